"""Application layer: matching services, DTOs, ports and use cases."""
