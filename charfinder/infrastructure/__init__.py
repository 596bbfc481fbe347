"""Infrastructure: dataset source adapters and their exceptions."""
