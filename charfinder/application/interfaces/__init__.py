"""Application ports (protocols implemented by infrastructure)."""

from charfinder.application.interfaces.services import IDatasetLoader, IDatasetProvider

__all__ = ["IDatasetLoader", "IDatasetProvider"]
