"""Application use cases."""

from charfinder.application.use_cases.search import SearchService, match

__all__ = ["SearchService", "match"]
