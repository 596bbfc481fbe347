"""Application DTOs."""

from charfinder.application.dtos.search import (
    FOUND_MESSAGE,
    NOT_FOUND_MESSAGE,
    SearchOutcome,
)

__all__ = ["FOUND_MESSAGE", "NOT_FOUND_MESSAGE", "SearchOutcome"]
