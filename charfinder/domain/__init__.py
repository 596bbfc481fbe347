"""Domain layer: entities, enums and exceptions. No I/O and no framework imports."""

from charfinder.domain.entities import CharacterEntry, Dataset
from charfinder.domain.enums import ErrorReason, QueryState, ResultStatus
from charfinder.domain.exceptions import (
    CharFinderException,
    DataUnavailableException,
    EmptyQueryException,
    InvalidQueryException,
    ResponseSerializationException,
)

__all__ = [
    "CharacterEntry",
    "Dataset",
    "ErrorReason",
    "QueryState",
    "ResultStatus",
    "CharFinderException",
    "DataUnavailableException",
    "EmptyQueryException",
    "InvalidQueryException",
    "ResponseSerializationException",
]
