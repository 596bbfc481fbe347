"""Domain enumerations for the charfinder application.

Enums represent fixed sets of domain values (result status, error reasons,
query validation states).
"""

from enum import Enum


class ResultStatus(str, Enum):
    """Top-level status of a search result."""

    SUCCESS = "success"
    ERROR = "error"


class ErrorReason(str, Enum):
    """Why a search produced an error result.

    Values match the error_code of the corresponding domain exception.
    """

    INVALID_QUERY = "INVALID_QUERY"
    EMPTY_QUERY = "EMPTY_QUERY"
    DATA_UNAVAILABLE = "DATA_UNAVAILABLE"
    INTERNAL_SERIALIZATION_FAILURE = "INTERNAL_SERIALIZATION_FAILURE"

    @property
    def http_status(self) -> int:
        """HTTP status code the transport layer reports for this reason."""
        return _REASON_STATUS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid reason values as strings."""
        return [reason.value for reason in cls]


_REASON_STATUS: dict[ErrorReason, int] = {
    ErrorReason.INVALID_QUERY: 400,
    ErrorReason.EMPTY_QUERY: 400,
    ErrorReason.DATA_UNAVAILABLE: 500,
    ErrorReason.INTERNAL_SERIALIZATION_FAILURE: 500,
}


class QueryState(str, Enum):
    """States of the query validator, in the order they are checked.

    NO_PARAMETER and PRESENT_BUT_EMPTY mean no understandable input;
    PRESENT_WITH_BLANK means understandable but vacuous input.
    """

    NO_PARAMETER = "no_parameter"
    PRESENT_BUT_EMPTY = "present_but_empty"
    PRESENT_WITH_BLANK = "present_with_blank"
    VALID = "valid"
