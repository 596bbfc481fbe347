"""Domain exceptions for the charfinder application.

Defines the error taxonomy of a character-name search. These exceptions are
independent of transport concerns; the search service and the exception
handlers map them to error results and HTTP status codes.
"""

from typing import Any


class CharFinderException(Exception):
    """Base exception for all charfinder errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. parameter name).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidQueryException(CharFinderException):
    """Raised when the request carries no understandable query.

    The recognized parameter is absent (possibly because only unknown
    parameter names were sent) or present without any value.
    """

    def __init__(
        self, message: str = "Invalid query given", param: str | None = None
    ) -> None:
        details = {"param": param} if param else {}
        super().__init__(message, "INVALID_QUERY", details)


class EmptyQueryException(CharFinderException):
    """Raised when the recognized parameter carries a blank value."""

    def __init__(
        self, message: str = "Empty query given", param: str | None = None
    ) -> None:
        details = {"param": param} if param else {}
        super().__init__(message, "EMPTY_QUERY", details)


class DataUnavailableException(CharFinderException):
    """Raised when the character-name dataset cannot be loaded after retry."""

    def __init__(
        self, message: str = "Failed to read unicode data", source: str | None = None
    ) -> None:
        details = {"source": source} if source else {}
        super().__init__(message, "DATA_UNAVAILABLE", details)


class ResponseSerializationException(CharFinderException):
    """Raised when a search result cannot be encoded for the response."""

    def __init__(self, reason: str | None = None) -> None:
        details = {"reason": reason} if reason else {}
        super().__init__(
            "Failed to encode response", "INTERNAL_SERIALIZATION_FAILURE", details
        )
