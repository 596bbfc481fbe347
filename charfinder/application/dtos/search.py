"""DTOs for search outcomes (no dependency on the web framework)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from charfinder.domain.entities import CharacterEntry
from charfinder.domain.enums import ErrorReason, ResultStatus
from charfinder.domain.exceptions import CharFinderException

FOUND_MESSAGE = "Found these results for your search"
NOT_FOUND_MESSAGE = "Could not find any results for the given query"


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one search: matched entries on success, a reason on error."""

    status: ResultStatus
    message: str
    entries: tuple[CharacterEntry, ...] | None = None
    reason: ErrorReason | None = None

    @classmethod
    def success(cls, entries: list[CharacterEntry]) -> SearchOutcome:
        message = FOUND_MESSAGE if entries else NOT_FOUND_MESSAGE
        return cls(ResultStatus.SUCCESS, message, tuple(entries))

    @classmethod
    def failure(cls, exc: CharFinderException) -> SearchOutcome:
        return cls(ResultStatus.ERROR, exc.message, None, ErrorReason(exc.error_code))

    @property
    def is_success(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    @property
    def http_status(self) -> int:
        """200 for every success (including no matches); reason-specific otherwise."""
        return 200 if self.reason is None else self.reason.http_status

    def to_dict(self) -> dict[str, Any]:
        """Response body shape: status, message, charNames (None on error)."""
        return {
            "status": self.status.value,
            "message": self.message,
            "charNames": (
                [entry.to_dict() for entry in self.entries]
                if self.entries is not None
                else None
            ),
        }
