"""Service interfaces (ports) for the application layer.

Protocols define what the search use case needs from infrastructure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from charfinder.domain.entities import Dataset


class IDatasetLoader(Protocol):
    """Protocol for producing a fully parsed dataset from its source."""

    async def load(self) -> "Dataset":
        """Return the dataset or raise DataUnavailableException."""


class IDatasetProvider(Protocol):
    """Protocol for handing the current dataset to the search use case.

    get() must return a fully formed dataset, never a partially populated one.
    """

    async def get(self) -> "Dataset":
        """Return the dataset or raise DataUnavailableException."""
