"""Dataset provider: shares one loaded dataset across requests.

The current dataset is published by a single attribute assignment after it
is fully built, so readers see either the previous dataset or the new one,
never a partial one. Loads are serialized by an asyncio.Lock.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from charfinder.domain.entities import Dataset

if TYPE_CHECKING:
    from charfinder.application.interfaces.services import IDatasetLoader

logger = logging.getLogger(__name__)


class DatasetProvider:
    """Hand out the dataset, loading it on first use (IDatasetProvider).

    With cache_enabled=False every get() loads a fresh dataset.
    """

    def __init__(self, loader: "IDatasetLoader", cache_enabled: bool = True) -> None:
        self.loader = loader
        self.cache_enabled = cache_enabled
        self._dataset: Dataset | None = None
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._dataset is not None

    async def get(self) -> Dataset:
        """Return the shared dataset, loading it if absent.

        Raises:
            DataUnavailableException: The loader failed (nothing is cached).
        """
        if not self.cache_enabled:
            return await self.loader.load()

        dataset = self._dataset
        if dataset is not None:
            return dataset
        async with self._lock:
            # Another request may have finished loading while we waited.
            if self._dataset is None:
                self._dataset = await self.loader.load()
            return self._dataset

    async def reload(self) -> Dataset:
        """Load a new dataset and swap it in; the old one serves until then.

        On failure the previous dataset stays in place and the error propagates.
        """
        async with self._lock:
            dataset = await self.loader.load()
            self._dataset = dataset
        logger.info("Dataset reloaded (%d entries)", len(dataset))
        return dataset

    def clear(self) -> None:
        self._dataset = None
