"""Dataset provider factory: wires loader and provider from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from charfinder.infrastructure.unicode_data.loader import UnicodeDataLoader
from charfinder.infrastructure.unicode_data.provider import DatasetProvider

if TYPE_CHECKING:
    from charfinder.core.config import Settings


class DatasetProviderFactory:
    """Factory for dataset providers based on configuration."""

    @staticmethod
    def create_provider(
        settings: "Settings | None" = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> DatasetProvider:
        """Create a provider over a UnicodeData loader.

        Args:
            settings: Application settings; if None, uses get_settings().
            http_client: Shared client for downloads; if None, the loader
                opens one per download.

        Returns:
            DatasetProvider caching (or not) per DATASET_CACHE_ENABLED.
        """
        from charfinder.core.config import get_settings

        s = settings or get_settings()
        loader = UnicodeDataLoader(
            path=s.unicode_data_path,
            url=s.unicode_data_url,
            http_client=http_client,
            timeout=s.download_timeout_seconds,
            build_index=s.name_index_enabled,
        )
        return DatasetProvider(loader, cache_enabled=s.dataset_cache_enabled)
