"""UnicodeData loader: local cached copy first, remote download on miss.

Read policy: read and parse the local file; if that fails, download the
remote file over it and read once more. Only the outcome of the second read
is reported; its failure becomes DataUnavailableException.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import aiofiles
import httpx

from charfinder.application.services.matcher import NameIndex
from charfinder.domain.entities import Dataset
from charfinder.domain.exceptions import DataUnavailableException
from charfinder.infrastructure.exceptions import (
    DatasetDownloadError,
    DatasetException,
    DatasetReadError,
)
from charfinder.infrastructure.unicode_data.parser import parse_unicode_data

logger = logging.getLogger(__name__)


class UnicodeDataLoader:
    """Load the character-name dataset from a local file, fetching it if needed.

    The HTTP client is injected (shared app client or a test transport);
    when omitted, a short-lived client is created per download.
    """

    CHUNK_SIZE = 64 * 1024  # 64KB

    def __init__(
        self,
        path: str | Path,
        url: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
        build_index: bool = True,
    ) -> None:
        """Initialize the loader.

        Args:
            path: Local cache file for the dataset.
            url: Remote location of UnicodeData.txt.
            http_client: Optional client used for the download.
            timeout: Download timeout in seconds when no client is given.
            build_index: Attach a NameIndex to loaded datasets.
        """
        self.path = Path(path)
        self.url = url
        self.http_client = http_client
        self.timeout = timeout
        self.build_index = build_index

    async def load(self) -> Dataset:
        """Return a fully parsed dataset or raise DataUnavailableException."""
        try:
            return await self.read()
        except DatasetException as e:
            logger.warning("Local dataset not usable (%s); downloading %s", e.message, self.url)

        try:
            await self.download()
        except DatasetDownloadError as e:
            logger.error("Dataset download failed: %s", e.details.get("reason"))

        try:
            return await self.read()
        except DatasetException as e:
            raise DataUnavailableException(source=str(self.path)) from e

    async def read(self) -> Dataset:
        """Read and parse the local file.

        Raises:
            DatasetReadError: File missing, unreadable or not UTF-8.
            DatasetFormatError: A record is malformed.
        """
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                text = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetReadError(str(self.path), str(e)) from e

        entries = tuple(parse_unicode_data(text.splitlines()))
        index = NameIndex(entries) if self.build_index else None
        logger.info("Loaded %d character names from %s", len(entries), self.path)
        return Dataset(entries, index)

    async def download(self) -> Path:
        """Fetch the remote file and atomically replace the local copy.

        Writes to a temp file in the target directory, then renames it, so a
        concurrent reader never sees a partial file.

        Raises:
            DatasetDownloadError: Request failed, non-2xx status, or write failed.
        """
        target = self.path.resolve()
        target.parent.mkdir(parents=True, exist_ok=True)
        temp_fd, temp_path = tempfile.mkstemp(
            dir=target.parent, prefix=".tmp_", suffix=target.suffix
        )
        os.close(temp_fd)
        try:
            if self.http_client is not None:
                size = await self._fetch_to(self.http_client, temp_path)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    size = await self._fetch_to(client, temp_path)
            os.replace(temp_path, target)
        except httpx.HTTPError as e:
            raise DatasetDownloadError(self.url, str(e)) from e
        except OSError as e:
            raise DatasetDownloadError(self.url, f"write failed: {e}") from e
        finally:
            if Path(temp_path).exists():
                os.unlink(temp_path)

        logger.info("Downloaded %d bytes from %s to %s", size, self.url, target)
        return target

    async def _fetch_to(self, client: httpx.AsyncClient, temp_path: str) -> int:
        size = 0
        async with client.stream("GET", self.url, follow_redirects=True) as response:
            response.raise_for_status()
            async with aiofiles.open(temp_path, "wb") as f:
                async for chunk in response.aiter_bytes(self.CHUNK_SIZE):
                    await f.write(chunk)
                    size += len(chunk)
        return size
