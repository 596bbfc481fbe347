"""Infrastructure exceptions for reading, parsing and downloading the dataset.

They extend CharFinderException so failures carry a code and details, but
they stay inside the loader: its final failure is reported to the
application as DataUnavailableException.
"""

from charfinder.domain.exceptions import CharFinderException


class DatasetException(CharFinderException):
    """Base exception for dataset source operations."""


class DatasetReadError(DatasetException):
    """Local dataset file missing or unreadable."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to read dataset file: {file_path}",
            "DATASET_READ_ERROR",
            {"file_path": file_path, "reason": reason},
        )


class DatasetFormatError(DatasetException):
    """A dataset line does not have the expected `code;name;...` shape."""

    def __init__(self, line: str, reason: str, line_number: int | None = None) -> None:
        details = {"line": line[:80], "reason": reason}
        if line_number is not None:
            details["line_number"] = line_number
        super().__init__(
            f"Malformed dataset line: {reason}",
            "DATASET_FORMAT_ERROR",
            details,
        )


class DatasetDownloadError(DatasetException):
    """Remote dataset could not be fetched or stored locally."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(
            f"Failed to download dataset: {url}",
            "DATASET_DOWNLOAD_ERROR",
            {"url": url, "reason": reason},
        )
