"""UnicodeData.txt source: line parser, file/remote loader, shared dataset provider."""

from charfinder.infrastructure.unicode_data.factory import DatasetProviderFactory
from charfinder.infrastructure.unicode_data.loader import UnicodeDataLoader
from charfinder.infrastructure.unicode_data.parser import (
    parse_unicode_data,
    parse_unicode_line,
)
from charfinder.infrastructure.unicode_data.provider import DatasetProvider

__all__ = [
    "DatasetProviderFactory",
    "DatasetProvider",
    "UnicodeDataLoader",
    "parse_unicode_data",
    "parse_unicode_line",
]
