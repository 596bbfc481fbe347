"""Domain entities: character entries and the dataset they form.

Both are immutable; a Dataset is built once by the loader and shared
read-only by every search.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from charfinder.application.services.matcher import NameIndex

MAX_CODE_POINT = 0xFFFFFFFF
SURROGATES = range(0xD800, 0xE000)
REPLACEMENT_CHARACTER = "\ufffd"


@dataclass(frozen=True)
class CharacterEntry:
    """A code point and its canonical name (e.g. 0xAE, 'REGISTERED SIGN')."""

    code_point: int
    name: str

    def __post_init__(self) -> None:
        if not 0 <= self.code_point <= MAX_CODE_POINT:
            raise ValueError(
                f"Code point must be an unsigned 32-bit integer, got {self.code_point}"
            )
        if not self.name:
            raise ValueError("Character name must be a non-empty string")

    @property
    def char(self) -> str:
        """The character itself, or U+FFFD when the code point is not encodable.

        Surrogates and values above U+10FFFF have no UTF-8 encoding.
        """
        if self.code_point in SURROGATES:
            return REPLACEMENT_CHARACTER
        try:
            return chr(self.code_point)
        except (ValueError, OverflowError):
            return REPLACEMENT_CHARACTER

    def to_dict(self) -> dict[str, Any]:
        return {"char": self.code_point, "name": self.name}


@dataclass(frozen=True)
class Dataset:
    """Ordered, read-only sequence of character entries.

    Source order is preserved (ascending by code point in the registry).
    `index` is an optional NameIndex built over exactly these entries.
    """

    entries: tuple[CharacterEntry, ...]
    index: NameIndex | None = field(default=None, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CharacterEntry]:
        return iter(self.entries)
