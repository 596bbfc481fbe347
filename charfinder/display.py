"""Plain-text presentation of search results: U+XXXX<TAB>glyph<TAB>NAME."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from charfinder.domain.entities import CharacterEntry


def format_entry(entry: CharacterEntry) -> str:
    """E.g. CharacterEntry(0xAE, "REGISTERED SIGN") -> "U+00AE\\t®\\tREGISTERED SIGN"."""
    return f"U+{entry.code_point:04X}\t{entry.char}\t{entry.name}"


def format_entries(entries: Iterable[CharacterEntry]) -> list[str]:
    return [format_entry(entry) for entry in entries]


def display(entries: Iterable[CharacterEntry], out: TextIO | None = None) -> None:
    """Write one line per entry, in order, to out (stdout by default)."""
    out = out or sys.stdout
    for line in format_entries(entries):
        out.write(line + "\n")
