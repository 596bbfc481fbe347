"""Parser for UnicodeData.txt records (semicolon-delimited, one per line)."""

from __future__ import annotations

import re
from collections.abc import Iterable

from charfinder.domain.entities import CharacterEntry
from charfinder.infrastructure.exceptions import DatasetFormatError

FIELD_SEPARATOR = ";"
CODE_POINT_PATTERN = re.compile(r"[0-9A-Fa-f]+")


def is_placeholder_name(name: str) -> bool:
    """True for bracketed labels such as "<control>" or "<CJK Ideograph, First>".

    These mark code ranges or unnamed characters; they are not character names.
    """
    return name.startswith("<") and name.endswith(">")


def parse_unicode_line(line: str, line_number: int | None = None) -> CharacterEntry:
    """Parse one record: field 0 is the hex code point, field 1 the name.

    Example: "0039;DIGIT NINE;Nd;0;EN;;9;9;9;N;;;;;" -> (0x39, "DIGIT NINE").

    Raises:
        DatasetFormatError: Fewer than two fields, bad hex, or empty name.
    """
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) < 2:
        raise DatasetFormatError(line, "expected at least 2 fields", line_number)
    if not CODE_POINT_PATTERN.fullmatch(fields[0]):
        raise DatasetFormatError(line, f"invalid code point {fields[0]!r}", line_number)
    try:
        return CharacterEntry(int(fields[0], 16), fields[1])
    except ValueError as e:
        raise DatasetFormatError(line, str(e), line_number) from e


def parse_unicode_data(lines: Iterable[str]) -> list[CharacterEntry]:
    """Parse all records in order, skipping blank lines and placeholder names."""
    entries = []
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        entry = parse_unicode_line(line, number)
        if is_placeholder_name(entry.name):
            continue
        entries.append(entry)
    return entries
