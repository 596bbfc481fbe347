"""Name normalization: text to a set of comparable word tokens."""

from __future__ import annotations


def normalize(text: str) -> frozenset[str]:
    """Return the set of uppercase word tokens in text.

    Hyphens separate words like whitespace does, so "LESS-THAN" and
    "less than" both give {"LESS", "THAN"}. Applied to stored names and to
    query text alike.
    """
    return frozenset(text.upper().replace("-", " ").split())
