"""Whole-word matching of character names against query terms.

filter_entries is the reference definition: an entry matches when every
normalized query token is a word of its normalized name. NameIndex answers
the same question from an inverted index and must agree with it on every
input.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from charfinder.application.services.normalizer import normalize
from charfinder.domain.entities import CharacterEntry


def query_term_set(query_terms: Sequence[str]) -> frozenset[str]:
    """Normalize all query terms together into one term set."""
    return normalize(" ".join(query_terms))


def filter_entries(
    entries: Iterable[CharacterEntry], query_terms: Sequence[str]
) -> list[CharacterEntry]:
    """Return entries whose name contains every query term as a whole word.

    An empty term list matches nothing. Terms are order- and
    duplicate-insensitive; output keeps the order of `entries`.
    """
    if not query_terms:
        return []
    terms = query_term_set(query_terms)
    return [entry for entry in entries if terms <= normalize(entry.name)]


class NameIndex:
    """Inverted index from name token to the positions of entries using it.

    Posting lists are ascending, so intersecting them and sorting yields
    results in dataset order.
    """

    def __init__(self, entries: Sequence[CharacterEntry]) -> None:
        self._entries = tuple(entries)
        postings: dict[str, list[int]] = defaultdict(list)
        for position, entry in enumerate(self._entries):
            for token in normalize(entry.name):
                postings[token].append(position)
        self._postings = dict(postings)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def token_count(self) -> int:
        return len(self._postings)

    def filter(self, query_terms: Sequence[str]) -> list[CharacterEntry]:
        """Same contract as filter_entries over the indexed entries."""
        if not query_terms:
            return []
        terms = query_term_set(query_terms)
        if not terms:
            # An empty term set is a subset of every name.
            return list(self._entries)

        lists = []
        for token in terms:
            posting = self._postings.get(token)
            if not posting:
                return []
            lists.append(posting)
        lists.sort(key=len)

        positions = set(lists[0])
        for posting in lists[1:]:
            positions.intersection_update(posting)
            if not positions:
                return []
        return [self._entries[p] for p in sorted(positions)]
