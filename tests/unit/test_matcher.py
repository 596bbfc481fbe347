"""Tests for whole-word matching (filter_entries) and the inverted NameIndex."""

import pytest

from charfinder.application.services.matcher import (
    NameIndex,
    filter_entries,
    query_term_set,
)
from charfinder.domain.entities import CharacterEntry

LESS_THAN = CharacterEntry(0x3C, "LESS-THAN SIGN")
REGISTERED = CharacterEntry(0xAE, "REGISTERED SIGN")
L_WITH_BAR = CharacterEntry(0x23D, "LATIN CAPITAL LETTER L WITH BAR")

GIVEN = [LESS_THAN, REGISTERED, L_WITH_BAR]

QUERY_CASES = [
    pytest.param(["registered"], [REGISTERED], id="case-insensitive"),
    pytest.param(["regis"], [], id="whole-words-only"),
    pytest.param(["something that not exists"], [], id="no-such-words"),
    pytest.param(["LESS"], [LESS_THAN], id="hyphenated-name"),
    pytest.param(["LESS-THAN"], [LESS_THAN], id="hyphenated-query"),
    pytest.param(["SIGN"], [LESS_THAN, REGISTERED], id="multiple-results"),
    pytest.param(["SIGN", "LESS"], [LESS_THAN], id="multiple-terms"),
    pytest.param([], [], id="empty-term-list"),
    pytest.param(["REGISTERED", "REGISTERED"], [REGISTERED], id="duplicate-terms"),
    pytest.param(["less than"], [LESS_THAN], id="spaced-query-hyphenated-name"),
]


class TestFilterEntries:
    @pytest.mark.parametrize("query, want", QUERY_CASES)
    def test_query_cases(self, query: list[str], want: list[CharacterEntry]) -> None:
        assert filter_entries(GIVEN, query) == want

    def test_single_match(self) -> None:
        given = [REGISTERED, L_WITH_BAR]
        assert filter_entries(given, ["REGISTERED"]) == [REGISTERED]

    def test_whole_word_rule(self) -> None:
        assert filter_entries([REGISTERED], ["REGIS"]) == []

    def test_empty_term_list_matches_nothing(self) -> None:
        assert filter_entries(GIVEN, []) == []

    def test_result_is_subsequence_in_dataset_order(self) -> None:
        reversed_given = list(reversed(GIVEN))
        assert filter_entries(reversed_given, ["SIGN"]) == [REGISTERED, LESS_THAN]

    def test_term_order_and_duplicates_do_not_matter(self) -> None:
        a = filter_entries(GIVEN, ["SIGN", "LESS"])
        b = filter_entries(GIVEN, ["LESS", "SIGN"])
        c = filter_entries(GIVEN, ["SIGN", "LESS", "SIGN"])
        assert a == b == c == [LESS_THAN]

    def test_refinement(self, sample_entries: list[CharacterEntry]) -> None:
        desktop = filter_entries(sample_entries, ["DESKTOP"])
        assert [e.name for e in desktop] == ["DESKTOP COMPUTER", "DESKTOP WINDOW"]
        refined = filter_entries(sample_entries, ["DESKTOP", "COMPUTER"])
        assert [e.name for e in refined] == ["DESKTOP COMPUTER"]

    def test_accepts_any_iterable(self) -> None:
        assert filter_entries(iter(GIVEN), ["BAR"]) == [L_WITH_BAR]


def test_query_term_set_joins_terms() -> None:
    assert query_term_set(["less-than", "Sign"]) == {"LESS", "THAN", "SIGN"}


class TestNameIndex:
    """NameIndex must agree with filter_entries on every input."""

    @pytest.mark.parametrize("query, want", QUERY_CASES)
    def test_query_cases(self, query: list[str], want: list[CharacterEntry]) -> None:
        assert NameIndex(GIVEN).filter(query) == want

    @pytest.mark.parametrize(
        "query",
        [
            ["LATIN"],
            ["LETTER", "latin"],
            ["DESKTOP"],
            ["DESKTOP", "COMPUTER"],
            ["SIGN", "SPACE"],
            ["SPACE"],
            ["-"],
            ["   "],
            ["TURNED-DELTA small"],
        ],
    )
    def test_agrees_with_filter_entries(
        self, sample_entries: list[CharacterEntry], query: list[str]
    ) -> None:
        assert NameIndex(sample_entries).filter(query) == filter_entries(sample_entries, query)

    def test_tokenless_terms_match_everything_like_filter_entries(self) -> None:
        assert NameIndex(GIVEN).filter(["-"]) == GIVEN == filter_entries(GIVEN, ["-"])

    def test_preserves_dataset_order(self) -> None:
        reversed_given = list(reversed(GIVEN))
        assert NameIndex(reversed_given).filter(["SIGN"]) == [REGISTERED, LESS_THAN]

    def test_counts(self) -> None:
        index = NameIndex(GIVEN)
        assert len(index) == 3
        # LESS THAN SIGN REGISTERED LATIN CAPITAL LETTER L WITH BAR
        assert index.token_count == 10

    def test_empty_index(self) -> None:
        assert NameIndex([]).filter(["SIGN"]) == []
