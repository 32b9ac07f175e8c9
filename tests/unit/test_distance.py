"""Unit tests for the similarity function and its helpers."""

import pytest

from post_search.core.distance import (
    _closest_index,
    _jaro_score,
    _match_window,
    _order,
    similarity,
)

VARIANCE = 0.001


class TestHelpers:
    """Test cases for the private helpers of the distance module."""

    def test_order_ascii(self):
        """Shorter word comes first regardless of argument order."""
        assert _order("longerword", "short") == ("short", "longerword")
        assert _order("short", "longerword") == ("short", "longerword")

    def test_order_counts_code_points(self):
        """'ääni' is longer than 'sound' in bytes but shorter in code points."""
        assert _order("ääni", "sound") == ("ääni", "sound")
        assert _order("sound", "ääni") == ("ääni", "sound")

    def test_order_tie_keeps_first(self):
        """Equal lengths keep the first argument as the shorter one."""
        assert _order("abc", "xyz") == ("abc", "xyz")
        assert _order("xyz", "abc") == ("xyz", "abc")

    def test_match_window(self):
        """Window is half the longer length minus one, floored."""
        assert _match_window("dicksonx") == 3
        assert _match_window("johnson") == 2
        assert _match_window("sound") == 1
        assert _match_window("a") == -1

    @pytest.mark.parametrize("text, char, position, expected", [
        ("eiiiiieii", "e", 4, 6),
        ("dwayne", "e", 4, 5),
        ("dwayne", "n", 3, 4),
        ("sound", "n", 2, 3),
    ])
    def test_closest_index(self, text, char, position, expected):
        """Nearest occurrence wins over the first occurrence."""
        assert _closest_index(text, char, position) == expected

    def test_closest_index_tie_prefers_backward(self):
        """Equally distant occurrences resolve to the one before the position."""
        # 'a' sits at 1 and 5, both two steps from 3
        assert _closest_index("marhta", "a", 3) == 1

    def test_closest_index_falls_back_to_whole_string(self):
        """Occurrences only on one side are still found."""
        assert _closest_index("abcdx", "x", 1) == 4
        assert _closest_index("xabcd", "x", 3) == 0

    def test_closest_index_missing(self):
        """A missing character yields -1."""
        assert _closest_index("sound", "z", 2) == -1

    def test_closest_index_multibyte(self):
        """Indices are code points even for multi-byte characters."""
        assert _closest_index("ääni", "n", 0) == 2
        assert _closest_index("äiti", "ä", 1) == 0

    def test_jaro_score(self):
        """Base score with precalculated data."""
        assert _jaro_score(4, 0, len("dixon"), len("dicksonx")) == pytest.approx(0.767, abs=VARIANCE)

    def test_jaro_score_halves_transpositions(self):
        """Only whole pairs of transpositions reduce the score."""
        assert _jaro_score(4, 1, 5, 7) == _jaro_score(4, 0, 5, 7)
        assert _jaro_score(4, 2, 5, 7) < _jaro_score(4, 1, 5, 7)


class TestSimilarity:
    """Test cases for the similarity function."""

    @pytest.mark.parametrize("first, second, expected", [
        ("dwayne", "duane", 0.84),
        ("martha", "marhta", 0.961),
        ("dixon", "dicksonx", 0.814),
        ("dicksonx", "dixon", 0.814),
        ("DICKSONX", "DIXON", 0.814),
        ("jones", "johnson", 0.832),
        ("sound", "ääni", 0.483),
        ("'foo", "fizz", 0.166),
    ])
    def test_reference_values(self, first, second, expected):
        """Precalculated reference scores."""
        assert similarity(first, second) == pytest.approx(expected, abs=VARIANCE)

    def test_jones_johnson_exact(self):
        """Scores are reproducible down to the last digit."""
        assert similarity("jones", "johnson") == pytest.approx(0.8323809523809523, rel=1e-12)

    def test_disjoint_characters(self):
        """No shared characters gives zero."""
        assert similarity("asdfg", "qwerty") == 0

    @pytest.mark.parametrize("first, second", [
        ("", ""),
        ("", "duane"),
        ("duane", ""),
        ("", "ääni"),
    ])
    def test_empty_input(self, first, second):
        """Empty strings never match anything."""
        assert similarity(first, second) == 0

    @pytest.mark.parametrize("word", ["a", "date", "markdown", "ääni", "Dicksonx", "hello world"])
    def test_identity(self, word):
        """A string is fully similar to itself."""
        assert similarity(word, word) == 1.0

    def test_identity_ignores_case(self):
        """Case differences alone still score 1.0."""
        assert similarity("MarkDown", "markdown") == 1.0
        assert similarity("ÄÄNI", "ääni") == 1.0

    def test_case_insensitive(self):
        """Scores do not depend on capitalization."""
        assert similarity("Martha", "marhta") == similarity("martha", "MARHTA")

    @pytest.mark.parametrize("first, second", [
        ("dixon", "dicksonx"),
        ("jones", "johnson"),
        ("dwayne", "duane"),
        ("sound", "ääni"),
        ("markdown", "markdownn"),
    ])
    def test_symmetric_for_unequal_lengths(self, first, second):
        """Swapping arguments of different lengths gives the same score."""
        assert similarity(first, second) == similarity(second, first)

    def test_equal_length_uses_first_as_shorter(self):
        """With equal lengths the argument order decides the alignment."""
        assert similarity("ÄÄNI", "äiti") == pytest.approx(0.75, abs=VARIANCE)
        assert similarity("äiti", "ÄÄNI") == pytest.approx(0.7, abs=VARIANCE)

    def test_single_characters(self):
        """One character strings either match fully or not at all."""
        assert similarity("a", "A") == 1.0
        assert similarity("a", "b") == 0

    def test_trailing_typo_scores_high(self):
        """A doubled last letter stays well above the search threshold."""
        assert similarity("markdownn", "markdown") == pytest.approx(0.9778, abs=VARIANCE)

    @pytest.mark.parametrize("first, second", [
        ("dwayne", "duane"),
        ("abcabcabc", "cba"),
        ("zzzzzzzza", "azzzzzzzz"),
        ("ñandú", "andu"),
        ("x", "xxxxxxxxxxxx"),
    ])
    def test_score_range(self, first, second):
        """Scores are finite and stay within [0, 1]."""
        score = similarity(first, second)
        assert 0.0 <= score <= 1.0

    def test_deterministic(self):
        """Repeated calls give identical results."""
        assert similarity("martha", "marhta") == similarity("martha", "marhta")
