"""Jaro-Winkler style similarity for short text tokens.

The metric follows the classic Jaro-Winkler shape (matches, transpositions
and a prefix boost) but resolves matches by looking up the nearest
occurrence of a character in the longer string, and counts transpositions
with a nearest-occurrence rule instead of the textbook pairwise comparison.
Scores produced here are what the search threshold was tuned against, so
the arithmetic must stay exactly as it is.

All lengths and indices are code points, never bytes.
"""

import math
from typing import Tuple

PREFIX_WEIGHT = 0.1
PREFIX_LIMIT = 4


def _order(first: str, second: str) -> Tuple[str, str]:
    """Return (shorter, longer); equal lengths keep ``first`` as the shorter."""
    if len(second) < len(first):
        return second, first
    return first, second


def _match_window(longer: str) -> int:
    """Maximum index distance for two equal characters to count as a match."""
    return len(longer) // 2 - 1


def _search_backward(text: str, char: str, start: int) -> int:
    for index in range(start, -1, -1):
        if text[index] == char:
            return index
    return text.find(char)


def _search_forward(text: str, char: str, start: int) -> int:
    for index in range(start, len(text)):
        if text[index] == char:
            return index
    return text.rfind(char)


def _closest_index(text: str, char: str, position: int) -> int:
    """
    Find the occurrence of ``char`` in ``text`` nearest to ``position``.

    Both directions are searched; when they are equally far away the
    backward result wins. Returns -1 when ``char`` does not occur at all.
    """
    backward = _search_backward(text, char, position)
    forward = _search_forward(text, char, position)

    if abs(forward - position) < abs(backward - position):
        return forward
    return backward


def _jaro_score(matches: int, transpositions: int, shorter_len: int, longer_len: int) -> float:
    return (
        matches / shorter_len
        + matches / longer_len
        + (matches - transpositions // 2) / matches
    ) / 3


def similarity(first: str, second: str) -> float:
    """
    Calculate the similarity of two strings.

    Comparison is case-insensitive. Returns a float in [0, 1] where 1.0
    means the strings are equal and 0.0 means nothing matched (or one of
    the strings was empty).

    Args:
        first: First string
        second: Second string

    Returns:
        Similarity score between 0 and 1
    """
    if not first or not second:
        return 0.0

    shorter, longer = _order(first.lower(), second.lower())
    window = _match_window(longer)

    matches = 0
    transpositions = 0
    prefix = 0

    for i, char in enumerate(shorter):
        if char == longer[i]:
            matches += 1
            if i == prefix and i <= PREFIX_LIMIT:
                prefix = min(prefix + 1, PREFIX_LIMIT)
        elif char in longer:
            closest = _closest_index(longer, char, i)
            if abs(closest - i) <= window:
                matches += 1
                # Every remaining character whose nearest occurrence sits at
                # or before i counts, including characters missing from longer.
                for k in range(i, len(shorter)):
                    if _closest_index(longer, shorter[k], i) <= i:
                        transpositions += 1

    if matches == 0:
        return 0.0

    score = _jaro_score(matches, transpositions, len(shorter), len(longer))
    distance = score + prefix * PREFIX_WEIGHT * (1 - score)

    if not math.isfinite(distance):
        return 0.0

    return min(1.0, max(0.0, distance))
