"""Core search functionality."""

from .distance import similarity
from .engine import SearchEngine, create_engine
from .matcher import MATCH_THRESHOLD, TokenMatch, find_matches, first_match, matches
from .normalizer import TextNormalizer

__all__ = [
    "similarity",
    "SearchEngine",
    "create_engine",
    "MATCH_THRESHOLD",
    "TokenMatch",
    "find_matches",
    "first_match",
    "matches",
    "TextNormalizer",
]
