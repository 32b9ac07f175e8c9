"""Token-level matching of a query against document fields."""

from typing import Iterable, List, NamedTuple, Optional, Sequence

from ..models.document import SearchDocument
from .distance import similarity
from .normalizer import TextNormalizer

# Strict enough to only let through capitalization differences and small,
# one letter typos in the query.
MATCH_THRESHOLD = 0.9

_normalizer = TextNormalizer()


class TokenMatch(NamedTuple):
    """First token of a document that satisfied the threshold."""

    field_index: int
    token: str
    score: float


def first_match(
    query: str,
    fields: Sequence[str],
    threshold: float = MATCH_THRESHOLD
) -> Optional[TokenMatch]:
    """
    Find the first token in ``fields`` similar enough to ``query``.

    Fields are scanned in the given order and tokens left to right. Scanning
    stops at the first token scoring at or above the threshold.

    Args:
        query: Search query
        fields: Field texts in scan order
        threshold: Minimum similarity for a token to match

    Returns:
        TokenMatch for the first qualifying token, or None
    """
    for field_index, text in enumerate(fields):
        for token in _normalizer.tokenize(text):
            score = similarity(token, query)
            if score >= threshold:
                return TokenMatch(field_index, token, score)
    return None


def matches(query: str, fields: Sequence[str], threshold: float = MATCH_THRESHOLD) -> bool:
    """Whether any token of ``fields`` matches ``query``."""
    return first_match(query, fields, threshold) is not None


def find_matches(
    query: str,
    documents: Iterable[SearchDocument],
    threshold: float = MATCH_THRESHOLD
) -> List:
    """
    Filter documents down to the ones containing a token matching ``query``.

    Input order is preserved and nothing is ranked or deduplicated.

    Args:
        query: Search query
        documents: Documents to scan
        threshold: Minimum similarity for a token to match

    Returns:
        Payloads of the matching documents
    """
    return [
        document.payload
        for document in documents
        if first_match(query, document.fields, threshold) is not None
    ]
