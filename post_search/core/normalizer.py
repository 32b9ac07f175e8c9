"""Text normalization utilities for consistent word processing."""

from typing import List


class TextNormalizer:
    """Handles query cleanup and word splitting for search."""

    def normalize_query(self, query: str) -> str:
        """
        Clean up a search query before matching.

        Args:
            query: Raw query text

        Returns:
            Query with surrounding whitespace removed
        """
        if not query:
            return ""

        return query.strip()

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into words on runs of whitespace.

        Punctuation stays attached to its word and case is left untouched;
        the similarity function lowercases on its own.

        Args:
            text: Input text

        Returns:
            List of tokens, empty for empty or whitespace-only text
        """
        if not text:
            return []

        return text.split()
