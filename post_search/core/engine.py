"""Search engine facade over the token matcher."""

import time
from typing import Iterable, List, Optional

import structlog

from ..config import Settings, get_settings
from ..models.document import Post, SearchDocument
from ..models.request import SearchRequest
from ..models.response import SearchResponse
from .matcher import MATCH_THRESHOLD, find_matches
from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)


class SearchEngine:
    """Runs fuzzy token searches with a fixed similarity threshold."""

    def __init__(self, threshold: float = MATCH_THRESHOLD) -> None:
        """
        Initialize the search engine.

        Args:
            threshold: Minimum similarity for a token to match a query
        """
        self.threshold = threshold
        self.normalizer = TextNormalizer()

    def search(self, query: str, documents: Iterable[SearchDocument]) -> List:
        """
        Return the payloads of all documents matching a query.

        Args:
            query: Search query
            documents: Documents to scan

        Returns:
            Matching payloads in input order
        """
        query = self.normalizer.normalize_query(query)
        if not query:
            return []

        documents = list(documents)
        matched = find_matches(query, documents, self.threshold)

        logger.debug(
            "Search completed",
            query=query,
            scanned=len(documents),
            matched=len(matched)
        )
        return matched

    def search_posts(self, query: str, posts: Iterable[Post]) -> SearchResponse:
        """
        Search published posts by body and title.

        Args:
            query: Search query
            posts: Candidate posts; unpublished ones are skipped

        Returns:
            SearchResponse with the matching posts and metadata
        """
        start_time = time.time()

        documents = [post.to_document() for post in posts if post.published]
        matched = self.search(query, documents)

        execution_time = (time.time() - start_time) * 1000
        logger.info(
            "Post search",
            query=query,
            total_results=len(matched),
            execution_time_ms=round(execution_time, 2)
        )

        return SearchResponse(
            query=self.normalizer.normalize_query(query),
            threshold=self.threshold,
            total_results=len(matched),
            posts=matched,
            execution_time_ms=execution_time
        )

    def search_request(self, request: SearchRequest, posts: Iterable[Post]) -> SearchResponse:
        """Search posts for an already validated request."""
        return self.search_posts(request.query, posts)


def create_engine(settings: Optional[Settings] = None) -> SearchEngine:
    """Build a search engine using the configured threshold."""
    settings = settings or get_settings()
    return SearchEngine(threshold=settings.match_threshold)
