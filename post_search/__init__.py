"""
Post Search - fuzzy full-text search for blog posts.

Words of a post's body and title are compared against the query with a
Jaro-Winkler style similarity, so small typos and capitalization
differences in the query still find the post.
"""

__version__ = "1.0.0"

from .core.distance import similarity
from .core.engine import SearchEngine, create_engine
from .core.matcher import MATCH_THRESHOLD, find_matches
from .models.document import Post, SearchDocument
from .models.response import SearchResponse

__all__ = [
    "similarity",
    "SearchEngine",
    "create_engine",
    "MATCH_THRESHOLD",
    "find_matches",
    "Post",
    "SearchDocument",
    "SearchResponse",
]
