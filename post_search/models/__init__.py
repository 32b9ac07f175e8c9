"""Data models for post search."""

from .document import Post, SearchDocument
from .request import SearchRequest
from .response import SearchResponse

__all__ = [
    "Post",
    "SearchDocument",
    "SearchRequest",
    "SearchResponse",
]
