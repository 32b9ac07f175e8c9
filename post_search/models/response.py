"""Response models for search."""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field

from .document import Post


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchResponse(BaseModel):
    """Response for post search queries."""

    query: str = Field(..., description="Search query as matched")
    threshold: float = Field(..., ge=0.0, le=1.0, description="Similarity threshold used")
    total_results: int = Field(..., description="Number of matching posts")
    posts: List[Post] = Field(..., description="Matching posts in their original order")
    execution_time_ms: float = Field(..., description="Search execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")
