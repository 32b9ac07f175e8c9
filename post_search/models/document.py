"""Searchable document models."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class SearchDocument(BaseModel):
    """A document as seen by the matcher: field texts plus an opaque payload."""

    fields: List[str] = Field(..., description="Field texts in scan order")
    payload: Any = Field(None, description="Value returned when the document matches")


class Post(BaseModel):
    """Blog post exposed to search."""

    id: Optional[str] = Field(None, description="Post identifier")
    title: str = Field(default="", description="Post title")
    markdown: str = Field(default="", description="Post body as markdown")
    slug: Optional[str] = Field(None, description="URL slug")
    published: bool = Field(default=True, description="Whether the post is publicly visible")

    def search_fields(self) -> List[str]:
        """Fields scanned by search, body before title."""
        return [self.markdown, self.title]

    def to_document(self) -> SearchDocument:
        """Wrap the post for the matcher."""
        return SearchDocument(fields=self.search_fields(), payload=self)
