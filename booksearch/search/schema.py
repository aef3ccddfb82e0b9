"""
Purpose:
- Pydantic models for the book search so every layer shares the same shapes.
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class BookRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Unique key within the store")
    author: str
    cover_url: str = Field(..., description="URI of the cover image")

class SearchQuery(BaseModel):
    # None means "no search requested", not "search for the empty string"
    term: Optional[str] = None
    case_sensitive: bool = False

class SearchResult(BaseModel):
    query: SearchQuery
    books: List[BookRecord] = []

    @property
    def searched(self) -> bool:
        return self.query.term is not None
