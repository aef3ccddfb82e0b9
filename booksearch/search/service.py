"""
Purpose:
- Match a SearchQuery against the book store.
- Whole-title equality only; lowercase both sides unless case_sensitive is set.
"""

from __future__ import annotations
from typing import Iterable, List
from .schema import BookRecord, SearchQuery, SearchResult

def _title_matches(title: str, term: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return title == term
    return title.lower() == term.lower()

def search_books(query: SearchQuery, books: Iterable[BookRecord]) -> SearchResult:
    if query.term is None:
        return SearchResult(query=query, books=[])

    matches: List[BookRecord] = [
        b for b in books if _title_matches(b.title, query.term, query.case_sensitive)
    ]
    return SearchResult(query=query, books=matches)
