"""
Purpose:
- Turn raw query-string parameters into a SearchQuery.

Rules:
- searchTerm: only a present, non-empty value counts as a search.
- caseSensitive: a checkbox, so the key being present at all means True.
"""

from __future__ import annotations
from typing import Mapping
from .schema import SearchQuery

TERM_PARAM = "searchTerm"
CASE_PARAM = "caseSensitive"

def extract_query(params: Mapping[str, str]) -> SearchQuery:
    term = params.get(TERM_PARAM)
    return SearchQuery(
        term=term if term else None,
        case_sensitive=CASE_PARAM in params,
    )
