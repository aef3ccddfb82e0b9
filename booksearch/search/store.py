"""
Purpose:
- Load the static book store from a JSON file, in file order.
- The file is treated as read-only configuration and re-read on every call.

File shape:
    {
      "The Great Gatsby": {"author": "F. Scott Fitzgerald", "cover_url": "https://..."},
      ...
    }
"""

from __future__ import annotations
from typing import List
from pathlib import Path
import json
import logging

from pydantic import ValidationError
from .schema import BookRecord

logger = logging.getLogger("booksearch")

class BookStoreError(RuntimeError):
    """The book file is missing, unreadable or malformed."""

class _Pairs(list):
    """Key/value pairs of one JSON object, duplicates and order kept."""

def _titles_to_books(pairs: _Pairs) -> dict:
    out: dict = {}
    for title, info in pairs:
        if title in out:
            logger.warning("Duplicate book title %r in store; keeping the last entry", title)
        out[title] = dict(info) if isinstance(info, _Pairs) else info
    return out

def load_books(path: Path) -> List[BookRecord]:
    """
    Read every book from `path`. Raises BookStoreError instead of returning a
    partial list when anything about the file is wrong.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BookStoreError(f"cannot read book file {path}: {e}") from e

    try:
        data = json.loads(text, object_pairs_hook=_Pairs)
    except json.JSONDecodeError as e:
        raise BookStoreError(f"book file {path} is not valid JSON: {e}") from e

    if not isinstance(data, _Pairs):
        raise BookStoreError(f"book file {path} must hold a JSON object keyed by title")

    data = _titles_to_books(data)

    books: List[BookRecord] = []
    for title, info in data.items():
        if not isinstance(info, dict):
            raise BookStoreError(f"entry {title!r} must be an object with author and cover_url")
        try:
            books.append(BookRecord(title=title, author=info["author"], cover_url=info["cover_url"]))
        except KeyError as e:
            raise BookStoreError(f"entry {title!r} is missing {e.args[0]!r}") from e
        except ValidationError as e:
            raise BookStoreError(f"entry {title!r} is invalid: {e}") from e

    logger.debug("Loaded %d books from %s", len(books), path)
    return books
