"""Pytest configuration and fixtures."""

import json

import pytest
from fastapi.testclient import TestClient

from booksearch.core.settings import settings
from booksearch.main import create_app
from booksearch.search.schema import BookRecord


BOOKS = {
    "The Great Gatsby": {
        "author": "F. Scott Fitzgerald",
        "cover_url": "https://example.com/covers/gatsby.jpg",
    },
    "Dune": {
        "author": "Frank Herbert",
        "cover_url": "https://example.com/covers/dune.jpg",
    },
    "dune": {
        "author": "Lowercase Imitator",
        "cover_url": "https://example.com/covers/dune-knockoff.jpg",
    },
    "Emma": {
        "author": "Jane Austen",
        "cover_url": "https://example.com/covers/emma.jpg",
    },
}


@pytest.fixture
def books():
    """The fixture store as BookRecords, in file order."""
    return [BookRecord(title=t, **info) for t, info in BOOKS.items()]


@pytest.fixture
def books_file(tmp_path, monkeypatch):
    """Write the fixture store to disk and point the app at it."""
    path = tmp_path / "books.json"
    path.write_text(json.dumps(BOOKS), encoding="utf-8")
    monkeypatch.setattr(settings, "books_file", path)
    return path


@pytest.fixture
def client(books_file):
    return TestClient(create_app())
