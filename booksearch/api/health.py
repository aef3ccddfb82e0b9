# Common language: ops probe that surfaces version pins, config paths, and whether the book store loads.

from fastapi import APIRouter
from ..core.settings import settings
from ..search.store import load_books, BookStoreError
from pathlib import Path
import sys, importlib

router = APIRouter(tags=["health"])

def _ver(modname: str) -> str:
    try:
        m = importlib.import_module(modname)
        return getattr(m, "__version__", "unknown")
    except ImportError:
        return "not-installed"

def _store_info(p: Path):
    info = {"path": str(p), "exists": p.exists(), "books": 0, "error": None}
    try:
        info["books"] = len(load_books(p))
    except BookStoreError as e:
        info["error"] = str(e)
    return info

@router.get("/healthz")
def healthz():
    store = _store_info(Path(settings.books_file))
    return {
        "status": "ok" if store["error"] is None else "degraded",
        "python": sys.version.split()[0],
        "versions": {
            "fastapi": _ver("fastapi"),
            "uvicorn": _ver("uvicorn"),
            "jinja2": _ver("jinja2"),
            "pydantic": _ver("pydantic"),
            "pydantic_settings": _ver("pydantic_settings"),
        },
        "config": {
            "templates_dir": str(settings.templates_dir),
        },
        "book_store": store,
    }
