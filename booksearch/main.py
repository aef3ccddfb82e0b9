"""
Purpose:
- FastAPI application factory and router mounts.
- Maps a broken book store to a short HTML 500 page.
- Uvicorn will serve this on 0.0.0.0:8000 by default.
"""

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
import uvicorn

from .core.settings import settings
from .core.logging import setup_logger
from .search.store import BookStoreError
from .api.health import router as health_router
from .api.pages import router as pages_router

logger = setup_logger()

async def book_store_error_handler(request: Request, exc: BookStoreError):
    logger.error("Book store failed on %s: %s", request.url.path, exc)
    return HTMLResponse(
        "<!DOCTYPE html><html><body><h1>Book catalogue unavailable</h1></body></html>",
        status_code=500,
    )

def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_title, version="0.1.0")
    app.add_exception_handler(BookStoreError, book_store_error_handler)
    app.include_router(health_router)
    app.include_router(pages_router)
    return app

app = create_app()

def run():
    uvicorn.run("booksearch.main:app", host=settings.host, port=settings.port)
