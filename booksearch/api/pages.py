"""
Purpose:
- Serve the HTML search page: GET form in, same form plus results out.
- The store is re-read on every request; nothing is cached between calls.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, select_autoescape
import logging

from ..core.settings import settings
from ..search.query import extract_query, TERM_PARAM, CASE_PARAM
from ..search.service import search_books
from ..search.store import load_books

logger = logging.getLogger("booksearch")

router = APIRouter(tags=["pages"])

# Every value interpolated into .html templates is escaped on output.
_env = Environment(
    loader=FileSystemLoader(str(settings.templates_dir)),
    autoescape=select_autoescape(["html", "xml"]),
)
templates = Jinja2Templates(env=_env)

@router.get("/", include_in_schema=False)
def index():
    return RedirectResponse(url="/search")

@router.get("/search", response_class=HTMLResponse)
def search_page(request: Request):
    """
    Render the search form; when searchTerm was submitted, append the matches
    (or the empty-state message) below it.
    """
    query = extract_query(request.query_params)
    result = search_books(query, load_books(settings.books_file))

    if result.searched:
        logger.info(
            "search term=%r case_sensitive=%s matches=%d",
            query.term, query.case_sensitive, len(result.books),
        )

    return templates.TemplateResponse(
        request,
        "search.html",
        {
            "title": settings.app_title,
            "result": result,
            "term_param": TERM_PARAM,
            "case_param": CASE_PARAM,
        },
    )
