from booksearch.search.schema import SearchQuery
from booksearch.search.service import search_books


def titles(result):
    return [b.title for b in result.books]


def test_exact_title_case_sensitive_returns_only_that_book(books):
    for book in books:
        result = search_books(SearchQuery(term=book.title, case_sensitive=True), books)
        assert result.books == [book]


def test_case_folded_match_by_default(books):
    result = search_books(SearchQuery(term="THE GREAT GATSBY"), books)
    assert titles(result) == ["The Great Gatsby"]


def test_case_varied_term_misses_when_case_sensitive(books):
    result = search_books(SearchQuery(term="the great gatsby", case_sensitive=True), books)
    assert result.books == []


def test_default_mode_keeps_store_order_for_case_variants(books):
    result = search_books(SearchQuery(term="DUNE"), books)
    assert titles(result) == ["Dune", "dune"]


def test_no_partial_matches(books):
    assert search_books(SearchQuery(term="Gatsby"), books).books == []
    assert search_books(SearchQuery(term="The Great Gatsby "), books).books == []


def test_absent_term_skips_the_scan():
    class Exploding:
        def __iter__(self):
            raise AssertionError("store should not be scanned")

    result = search_books(SearchQuery(), Exploding())
    assert result.books == []
    assert result.searched is False


def test_unmatched_term_is_still_a_search(books):
    result = search_books(SearchQuery(term="Ulysses"), books)
    assert result.books == []
    assert result.searched is True
