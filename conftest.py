import json
import pytest

from bookshelf.book import Book
from bookshelf.library import Library
from bookshelf.patron import Patron
from utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Output mode is process-wide; keep every test on the plain default
    monkeypatch.delenv(OUTPUT_MODE_ENV, raising=False)


@pytest.fixture
def lib():
    # 3 books, 2 books per patron, 2 patrons
    return Library(max_book_capacity=3, max_borrowed_books=2, max_patron_capacity=2)


@pytest.fixture
def comic_book():
    return Book("Watchmen", "Alan Moore", 1987, comic_value=5, dramatic_value=0, educational_value=0)


@pytest.fixture
def comic_fan():
    return Patron("Dana", "Scully", 2, 0, 0, 10)


@pytest.fixture
def scenario_file(tmp_path):
    """Write a scenario dict to a temporary JSON file and return its path."""
    def _write(data, name="scenario.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write
