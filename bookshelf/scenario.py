"""Scenario files: a library's capacities, its initial books and patrons, and a
list of operations to replay against it.

Scenarios are read-only input for the CLI; nothing is ever written back.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from bookshelf.book import Book
from bookshelf.library import Library, UnknownBookError
from bookshelf.patron import Patron
from config import settings as default_settings
from utils.validators import GenreValidator

logger = logging.getLogger(__name__)

CAPACITY_KEYS = ("max_book_capacity", "max_borrowed_books", "max_patron_capacity")


class ScenarioError(ValueError):
    pass


@dataclass
class OperationResult:
    op: str
    args: Dict[str, Any]
    success: bool
    value: Any = None
    message: str = ""

    def to_dict(self) -> dict:
        return {"op": self.op, "args": self.args, "success": self.success,
                "value": self.value, "message": self.message}


@dataclass
class Scenario:
    capacity: Dict[str, int]
    books: List[Book] = field(default_factory=list)
    patrons: List[Patron] = field(default_factory=list)
    operations: List[Dict[str, Any]] = field(default_factory=list)

    def build_library(self) -> Library:
        library = Library(**self.capacity)
        for book in self.books:
            library.add_book_to_library(book)
        for patron in self.patrons:
            library.register_patron_to_library(patron)
        return library

    def run(self, library: Library) -> List[OperationResult]:
        results = []
        for operation in self.operations:
            op = operation["op"]
            args = {k: v for k, v in operation.items() if k != "op"}
            handler = _HANDLERS.get(op)
            if handler is None:
                raise ScenarioError(f"Unknown operation: {op!r}")
            result = handler(library, args)
            logger.debug(f"{op} {args} -> {result.success}")
            results.append(result)
        return results


# ------------------------- Operation handlers ------------------------- #
def _require_int(args: Dict[str, Any], key: str) -> int:
    value = args.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ScenarioError(f"Operation argument {key!r} must be an integer, got {value!r}")
    return value


def _op_borrow(library: Library, args: Dict[str, Any]) -> OperationResult:
    book_id = _require_int(args, "book_id")
    patron_id = _require_int(args, "patron_id")
    ok = library.borrow_book(book_id, patron_id)
    message = f"Book {book_id} borrowed by patron {patron_id}." if ok else \
        f"Patron {patron_id} could not borrow book {book_id}."
    return OperationResult("borrow", args, ok, message=message)


def _op_return(library: Library, args: Dict[str, Any]) -> OperationResult:
    book_id = _require_int(args, "book_id")
    try:
        library.return_book(book_id)
    except UnknownBookError as e:
        logger.warning(f"Return skipped: {e}")
        return OperationResult("return", args, False, message=str(e))
    return OperationResult("return", args, True, message=f"Book {book_id} returned.")


def _op_suggest(library: Library, args: Dict[str, Any]) -> OperationResult:
    patron_id = _require_int(args, "patron_id")
    book = library.suggest_book_to_patron(patron_id)
    if book is None:
        return OperationResult("suggest", args, False, message=f"No suggestion for patron {patron_id}.")
    book_id = library.get_book_id(book)
    return OperationResult("suggest", args, True, value=book_id,
                           message=f"Suggested for patron {patron_id}: {book.title} (id {book_id}).")


def _op_available(library: Library, args: Dict[str, Any]) -> OperationResult:
    book_id = _require_int(args, "book_id")
    available = library.is_book_available(book_id)
    state = "available" if available else "not available"
    return OperationResult("available", args, True, value=available, message=f"Book {book_id} is {state}.")


def _op_score(library: Library, args: Dict[str, Any]) -> OperationResult:
    book_id = _require_int(args, "book_id")
    patron_id = _require_int(args, "patron_id")
    book = library.get_book(book_id)
    patron = library.get_patron(patron_id)
    if book is None or patron is None:
        return OperationResult("score", args, False,
                               message=f"Unknown book {book_id} or patron {patron_id}.")
    score = patron.get_book_score(book)
    return OperationResult("score", args, True, value=score,
                           message=f"Patron {patron_id} scores book {book_id} at {score}.")


_HANDLERS: Dict[str, Callable[[Library, Dict[str, Any]], OperationResult]] = {
    "borrow": _op_borrow,
    "return": _op_return,
    "suggest": _op_suggest,
    "available": _op_available,
    "score": _op_score,
}


# ------------------------- Loading ------------------------- #
def parse_scenario(data: Any, settings: Optional[Any] = None) -> Scenario:
    settings = settings or default_settings
    if not isinstance(data, dict):
        raise ScenarioError("Scenario must be a JSON object.")

    raw_capacity = data.get("capacity") or {}
    if not isinstance(raw_capacity, dict):
        raise ScenarioError("'capacity' must be an object.")
    capacity = {}
    try:
        for key in CAPACITY_KEYS:
            capacity[key] = GenreValidator.require_capacity(key, raw_capacity.get(key, getattr(settings, key)))
        books = [Book.from_dict(item) for item in _list_of_objects(data, "books")]
        patrons = [Patron.from_dict(item) for item in _list_of_objects(data, "patrons")]
    except ValueError as e:
        raise ScenarioError(str(e)) from e

    operations = _list_of_objects(data, "operations")
    for operation in operations:
        if operation.get("op") not in _HANDLERS:
            raise ScenarioError(f"Unknown operation: {operation.get('op')!r}")

    return Scenario(capacity=capacity, books=books, patrons=patrons, operations=operations)


def _list_of_objects(data: dict, key: str) -> List[dict]:
    items = data.get(key, [])
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise ScenarioError(f"'{key}' must be a list of objects.")
    return items


def load_scenario(path: str | Path, settings: Optional[Any] = None) -> Scenario:
    path = Path(path)
    if not path.exists():
        raise ScenarioError(f"Scenario file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ScenarioError(f"Invalid JSON in {path}: {e}") from e
    scenario = parse_scenario(data, settings)
    logger.info(f"Loaded scenario {path}: {len(scenario.books)} books, {len(scenario.patrons)} patrons, "
                f"{len(scenario.operations)} operations")
    return scenario
