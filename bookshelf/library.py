from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from bookshelf.book import Book, NOT_BORROWED
from bookshelf.patron import Patron
from utils.validators import GenreValidator

logger = logging.getLogger(__name__)

INVALID_ID = -1


class LibraryError(Exception):
    pass


class UnknownBookError(LibraryError, LookupError):
    """Raised when a book id does not refer to an occupied catalog slot."""


class Library:
    """Fixed-capacity registry of books and patrons with borrowing rules.

    The index of a slot is the id of the book or patron stored in it. Slots
    are filled first-fit and entries are never removed, so ids are stable for
    the lifetime of the library. Operations report failure through sentinel
    values (``-1``, ``False`` or ``None``) rather than exceptions.
    """

    def __init__(self, max_book_capacity: int, max_borrowed_books: int, max_patron_capacity: int) -> None:
        self.max_book_capacity = GenreValidator.require_capacity("max_book_capacity", max_book_capacity)
        self.max_borrowed_books = GenreValidator.require_capacity("max_borrowed_books", max_borrowed_books)
        self.max_patron_capacity = GenreValidator.require_capacity("max_patron_capacity", max_patron_capacity)

        self._books: List[Optional[Book]] = [None] * self.max_book_capacity
        self._patrons: List[Optional[Patron]] = [None] * self.max_patron_capacity

    @classmethod
    def from_settings(cls, settings: Any) -> "Library":
        return cls(settings.max_book_capacity, settings.max_borrowed_books, settings.max_patron_capacity)

    # ------------------------- Books ------------------------- #
    def add_book_to_library(self, book: Book) -> int:
        """Add a book, returning its id; an already present book keeps its id.

        Returns -1 when every slot is taken.
        """
        book_id = self._place(self._books, book)
        if book_id == INVALID_ID:
            logger.warning(f"Catalog full ({self.max_book_capacity} books), could not add {book.title!r}")
        else:
            logger.debug(f"Book {book.title!r} stored at id {book_id}")
        return book_id

    def is_book_id_valid(self, book_id: int) -> bool:
        return self._is_slot_occupied(self._books, book_id)

    def get_book_id(self, book: Book) -> int:
        return self._find(self._books, book)

    def get_book(self, book_id: int) -> Optional[Book]:
        if not self.is_book_id_valid(book_id):
            return None
        return self._books[book_id]

    def is_book_available(self, book_id: int) -> bool:
        if not self.is_book_id_valid(book_id):
            return False
        return self._books[book_id].get_current_borrower_id() == NOT_BORROWED

    def list_books(self) -> List[Tuple[int, Book]]:
        return [(i, book) for i, book in enumerate(self._books) if book is not None]

    # ------------------------- Patrons ------------------------- #
    def register_patron_to_library(self, patron: Patron) -> int:
        """Register a patron, returning its id; -1 when the registry is full."""
        patron_id = self._place(self._patrons, patron)
        if patron_id == INVALID_ID:
            logger.warning(f"Patron registry full ({self.max_patron_capacity}), could not register {patron}")
        else:
            logger.debug(f"Patron {patron} registered with id {patron_id}")
        return patron_id

    def is_patron_id_valid(self, patron_id: int) -> bool:
        return self._is_slot_occupied(self._patrons, patron_id)

    def get_patron_id(self, patron: Patron) -> int:
        return self._find(self._patrons, patron)

    def get_patron(self, patron_id: int) -> Optional[Patron]:
        if not self.is_patron_id_valid(patron_id):
            return None
        return self._patrons[patron_id]

    def list_patrons(self) -> List[Tuple[int, Patron]]:
        return [(i, patron) for i, patron in enumerate(self._patrons) if patron is not None]

    # ------------------------- Borrowing ------------------------- #
    def count_borrowed_books(self, patron_id: int) -> int:
        return sum(1 for book in self._books
                   if book is not None and book.get_current_borrower_id() == patron_id)

    def _patron_can_borrow(self, patron_id: int) -> bool:
        if not self.is_patron_id_valid(patron_id):
            return False
        return self.count_borrowed_books(patron_id) < self.max_borrowed_books

    def borrow_book(self, book_id: int, patron_id: int) -> bool:
        """Lend a book to a patron.

        Succeeds only when both ids are valid, the book is available, the
        patron holds fewer than ``max_borrowed_books`` books and would enjoy
        this one. On failure nothing is changed.
        """
        if not (self.is_book_id_valid(book_id) and self.is_patron_id_valid(patron_id)):
            logger.info(f"Borrow rejected: invalid book id {book_id} or patron id {patron_id}")
            return False

        book = self._books[book_id]
        patron = self._patrons[patron_id]
        if not self.is_book_available(book_id):
            logger.info(f"Borrow rejected: book {book_id} is held by patron {book.get_current_borrower_id()}")
            return False
        if not self._patron_can_borrow(patron_id):
            logger.info(f"Borrow rejected: patron {patron_id} reached the limit of {self.max_borrowed_books}")
            return False
        if not patron.will_enjoy_book(book):
            logger.info(f"Borrow rejected: patron {patron_id} would not enjoy book {book_id}")
            return False

        book.set_borrower_id(patron_id)
        logger.info(f"Book {book_id} borrowed by patron {patron_id}")
        return True

    def return_book(self, book_id: int) -> None:
        """Return a book to the shelf. Raises UnknownBookError for an invalid id."""
        if not self.is_book_id_valid(book_id):
            raise UnknownBookError(f"No book with id {book_id} in this library.")
        self._books[book_id].return_book()
        logger.info(f"Book {book_id} returned")

    def suggest_book_to_patron(self, patron_id: int) -> Optional[Book]:
        """Return the available book the patron would enjoy the most.

        Ties go to the lowest id. Books scoring zero or less are never
        suggested. Returns None if nothing qualifies or the patron id is invalid.
        """
        patron = self.get_patron(patron_id)
        if patron is None:
            return None

        best_book = None
        best_score = 0
        for book_id, book in enumerate(self._books):
            if book is None or not self.is_book_available(book_id):
                continue
            score = patron.get_book_score(book)
            if patron.will_enjoy_book(book) and score > best_score:
                best_book = book
                best_score = score
        return best_book

    def get_statistics(self) -> Dict[str, Any]:
        books = self.list_books()
        borrowed = sum(1 for _, book in books if book.is_borrowed)
        return {
            "total_books": len(books),
            "available_books": len(books) - borrowed,
            "borrowed_books": borrowed,
            "registered_patrons": len(self.list_patrons()),
            "max_book_capacity": self.max_book_capacity,
            "max_borrowed_books": self.max_borrowed_books,
            "max_patron_capacity": self.max_patron_capacity,
        }

    # ------------------------- Slot helpers ------------------------- #
    @staticmethod
    def _place(slots: list, item: Any) -> int:
        for i, occupant in enumerate(slots):
            if occupant is item:
                return i
            if occupant is None:
                slots[i] = item
                return i
        return INVALID_ID

    @staticmethod
    def _find(slots: list, item: Any) -> int:
        for i, occupant in enumerate(slots):
            if occupant is item:
                return i
        return INVALID_ID

    @staticmethod
    def _is_slot_occupied(slots: list, index: int) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        if index < 0 or index >= len(slots):
            return False
        return slots[index] is not None
