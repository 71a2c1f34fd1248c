from __future__ import annotations

from utils.validators import GenreValidator, TextValidator

NOT_BORROWED = -1


class Book:
    """A single book in the catalog with its genre values and borrower state."""

    def __init__(self, title: str, author: str, year_of_publication: int | None = None,
                 comic_value: int = 0, dramatic_value: int = 0, educational_value: int = 0) -> None:
        self.title = title.strip()
        self.author = author.strip()
        self.year_of_publication = year_of_publication

        # Genre values
        self.comic_value = comic_value
        self.dramatic_value = dramatic_value
        self.educational_value = educational_value

        self.current_borrower_id = NOT_BORROWED

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return self.string_representation()

    def __repr__(self) -> str:
        return f"Book(title={self.title!r}, author={self.author!r}, borrower={self.current_borrower_id})"

    def get_comic_value(self) -> int:
        return self.comic_value

    def get_dramatic_value(self) -> int:
        return self.dramatic_value

    def get_educational_value(self) -> int:
        return self.educational_value

    def get_current_borrower_id(self) -> int:
        return self.current_borrower_id

    def set_borrower_id(self, patron_id: int) -> None:
        self.current_borrower_id = patron_id

    def return_book(self) -> None:
        """Mark the book as back on the shelf."""
        self.current_borrower_id = NOT_BORROWED

    @property
    def is_borrowed(self) -> bool:
        return self.current_borrower_id != NOT_BORROWED

    def get_literary_value(self) -> int:
        return self.comic_value + self.dramatic_value + self.educational_value

    def string_representation(self) -> str:
        """Return ``[title,author,year,literary value]``."""
        return f"[{self.title},{self.author},{self.year_of_publication},{self.get_literary_value()}]"

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "year_of_publication": self.year_of_publication,
            "comic_value": self.comic_value,
            "dramatic_value": self.dramatic_value,
            "educational_value": self.educational_value,
            "current_borrower_id": self.current_borrower_id,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        title = data.get("title")
        if not TextValidator.validate_title(title):
            raise ValueError(f"Invalid book title: {title!r}")
        author = str(data.get("author") or "Unknown Author")

        values = {}
        for key in ("comic_value", "dramatic_value", "educational_value"):
            values[key] = GenreValidator.require_genre_value(key, data.get(key, 0))

        return Book(
            title=title,
            author=author,
            year_of_publication=data.get("year_of_publication"),
            **values,
        )
