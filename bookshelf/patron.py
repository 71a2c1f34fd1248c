from __future__ import annotations

from dataclasses import dataclass

from bookshelf.book import Book
from utils.validators import GenreValidator, TextValidator


@dataclass(frozen=True, eq=False)
class Patron:
    """A library patron with genre tendencies and an enjoyment threshold.

    Patrons are compared by identity: two patrons with the same name and
    tendencies are still different registrations.
    """

    first_name: str
    last_name: str
    comic_tendency: int
    dramatic_tendency: int
    educational_tendency: int
    enjoyment_threshold: int

    def __str__(self) -> str:
        return self.string_representation()

    def get_book_score(self, book: Book) -> int:
        """Weighted sum of the book's genre values by this patron's tendencies."""
        comic_score = book.get_comic_value() * self.comic_tendency
        dramatic_score = book.get_dramatic_value() * self.dramatic_tendency
        educational_score = book.get_educational_value() * self.educational_tendency
        return comic_score + dramatic_score + educational_score

    def will_enjoy_book(self, book: Book) -> bool:
        return self.get_book_score(book) >= self.enjoyment_threshold

    def string_representation(self) -> str:
        return self.first_name + " " + self.last_name

    def to_dict(self) -> dict:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "comic_tendency": self.comic_tendency,
            "dramatic_tendency": self.dramatic_tendency,
            "educational_tendency": self.educational_tendency,
            "enjoyment_threshold": self.enjoyment_threshold,
        }

    @staticmethod
    def from_dict(data: dict) -> "Patron":
        first_name = data.get("first_name")
        last_name = data.get("last_name")
        if not TextValidator.validate_name(first_name) or not TextValidator.validate_name(last_name):
            raise ValueError(f"Invalid patron name: {first_name!r} {last_name!r}")

        fields = {}
        for key in ("comic_tendency", "dramatic_tendency", "educational_tendency", "enjoyment_threshold"):
            fields[key] = GenreValidator.require_genre_value(key, data.get(key, 0))

        return Patron(first_name=first_name, last_name=last_name, **fields)
