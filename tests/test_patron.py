import dataclasses
import pytest

from bookshelf.book import Book
from bookshelf.patron import Patron


def test_book_score_is_weighted_sum():
    patron = Patron("Ada", "Lovelace", 1, 2, 3, 0)
    book = Book("Mixed", "Author", comic_value=4, dramatic_value=5, educational_value=6)
    assert patron.get_book_score(book) == 4 * 1 + 5 * 2 + 6 * 3

def test_book_score_with_zero_tendencies():
    patron = Patron("No", "Taste", 0, 0, 0, 0)
    book = Book("Anything", "Author", comic_value=9, dramatic_value=9, educational_value=9)
    assert patron.get_book_score(book) == 0

def test_will_enjoy_book_threshold_is_inclusive(comic_book, comic_fan):
    # 5 * 2 == 10 == threshold
    assert comic_fan.get_book_score(comic_book) == 10
    assert comic_fan.will_enjoy_book(comic_book) is True

def test_will_not_enjoy_book_below_threshold(comic_fan):
    book = Book("Thin Comic", "Author", comic_value=4)
    assert comic_fan.get_book_score(book) == 8
    assert comic_fan.will_enjoy_book(book) is False

def test_string_representation():
    patron = Patron("Fox", "Mulder", 0, 0, 0, 0)
    assert patron.string_representation() == "Fox Mulder"
    assert str(patron) == "Fox Mulder"

def test_string_representation_does_not_trim():
    patron = Patron(" Fox", "Mulder ", 0, 0, 0, 0)
    assert patron.string_representation() == " Fox Mulder "

def test_patron_is_immutable(comic_fan):
    with pytest.raises(dataclasses.FrozenInstanceError):
        comic_fan.enjoyment_threshold = 0

def test_patrons_compare_by_identity():
    first = Patron("Same", "Person", 1, 1, 1, 1)
    second = Patron("Same", "Person", 1, 1, 1, 1)
    assert first != second
    assert first == first

def test_from_dict_defaults_missing_tendencies_to_zero():
    patron = Patron.from_dict({"first_name": "Walter", "last_name": "Skinner", "comic_tendency": 3})
    assert patron.comic_tendency == 3
    assert patron.dramatic_tendency == 0
    assert patron.enjoyment_threshold == 0

def test_from_dict_rejects_negative_threshold():
    with pytest.raises(ValueError, match="enjoyment_threshold"):
        Patron.from_dict({"first_name": "A", "last_name": "B", "enjoyment_threshold": -1})

def test_from_dict_rejects_missing_name():
    with pytest.raises(ValueError, match="Invalid patron name"):
        Patron.from_dict({"first_name": "Only"})

def test_to_dict_round_trip_keeps_fields(comic_fan):
    data = comic_fan.to_dict()
    assert data["first_name"] == "Dana"
    assert Patron.from_dict(data).get_book_score(Book("B", "A", comic_value=1)) == 2
