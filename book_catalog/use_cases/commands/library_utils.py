"""
Helpers shared by commands for searching and grouping the catalog.
"""

from typing import Iterable, TypeVar

from book_catalog.entities.BookEntry import BookEntry

K = TypeVar("K")
V = TypeVar("V")

DIGITS_GROUP = "[0-9]"


def pack_to_map(key: K, value: V, dictionary: dict[K, list[V]]) -> None:
    """Append value to the list stored under key, creating it when missing."""
    dictionary.setdefault(key, []).append(value)


def contains_ignore_case(text: str, sub_string: str) -> bool:
    """Case-insensitive substring test."""
    return sub_string.casefold() in text.casefold()


def bucket_key(value: str) -> str:
    """
    Group key of a value derived from its first character.

    Values starting with a digit share the DIGITS_GROUP key, any other
    value is keyed by its uppercased first character.
    """
    first = value[0]
    if first.isdecimal():
        return DIGITS_GROUP
    return first.upper()


def sorted_group_keys(keys: Iterable[str]) -> list[str]:
    """Sort group keys ascending, DIGITS_GROUP first."""
    return sorted(keys, key=lambda key: (key != DIGITS_GROUP, key))


def group_titles_by_first_letter(books: Iterable[BookEntry]) -> dict[str, list[str]]:
    """
    Bucket the distinct titles of books by first character.

    Members of a bucket are in lexicographic order.
    """
    groups: dict[str, list[str]] = {}
    for title in sorted({book.title for book in books}):
        pack_to_map(bucket_key(title), title, groups)
    return groups


def group_titles_by_author(books: Iterable[BookEntry]) -> dict[str, list[str]]:
    """
    Bucket titles under every author who wrote them.

    Members of a bucket are in catalog order.
    """
    groups: dict[str, list[str]] = {}
    for book in books:
        for author in book.authors:
            pack_to_map(author, book.title, groups)
    return groups
