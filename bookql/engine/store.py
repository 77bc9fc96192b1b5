"""
Read-only book store.

The store is built once from a fixed list of records and handed by reference
to whoever needs it (schema, executor, API app). It has no mutation API.
"""

from typing import Dict, Iterable, Iterator, Optional, Tuple

from bookql.domain import Book


DEFAULT_BOOKS: Tuple[Book, ...] = (
    Book(id="1", name="Book 1", genre="Fantasy"),
    Book(id="2", name="Book 2", genre="Fantasy"),
    Book(id="3", name="Book 3", genre="Sci-Fi"),
)


class BookStore:
    """Ordered, immutable collection of books with lookup by id."""

    def __init__(self, books: Iterable[Book]) -> None:
        self._books: Tuple[Book, ...] = tuple(books)
        self._by_id: Dict[str, Book] = {}
        for book in self._books:
            if book.id in self._by_id:
                raise ValueError(f"Duplicate book id: {book.id!r}")
            self._by_id[book.id] = book

    def find(self, book_id: str) -> Optional[Book]:
        return self._by_id.get(book_id)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._by_id


def default_store() -> BookStore:
    """Store pre-loaded with the demo catalogue."""
    return BookStore(DEFAULT_BOOKS)
