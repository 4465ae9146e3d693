"""
Record store holding the author and book collections in process memory
"""

import itertools
import threading
from collections.abc import Iterable, Iterator

from ..logging import get_logger
from .models import AuthorRecord, BookRecord

logger = get_logger(__name__)


def _next_id_counter(existing_ids: Iterable[int]) -> Iterator[int]:
    """Start a counter right after the highest id already in use."""
    return itertools.count(max(existing_ids, default=0) + 1)


class RecordStore:
    """Owns the authors and books collections.

    Collections are append-only and keep insertion order. Ids come from
    per-collection monotonic counters, and appends are serialized by a lock
    so concurrent writers never receive the same id.
    """

    def __init__(
        self,
        authors: Iterable[AuthorRecord] = (),
        books: Iterable[BookRecord] = (),
    ) -> None:
        self._authors: list[AuthorRecord] = list(authors)
        self._books: list[BookRecord] = list(books)
        self._author_ids = _next_id_counter(author.id for author in self._authors)
        self._book_ids = _next_id_counter(book.id for book in self._books)
        self._write_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"RecordStore(authors={len(self._authors)}, books={len(self._books)})"

    # Reads

    def list_authors(self) -> list[AuthorRecord]:
        """Return all authors in insertion order."""
        return list(self._authors)

    def list_books(self) -> list[BookRecord]:
        """Return all books in insertion order."""
        return list(self._books)

    def get_author_by_id(self, author_id: int | None) -> AuthorRecord | None:
        """Return the first author whose id equals ``author_id``, if any."""
        return next((author for author in self._authors if author.id == author_id), None)

    def get_book_by_id(self, book_id: int | None) -> BookRecord | None:
        """Return the first book whose id equals ``book_id``, if any."""
        return next((book for book in self._books if book.id == book_id), None)

    # Writes

    def append_author(self, name: str) -> AuthorRecord:
        """Store a new author under the next free id."""
        with self._write_lock:
            author = AuthorRecord(id=next(self._author_ids), name=name)
            self._authors.append(author)

        logger.debug("Author appended", author_id=author.id, total=len(self._authors))
        return author

    def append_book(self, name: str, author_id: int) -> BookRecord:
        """Store a new book under the next free id."""
        with self._write_lock:
            book = BookRecord(id=next(self._book_ids), name=name, author_id=author_id)
            self._books.append(book)

        logger.debug("Book appended", book_id=book.id, total=len(self._books))
        return book
