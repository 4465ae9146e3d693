"""
Sample data loaded into the record store at startup.
"""

from __future__ import annotations

from ..logging import get_logger
from .memory import RecordStore
from .models import AuthorRecord, BookRecord

logger = get_logger(__name__)

SEED_AUTHORS: tuple[AuthorRecord, ...] = (
    AuthorRecord(id=1, name="J. K. Rowling"),
    AuthorRecord(id=2, name="J. R. R. Tolkien"),
    AuthorRecord(id=3, name="Brent Weeks"),
)

SEED_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(id=1, name="Harry Potter and the Chamber of Secrets", author_id=1),
    BookRecord(id=2, name="Harry Potter and the Prisoner of Azkaban", author_id=1),
    BookRecord(id=3, name="Harry Potter and the Goblet of Fire", author_id=1),
    BookRecord(id=4, name="The Fellowship of the Ring", author_id=2),
    BookRecord(id=5, name="The Two Towers", author_id=2),
    BookRecord(id=6, name="The Return of the King", author_id=2),
    BookRecord(id=7, name="The Way of Shadows", author_id=3),
    BookRecord(id=8, name="Beyond the Shadows", author_id=3),
)


def create_seeded_store() -> RecordStore:
    """
    Build a record store pre-populated with the sample authors and books.

    Returns:
        A new RecordStore; each call returns an independent copy of the data.
    """
    store = RecordStore(authors=SEED_AUTHORS, books=SEED_BOOKS)
    logger.debug(
        "Seeded record store",
        authors=len(SEED_AUTHORS),
        books=len(SEED_BOOKS),
    )
    return store
