from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in insertion order."""
    from ..types.book import Book as BookType

    store = get_store_from_info(info)
    return [BookType.from_record(record) for record in store.list_books()]


def resolve_book_by_id(info: strawberry.Info, id: int | None) -> Book | None:
    """
    Resolve a single book by its ID.

    An omitted ID never matches a stored book, so it resolves to None.
    """
    store = get_store_from_info(info)
    record = store.get_book_by_id(id)

    if record is None:
        logger.debug("Book not found", book_id=id)
        return None

    from ..types.book import Book as BookType

    return BookType.from_record(record)


# Field resolvers
def resolve_author_for_book(book: Book, info: strawberry.Info) -> Author | None:
    """
    Resolve the author referenced by a book.

    Books may reference an author that does not exist; that resolves to None.
    """
    store = get_store_from_info(info)
    record = store.get_author_by_id(book.author_id)

    if record is None:
        logger.debug(
            "Book references a missing author", book_id=book.id, author_id=book.author_id
        )
        return None

    from ..types.author import Author as AuthorType

    return AuthorType.from_record(record)


# Mutations
def create_book(info: strawberry.Info, name: str, author_id: int) -> Book:
    """Create a new book. The author ID is stored as given, without a lookup."""
    from ..types.book import Book as BookType

    store = get_store_from_info(info)
    record = store.append_book(name, author_id)

    logger.info("Book created", book_id=record.id, name=record.name, author_id=record.author_id)
    return BookType.from_record(record)
