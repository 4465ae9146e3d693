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
def resolve_authors(info: strawberry.Info) -> list[Author]:
    """Resolve every author in insertion order."""
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)
    return [AuthorType.from_record(record) for record in store.list_authors()]


def resolve_author_by_id(info: strawberry.Info, id: int | None) -> Author | None:
    """
    Resolve a single author by its ID.

    An omitted ID never matches a stored author, so it resolves to None
    rather than an error or the full list.
    """
    store = get_store_from_info(info)
    record = store.get_author_by_id(id)

    if record is None:
        logger.debug("Author not found", author_id=id)
        return None

    from ..types.author import Author as AuthorType

    return AuthorType.from_record(record)


# Field resolvers
def resolve_books_for_author(author: Author, info: strawberry.Info) -> list[Book]:
    """Resolve the books whose author_id points at this author, in store order."""
    from ..types.book import Book as BookType

    store = get_store_from_info(info)
    return [
        BookType.from_record(record)
        for record in store.list_books()
        if record.author_id == author.id
    ]


# Mutations
def create_author(info: strawberry.Info, name: str) -> Author:
    """Create a new author."""
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)
    record = store.append_author(name)

    logger.info("Author created", author_id=record.id, name=record.name)
    return AuthorType.from_record(record)
