"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store import AuthorRecord

if TYPE_CHECKING:
    from .book import Book


@strawberry.type(description="This represent an author of a book")
class Author:
    """Author type for GraphQL API."""

    id: int
    name: str

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "Author":
        return cls(id=record.id, name=record.name)

    @strawberry.field
    def book(
        self, info: strawberry.Info
    ) -> list[Annotated["Book", strawberry.lazy(".book")] | None] | None:
        """Get the books written by this author."""
        from ..resolvers.author import resolve_books_for_author

        return resolve_books_for_author(self, info)
