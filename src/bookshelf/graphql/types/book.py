"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store import BookRecord

if TYPE_CHECKING:
    from .author import Author


@strawberry.type(description="This represent a book written by an author")
class Book:
    """Book type for GraphQL API."""

    id: int
    name: str
    author_id: int

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(id=record.id, name=record.name, author_id=record.author_id)

    @strawberry.field
    def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author this book references, if it exists."""
        from ..resolvers.book import resolve_author_for_book

        return resolve_author_for_book(self, info)
