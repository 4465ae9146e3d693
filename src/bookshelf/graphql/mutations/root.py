"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.author import Author
from ..types.book import Book


@strawberry.type(description="Root Mutation")
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addBook", description="Add a book")
    def add_book(self, info: strawberry.Info, name: str, author_id: int) -> Book | None:
        from ..resolvers.book import create_book

        return create_book(info, name, author_id)

    @strawberry.mutation(name="addAuthor", description="Add an Author")
    def add_author(self, info: strawberry.Info, name: str) -> Author | None:
        from ..resolvers.author import create_author

        return create_author(info, name)
