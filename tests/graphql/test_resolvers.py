"""
Unit tests for author and book resolver functions
"""

from unittest.mock import MagicMock, patch

import pytest
import strawberry

from bookshelf.graphql.resolvers.author import (
    create_author,
    resolve_author_by_id,
    resolve_authors,
    resolve_books_for_author,
)
from bookshelf.graphql.resolvers.book import (
    create_book,
    resolve_author_for_book,
    resolve_book_by_id,
    resolve_books,
)
from bookshelf.graphql.types.author import Author
from bookshelf.graphql.types.book import Book


class TestRelationResolvers:
    """Tests for the author <-> book field resolvers."""

    def test_books_for_author(self, mock_info):
        result = resolve_books_for_author(Author(id=2, name="Tolkien"), mock_info)

        assert result == [Book(id=4, name="Fellowship", author_id=2)]

    def test_books_for_author_without_books_is_empty_list(self, mock_info):
        result = resolve_books_for_author(Author(id=42, name="Nobody"), mock_info)

        assert result == []

    def test_books_for_author_matches_every_book_with_author_id(self, mock_info, record_store):
        record_store.append_book("Prisoner of Azkaban", 1)
        record_store.append_book("Two Towers", 2)

        for author in record_store.list_authors():
            books = resolve_books_for_author(Author.from_record(author), mock_info)
            expected = [b.id for b in record_store.list_books() if b.author_id == author.id]
            assert [b.id for b in books] == expected

    def test_author_for_book(self, mock_info):
        result = resolve_author_for_book(Book(id=1, name="Chamber of Secrets", author_id=1), mock_info)

        assert result == Author(id=1, name="J.K. Rowling")

    def test_author_for_book_with_dangling_reference(self, mock_info):
        result = resolve_author_for_book(Book(id=9, name="X", author_id=999), mock_info)

        assert result is None


class TestQueryResolvers:
    def test_resolve_books(self, mock_info):
        assert [b.id for b in resolve_books(mock_info)] == [1, 4]

    def test_resolve_authors(self, mock_info):
        assert [a.name for a in resolve_authors(mock_info)] == ["J.K. Rowling", "Tolkien"]

    def test_resolve_book_by_id(self, mock_info):
        assert resolve_book_by_id(mock_info, 4) == Book(id=4, name="Fellowship", author_id=2)

    def test_resolve_author_by_id(self, mock_info):
        assert resolve_author_by_id(mock_info, 2) == Author(id=2, name="Tolkien")

    @pytest.mark.parametrize("missing", [99, None, strawberry.UNSET])
    def test_lookup_misses_resolve_to_none(self, mock_info, missing):
        assert resolve_book_by_id(mock_info, missing) is None
        assert resolve_author_by_id(mock_info, missing) is None

    def test_repeated_reads_are_identical(self, mock_info):
        assert resolve_books(mock_info) == resolve_books(mock_info)
        assert resolve_book_by_id(mock_info, 1) == resolve_book_by_id(mock_info, 1)


class TestMutations:
    def test_create_author(self, mock_info, record_store):
        author = create_author(mock_info, "New Author")

        assert author == Author(id=3, name="New Author")
        assert len(resolve_authors(mock_info)) == 3
        assert record_store.get_author_by_id(3).name == "New Author"

    def test_create_book_for_existing_author(self, mock_info):
        book = create_book(mock_info, "Two Towers", 2)

        assert book == Book(id=5, name="Two Towers", author_id=2)
        assert resolve_author_for_book(book, mock_info) == Author(id=2, name="Tolkien")

    def test_create_book_for_missing_author(self, mock_info):
        book = create_book(mock_info, "X", 999)

        assert book.author_id == 999
        assert resolve_author_for_book(book, mock_info) is None


def test_resolvers_fall_back_to_shared_store(record_store):
    info = MagicMock(spec=strawberry.Info)
    info.context = {}

    with patch("bookshelf.graphql.context.get_store", return_value=record_store):
        assert [b.id for b in resolve_books(info)] == [1, 4]
