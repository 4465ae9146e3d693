"""
Record types held by the in-memory store
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthorRecord:
    """A stored author."""

    id: int
    name: str


@dataclass(frozen=True)
class BookRecord:
    """A stored book. ``author_id`` is not checked against the authors."""

    id: int
    name: str
    author_id: int
