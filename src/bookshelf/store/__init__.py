"""
In-memory record store for the Bookshelf API
"""

from .memory import RecordStore
from .models import AuthorRecord, BookRecord
from .shared import get_store, init_store, reset_store

__all__ = [
    "AuthorRecord",
    "BookRecord",
    "RecordStore",
    "get_store",
    "init_store",
    "reset_store",
]
