"""
Shared record store lifecycle
"""

import threading

from ..config import settings
from ..logging import get_logger
from .memory import RecordStore

logger = get_logger(__name__)

# Process-wide store handed to the GraphQL context
_store: RecordStore | None = None
_init_lock = threading.Lock()


def reset_store() -> None:
    """Drop the shared store (for tests)."""
    global _store
    _store = None


def init_store(store: RecordStore | None = None, force_reinit: bool = False) -> RecordStore:
    """Initialize the shared record store.

    Builds the seeded store, or an empty one when seeding is disabled, unless
    a store is passed in explicitly. Repeated calls return the existing store.
    """
    global _store

    # Fast path: already initialized, no lock needed
    if _store is not None and store is None and not force_reinit:
        return _store

    with _init_lock:
        # Double-check after acquiring lock (another thread may have initialized)
        if _store is not None and store is None and not force_reinit:
            return _store

        if store is None:
            if settings.seed_data:
                from .seed_data import create_seeded_store

                store = create_seeded_store()
            else:
                store = RecordStore()

        _store = store
        logger.info(
            "Record store initialized",
            authors=len(store.list_authors()),
            books=len(store.list_books()),
        )
        return store


def get_store() -> RecordStore:
    """Get the shared record store, initializing it on first use."""
    if _store is None:
        return init_store()
    return _store
