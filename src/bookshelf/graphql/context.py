"""
Helpers for reading per-request state out of the GraphQL context
"""

from typing import Any

import strawberry

from ..store import RecordStore, get_store


def get_store_from_info(info: strawberry.Info) -> RecordStore:
    """Return the record store bound to this request.

    Falls back to the shared store when the context does not carry one.
    """
    context: Any = info.context
    store = context.get("store") if isinstance(context, dict) else None
    if store is None:
        return get_store()
    return store
