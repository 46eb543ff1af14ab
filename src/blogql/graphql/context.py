"""
Access to per-request GraphQL context
"""

import strawberry

from ..store.memory import DataStore


def get_store_from_info(info: strawberry.Info) -> DataStore:
    """Return the DataStore placed in the GraphQL context."""
    store = info.context.get("store") if isinstance(info.context, dict) else None
    if store is None:
        raise RuntimeError("GraphQL context has no data store")
    return store
