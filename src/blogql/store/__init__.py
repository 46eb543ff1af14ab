"""In-memory blog data store: records, the store itself, and the JSON loader."""

from .loader import load_store
from .memory import DataStore
from .records import (
    Address,
    Category,
    CommentRecord,
    Company,
    GeoCoord,
    PostRecord,
    RecordKind,
    UserRecord,
)

__all__ = [
    "Address",
    "Category",
    "CommentRecord",
    "Company",
    "DataStore",
    "GeoCoord",
    "PostRecord",
    "RecordKind",
    "UserRecord",
    "load_store",
]
