"""
Author lookup for records implementing the HasAuthor interface.

Dispatch uses the record's ``kind`` tag: posts resolve their author through
``user_id``, comments through a case-insensitive email match. Any other kind
has no author.
"""

from __future__ import annotations

from typing import Protocol

from ..logging import get_logger
from ..store.memory import DataStore
from ..store.records import RecordKind, UserRecord
from .users import get_user_by_id

logger = get_logger(__name__)

AUTHORED_KINDS = frozenset({RecordKind.POST, RecordKind.COMMENT})


class Authored(Protocol):
    kind: RecordKind


def author_variant(source: Authored) -> RecordKind | None:
    """Classify a record under HasAuthor, or None if it is not a variant."""
    kind = getattr(source, "kind", None)
    return kind if kind in AUTHORED_KINDS else None


def post_author(store: DataStore, user_id: int) -> UserRecord | None:
    return get_user_by_id(store, user_id)


def comment_author(store: DataStore, email: str | None) -> UserRecord | None:
    if not email:
        return None
    wanted = email.lower()
    return next(
        (user for user in store.users() if user.email and user.email.lower() == wanted),
        None,
    )


def resolve_author(store: DataStore, source: Authored) -> UserRecord | None:
    variant = author_variant(source)
    if variant is RecordKind.POST:
        return post_author(store, source.user_id)  # type: ignore[attr-defined]
    if variant is RecordKind.COMMENT:
        return comment_author(store, source.email)  # type: ignore[attr-defined]

    logger.warning("No HasAuthor variant for record", kind=getattr(source, "kind", None))
    return None
