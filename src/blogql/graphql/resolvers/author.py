from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...repository.authors import resolve_author
from ..context import get_store_from_info
from .user import to_user_type

if TYPE_CHECKING:
    from ..types.author import HasAuthor
    from ..types.user import User


async def resolve_has_author(source: HasAuthor, info: strawberry.Info) -> User | None:
    """Resolve ``author`` for any HasAuthor implementation."""
    store = get_store_from_info(info)
    record = getattr(source, "record", None)
    if record is None:
        return None
    user = resolve_author(store, record)
    return to_user_type(user) if user is not None else None
