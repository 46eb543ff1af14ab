"""
HasAuthor interface definition
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .user import User


@strawberry.interface(description="This type has an author")
class HasAuthor:
    """Implemented by every type that can name the user who wrote it."""

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the author, dispatched on the underlying record kind."""
        from ..resolvers.author import resolve_has_author

        return await resolve_has_author(self, info)
