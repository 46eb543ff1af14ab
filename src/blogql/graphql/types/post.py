"""
Post and Category GraphQL type definitions
"""

from typing import Annotated

import strawberry

from ...store import records
from ...store.records import PostRecord
from .author import HasAuthor
from .comment import Comment

Category = strawberry.enum(records.Category, name="Category", description="A Category of the blog")


@strawberry.type(description="Represents a blog post")
class Post(HasAuthor):
    """Post type for GraphQL API."""

    id: int
    user_id: int
    title: str
    body: str
    category: Category | None
    like_count: int
    record: strawberry.Private[PostRecord]

    @strawberry.field
    def timestamp(self) -> float | None:
        """Publication date as epoch milliseconds."""
        from ..resolvers.post import resolve_post_timestamp

        return resolve_post_timestamp(self)

    @strawberry.field
    async def comments(
        self,
        info: strawberry.Info,
        limit: Annotated[
            int | None, strawberry.argument(description="Limit the number of comments returned")
        ] = None,
    ) -> list[Comment]:
        """Get comments on this post."""
        from ..resolvers.post import resolve_post_comments

        return await resolve_post_comments(self, info, limit)
