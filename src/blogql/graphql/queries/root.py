"""
Root GraphQL query definitions
"""

from typing import Annotated

import strawberry

from ..types.post import Category, Post
from ..types.user import User


@strawberry.type(name="BlogSchema", description="Root of the Blog Schema")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="List of posts in the blog")
    async def posts(self, info: strawberry.Info, category: Category | None = None) -> list[Post]:
        from ..resolvers.post import resolve_posts

        return await resolve_posts(info, category)

    @strawberry.field(description="List of users of the blog site")
    async def users(self, info: strawberry.Info) -> list[User]:
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field(description="User by username")
    async def user(self, info: strawberry.Info, username: str) -> User | None:
        from ..resolvers.user import resolve_user

        return await resolve_user(info, username)

    @strawberry.field(description="Post by id")
    async def post(self, info: strawberry.Info, id: int) -> Post | None:
        from ..resolvers.post import resolve_post

        return await resolve_post(info, id)

    @strawberry.field(name="latestPost", description="Latest post in the blog")
    async def latest_post(self, info: strawberry.Info) -> Post | None:
        from ..resolvers.post import resolve_latest_post

        return await resolve_latest_post(info)

    @strawberry.field(name="recentPosts", description="Recent posts in the blog")
    async def recent_posts(
        self,
        info: strawberry.Info,
        count: Annotated[int, strawberry.argument(description="Number of recent items")],
    ) -> list[Post]:
        from ..resolvers.post import resolve_recent_posts

        return await resolve_recent_posts(info, count)
