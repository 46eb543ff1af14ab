"""
Root GraphQL mutation definitions
"""

from typing import Annotated

import strawberry

from ..types.post import Category, Post
from ..types.user import User


@strawberry.type(name="BlogMutations")
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createPost", description="Create a new blog post")
    async def create_post(
        self,
        info: strawberry.Info,
        title: str,
        body: str,
        author: Annotated[str, strawberry.argument(description="username of the author")],
        category: Category | None = None,
    ) -> Post:
        from ..resolvers.post import create_post

        return await create_post(info, title, body, author, category)

    @strawberry.mutation(name="createUser", description="Create a new user")
    async def create_user(
        self, info: strawberry.Info, username: str, name: str, email: str | None = None
    ) -> User:
        from ..resolvers.user import create_user

        return await create_user(info, username, name, email)
