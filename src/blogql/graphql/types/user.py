"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.records import UserRecord

if TYPE_CHECKING:
    from .post import Post


@strawberry.type(description="A latitude/longitude pair")
class GeoCoord:
    lat: str | None
    lng: str | None


@strawberry.type(description="The address for a user")
class Address:
    street: str | None
    suite: str | None
    city: str | None
    zipcode: str | None
    geo: GeoCoord | None


@strawberry.type(description="The company for a user")
class Company:
    name: str | None
    catch_phrase: str | None
    bs: str | None


@strawberry.type(description="Represents a user on the blog site")
class User:
    """User type for GraphQL API."""

    id: int
    name: str
    username: str
    email: str | None
    address: Address | None
    phone: str | None
    website: str | None
    company: Company | None
    record: strawberry.Private[UserRecord]

    @strawberry.field
    async def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:
        """Get posts written by this user."""
        from ..resolvers.user import resolve_user_posts

        return await resolve_user_posts(self, info)
