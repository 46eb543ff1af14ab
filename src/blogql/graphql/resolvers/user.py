from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...repository import posts as post_repo
from ...repository import users as user_repo
from ...store.records import UserRecord
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


def to_user_type(record: UserRecord) -> User:
    """Convert a stored user into the GraphQL type."""
    from ..types.user import Address, Company, GeoCoord
    from ..types.user import User as UserType

    address = None
    if record.address is not None:
        geo = record.address.geo
        address = Address(
            street=record.address.street,
            suite=record.address.suite,
            city=record.address.city,
            zipcode=record.address.zipcode,
            geo=GeoCoord(lat=geo.lat, lng=geo.lng) if geo is not None else None,
        )

    company = None
    if record.company is not None:
        company = Company(
            name=record.company.name,
            catch_phrase=record.company.catch_phrase,
            bs=record.company.bs,
        )

    return UserType(
        id=record.id,
        name=record.name,
        username=record.username,
        email=record.email,
        address=address,
        phone=record.phone,
        website=record.website,
        company=company,
        record=record,
    )


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[User]:
    store = get_store_from_info(info)
    return [to_user_type(user) for user in user_repo.list_users(store)]


async def resolve_user(info: strawberry.Info, username: str) -> User | None:
    store = get_store_from_info(info)
    user = user_repo.get_user(store, username)
    if user is None:
        logger.info("User not found", username=username)
        return None
    return to_user_type(user)


# Field resolvers
async def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    from .post import to_post_type

    store = get_store_from_info(info)
    return [to_post_type(post) for post in post_repo.posts_by_user(store, user.id)]


# Mutation resolvers
async def create_user(
    info: strawberry.Info, username: str, name: str, email: str | None
) -> User:
    store = get_store_from_info(info)
    return to_user_type(user_repo.create_user(store, username=username, name=name, email=email))
