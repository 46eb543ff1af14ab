from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...repository import posts as post_repo
from ...store.records import Category, CommentRecord, PostRecord
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.post import Post

logger = get_logger(__name__)


def to_post_type(record: PostRecord) -> Post:
    """Convert a stored post into the GraphQL type."""
    from ..types.post import Post as PostType

    return PostType(
        id=record.id,
        user_id=record.user_id,
        title=record.title,
        body=record.body,
        category=record.category,
        like_count=record.like_count,
        record=record,
    )


def to_comment_type(record: CommentRecord) -> Comment:
    """Convert a stored comment into the GraphQL type."""
    from ..types.comment import Comment as CommentType

    return CommentType(
        id=record.id,
        post_id=record.post_id,
        name=record.name,
        email=record.email,
        body=record.body,
        record=record,
    )


# Query resolvers
async def resolve_posts(info: strawberry.Info, category: Category | None) -> list[Post]:
    store = get_store_from_info(info)
    return [to_post_type(post) for post in post_repo.list_posts(store, category)]


async def resolve_post(info: strawberry.Info, id: int) -> Post | None:
    store = get_store_from_info(info)
    post = post_repo.get_post(store, id)
    if post is None:
        logger.info("Post not found", post_id=id)
        return None
    return to_post_type(post)


async def resolve_latest_post(info: strawberry.Info) -> Post | None:
    store = get_store_from_info(info)
    post = post_repo.latest_post(store)
    return to_post_type(post) if post is not None else None


async def resolve_recent_posts(info: strawberry.Info, count: int) -> list[Post]:
    store = get_store_from_info(info)
    return [to_post_type(post) for post in post_repo.recent_posts(store, count)]


# Field resolvers
def resolve_post_timestamp(post: Post) -> float | None:
    return post_repo.post_timestamp(post.record)


async def resolve_post_comments(
    post: Post, info: strawberry.Info, limit: int | None
) -> list[Comment]:
    store = get_store_from_info(info)
    return [
        to_comment_type(comment)
        for comment in post_repo.post_comments(store, post.record, limit)
    ]


# Mutation resolvers
async def create_post(
    info: strawberry.Info,
    title: str,
    body: str,
    author: str,
    category: Category | None,
) -> Post:
    store = get_store_from_info(info)
    post = post_repo.create_post(
        store, title=title, body=body, author=author, category=category
    )
    return to_post_type(post)
