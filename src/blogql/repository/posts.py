"""Repository helpers for posts and their comments."""

from __future__ import annotations

from datetime import UTC, datetime

from ..errors import AuthorNotFoundError, InvalidArgumentError
from ..logging import get_logger
from ..store.memory import DataStore
from ..store.records import Category, CommentRecord, PostRecord

logger = get_logger(__name__)


def _recency_key(post: PostRecord) -> tuple[bool, float, int]:
    # Newest first, undated posts last, ties by ascending id
    if post.date is None:
        return (True, 0.0, post.id)
    return (False, -post.date.timestamp(), post.id)


def sorted_by_recency(posts: list[PostRecord]) -> list[PostRecord]:
    """Return a new list of posts ordered newest first."""
    return sorted(posts, key=_recency_key)


# Queries
def list_posts(store: DataStore, category: Category | None = None) -> list[PostRecord]:
    posts = store.posts()
    if category is None:
        return posts
    return [post for post in posts if post.category == category]


def get_post(store: DataStore, post_id: int) -> PostRecord | None:
    return next((post for post in store.posts() if post.id == post_id), None)


def latest_post(store: DataStore) -> PostRecord | None:
    """Return the most recent post without reordering the stored collection."""
    ordered = sorted_by_recency(store.posts())
    return ordered[0] if ordered else None


def recent_posts(store: DataStore, count: int) -> list[PostRecord]:
    """
    Return up to ``count`` posts, newest first.

    Raises:
        InvalidArgumentError: If count is negative
    """
    if count < 0:
        raise InvalidArgumentError(f"count must be non-negative, got {count}")
    return sorted_by_recency(store.posts())[:count]


def posts_by_user(store: DataStore, user_id: int) -> list[PostRecord]:
    return [post for post in store.posts() if post.user_id == user_id]


# Field resolvers
def post_timestamp(post: PostRecord) -> float | None:
    """Post date as epoch milliseconds, or None for undated posts."""
    if post.date is None:
        return None
    return post.date.timestamp() * 1000


def post_comments(
    store: DataStore, post: PostRecord, limit: int | None = None
) -> list[CommentRecord]:
    """
    Comments on a post in collection order.

    A non-negative ``limit`` keeps the first ``limit`` comments; a missing or
    negative limit returns them all.
    """
    comments = [comment for comment in store.comments() if comment.post_id == post.id]
    if limit is not None and limit >= 0:
        return comments[:limit]
    return comments


# Mutations
def create_post(
    store: DataStore,
    *,
    title: str,
    body: str,
    author: str,
    category: Category | None = None,
    now: datetime | None = None,
) -> PostRecord:
    """
    Create and append a post written by ``author``.

    The returned record is the stored one, not a copy.

    Raises:
        AuthorNotFoundError: If no user has the given username
    """
    with store.exclusive():
        user = store.find_user(author)
        if user is None:
            logger.info("Rejected post for unknown author", author=author)
            raise AuthorNotFoundError(author)

        post = PostRecord(
            id=store.post_count() + 1,
            user_id=user.id,
            title=title,
            body=body,
            category=category,
            date=now or datetime.now(UTC),
        )
        store.append_post(post)

    logger.info("Post created", post_id=post.id, user_id=post.user_id)
    return post
