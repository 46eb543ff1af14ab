"""
Comment GraphQL type definitions
"""

import strawberry

from ...store.records import CommentRecord
from .author import HasAuthor


@strawberry.type(description="Represents a comment made about a post")
class Comment(HasAuthor):
    """Comment type for GraphQL API."""

    id: int
    post_id: int
    name: str | None
    email: str | None
    body: str | None
    record: strawberry.Private[CommentRecord]
