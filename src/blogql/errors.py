"""
Error taxonomy for the blog graph.

Lookups that find nothing are not errors: they resolve to ``None``. Only
data-dependent mutation failures and bad input raise.
"""


class BlogError(Exception):
    """Base exception for blog graph operations."""

    pass


class UserConflictError(BlogError):
    """Raised when a username is already registered (case-insensitively)."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User already exists: {username}")


class AuthorNotFoundError(BlogError):
    """Raised when a post names an author that does not resolve to a user."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"No such author: {username}")


class InvalidArgumentError(BlogError):
    """Raised when an argument is well-typed but out of range."""

    pass


class DataLoadError(BlogError):
    """Raised when the data set cannot be loaded."""

    pass
