"""In-memory data store for posts, users and comments."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from ..errors import UserConflictError
from .records import CommentRecord, PostRecord, UserRecord


class DataStore:
    """
    Holds the three blog collections for the lifetime of the process.

    Posts and comments keep insertion order. Users are keyed by lower-cased
    username. Every read returns a snapshot copy and every write runs under
    one re-entrant lock; callers that need check-then-write atomicity wrap
    the sequence in ``exclusive()``.

    Relationship lookups are linear scans over the owning collection.
    """

    def __init__(
        self,
        posts: Iterable[PostRecord] = (),
        users: Iterable[UserRecord] = (),
        comments: Iterable[CommentRecord] = (),
    ):
        self._lock = threading.RLock()
        self._posts: list[PostRecord] = list(posts)
        self._comments: list[CommentRecord] = list(comments)
        self._users: dict[str, UserRecord] = {}
        for user in users:
            self.insert_user(user)

    @contextmanager
    def exclusive(self) -> Iterator[DataStore]:
        """Hold the store lock for a sequence of reads and writes."""
        with self._lock:
            yield self

    # Reads
    def posts(self) -> list[PostRecord]:
        with self._lock:
            return list(self._posts)

    def users(self) -> list[UserRecord]:
        with self._lock:
            return list(self._users.values())

    def comments(self) -> list[CommentRecord]:
        with self._lock:
            return list(self._comments)

    def post_count(self) -> int:
        with self._lock:
            return len(self._posts)

    def user_count(self) -> int:
        with self._lock:
            return len(self._users)

    def find_user(self, username: str) -> UserRecord | None:
        """Look up a user by username, case-insensitively."""
        with self._lock:
            return self._users.get(username.lower())

    # Writes
    def append_post(self, post: PostRecord) -> None:
        with self._lock:
            self._posts.append(post)

    def insert_user(self, user: UserRecord) -> None:
        """
        Insert a user under its lower-cased username.

        Raises:
            UserConflictError: If the key is already taken
        """
        with self._lock:
            if user.key in self._users:
                raise UserConflictError(user.username)
            self._users[user.key] = user
