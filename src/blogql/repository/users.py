"""Repository helpers for users."""

from __future__ import annotations

from ..errors import UserConflictError
from ..logging import get_logger
from ..store.memory import DataStore
from ..store.records import UserRecord

logger = get_logger(__name__)


def list_users(store: DataStore) -> list[UserRecord]:
    return store.users()


def get_user(store: DataStore, username: str) -> UserRecord | None:
    return store.find_user(username)


def get_user_by_id(store: DataStore, user_id: int) -> UserRecord | None:
    return next((user for user in store.users() if user.id == user_id), None)


def create_user(
    store: DataStore, *, username: str, name: str, email: str | None = None
) -> UserRecord:
    """
    Register a new user.

    Raises:
        UserConflictError: If the username is taken, ignoring case
    """
    with store.exclusive():
        if store.find_user(username) is not None:
            logger.info("Rejected duplicate username", username=username)
            raise UserConflictError(username)

        user = UserRecord(
            id=store.user_count() + 1,
            username=username,
            name=name,
            email=email,
        )
        store.insert_user(user)

    logger.info("User created", user_id=user.id)
    return user
