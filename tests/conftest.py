"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest
import structlog

# Add src directory to path so imports work without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from blogql.store import (  # noqa: E402
    Address,
    Category,
    CommentRecord,
    Company,
    DataStore,
    GeoCoord,
    PostRecord,
    UserRecord,
)


@pytest.fixture
def alice() -> UserRecord:
    return UserRecord(
        id=1,
        username="Alice",
        name="Alice Liddell",
        email="alice@example.com",
        address=Address(
            street="Rabbit Hole",
            suite="Apt. 1",
            city="Wonderland",
            zipcode="00001",
            geo=GeoCoord(lat="51.75", lng="-1.25"),
        ),
        company=Company(name="Looking Glass", catch_phrase="Curiouser", bs="tea parties"),
    )


@pytest.fixture
def bob() -> UserRecord:
    return UserRecord(id=2, username="bob", name="Bob Builder", email="bob@example.com")


@pytest.fixture
def sample_posts() -> list[PostRecord]:
    """Three posts, dated out of id order."""
    return [
        PostRecord(
            id=1,
            user_id=1,
            title="First",
            body="Oldest post",
            category=Category.METEOR,
            like_count=3,
            date=datetime(2021, 1, 1, tzinfo=UTC),
        ),
        PostRecord(
            id=2,
            user_id=2,
            title="Second",
            body="Newest post",
            category=Category.PRODUCT,
            like_count=5,
            date=datetime(2023, 5, 1, tzinfo=UTC),
        ),
        PostRecord(
            id=3,
            user_id=1,
            title="Third",
            body="Middle post",
            category=Category.METEOR,
            date=datetime(2022, 6, 1, tzinfo=UTC),
        ),
    ]


@pytest.fixture
def sample_comments() -> list[CommentRecord]:
    """Five comments on post 1 interleaved with comments on other posts."""
    return [
        CommentRecord(id=1, post_id=1, name="c1", email="x@example.com", body="one"),
        CommentRecord(id=2, post_id=2, name="c2", email="BOB@example.com", body="two"),
        CommentRecord(id=3, post_id=1, name="c3", email="y@example.com", body="three"),
        CommentRecord(id=4, post_id=1, name="c4", email="z@example.com", body="four"),
        CommentRecord(id=5, post_id=3, name="c5", email=None, body="five"),
        CommentRecord(id=6, post_id=1, name="c6", email="w@example.com", body="six"),
        CommentRecord(id=7, post_id=1, name="c7", email="v@example.com", body="seven"),
    ]


@pytest.fixture
def store(
    alice: UserRecord,
    bob: UserRecord,
    sample_posts: list[PostRecord],
    sample_comments: list[CommentRecord],
) -> DataStore:
    return DataStore(posts=sample_posts, users=[alice, bob], comments=sample_comments)


@pytest.fixture
def empty_posts_store(alice: UserRecord) -> DataStore:
    return DataStore(users=[alice])


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Drop any structlog configuration a test installed."""
    yield
    structlog.reset_defaults()


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
