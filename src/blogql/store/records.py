"""
Record models held by the data store.

Field names are snake_case in Python and camelCase in data files
(``userId``, ``likeCount``, ``catchPhrase``). Every record carries an
explicit ``kind`` tag used for interface dispatch.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RecordKind(str, Enum):
    """Discriminant stored on every record."""

    POST = "post"
    COMMENT = "comment"
    USER = "user"


class Category(Enum):
    """Blog post category. Values are the stable external representation."""

    METEOR = "meteor"
    PRODUCT = "product"
    USER_STORY = "user-story"
    OTHER = "other"


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeoCoord(_Record):
    lat: str | None = None
    lng: str | None = None


class Address(_Record):
    street: str | None = None
    suite: str | None = None
    city: str | None = None
    zipcode: str | None = None
    geo: GeoCoord | None = None


class Company(_Record):
    name: str | None = None
    catch_phrase: str | None = None
    bs: str | None = None


class UserRecord(_Record):
    """A registered user. Stored under the lower-cased username."""

    kind: RecordKind = Field(default=RecordKind.USER, frozen=True)
    id: int = Field(frozen=True)
    username: str
    name: str
    email: str | None = None
    address: Address | None = None
    phone: str | None = None
    website: str | None = None
    company: Company | None = None

    @property
    def key(self) -> str:
        return self.username.lower()


class PostRecord(_Record):
    """A blog post. ``user_id`` references ``UserRecord.id``."""

    kind: RecordKind = Field(default=RecordKind.POST, frozen=True)
    id: int = Field(frozen=True)
    user_id: int = Field(frozen=True)
    title: str
    body: str
    category: Category | None = None
    like_count: int = 0
    date: datetime | None = Field(default=None, frozen=True)

    @field_validator("date", mode="before")
    @classmethod
    def unwrap_date(cls, value: Any) -> Any:
        # Exported data wraps dates as {"$date": ...}
        if isinstance(value, dict) and "$date" in value:
            return value["$date"]
        return value

    @field_validator("date")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class CommentRecord(_Record):
    """A comment on a post. ``post_id`` references ``PostRecord.id``."""

    kind: RecordKind = Field(default=RecordKind.COMMENT, frozen=True)
    id: int = Field(frozen=True)
    post_id: int
    name: str | None = None
    email: str | None = None
    body: str | None = None
