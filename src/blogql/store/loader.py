"""
Load a DataStore from a directory of JSON files.

The directory holds ``posts.json`` (list), ``users.json`` (object keyed by
username, or list) and ``comments.json`` (list).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import DataLoadError, UserConflictError
from ..logging import get_logger
from .memory import DataStore
from .records import CommentRecord, PostRecord, UserRecord

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

BUNDLED_DATA_DIR = Path(__file__).parent / "data"

POSTS_FILE = "posts.json"
USERS_FILE = "users.json"
COMMENTS_FILE = "comments.json"


def _read_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DataLoadError(f"Missing data file: {path}") from e
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Malformed JSON in {path}: {e}") from e


def _parse_records(path: Path, items: Any, model: type[RecordT]) -> list[RecordT]:
    if not isinstance(items, list):
        raise DataLoadError(f"Expected a list in {path}")
    try:
        return [model.model_validate(item) for item in items]
    except ValidationError as e:
        raise DataLoadError(f"Invalid record in {path}: {e}") from e


def load_store(data_dir: str | Path | None = None) -> DataStore:
    """
    Build a DataStore from JSON files.

    Args:
        data_dir: Directory holding the data files. Defaults to the bundled
            sample data.

    Returns:
        Populated DataStore

    Raises:
        DataLoadError: If a file is missing, malformed, or holds invalid records
    """
    base = Path(data_dir) if data_dir is not None else BUNDLED_DATA_DIR

    users_path = base / USERS_FILE
    raw_users = _read_json(users_path)
    if isinstance(raw_users, dict):
        raw_users = list(raw_users.values())

    posts_path = base / POSTS_FILE
    comments_path = base / COMMENTS_FILE

    users = _parse_records(users_path, raw_users, UserRecord)
    posts = _parse_records(posts_path, _read_json(posts_path), PostRecord)
    comments = _parse_records(comments_path, _read_json(comments_path), CommentRecord)

    try:
        store = DataStore(posts=posts, users=users, comments=comments)
    except UserConflictError as e:
        raise DataLoadError(f"Duplicate user in {users_path}: {e.username}") from e

    logger.info(
        "Data store loaded",
        data_dir=str(base),
        posts=len(posts),
        users=len(users),
        comments=len(comments),
    )
    return store
