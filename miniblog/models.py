"""Domain model for blog posts."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


class PostValidationError(ValueError):
    """Raised when a post's data breaks a validation rule."""


class EmptyTitleError(PostValidationError):
    """Raised when a post is given an empty title."""

    def __init__(self, message: str = "title cannot be empty") -> None:
        super().__init__(message)


class EmptyContentError(PostValidationError):
    """Raised when a post is given empty content."""

    def __init__(self, message: str = "content cannot be empty") -> None:
        super().__init__(message)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Post:
    """A single blog post."""

    name: str
    content: str
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_utc_now)


def new_post(name: str, content: str) -> Post:
    """Validate the fields and build a post with a fresh id and UTC timestamp."""
    if not name:
        raise EmptyTitleError()
    if not content:
        raise EmptyContentError()
    return Post(name=name, content=content)