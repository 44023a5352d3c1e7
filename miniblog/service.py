"""Business rules for creating and reading blog posts."""

from __future__ import annotations

from typing import Protocol

from miniblog.models import Post, PostValidationError, new_post
from miniblog.store import StoreError


class ContentTooShortError(PostValidationError):
    """Raised when post content is shorter than five bytes."""

    def __init__(
        self, message: str = "Content Too Short, must be at least contain 5 chars"
    ) -> None:
        super().__init__(message)


class DuplicateTitleError(PostValidationError):
    """Raised when a title matches an existing one, ignoring case."""

    def __init__(
        self, message: str = "Title already exists (case insensitive)"
    ) -> None:
        super().__init__(message)


class PostStore(Protocol):
    """Storage the post service depends on."""

    def create(self, post: Post) -> None: ...

    def get_all(self) -> list[Post]: ...

    def get_by_id(self, post_id: str) -> Post: ...

    def delete_all(self) -> None: ...


MIN_CONTENT_LENGTH = 5


class PostService:
    """Applies the blog's rules on top of a post store."""

    def __init__(self, store: PostStore) -> None:
        self.store = store

    def create_post(self, title: str, content: str) -> Post:
        """Validate, create and store a new post."""
        trimmed_title = title.strip()
        if len(content.encode("utf-8")) < MIN_CONTENT_LENGTH:
            raise ContentTooShortError()
        if self._title_exists(title):
            raise DuplicateTitleError()
        post = new_post(trimmed_title, content)
        self.store.create(post)
        return post

    def get_post_by_id(self, post_id: str) -> Post:
        """Return the post with the given id."""
        return self.store.get_by_id(post_id)

    def list_all_posts(self) -> list[Post]:
        """Return every post in the store."""
        return self.store.get_all()

    def delete_all(self) -> None:
        """Remove every post, ignoring store failures."""
        try:
            self.store.delete_all()
        except StoreError:
            pass

    def _title_exists(self, title: str) -> bool:
        try:
            posts = self.store.get_all()
        except StoreError:
            return False
        wanted = title.casefold()
        return any(post.name.casefold() == wanted for post in posts)