"""In-memory storage of posts."""

from __future__ import annotations

from miniblog.models import Post


class StoreError(Exception):
    """Base class for store errors."""


class NotFoundError(StoreError, LookupError):
    """Raised when no post has the requested id."""

    def __init__(self, message: str = "Item not found") -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class EmptyStoreError(StoreError):
    """Raised when listing a store that holds no posts."""

    def __init__(self, message: str = "Empty store") -> None:
        super().__init__(message)


class InMemoryStore:
    """Keeps posts in a dictionary keyed by post id."""

    def __init__(self) -> None:
        self._posts: dict[str, Post] = {}

    def create(self, post: Post | None) -> None:
        """Store a post, replacing any post with the same id."""
        if post is None:
            raise ValueError("post cannot be None")
        self._posts[post.id] = post

    def get_by_id(self, post_id: str) -> Post:
        """Return the post with the given id."""
        try:
            return self._posts[post_id]
        except KeyError:
            raise NotFoundError() from None

    def get_all(self) -> list[Post]:
        """Return every stored post; an empty store is an error."""
        if not self._posts:
            raise EmptyStoreError()
        return list(self._posts.values())

    def delete_all(self) -> None:
        """Remove every stored post."""
        self._posts = {}