"""HTTP handlers for the blog's post endpoints."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from miniblog.models import Post
from miniblog.service import PostService
from miniblog.store import StoreError
from miniblog.web import Request, Response

TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def post_to_dict(post: Post) -> dict[str, Any]:
    """Return the JSON representation of a post."""
    return {
        "id": post.id,
        "name": post.name,
        "content": post.content,
        "created_at": post.created_at.strftime(TIME_FORMAT),
    }


def _decode_create_request(body: bytes) -> tuple[str, str]:
    """Read the name and content from a create request body."""
    try:
        text = body.decode("utf-8").lstrip(" \t\r\n")
        value, _ = json.JSONDecoder().raw_decode(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError("Invalid JSON") from exc
    if value is None:
        return "", ""
    if not isinstance(value, dict):
        raise ValueError("Invalid JSON")
    fields = {"name": "", "content": ""}
    for key, item in value.items():
        field_name = key.lower()
        if field_name not in fields or item is None:
            continue
        if not isinstance(item, str):
            raise ValueError("Invalid JSON")
        fields[field_name] = item
    return fields["name"], fields["content"]


class PostHandler:
    """Turns HTTP requests into calls on the post service."""

    def __init__(self, service: PostService) -> None:
        self.service = service

    def create_post(self, request: Request) -> Response:
        """Handle POST /posts."""
        try:
            name, content = _decode_create_request(request.body)
        except ValueError:
            return Response.error("Invalid JSON", HTTPStatus.BAD_REQUEST)
        try:
            post = self.service.create_post(name, content)
        except (ValueError, StoreError) as exc:
            return Response.error(str(exc), HTTPStatus.BAD_REQUEST)
        return Response.json(post_to_dict(post), HTTPStatus.CREATED)

    def get_post_by_id(self, request: Request) -> Response:
        """Handle GET /post/{id}."""
        post_id = request.path.removeprefix("/post/")
        try:
            post = self.service.get_post_by_id(post_id)
        except StoreError as exc:
            return Response.error(str(exc), HTTPStatus.NOT_FOUND)
        return Response.json(post_to_dict(post), HTTPStatus.OK)

    def get_posts_all(self, request: Request) -> Response:
        """Handle GET /posts."""
        try:
            posts = self.service.list_all_posts()
        except StoreError as exc:
            return Response.error(str(exc), HTTPStatus.NOT_FOUND)
        return Response.json([post_to_dict(post) for post in posts], HTTPStatus.OK)

    def delete_all_posts(self, request: Request) -> Response:
        """Handle DELETE /posts."""
        try:
            self.service.store.delete_all()
        except StoreError as exc:
            return Response.error(str(exc), HTTPStatus.BAD_REQUEST)
        return Response(status=HTTPStatus.NO_CONTENT)