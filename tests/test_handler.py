import json
import re
from datetime import datetime

import pytest

from miniblog.handler import PostHandler, post_to_dict
from miniblog.models import new_post
from miniblog.service import PostService
from miniblog.store import EmptyStoreError, InMemoryStore
from miniblog.web import Request


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def service(store):
    return PostService(store)


@pytest.fixture
def handler(service):
    return PostHandler(service)


def _post_request(body):
    if not isinstance(body, bytes):
        body = json.dumps(body).encode("utf-8")
    return Request(
        method="POST",
        path="/posts",
        body=body,
        headers={"Content-Type": "application/json"},
    )


def test_create_post_success(handler):
    response = handler.create_post(
        _post_request({"name": "My Name", "content": "My content"})
    )
    assert response.status == 201
    assert json.loads(response.body)["name"] == "My Name"


def test_create_post_bad_json(handler):
    response = handler.create_post(_post_request(b'{"bad":}'))
    assert response.status == 400
    assert response.body == b"Invalid JSON\n"


def test_create_post_short_content(handler):
    response = handler.create_post(
        _post_request({"name": "Test Name", "content": "hi"})
    )
    assert response.status == 400
    assert response.body == b"Content Too Short, must be at least contain 5 chars\n"


@pytest.mark.parametrize("body", [b"", b"[1, 2]", b'{"name": 5}', b"\xff"])
def test_create_post_rejects_undecodable_bodies(handler, body):
    response = handler.create_post(_post_request(body))
    assert response.status == 400
    assert response.body == b"Invalid JSON\n"


def test_create_post_duplicate_title(handler):
    first = handler.create_post(
        _post_request({"name": "Unique Title", "content": "First post content here"})
    )
    second = handler.create_post(
        _post_request({"name": "unique title", "content": "Second post content here"})
    )
    assert first.status == 201
    assert second.status == 400
    assert second.body == b"Title already exists (case insensitive)\n"


def test_create_post_stores_post(handler, store):
    response = handler.create_post(
        _post_request({"name": "Stored", "content": "Stored content"})
    )
    data = json.loads(response.body)
    assert store.get_by_id(data["id"]).content == "Stored content"


def test_get_post_by_id_valid(handler, service):
    post = service.create_post("some test title", "some test content for this")
    response = handler.get_post_by_id(Request(method="GET", path="/post/" + post.id))
    assert response.status == 200
    assert json.loads(response.body)["id"] == post.id


def test_get_post_by_id_invalid(handler, service):
    service.create_post("some test title", "some test content for this")
    response = handler.get_post_by_id(Request(method="GET", path="/post/invalidID"))
    assert response.status == 404
    assert response.body == b"Item not found\n"


def test_get_posts_all(handler, service):
    posts = [service.create_post(f"{i}Name", f"Some Content{i}") for i in range(5)]
    response = handler.get_posts_all(Request(method="GET", path="/posts/"))
    assert response.status == 200
    assert response.headers["Content-Type"] == "application/json"
    data = json.loads(response.body)
    assert len(data) == len(posts)
    assert {item["id"] for item in data} == {post.id for post in posts}


def test_get_posts_all_empty_store(handler):
    response = handler.get_posts_all(Request(method="GET", path="/posts"))
    assert response.status == 404


def test_delete_all_posts(handler, service, store):
    for i in range(5):
        service.create_post(f"{i}Name", f"Some Content{i}")
    response = handler.delete_all_posts(Request(method="DELETE", path="/posts"))
    assert response.status == 204
    assert response.body == b""
    with pytest.raises(EmptyStoreError):
        store.get_all()


def test_post_to_dict_fields():
    post = new_post("Title", "Some content")
    data = post_to_dict(post)
    assert data["id"] == post.id
    assert data["name"] == "Title"
    assert data["content"] == "Some content"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", data["created_at"])
    parsed = datetime.strptime(data["created_at"], "%Y-%m-%dT%H:%M:%SZ")
    assert parsed == post.created_at.replace(microsecond=0, tzinfo=None)