# miniblog

Building blocks for a small blog service: a post model, an in-memory store,
a service that applies the blog's rules, and request handlers that answer
with JSON. It has no dependencies beyond the standard library.

## Installing

```
pip install .
```

## Modules

- `miniblog.models` – the `Post` dataclass (`name`, `content`, `id`,
  `created_at`) and `new_post(name, content)`, which gives a post a fresh
  UUID and a UTC timestamp. An empty name raises `EmptyTitleError`, empty
  content raises `EmptyContentError`; both are `PostValidationError`, a
  `ValueError`.
- `miniblog.store` – `InMemoryStore` with `create`, `get_by_id`, `get_all`
  and `delete_all`. A missing id raises `NotFoundError` ("Item not found");
  listing an empty store raises `EmptyStoreError`. Both are `StoreError`.
  Passing `None` to `create` raises `ValueError`.
- `miniblog.service` – `PostService`, built on any object that meets the
  `PostStore` protocol, with `create_post`, `get_post_by_id`,
  `list_all_posts` and `delete_all`.
- `miniblog.web` – the `Request` and `Response` dataclasses,
  `Response.json(data, status)`, `Response.error(message, status)` and
  `logging_middleware(handler)`, which logs each request's method, path,
  status code and duration at INFO level on the `miniblog.web` logger.
- `miniblog.handler` – `PostHandler` and `post_to_dict(post)`.

## Rules applied when a post is created

- the title is trimmed of surrounding whitespace and must not be empty;
- the content must be at least 5 bytes long once encoded as UTF-8
  (`ContentTooShortError`);
- no two posts may share a title, compared without regard to case
  (`DuplicateTitleError`).

## Handlers

`PostHandler` takes a `Request` and returns a `Response`:

| Method                | Meant for            | Result                                              |
|-----------------------|----------------------|-----------------------------------------------------|
| `create_post`         | `POST /posts`        | `201` with the new post; `400` on bad JSON or a broken rule |
| `get_post_by_id`      | `GET /post/{id}`     | `200` with the post, `404` if there is none          |
| `get_posts_all`       | `GET /posts`         | `200` with every post, `404` if the store is empty   |
| `delete_all_posts`    | `DELETE /posts`      | removes every post and answers `204`                 |

`get_post_by_id` reads the id from the request path after `/post/`.
A post is rendered as:

```json
{"id": "…", "name": "My title", "content": "Some text", "created_at": "2024-01-01T12:00:00Z"}
```

Error responses are plain text holding the error message.

## Example

```python
from miniblog.handler import PostHandler
from miniblog.service import PostService
from miniblog.store import InMemoryStore
from miniblog.web import Request, logging_middleware

service = PostService(InMemoryStore())
handler = PostHandler(service)

create = logging_middleware(handler.create_post)
response = create(Request("POST", "/posts", b'{"name": "Hello", "content": "First post"}'))
print(response.status, response.body)
```

## What it does not do

The package contains no HTTP server, no WSGI application object, no
routing and no command to start a service. The handlers produce `Response`
objects; connecting them to a server and dispatching requests by method and
path is left to the caller. Posts live only in memory and are lost when the
process ends.

## Tests

```
pip install ".[test]"
pytest
```