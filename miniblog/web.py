"""Request and response types and the request-logging middleware."""

from __future__ import annotations

import functools
import json
import logging
import time
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Callable

logger = logging.getLogger(__name__)

_JSON_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


@dataclass
class Request:
    """An incoming HTTP request."""

    method: str
    path: str
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)
    path_params: dict[str, str] = field(default_factory=dict)


@dataclass
class Response:
    """An outgoing HTTP response."""

    status: int = HTTPStatus.OK
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def json(cls, data: Any, status: int = HTTPStatus.OK) -> Response:
        """Build a response holding ``data`` encoded as one line of JSON."""
        text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
        text = text.translate(_JSON_ESCAPES) + "\n"
        return cls(
            status=status,
            body=text.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

    @classmethod
    def error(cls, message: str, status: int) -> Response:
        """Build a plain-text error response."""
        return cls(
            status=status,
            body=(message + "\n").encode("utf-8"),
            headers={
                "Content-Type": "text/plain; charset=utf-8",
                "X-Content-Type-Options": "nosniff",
            },
        )


Handler = Callable[[Request], Response]


def _format_duration(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


def logging_middleware(next_handler: Handler) -> Handler:
    """Wrap a handler so every request is logged with its status and duration."""

    @functools.wraps(next_handler)
    def wrapper(request: Request) -> Response:
        start = time.perf_counter()
        response = next_handler(request)
        elapsed = time.perf_counter() - start
        logger.info(
            "%s %s %d %s",
            request.method,
            request.path,
            int(response.status),
            _format_duration(elapsed),
        )
        return response

    return wrapper