"""Request-line parsing and response rendering for the minimal HTTP server."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Method(Enum):
    """HTTP methods the server understands."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value


class ResponseType(Enum):
    """Kinds of response body, each mapped to its Content-Type."""

    TEXT = "text/plain"
    JSON = "application/json"
    HTML = "text/html"

    @property
    def content_type(self) -> str:
        return self.value


_STATUS_TEXT = {
    400: "Bad Request",
    404: "Not Found",
}


@dataclass(frozen=True)
class Request:
    """A parsed request line."""

    method: Method
    path: str


@dataclass
class Response:
    """A response ready to be rendered onto the wire."""

    status: int = 200
    body: str = ""
    response_type: ResponseType = ResponseType.TEXT

    @property
    def status_text(self) -> str:
        return _STATUS_TEXT.get(self.status, "OK")

    def render(self) -> str:
        """Return the full response text as sent to the client."""
        return (
            f"HTTP/1.1 {self.status} {self.status_text}\n"
            f"Content-Type: {self.response_type.content_type}\n"
            "\n"
            f"{self.body}\n"
        )


def parse_path(message: str) -> str:
    """Return the first line of a raw request message, trimmed, or an empty string."""
    if not message:
        return ""
    first, _, _ = message.partition("\n")
    return first.strip()


def process_path(line: str) -> Request | None:
    """Parse a request line such as ``GET / HTTP/1.1``; return None if it is invalid."""
    parts = line.split()
    if len(parts) != 3:
        return None
    method_name, path, version = parts
    if version != "HTTP/1.1" or not path.startswith("/"):
        return None
    try:
        method = Method[method_name]
    except KeyError:
        return None
    return Request(method=method, path=path)