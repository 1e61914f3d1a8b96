"""A server that dispatches requests by method and exact path."""

from __future__ import annotations

from typing import Callable

from loghttpd.http import Method, Request, Response, ResponseType
from loghttpd.server import Server

Handler = Callable[[Request], Response]


class RoutingServer(Server):
    """Dispatches each request to the handler registered for its method and path."""

    def __init__(self) -> None:
        self._routes: dict[tuple[Method, str], Handler] = {}

    def add_route(self, method: Method, path: str, func: Handler) -> None:
        """Register ``func`` for ``method`` and ``path``, replacing any earlier handler."""
        self._routes[(method, path)] = func

    def process_request(self, request: Request) -> Response:
        handler = self._routes.get((request.method, request.path))
        if handler is None:
            return Response(status=404, body="", response_type=ResponseType.TEXT)
        return handler(request)