"""Command-line entry point: run the server or manage its log and configuration."""

from __future__ import annotations

import sys
from datetime import datetime, timezone

from loghttpd.config import ConfigError, update_config
from loghttpd.http import Method, Request, Response, ResponseType
from loghttpd.logfile import count, rotate
from loghttpd.routing import RoutingServer

PROG = "loghttpd"
USAGE = f"Usage: {PROG} <run|count|rotate|update_config>"

_HTML_BODY = """<html>
            <body>
            <h1>Request received!</h1>
            <body>
            </html>"""


def handle_status(request: Request) -> Response:
    """Report status, method, path and the current UTC time as JSON."""
    timestamp = datetime.now(timezone.utc).isoformat()
    body = (
        f'{{"status": "OK",\n'
        f'"method": "{request.method}",\n'
        f'"path": "{request.path}",\n'
        f'"timestamp": "{timestamp}"}}'
    )
    return Response(status=200, body=body, response_type=ResponseType.JSON)


def handle_html(request: Request) -> Response:
    """Return a fixed HTML page."""
    return Response(status=200, body=_HTML_BODY, response_type=ResponseType.HTML)


def build_server() -> RoutingServer:
    """Create the server with its standard routes."""
    server = RoutingServer()
    server.add_route(Method.GET, "/status", handle_status)
    server.add_route(Method.GET, "/", handle_html)
    return server


def _parse_verbosity(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 255:
        raise ValueError(text)
    return value


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    print("Hello!")
    if not args:
        print(USAGE)
        return 1

    command = args[0]
    if command == "run":
        build_server().run()
    elif command == "count":
        try:
            print(f"Number of lines: {count()}")
        except OSError as exc:
            print(f"Failed to open file: {exc}", file=sys.stderr)
            return 1
    elif command == "rotate":
        rotate()
    elif command == "update_config":
        try:
            verbosity = _parse_verbosity(args[1])
        except (IndexError, ValueError):
            print("Failed to parse verbosity", file=sys.stderr)
            return 1
        try:
            update_config(verbosity)
        except ConfigError as exc:
            print(exc, file=sys.stderr)
            return 1
    else:
        print(USAGE)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())