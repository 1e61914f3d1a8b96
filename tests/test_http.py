import pytest

from loghttpd.http import (
    Method,
    Request,
    Response,
    ResponseType,
    parse_path,
    process_path,
)


def test_render_not_found_text():
    response = Response(status=404)
    assert response.render() == "HTTP/1.1 404 Not Found\nContent-Type: text/plain\n\n\n"


def test_render_bad_request_with_body():
    response = Response(status=400, body="Invalid request")
    assert response.render() == (
        "HTTP/1.1 400 Bad Request\nContent-Type: text/plain\n\nInvalid request\n"
    )


@pytest.mark.parametrize(
    "kind, content_type",
    [
        (ResponseType.TEXT, "text/plain"),
        (ResponseType.JSON, "application/json"),
        (ResponseType.HTML, "text/html"),
    ],
)
def test_render_content_types(kind, content_type):
    rendered = Response(status=200, body="x", response_type=kind).render()
    assert rendered.splitlines()[1] == f"Content-Type: {content_type}"


def test_other_status_is_ok():
    assert Response(status=500).render().startswith("HTTP/1.1 500 OK\n")


def test_parse_path_takes_first_line_trimmed():
    message = "  GET /status HTTP/1.1  \r\nHost: localhost\r\n\r\n"
    assert parse_path(message) == "GET /status HTTP/1.1"


def test_parse_path_empty():
    assert parse_path("") == ""
    assert parse_path("\nsecond") == ""


@pytest.mark.parametrize("method", list(Method))
def test_process_path_valid_methods(method):
    request = process_path(f"{method.value} /status HTTP/1.1")
    assert request == Request(method=method, path="/status")


@pytest.mark.parametrize(
    "line",
    [
        "",
        "GET /",
        "GET / HTTP/1.0",
        "GET status HTTP/1.1",
        "get / HTTP/1.1",
        "PATCH / HTTP/1.1",
        "GET / HTTP/1.1 extra",
    ],
)
def test_process_path_rejects(line):
    assert process_path(line) is None


def test_parse_then_process_round_trip():
    request = process_path(parse_path("DELETE /items HTTP/1.1\nHost: x\n"))
    assert request.method is Method.DELETE
    assert request.path == "/items"