from loghttpd.http import Method, Request, Response, ResponseType
from loghttpd.routing import RoutingServer


def _body(text):
    return lambda request: Response(status=200, body=text, response_type=ResponseType.TEXT)


def test_registered_route_is_called():
    server = RoutingServer()
    server.add_route(Method.GET, "/a", lambda request: Response(body=request.path))
    response = server.process_request(Request(Method.GET, "/a"))
    assert response.status == 200
    assert response.body == "/a"


def test_unknown_path_is_404():
    server = RoutingServer()
    server.add_route(Method.GET, "/a", _body("a"))
    response = server.process_request(Request(Method.GET, "/b"))
    assert response.status == 404
    assert response.body == ""
    assert response.response_type is ResponseType.TEXT


def test_method_is_part_of_route():
    server = RoutingServer()
    server.add_route(Method.GET, "/a", _body("a"))
    assert server.process_request(Request(Method.POST, "/a")).status == 404


def test_re_adding_route_replaces_handler():
    server = RoutingServer()
    server.add_route(Method.PUT, "/a", _body("first"))
    server.add_route(Method.PUT, "/a", _body("second"))
    assert server.process_request(Request(Method.PUT, "/a")).body == "second"


def test_routing_server_respond_uses_routes(tmp_path):
    server = RoutingServer()
    server.log_dir = tmp_path
    server.add_route(Method.DELETE, "/item", _body("gone"))
    response = server.respond("DELETE /item HTTP/1.1\r\n\r\n", 1)
    assert response.body == "gone"
    missing = server.respond("DELETE /other HTTP/1.1\r\n\r\n", 1)
    assert missing.status == 404