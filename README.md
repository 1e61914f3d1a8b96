# loghttpd

A small HTTP server for POSIX systems. It answers requests through a
routing table and writes one line per request to a log file, which it
rotates as the file grows. A running server reads its verbosity from a
shared configuration that other processes can change.

## Installation

```
pip install .
```

## Commands

The `loghttpd` command prints `Hello!` and then carries out one action:

```
loghttpd run
loghttpd count
loghttpd rotate
loghttpd update_config <verbosity>
```

- `run` creates the shared configuration (verbosity starts at 1) and
  serves on `127.0.0.1:8080`. Each connection is handled in its own
  thread. The first Ctrl+C or SIGTERM stops accepting new connections;
  the second one ends the server, which removes the shared configuration.
  If the address cannot be bound, the error is printed and the server
  stops. Starting a second server while the configuration exists fails.
- `count` prints the number of lines in `http.log` in the working
  directory, or an error if there is no such file.
- `rotate` drops `http.5.log`, shifts `http.4.log` to `http.5.log` and so
  on down to `http.1.log`, then moves `http.log` to `http.1.log`.
- `update_config <verbosity>` stores a new verbosity (0–255) in the
  shared configuration of a running server. Connections accepted after
  the change log with the new value.

Without an action, or with an unknown one, the usage line is printed and
the command exits with status 1.

## Routes

| Method | Path      | Response                                         |
|--------|-----------|--------------------------------------------------|
| GET    | `/status` | JSON with status, method, path and UTC timestamp |
| GET    | `/`       | a short HTML page                                |

Any other method and path gives `404 Not Found` with an empty body. A
first line that is not `<METHOD> /<path> HTTP/1.1`, with METHOD one of
GET, PUT, POST or DELETE, gives `400 Bad Request` with the body
`Invalid request`.

Each connection is read once (up to 1024 bytes); only the request line
is looked at, and the connection is closed after the response is sent.
Headers and request bodies are ignored.

## Log format

Every request appends a line to `http.log`:

```
<local RFC 3339 time> <verbosity> <request line without HTTP/1.1> <status>
```

Writes are made under an exclusive file lock. When the log holds more
than 500 lines after a write, it is rotated.

## Shared configuration

The configuration is a one-byte file named `loghttpd_config`, kept in
`/dev/shm` when that directory exists and in the system temporary
directory otherwise. `loghttpd.config` provides `init_config`,
`read_config`, `update_config` and `remove_config`; each takes the name
(or a path) of the configuration and raises `ConfigError` when it
cannot be created or opened.

## Using the library

Build your own server by registering handlers on a `RoutingServer`:

```python
from loghttpd.http import Method, Response, ResponseType
from loghttpd.routing import RoutingServer

def hello(request):
    return Response(status=200, body="hello", response_type=ResponseType.TEXT)

server = RoutingServer()
server.add_route(Method.GET, "/hello", hello)
server.run("127.0.0.1", 8080)
```

`run` must be called from the main thread. The `log_dir` and
`config_name` attributes of a server choose where its log files live and
which shared configuration it uses. `Server.respond(message, verbosity)`
turns a raw request message into a `Response` and logs it, without any
socket.

For other dispatch rules, subclass `loghttpd.server.Server` and
implement `process_request(request)`.

`loghttpd.cli.build_server()` returns a `RoutingServer` with the two
default routes registered. `loghttpd.http` holds `parse_path` and
`process_path` for request lines and `Response.render()` for the text
sent to the client; `loghttpd.logfile` holds `log`, `count` and
`rotate`.