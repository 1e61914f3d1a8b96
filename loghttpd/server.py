"""Connection handling, request logging and the accept loop of the HTTP server."""

from __future__ import annotations

import os
import signal
import socket
import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path

from loghttpd.config import CONFIG_NAME, init_config, read_config, remove_config
from loghttpd.http import Request, Response, ResponseType, parse_path, process_path
from loghttpd.logfile import LOG_NAME, count, log, rotate

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
BACKLOG = 128
READ_SIZE = 1024
MAX_LOG_LINES = 500
_TERM_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class _StopAccepting(Exception):
    """Raised from the signal handler to end the accept loop."""

    def __init__(self, signum: int) -> None:
        self.signum = signum
        super().__init__(signal.Signals(signum).name)


def _raise_stop(signum, frame) -> None:
    """Turn a termination signal into an exception in the accepting thread."""
    stop = _StopAccepting(signum)
    raise stop


class Server(ABC):
    """Base server: subclasses decide how a parsed request is answered.

    ``log_dir`` is where ``http.log`` and its rotations live, and
    ``config_name`` names the shared configuration; both may be overridden
    on an instance.
    """

    log_dir: str | os.PathLike = "."
    config_name: str | os.PathLike = CONFIG_NAME

    @property
    def log_path(self) -> Path:
        return Path(self.log_dir) / LOG_NAME

    @abstractmethod
    def process_request(self, request: Request) -> Response:
        """Answer a well-formed request."""

    def respond(self, message: str, verbosity: int) -> Response:
        """Build the response to a raw request message and record it in the log."""
        line = parse_path(message)
        if line:
            print(line)
        request = process_path(line)
        if request is None:
            response = Response(status=400, body="Invalid request", response_type=ResponseType.TEXT)
        else:
            response = self.process_request(request)
        log(line.replace("HTTP/1.1", ""), verbosity, response.status, self.log_path)
        if count(self.log_path) > MAX_LOG_LINES:
            rotate(self.log_dir)
        return response

    def handle_connection(self, conn: socket.socket) -> None:
        """Read one request from ``conn``, answer it and close the connection."""
        verbosity = read_config(self.config_name)
        with conn:
            try:
                data = conn.recv(READ_SIZE)
            except OSError as exc:
                print(f"Error reading from socket: {exc}", file=sys.stderr)
                return
            if not data:
                print("Connection closed")
                return
            message = data.decode("utf-8", errors="replace")
            print(f"Received: {message}")
            text = self.respond(message, verbosity).render()
            print(text)
            conn.sendall(text.encode())

    def run(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        """Serve until a termination signal stops accepting and a second one ends the process.

        Must be called from the main thread.
        """
        init_config(self.config_name)
        previous = {sig: signal.signal(sig, _raise_stop) for sig in _TERM_SIGNALS}
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
                try:
                    listener.bind((host, port))
                except OSError as exc:
                    print(f"Failed to bind {host}:{port}: {exc}", file=sys.stderr)
                    return
                listener.listen(BACKLOG)
                self._serve(listener)
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)
            remove_config(self.config_name)

    def _serve(self, listener: socket.socket) -> None:
        while True:
            try:
                conn, _ = listener.accept()
            except _StopAccepting:
                self._wait_for_exit()
                return
            except OSError as exc:
                print(f"Error accepting connection: {exc}", file=sys.stderr)
                continue
            threading.Thread(target=self.handle_connection, args=(conn,), daemon=True).start()

    @staticmethod
    def _wait_for_exit() -> None:
        old_mask = signal.pthread_sigmask(signal.SIG_BLOCK, _TERM_SIGNALS)
        try:
            print("\nNo longer accepting new connections, press Ctrl+C to exit")
            signal.sigwait(_TERM_SIGNALS)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)