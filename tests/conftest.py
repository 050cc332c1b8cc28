"""Shared test configuration and fixtures for all tests."""

import io
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from httpbench.benchmark.models import BenchmarkConfig
from .test_const import OK_BODY, TEST_URL


def _make_handler(status: int, body: bytes):
    """Build a request handler class answering every GET with status and body."""

    class Handler(BaseHTTPRequestHandler):
        received_headers = []
        lock = threading.Lock()

        def do_GET(self):
            with Handler.lock:
                Handler.received_headers.append({k.lower(): v for k, v in self.headers.items()})
            self.send_response(status)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format, *args):
            pass

    return Handler


class LocalServer:
    """A threaded HTTP server on an ephemeral localhost port."""

    def __init__(self, status: int = 200, body: bytes = OK_BODY):
        self.handler = _make_handler(status, body)
        self._server = ThreadingHTTPServer(("127.0.0.1", 0), self.handler)
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}/"

    @property
    def hits(self) -> int:
        with self.handler.lock:
            return len(self.handler.received_headers)

    def start(self) -> "LocalServer":
        self._thread.start()
        return self

    def stop(self) -> None:
        self._server.shutdown()
        self._server.server_close()


@pytest.fixture
def local_server_factory():
    """Factory fixture starting local servers that are stopped after the test."""
    servers = []

    def start(status: int = 200, body: bytes = OK_BODY) -> LocalServer:
        server = LocalServer(status, body).start()
        servers.append(server)
        return server

    yield start
    for server in servers:
        server.stop()


@pytest.fixture
def ok_server(local_server_factory):
    """Local server answering 200 HelloWorld."""
    return local_server_factory()


@pytest.fixture
def discard_streams():
    """Stdout and stderr buffers for the benchmark output."""
    return io.StringIO(), io.StringIO()


@pytest.fixture
def make_config(discard_streams):
    """Build a BenchmarkConfig writing to in-memory streams."""
    stdout, stderr = discard_streams

    def build(**kwargs) -> BenchmarkConfig:
        kwargs.setdefault("url", TEST_URL)
        kwargs.setdefault("stdout", stdout)
        kwargs.setdefault("stderr", stderr)
        return BenchmarkConfig(**kwargs)

    return build
