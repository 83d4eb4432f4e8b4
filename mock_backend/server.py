from __future__ import annotations

import logging
import sys
import time
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from .config import MockBackendConfig

MAX_CHUNK_LINE = 65536
READ_BLOCK_SIZE = 65536


class MockBackendRequestHandler(BaseHTTPRequestHandler):
    """Answers every request, whatever its method or path, with the same body."""

    config: MockBackendConfig
    logger = logging.getLogger("mock_backend.server")
    protocol_version = "HTTP/1.1"
    disable_nagle_algorithm = True

    def __getattr__(self, name: str):
        """Resolve every ``do_<METHOD>`` lookup to :meth:`_respond`.

        ``http.server`` answers 501 for methods without a ``do_`` attribute, so
        explicit ``do_GET``/``do_POST`` methods would not cover arbitrary
        method tokens.
        """

        if name.startswith("do_"):
            return self._respond
        raise AttributeError(name)

    def do_HEAD(self) -> None:
        self._respond(include_body=False)

    def log_message(self, format: str, *args) -> None:  # pragma: no cover - debug only
        self.logger.debug("%s - %s", self.address_string(), format % args)

    def _respond(self, include_body: bool = True) -> None:
        time.sleep(self.config.delay)
        self._discard_body()
        body = self.config.body
        try:
            self.send_response(HTTPStatus.OK)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if include_body:
                self.wfile.write(body)
        except ConnectionError:
            self.close_connection = True

    def _discard_body(self) -> None:
        if "chunked" in self.headers.get("Transfer-Encoding", "").lower():
            self._discard_chunked_body()
            return

        raw_length = self.headers.get("Content-Length")
        if raw_length is None:
            return
        try:
            remaining = int(raw_length)
        except ValueError:
            # Framing is unknown, so the connection cannot be reused.
            self.close_connection = True
            return

        self._discard_exactly(remaining)

    def _discard_chunked_body(self) -> None:
        while True:
            line = self.rfile.readline(MAX_CHUNK_LINE + 1)
            if not line:
                self.close_connection = True
                return
            try:
                size = int(line.split(b";", 1)[0].strip(), 16)
            except ValueError:
                self.close_connection = True
                return
            if size < 0:
                self.close_connection = True
                return
            if size == 0:
                break
            # chunk data is followed by CRLF
            if not self._discard_exactly(size + 2):
                return

        # trailer section ends with an empty line
        while True:
            trailer = self.rfile.readline(MAX_CHUNK_LINE + 1)
            if trailer in (b"", b"\r\n", b"\n"):
                return

    def _discard_exactly(self, remaining: int) -> bool:
        while remaining > 0:
            chunk = self.rfile.read(min(READ_BLOCK_SIZE, remaining))
            if not chunk:
                self.close_connection = True
                return False
            remaining -= len(chunk)
        return True


class MockBackendServer(ThreadingHTTPServer):
    daemon_threads = True
    request_queue_size = 128

    def handle_error(self, request, client_address) -> None:
        # Client disconnects are dropped silently; anything else is reported.
        if isinstance(sys.exc_info()[1], ConnectionError):
            return
        super().handle_error(request, client_address)


def create_server(config: MockBackendConfig) -> MockBackendServer:
    handler_cls = type("ConfiguredMockBackendRequestHandler", (MockBackendRequestHandler,), {})
    handler_cls.config = config
    return MockBackendServer((config.host, config.port), handler_cls)


__all__ = ["create_server", "MockBackendRequestHandler", "MockBackendServer"]
