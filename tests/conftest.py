from __future__ import annotations

import threading
from typing import Iterator

import pytest

from mock_backend.config import MockBackendConfig
from mock_backend.server import MockBackendServer, create_server


@pytest.fixture
def mock_server() -> Iterator[MockBackendServer]:
    server = create_server(MockBackendConfig(host="127.0.0.1", port=0))
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)
