from __future__ import annotations

from dataclasses import dataclass

HOST = "0.0.0.0"
PORT = 8080
RESPONSE_DELAY_SECONDS = 0.078
RESPONSE_BODY = b"ok"


@dataclass(frozen=True)
class MockBackendConfig:
    host: str = HOST
    port: int = PORT
    delay: float = RESPONSE_DELAY_SECONDS
    body: bytes = RESPONSE_BODY


def load_config() -> MockBackendConfig:
    return MockBackendConfig()


__all__ = [
    "HOST",
    "PORT",
    "RESPONSE_DELAY_SECONDS",
    "RESPONSE_BODY",
    "MockBackendConfig",
    "load_config",
]
