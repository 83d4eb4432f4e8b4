from .config import MockBackendConfig, load_config
from .server import MockBackendRequestHandler, MockBackendServer, create_server

__all__ = [
    "MockBackendConfig",
    "load_config",
    "MockBackendRequestHandler",
    "MockBackendServer",
    "create_server",
]
