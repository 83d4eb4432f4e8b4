from __future__ import annotations

import contextlib
import sys

from .config import load_config
from .server import create_server


def main() -> None:
    config = load_config()
    server = create_server(config)
    print(f"Mock backend listening on :{config.port}", flush=True)
    with contextlib.closing(server):
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass


def run() -> None:
    try:
        main()
    except Exception as exc:  # noqa: BLE001
        print(f"[mock-backend] fatal error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - cli entry point
    run()
