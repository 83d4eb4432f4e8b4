from __future__ import annotations

import urllib.error
import urllib.request

from .config import PORT, RESPONSE_BODY


def probe(host: str = "127.0.0.1", port: int = PORT, timeout: float = 2.0) -> None:
    """Raise ``SystemExit`` unless the mock at ``host:port`` answers ``200 ok``."""

    url = f"http://{host}:{port}/"
    try:
        with urllib.request.urlopen(url, timeout=timeout) as resp:
            status = resp.getcode()
            body = resp.read()
    except (urllib.error.URLError, OSError) as exc:
        raise SystemExit(f"mock backend at {url} unreachable: {exc}") from exc

    if status != 200 or body != RESPONSE_BODY:
        raise SystemExit(f"unexpected answer from {url}: {status} {body!r}")


def main() -> None:
    probe()
    print("mock backend healthy")


if __name__ == "__main__":
    main()
