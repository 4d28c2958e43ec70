"""E2E Test Configuration and Fixtures.

Provides a real HTTP server on localhost serving test files, so the
command-line entry point downloads over the network exactly as in
production.
"""
from __future__ import annotations

import threading
from collections.abc import Iterator
from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest


class _QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format: str, *args: object) -> None:
        pass


@pytest.fixture
def served_dir(tmp_path: Path) -> Path:
    """Directory whose files are served by ``file_server``."""
    directory = tmp_path / "served"
    directory.mkdir()
    return directory


@pytest.fixture
def file_server(served_dir: Path) -> Iterator[str]:
    """Serve ``served_dir`` over HTTP and yield its base URL."""
    handler = partial(_QuietHandler, directory=str(served_dir))
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address[:2]
        yield f"http://{host}:{port}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)
