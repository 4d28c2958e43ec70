"""Test configuration and shared fixtures.

Pattern: Pytest fixtures, conftest.py
"""

from __future__ import annotations

import hashlib
import shlex
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest
import structlog

from regress.core.config import Settings


# ============================================================================
# Sample Data
# ============================================================================

SAMPLE_BYTES = b"%PDF-1.4 regression sample\n"
SAMPLE_SHA1 = hashlib.sha1(SAMPLE_BYTES).hexdigest()
SAMPLE_URL = "https://files.example.com/testfiles/sample.pdf"


@pytest.fixture
def sample_bytes() -> bytes:
    return SAMPLE_BYTES


@pytest.fixture
def sample_sha1() -> str:
    return SAMPLE_SHA1


@pytest.fixture
def sample_url() -> str:
    return SAMPLE_URL


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Cache directory path (not created yet)."""
    return tmp_path / "cache"


@pytest.fixture
def spec_path(tmp_path: Path) -> Path:
    return tmp_path / "tests.txt"


@pytest.fixture
def test_settings(cache_dir: Path, spec_path: Path) -> Settings:
    """Create test settings pointing at temporary paths."""
    return Settings(
        spec_path=str(spec_path),
        cache_dir=str(cache_dir),
        log_level="DEBUG",
    )


# ============================================================================
# Command Fixtures
# ============================================================================

@pytest.fixture
def python_command(tmp_path: Path) -> Callable[..., str]:
    """Build a ``cmd:`` line running a Python script with the current interpreter.

    Usage: ``python_command("print('hi')", "$file")``
    """
    counter = {"n": 0}

    def _make(source: str, *args: str) -> str:
        counter["n"] += 1
        script = tmp_path / f"script_{counter['n']}.py"
        script.write_text(source, encoding="utf-8")
        parts = [shlex.quote(sys.executable), shlex.quote(str(script)), *args]
        return " ".join(parts)

    return _make


# ============================================================================
# HTTP Fixtures
# ============================================================================

@pytest.fixture
def serve_bytes() -> Callable[[dict[str, bytes]], httpx.MockTransport]:
    """Mock transport answering GETs from a ``{url: body}`` map, 404 otherwise."""

    def _make(files: dict[str, bytes]) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            body = files.get(str(request.url))
            if body is None:
                return httpx.Response(404, content=b"not found")
            return httpx.Response(200, content=body)

        return httpx.MockTransport(handler)

    return _make


# ============================================================================
# Logging Isolation
# ============================================================================

@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo structlog configuration done by a test."""
    yield
    structlog.reset_defaults()
