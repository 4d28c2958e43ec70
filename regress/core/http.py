"""HTTP client factory for test file downloads.

All downloads go through a synchronous httpx.Client: fetches are
sequential and blocking, with redirects followed and no retries.

Pattern: Factory Pattern
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import httpx

from regress.core.config import Settings, get_settings
from regress.core.logging import get_logger


logger = get_logger(__name__)


class HTTPClientFactory:
    """Factory for creating HTTP clients used by the downloader.

    Provides centralized client creation with:
    - Consistent timeout configuration (none by default)
    - User-Agent header from Settings
    - Redirect following

    Example:
        ```python
        factory = HTTPClientFactory()
        with factory.get_client() as client:
            response = client.get(url)
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the HTTP client factory.

        Args:
            settings: Harness settings. Uses get_settings() if not provided.
        """
        self._settings = settings or get_settings()

    def build_timeout(self, timeout: float | None = None) -> httpx.Timeout:
        """Build the request timeout.

        Args:
            timeout: Seconds, overriding the configured value.

        Returns:
            httpx.Timeout; Timeout(None) disables all timeouts.
        """
        return httpx.Timeout(timeout or self._settings.http_timeout_seconds)

    def create_client(self, timeout: float | None = None, **kwargs: Any) -> httpx.Client:
        """Create a standalone HTTP client (caller manages lifecycle).

        Args:
            timeout: Request timeout in seconds.
            **kwargs: Additional arguments passed to httpx.Client.

        Returns:
            Configured httpx.Client instance.

        Warning:
            Caller is responsible for calling `client.close()`.
        """
        headers = {"User-Agent": self._settings.user_agent}
        headers.update(kwargs.pop("headers", {}))
        return httpx.Client(
            timeout=self.build_timeout(timeout),
            follow_redirects=True,
            headers=headers,
            **kwargs,
        )

    @contextmanager
    def get_client(
        self,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> Generator[httpx.Client, None, None]:
        """Get an HTTP client that is closed on exit.

        Args:
            timeout: Request timeout in seconds. Uses settings default if not specified.
            **kwargs: Additional arguments passed to httpx.Client.

        Yields:
            Configured httpx.Client instance.
        """
        logger.debug(
            "Creating HTTP client",
            timeout=timeout or self._settings.http_timeout_seconds,
            user_agent=self._settings.user_agent,
        )
        client = self.create_client(timeout, **kwargs)
        try:
            yield client
        finally:
            client.close()
