"""Unit tests for regress.core.http module.

Tests HTTP client factory used for test file downloads.
"""

from unittest.mock import patch

import httpx
import pytest

from regress.core.config import Settings
from regress.core.http import HTTPClientFactory


class TestHTTPClientFactory:
    """Tests for HTTPClientFactory class."""

    @pytest.fixture
    def settings(self) -> Settings:
        return Settings(user_agent="regress-test/1.0")

    def test_init_with_settings(self, settings: Settings) -> None:
        factory = HTTPClientFactory(settings=settings)

        assert factory._settings is settings

    def test_init_without_settings(self) -> None:
        with patch("regress.core.http.get_settings") as mock_get:
            mock_get.return_value = Settings()

            HTTPClientFactory()

            mock_get.assert_called_once()

    def test_no_timeout_by_default(self, settings: Settings) -> None:
        timeout = HTTPClientFactory(settings).build_timeout()

        assert timeout == httpx.Timeout(None)

    def test_configured_timeout(self) -> None:
        timeout = HTTPClientFactory(Settings(http_timeout_seconds=5)).build_timeout()

        assert timeout == httpx.Timeout(5.0)

    def test_explicit_timeout_overrides(self, settings: Settings) -> None:
        timeout = HTTPClientFactory(settings).build_timeout(2.0)

        assert timeout.read == 2.0

    def test_create_client(self, settings: Settings) -> None:
        client = HTTPClientFactory(settings).create_client()
        try:
            assert isinstance(client, httpx.Client)
            assert client.follow_redirects is True
            assert client.headers["User-Agent"] == "regress-test/1.0"
        finally:
            client.close()

    def test_get_client_closes_on_exit(self, settings: Settings) -> None:
        with HTTPClientFactory(settings).get_client() as client:
            assert not client.is_closed

        assert client.is_closed

    def test_get_client_sends_user_agent(self, settings: Settings) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers["User-Agent"])
            return httpx.Response(200, content=b"ok")

        with HTTPClientFactory(settings).get_client(transport=httpx.MockTransport(handler)) as client:
            response = client.get("https://example.com/a.pdf")

        assert response.content == b"ok"
        assert seen == ["regress-test/1.0"]

    def test_redirects_followed(self, settings: Settings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old.pdf":
                return httpx.Response(302, headers={"Location": "https://example.com/new.pdf"})
            return httpx.Response(200, content=b"moved")

        with HTTPClientFactory(settings).get_client(transport=httpx.MockTransport(handler)) as client:
            response = client.get("https://example.com/old.pdf")

        assert response.content == b"moved"
