"""Downloader for test input files.

Fetches every file missing from the content cache with a single blocking
GET, checks the SHA-1 of the body against the declared hash and only
then stores it. There is no retry: any failure aborts the run.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePosixPath

import httpx

from regress.core.exceptions import DownloadError, DownloadIntegrityError
from regress.core.logging import get_logger
from regress.harness.cache import ContentCache
from regress.harness.hashing import sha1_hex_of_bytes
from regress.harness.models import CachedFile, TestCase


logger = get_logger(__name__)


def url_extension(url: str) -> str:
    """Extension of the last path segment of ``url`` (``.pdf``), or ``""``.

    The query string and fragment are not part of the extension.
    """
    return PurePosixPath(httpx.URL(url).path).suffix


class Downloader:
    """Fills the content cache from test URLs.

    Attributes:
        cache: Content cache files are looked up in and stored to
        client: HTTP client used for fetches
    """

    def __init__(self, cache: ContentCache, client: httpx.Client) -> None:
        self.cache = cache
        self.client = client

    def fetch(self, url: str) -> bytes:
        """GET ``url`` and return the body.

        Raises:
            DownloadError: Invalid URL, transport failure or non-2xx status.
        """
        try:
            response = self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DownloadError(
                f"GET '{url}' failed with status {e.response.status_code}",
                url,
                e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise DownloadError(f"GET '{url}' failed: {e}", url) from e
        except httpx.InvalidURL as e:
            raise DownloadError(f"invalid url '{url}': {e}", url) from e
        return response.content

    def ensure(self, test: TestCase) -> CachedFile:
        """Make sure the input file of ``test`` is cached and point the test at it.

        Raises:
            DownloadError: The fetch failed.
            DownloadIntegrityError: The body does not hash to ``test.sha1``.
            StorageError: The file cannot be written.
        """
        cached = self.cache.get(test.sha1)
        if cached is None:
            logger.info("Downloading test file", url=test.url, sha1=test.sha1)
            data = self.fetch(test.url)
            actual = sha1_hex_of_bytes(data)
            if actual != test.sha1:
                raise DownloadIntegrityError(test.url, test.sha1, actual)
            cached = self.cache.store(test.sha1, url_extension(test.url), data)
            logger.info("Saved test file", path=str(cached.path), size=len(data))
        test.file_path = cached.path
        return cached

    def ensure_all(self, tests: Iterable[TestCase]) -> None:
        """Download missing files for ``tests`` one after another."""
        for test in tests:
            self.ensure(test)
