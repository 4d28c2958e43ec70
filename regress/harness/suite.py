"""Regression suite orchestrator.

Runs the linear pipeline:

    parse spec -> verify cache -> download missing -> run tests -> report

All run state (cache index, parsed tests, failures) lives on the
RegressionSuite instance. Fatal errors propagate as RegressError
subclasses; per-test failures are collected and reported at the end.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

import httpx

from regress.core.config import Settings, get_settings
from regress.core.http import HTTPClientFactory
from regress.core.logging import get_logger
from regress.harness.cache import ContentCache
from regress.harness.downloader import Downloader
from regress.harness.models import TestCase
from regress.harness.parser import parse_tests_file
from regress.harness.reporter import is_failed, render_report
from regress.harness.runner import CommandRunner


logger = get_logger(__name__)


class RegressionSuite:
    """Owns one regression run.

    Example:
        ```python
        suite = RegressionSuite(get_settings())
        failed = suite.run()
        ```

    Attributes:
        settings: Harness settings
        cache: Content cache of input files
        runner: Command runner
        tests: Parsed test cases
        failures: Tests that failed, in run order
    """

    def __init__(
        self,
        settings: Settings | None = None,
        http_factory: HTTPClientFactory | None = None,
        transport: httpx.BaseTransport | None = None,
        out: TextIO | None = None,
    ) -> None:
        """Initialize the suite.

        Args:
            settings: Harness settings. Uses get_settings() if not provided.
            http_factory: Factory for the download client.
            transport: Optional httpx transport, used instead of the network.
            out: Stream the report is written to, stdout by default.
        """
        self.settings = settings or get_settings()
        self.cache = ContentCache(self.settings.cache_dir)
        self.runner = CommandRunner(
            placeholder=self.settings.file_placeholder,
            timeout=self.settings.command_timeout_seconds,
        )
        self._http_factory = http_factory or HTTPClientFactory(self.settings)
        self._transport = transport
        self._out = out
        self.tests: list[TestCase] = []
        self.failures: list[TestCase] = []

    def load_tests(self) -> list[TestCase]:
        self.tests = parse_tests_file(self.settings.spec_path)
        return self.tests

    def verify_cache(self) -> int:
        return self.cache.verify()

    def download(self, tests: Iterable[TestCase]) -> None:
        """Fetch every input file not yet in the cache."""
        kwargs = {"transport": self._transport} if self._transport is not None else {}
        with self._http_factory.get_client(**kwargs) as client:
            Downloader(self.cache, client).ensure_all(tests)

    def run_test(self, test: TestCase) -> bool:
        """Run one test and record it if it failed.

        Returns:
            True if the test passed.
        """
        self.runner.run(test)
        if is_failed(test, self.settings.normalize_whitespace):
            self.failures.append(test)
            logger.info("Test failed", command=test.command_line, line_number=test.line_number)
            return False
        logger.info("Test passed", command=test.command_line, output=test.output)
        return True

    def run_tests(self, tests: Iterable[TestCase]) -> None:
        for test in tests:
            self.run_test(test)

    def report(self) -> int:
        """Write the report and return the number of failed tests."""
        out = self._out or sys.stdout
        print(render_report(self.failures, self.settings.normalize_whitespace), file=out)
        return len(self.failures)

    def run(self) -> int:
        """Run the whole pipeline.

        Returns:
            Number of failed tests.

        Raises:
            RegressError: On any fatal parse, integrity or I/O error.
        """
        tests = self.load_tests()
        self.verify_cache()
        self.download(tests)
        self.run_tests(tests)
        return self.report()
