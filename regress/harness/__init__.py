"""Regression harness pipeline.

parse spec -> verify cache -> download missing -> run tests -> report
"""

from regress.harness.cache import ContentCache
from regress.harness.downloader import Downloader, url_extension
from regress.harness.hashing import is_sha1_hex, sha1_hex_of_bytes, sha1_hex_of_file
from regress.harness.models import CachedFile, TestCase
from regress.harness.parser import parse_tests, parse_tests_file
from regress.harness.reporter import (
    ALL_PASSED,
    format_failure,
    is_failed,
    normalize_whitespace,
    outputs_match,
    render_report,
)
from regress.harness.runner import CommandRunner, resolve_command
from regress.harness.suite import RegressionSuite


__all__ = [
    # Models
    "CachedFile",
    "TestCase",
    # Hashing
    "is_sha1_hex",
    "sha1_hex_of_bytes",
    "sha1_hex_of_file",
    # Parser
    "parse_tests",
    "parse_tests_file",
    # Cache
    "ContentCache",
    # Downloader
    "Downloader",
    "url_extension",
    # Runner
    "CommandRunner",
    "resolve_command",
    # Reporter
    "ALL_PASSED",
    "format_failure",
    "is_failed",
    "normalize_whitespace",
    "outputs_match",
    "render_report",
    # Suite
    "RegressionSuite",
]
