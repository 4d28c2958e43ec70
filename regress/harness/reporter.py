"""Output comparison and the failure report."""

from __future__ import annotations

import re
from collections.abc import Sequence

from regress.harness.models import TestCase


ALL_PASSED = "All tests passed!"
SEPARATOR = "-----"

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def outputs_match(actual: str, expected: str, normalize: bool = False) -> bool:
    """True when the captured output equals the expected output.

    Without ``normalize`` any difference is a mismatch.
    """
    if normalize:
        return normalize_whitespace(actual) == normalize_whitespace(expected)
    return actual == expected


def is_failed(test: TestCase, normalize: bool = False) -> bool:
    """A test fails on an execution error or an output mismatch."""
    if test.error is not None:
        return True
    return not outputs_match(test.output, test.expected_output, normalize)


def format_failure(test: TestCase, normalize: bool = False) -> str:
    """Describe why ``test`` failed."""
    lines = [f"Test {test.command_line} failed"]
    if test.error is not None:
        lines.append(f"Reason: process exited with error '{test.error}'")
        stderr = test.error.stderr.rstrip("\n")
        if stderr:
            lines.extend(["stderr:", SEPARATOR, stderr, SEPARATOR])
        return "\n".join(lines)

    if not outputs_match(test.output, test.expected_output, normalize):
        lines.extend([
            "",
            "Reason: got output:",
            SEPARATOR,
            test.output,
            SEPARATOR,
            "expected:",
            SEPARATOR,
            test.expected_output,
            SEPARATOR,
        ])
        return "\n".join(lines)

    lines.append("Internal error: unknown reason")
    return "\n".join(lines)


def render_report(failures: Sequence[TestCase], normalize: bool = False) -> str:
    """Full report: every failure, or the all-passed line."""
    if not failures:
        return ALL_PASSED
    return "\n".join(format_failure(test, normalize) for test in failures)
