"""Test-spec parser.

The spec file is line oriented:

    # comment
    Url: https://example.com/files/sample.pdf
    Sha1: 6fd389a36816f1ab490d46c0c7a6b34b678f72bf
    Cmd: SumatraPDF.exe -render 2 $file
    Out: rendering page 1 for '$file', zoom: 5.00

Blank lines separate tests, keys are case-insensitive, and every test
needs all four keys. Any malformed input raises a SpecError and nothing
is returned, so a broken spec never runs a subset of its tests.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

import httpx

from regress.core.constants import (
    COMMENT_PREFIX,
    KEY_VALUE_SEPARATOR,
    REQUIRED_FIELDS,
    SpecField,
)
from regress.core.exceptions import (
    InvalidHashError,
    InvalidUrlError,
    MissingFieldError,
    SpecSyntaxError,
    StorageError,
)
from regress.core.logging import get_logger
from regress.harness.hashing import is_sha1_hex
from regress.harness.models import TestCase


logger = get_logger(__name__)

# (1-based line number, trimmed text)
NumberedLine = tuple[int, str]


def to_trimmed_lines(text: str) -> list[NumberedLine]:
    """Split ``text`` on newlines and strip surrounding whitespace from each line."""
    return [(n, line.strip()) for n, line in enumerate(text.split("\n"), start=1)]


def collapse_empty_lines(lines: Iterable[NumberedLine]) -> list[NumberedLine]:
    """Collapse runs of consecutive empty lines into a single empty line."""
    result: list[NumberedLine] = []
    prev_was_empty = False
    for number, line in lines:
        if line == "" and prev_was_empty:
            continue
        prev_was_empty = line == ""
        result.append((number, line))
    return result


def split_paragraphs(lines: Iterable[NumberedLine]) -> Iterator[list[NumberedLine]]:
    """Yield non-empty groups of non-comment lines separated by empty lines."""
    paragraph: list[NumberedLine] = []
    for number, line in lines:
        if line.startswith(COMMENT_PREFIX):
            continue
        if line == "":
            if paragraph:
                yield paragraph
            paragraph = []
            continue
        paragraph.append((number, line))
    if paragraph:
        yield paragraph


def parse_test(paragraph: list[NumberedLine]) -> TestCase:
    """Build one TestCase from the lines of a paragraph.

    Raises:
        SpecSyntaxError: A line is not ``key: value``.
        InvalidHashError: The sha1 value is not 40 hex characters.
        InvalidUrlError: The url value cannot be parsed.
        MissingFieldError: One of url, sha1, cmd, out is absent or empty.
    """
    fields: dict[str, str] = {}
    for number, line in paragraph:
        if KEY_VALUE_SEPARATOR not in line:
            raise SpecSyntaxError(line, number)
        key, value = line.split(KEY_VALUE_SEPARATOR, 1)
        key = key.strip().lower()
        value = value.strip()
        if key == SpecField.SHA1:
            if not is_sha1_hex(value):
                raise InvalidHashError(value, number)
            value = value.lower()
        elif key == SpecField.URL:
            try:
                httpx.URL(value)
            except httpx.InvalidURL as e:
                raise InvalidUrlError(value, str(e), number) from e
        elif key not in REQUIRED_FIELDS:
            logger.debug("Ignoring unknown key", key=key, line_number=number)
            continue
        fields[key] = value

    first_line = paragraph[0][0]
    for name in REQUIRED_FIELDS:
        if not fields.get(name):
            raise MissingFieldError(name, first_line)

    return TestCase(
        command=fields[SpecField.CMD],
        sha1=fields[SpecField.SHA1],
        url=fields[SpecField.URL],
        expected_output=fields[SpecField.OUT],
        line_number=first_line,
    )


def parse_tests(text: str) -> list[TestCase]:
    """Parse the full text of a spec file into test cases, in file order."""
    lines = collapse_empty_lines(to_trimmed_lines(text))
    return [parse_test(paragraph) for paragraph in split_paragraphs(lines)]


def parse_tests_file(path: str | Path) -> list[TestCase]:
    """Read and parse a spec file.

    Raises:
        StorageError: The file cannot be read or is not UTF-8.
        SpecError: The content is malformed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"cannot read spec file '{path}': {e}", str(path), e) from e

    tests = parse_tests(text)
    logger.info("Parsed tests", count=len(tests), spec_path=str(path))
    return tests
