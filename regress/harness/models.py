"""Data records flowing through the regression pipeline.

Anti-Pattern Compliance:
- No mutable default arguments (uses field(default_factory=list))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from regress.core.exceptions import CommandExecutionError


@dataclass
class TestCase:
    """One regression test: an input file, a command line and its expected output.

    Created by the parser from one paragraph of the spec file, then
    filled in by the downloader (file_path), the runner (command_path,
    command_args, output, error) and read by the reporter.

    Attributes:
        command: Raw ``cmd:`` text
        sha1: Lowercase SHA-1 hex of the input file
        url: Where the input file is downloaded from
        expected_output: Raw ``out:`` text
        line_number: First line of the paragraph in the spec file
        command_path: Executable resolved from the command
        command_args: Arguments with the placeholder substituted
        file_path: Local path of the cached input file
        error: Execution error, if the command failed to run or exited non-zero
        output: Captured standard output
    """

    __test__ = False  # not a pytest test class

    command: str
    sha1: str
    url: str
    expected_output: str
    line_number: int | None = None

    command_path: str = ""
    command_args: list[str] = field(default_factory=list)
    file_path: Path | None = None
    error: CommandExecutionError | None = None
    output: str = ""

    @property
    def command_line(self) -> str:
        """Resolved command line for display, or the raw command before resolution."""
        if not self.command_path:
            return self.command
        return " ".join([self.command_path, *self.command_args])


@dataclass(frozen=True)
class CachedFile:
    """A verified file in the content cache.

    Invariant: ``path`` minus its extension is named ``sha1``, and the
    content hashes to ``sha1``.
    """

    path: Path
    sha1: str
