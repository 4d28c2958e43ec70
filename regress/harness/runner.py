"""Runs the command under test against its input file."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

from regress.core.constants import FILE_PLACEHOLDER
from regress.core.exceptions import CommandExecutionError
from regress.core.logging import get_logger
from regress.harness.models import TestCase


logger = get_logger(__name__)


def resolve_command(test: TestCase, placeholder: str = FILE_PLACEHOLDER) -> None:
    """Split ``test.command`` into path and arguments and substitute the input file.

    Every argument equal to ``placeholder`` becomes the local file path;
    occurrences inside the expected output are replaced too.

    Raises:
        ValueError: The command has unbalanced quotes or is empty.
    """
    parts = shlex.split(test.command)
    if not parts:
        raise ValueError("empty command")
    file_path = str(test.file_path) if test.file_path is not None else placeholder
    test.command_path = parts[0]
    test.command_args = [file_path if arg == placeholder else arg for arg in parts[1:]]
    test.expected_output = test.expected_output.replace(placeholder, file_path)


def strip_line_terminator(text: str) -> str:
    """Remove one trailing ``\\n`` or ``\\r\\n``."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


class CommandRunner:
    """Executes test commands as child processes.

    Standard output is captured for comparison; standard error is kept
    for the failure report. Failures are recorded on the test, never
    raised.

    Attributes:
        placeholder: Argument token replaced with the input file path
        timeout: Seconds before the child is killed, None to wait forever
        cwd: Working directory of the child, None for the current one
    """

    def __init__(
        self,
        placeholder: str = FILE_PLACEHOLDER,
        timeout: float | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.placeholder = placeholder
        self.timeout = timeout
        self.cwd = cwd

    def run(self, test: TestCase) -> TestCase:
        """Resolve and execute ``test``, filling in ``output`` or ``error``."""
        try:
            resolve_command(test, self.placeholder)
        except ValueError as e:
            test.error = CommandExecutionError(f"invalid command '{test.command}': {e}", cause=e)
            return test

        logger.info("Running", command=test.command_line)
        try:
            completed = subprocess.run(
                [test.command_path, *test.command_args],
                capture_output=True,
                timeout=self.timeout,
                cwd=self.cwd,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            test.output = strip_line_terminator(_decode(e.stdout))
            test.error = CommandExecutionError(
                f"timed out after {self.timeout} seconds",
                stderr=_decode(e.stderr),
                cause=e,
            )
            return test
        except OSError as e:
            test.error = CommandExecutionError(
                f"cannot start '{test.command_path}': {e.strerror or e}",
                cause=e,
            )
            return test

        test.output = strip_line_terminator(_decode(completed.stdout))
        if completed.returncode != 0:
            if completed.returncode < 0:
                message = f"terminated by signal {-completed.returncode}"
            else:
                message = f"exit status {completed.returncode}"
            test.error = CommandExecutionError(
                message,
                returncode=completed.returncode,
                stderr=_decode(completed.stderr),
            )
            return test

        logger.debug("Command finished", command=test.command_line, output=test.output)
        return test
