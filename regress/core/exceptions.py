"""Custom exceptions for the regression harness.

All exceptions derive from RegressError and never shadow Python builtins.

Two tiers:
- Fatal errors (everything except CommandExecutionError) propagate to the
  command-line entry point and abort the whole run.
- CommandExecutionError is recorded on the failing test case and the
  remaining tests keep running.
"""

from __future__ import annotations


class RegressError(Exception):
    """Base exception for all harness errors.

    Catching RegressError at the top level handles every fatal
    condition with a single except clause.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# =============================================================================
# Test-spec errors
# =============================================================================

class SpecError(RegressError):
    """Raised when the test-spec file is malformed."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        """Initialize spec error.

        Args:
            message: Error description
            line_number: 1-based line in the spec file, if known
        """
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class SpecSyntaxError(SpecError):
    """Raised for a line that is not of the form ``key: value``."""

    def __init__(self, line: str, line_number: int | None = None) -> None:
        self.line = line
        super().__init__(f"invalid line: '{line}'", line_number)


class MissingFieldError(SpecError):
    """Raised when a test paragraph lacks a required field."""

    def __init__(self, field: str, line_number: int | None = None) -> None:
        self.field = field
        super().__init__(f"{field.capitalize()}: field missing", line_number)


class InvalidHashError(SpecError):
    """Raised when a sha1 value is not 40 hexadecimal characters."""

    def __init__(self, value: str, line_number: int | None = None) -> None:
        self.value = value
        super().__init__(
            f"invalid sha1 '{value}': expected 40 hex characters, got {len(value)}",
            line_number,
        )


class InvalidUrlError(SpecError):
    """Raised when a url value cannot be parsed as a URL."""

    def __init__(self, value: str, reason: str, line_number: int | None = None) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"invalid url '{value}': {reason}", line_number)


# =============================================================================
# Integrity errors
# =============================================================================

class IntegrityError(RegressError):
    """Raised when content does not hash to the expected SHA-1."""

    def __init__(self, message: str, expected: str, actual: str) -> None:
        """Initialize integrity error.

        Args:
            message: Error description
            expected: SHA-1 hex the content should have
            actual: SHA-1 hex the content has
        """
        self.expected = expected
        self.actual = actual
        super().__init__(f"{message} ({expected} != {actual})")


class CacheIntegrityError(IntegrityError):
    """Raised when a cached file does not match the hash in its name."""

    def __init__(self, path: str, expected: str, actual: str) -> None:
        self.path = path
        super().__init__(f"cached file '{path}' is corrupt", expected, actual)


class DownloadIntegrityError(IntegrityError):
    """Raised when downloaded bytes do not match the declared hash."""

    def __init__(self, url: str, expected: str, actual: str) -> None:
        self.url = url
        super().__init__(f"download of '{url}' has wrong sha1", expected, actual)


# =============================================================================
# I/O errors
# =============================================================================

class DownloadError(RegressError):
    """Raised when a test file cannot be fetched."""

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
    ) -> None:
        """Initialize download error.

        Args:
            message: Error description
            url: URL that failed
            status_code: HTTP status code if a response was received
        """
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class StorageError(RegressError):
    """Raised when reading or writing a local file fails."""

    def __init__(self, message: str, path: str, cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause
        if cause:
            self.__cause__ = cause
        super().__init__(message)


# =============================================================================
# Per-test errors
# =============================================================================

class CommandExecutionError(RegressError):
    """Recorded when the command under test cannot run or exits non-zero.

    Never raised past the runner: it is attached to the test case.
    """

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        stderr: str = "",
        cause: Exception | None = None,
    ) -> None:
        """Initialize execution error.

        Args:
            message: Error description
            returncode: Exit status, None when the process never ran
            stderr: Captured standard error of the process
            cause: Original exception (spawn failure, timeout)
        """
        self.returncode = returncode
        self.stderr = stderr
        self.cause = cause
        if cause:
            self.__cause__ = cause
        super().__init__(message)
