"""Regression harness constants.

Provides centralized constants for the harness:
- Test-spec field names
- Content hash format
- Default paths
- Process exit codes
"""

from enum import IntEnum


VERSION = "0.1.0"


# =============================================================================
# Test-Spec Format
# =============================================================================

class SpecField:
    """Recognized (lowercase) keys of a test-spec paragraph."""

    URL = "url"
    SHA1 = "sha1"
    CMD = "cmd"
    OUT = "out"


# Order matters: missing fields are reported in this order
REQUIRED_FIELDS: tuple[str, ...] = (
    SpecField.URL,
    SpecField.SHA1,
    SpecField.CMD,
    SpecField.OUT,
)

COMMENT_PREFIX = "#"
KEY_VALUE_SEPARATOR = ":"

# Literal argument token replaced with the resolved input file path
FILE_PLACEHOLDER = "$file"


# =============================================================================
# Content Hash
# =============================================================================

SHA1_HEX_LENGTH = 40
HASH_CHUNK_SIZE = 64 * 1024


# =============================================================================
# Default Paths
# =============================================================================

DEFAULT_SPEC_PATH = "tools/regress/tests.txt"
DEFAULT_CACHE_DIR = "../sumatra-test-files"


# =============================================================================
# Exit Codes
# =============================================================================

class ExitCode(IntEnum):
    """Process exit codes outside the failed-test count.

    A normal run exits with the number of failed tests, so 0 means
    every test passed.
    """
    SUCCESS = 0
    FATAL = 1
    MAX_FAILURES = 255
    INTERRUPTED = 130
