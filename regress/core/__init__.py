"""Core module - Configuration, logging, HTTP client, and shared constants.

Exports:
    - Settings, get_settings: Pydantic Settings configuration
    - configure_logging, get_logger: Structured logging (structlog)
    - HTTPClientFactory: httpx client creation
    - Exception classes: RegressError and its subclasses
"""

from regress.core.config import Settings, get_settings
from regress.core.constants import (
    DEFAULT_CACHE_DIR,
    DEFAULT_SPEC_PATH,
    FILE_PLACEHOLDER,
    REQUIRED_FIELDS,
    SHA1_HEX_LENGTH,
    VERSION,
    ExitCode,
    SpecField,
)
from regress.core.exceptions import (
    CacheIntegrityError,
    CommandExecutionError,
    DownloadError,
    DownloadIntegrityError,
    IntegrityError,
    InvalidHashError,
    InvalidUrlError,
    MissingFieldError,
    RegressError,
    SpecError,
    SpecSyntaxError,
    StorageError,
)
from regress.core.http import HTTPClientFactory
from regress.core.logging import configure_logging, get_logger


__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Constants
    "DEFAULT_CACHE_DIR",
    "DEFAULT_SPEC_PATH",
    "FILE_PLACEHOLDER",
    "REQUIRED_FIELDS",
    "SHA1_HEX_LENGTH",
    "VERSION",
    "ExitCode",
    "SpecField",
    # Exceptions
    "CacheIntegrityError",
    "CommandExecutionError",
    "DownloadError",
    "DownloadIntegrityError",
    "IntegrityError",
    "InvalidHashError",
    "InvalidUrlError",
    "MissingFieldError",
    "RegressError",
    "SpecError",
    "SpecSyntaxError",
    "StorageError",
    # HTTP Clients
    "HTTPClientFactory",
    # Logging
    "configure_logging",
    "get_logger",
]
