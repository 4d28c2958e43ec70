"""Unit tests for core configuration.

Pattern: Pydantic Settings testing
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from regress.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings configuration class."""

    def test_settings_default_values(self) -> None:
        """Test the Field defaults (environment may override instances)."""
        fields = Settings.model_fields
        assert fields["spec_path"].default == "tools/regress/tests.txt"
        assert fields["cache_dir"].default == "../sumatra-test-files"
        assert fields["file_placeholder"].default == "$file"
        assert fields["normalize_whitespace"].default is False
        assert fields["http_timeout_seconds"].default is None
        assert fields["command_timeout_seconds"].default is None
        assert fields["log_level"].default == "INFO"
        assert fields["log_format"].default == "console"

    def test_settings_from_environment(self) -> None:
        env_vars = {
            "REGRESS_SPEC_PATH": "suite/tests.txt",
            "REGRESS_CACHE_DIR": "/var/cache/regress",
            "REGRESS_NORMALIZE_WHITESPACE": "true",
            "REGRESS_COMMAND_TIMEOUT_SECONDS": "12.5",
            "REGRESS_LOG_LEVEL": "debug",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings()

            assert settings.spec_path == "suite/tests.txt"
            assert settings.cache_dir == "/var/cache/regress"
            assert settings.normalize_whitespace is True
            assert settings.command_timeout_seconds == 12.5
            assert settings.log_level == "DEBUG"

    def test_settings_env_prefix(self) -> None:
        """Non-prefixed variables should NOT be read."""
        env_vars = {
            "CACHE_DIR": "/wrong",
            "REGRESS_CACHE_DIR": "/correct",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings()

            assert settings.cache_dir == "/correct"

    def test_invalid_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_invalid_log_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_format="xml")

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(command_timeout_seconds=0)

    def test_empty_placeholder_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(file_placeholder="")


class TestGetSettings:
    """Tests for get_settings function."""

    def test_get_settings_returns_settings(self) -> None:
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
