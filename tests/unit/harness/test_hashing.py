"""Unit tests for regress.harness.hashing."""

from pathlib import Path

import pytest

from regress.harness.hashing import is_sha1_hex, sha1_hex_of_bytes, sha1_hex_of_file


# Well-known SHA-1 digests
EMPTY_SHA1 = "da39a3ee5e6b4b0d3255bfef95601890afd80709"
ABC_SHA1 = "a9993e364706816aba3e25717850c26c9cd0d89d"


class TestSha1:
    """Tests for SHA-1 helpers."""

    def test_bytes(self) -> None:
        assert sha1_hex_of_bytes(b"") == EMPTY_SHA1
        assert sha1_hex_of_bytes(b"abc") == ABC_SHA1

    def test_file(self, tmp_path: Path) -> None:
        path = tmp_path / "abc.bin"
        path.write_bytes(b"abc")

        assert sha1_hex_of_file(path) == ABC_SHA1

    def test_large_file_matches_bytes(self, tmp_path: Path) -> None:
        data = bytes(range(256)) * 1024
        path = tmp_path / "large.bin"
        path.write_bytes(data)

        assert sha1_hex_of_file(path) == sha1_hex_of_bytes(data)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            sha1_hex_of_file(tmp_path / "missing")


class TestIsSha1Hex:
    """Tests for is_sha1_hex."""

    @pytest.mark.parametrize("value", [EMPTY_SHA1, ABC_SHA1.upper()])
    def test_valid(self, value: str) -> None:
        assert is_sha1_hex(value)

    @pytest.mark.parametrize("value", ["", "abc", EMPTY_SHA1 + "0", "g" * 40, " " + EMPTY_SHA1[1:]])
    def test_invalid(self, value: str) -> None:
        assert not is_sha1_hex(value)
