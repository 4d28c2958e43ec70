"""Content cache of downloaded test files.

A flat directory with one file per input, named ``<sha1><ext>``. The
directory is created on first use. verify() rehashes every file at
startup and builds the in-memory index used to skip downloads.
"""

from __future__ import annotations

from pathlib import Path

from regress.core.exceptions import CacheIntegrityError, StorageError
from regress.core.logging import get_logger
from regress.harness.hashing import sha1_hex_of_file
from regress.harness.models import CachedFile


logger = get_logger(__name__)


class ContentCache:
    """Index of verified files in the cache directory, keyed by SHA-1.

    Example:
        ```python
        cache = ContentCache("../sumatra-test-files")
        cache.verify()
        if not cache.contains(test.sha1):
            ...
        ```
    """

    def __init__(self, cache_dir: str | Path) -> None:
        self._root = Path(cache_dir)
        self._created = False
        self._files: dict[str, CachedFile] = {}

    @property
    def directory(self) -> Path:
        """Cache directory, created on first access.

        Raises:
            StorageError: The directory cannot be created.
        """
        if not self._created:
            try:
                self._root.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageError(
                    f"cannot create cache directory '{self._root}': {e}", str(self._root), e
                ) from e
            self._created = True
        return self._root

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, sha1: object) -> bool:
        return sha1 in self._files

    def contains(self, sha1: str) -> bool:
        return sha1 in self._files

    def get(self, sha1: str) -> CachedFile | None:
        return self._files.get(sha1)

    def add(self, cached_file: CachedFile) -> None:
        self._files[cached_file.sha1] = cached_file

    def path_for(self, sha1: str, extension: str = "") -> Path:
        """Location a file with this hash and extension is stored at."""
        return self.directory / f"{sha1}{extension}"

    def verify(self) -> int:
        """Rehash every cached file and index it.

        Returns:
            Number of files available locally.

        Raises:
            CacheIntegrityError: A file's content does not match its name.
            StorageError: The directory or a file cannot be read.
        """
        directory = self.directory
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            raise StorageError(f"cannot list cache directory '{directory}': {e}", str(directory), e) from e

        for path in entries:
            if not path.is_file():
                logger.warning("Skipping non-file in cache directory", path=str(path))
                continue
            sha1_from_name = path.stem
            try:
                sha1 = sha1_hex_of_file(path)
            except OSError as e:
                raise StorageError(f"cannot read cached file '{path}': {e}", str(path), e) from e
            if sha1 != sha1_from_name:
                raise CacheIntegrityError(str(path), sha1_from_name, sha1)
            self.add(CachedFile(path=path, sha1=sha1))

        logger.info("Test files available locally", count=len(self), cache_dir=str(directory))
        return len(self)

    def store(self, sha1: str, extension: str, data: bytes) -> CachedFile:
        """Write ``data`` as ``<sha1><extension>`` and index it.

        The caller is responsible for having verified that ``data`` hashes
        to ``sha1``.

        Raises:
            StorageError: The file cannot be written; no partial file is left.
        """
        path = self.path_for(sha1, extension)
        try:
            path.write_bytes(data)
        except OSError as e:
            path.unlink(missing_ok=True)
            raise StorageError(f"cannot write cached file '{path}': {e}", str(path), e) from e
        cached = CachedFile(path=path, sha1=sha1)
        self.add(cached)
        return cached
