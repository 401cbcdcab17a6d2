"""
File-backed implementation of KeyValueStorage.

Each key is one UTF-8 file ``<key>.json`` inside a directory. Writes go to
a temporary file in the same directory and are moved into place with
``os.replace``, so a reader never sees a half-written slot.
"""
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileKeyValueStorage:
    """
    Directory of slot files implementing the KeyValueStorage protocol.

    The directory is created on first write.
    """

    def __init__(self, directory: Union[str, Path]):
        """
        Initialize with the directory holding the slot files.

        Args:
            directory: Storage directory (created lazily)
        """
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        """File path backing ``key``."""
        if not _KEY_RE.match(key) or key in (".", ".."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        self._directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink()
            logger.info(f"Removed storage slot {path}")
        except FileNotFoundError:
            pass
