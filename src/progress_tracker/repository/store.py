# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Durable byte storage addressed by key."""

    def get(self, key: str) -> Optional[bytes]:
        """Return the stored bytes, or None if the key was never written."""
        ...

    def set(self, key: str, value: bytes) -> None:
        """Replace the value stored under key."""
        ...


class FileKeyValueStore:
    """Stores each key as <key>.json inside a directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def __path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[bytes]:
        file_path = self.__path(key)
        if not file_path.is_file():
            return None
        return file_path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self.__path(key).write_bytes(value)
