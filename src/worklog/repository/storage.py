# SPDX-License-Identifier: MIT

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class StoragePort(ABC):
    """Durable key-value storage holding one text value per key."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]: ...

    @abstractmethod
    def set(self, key: str, value: str) -> None: ...


class InMemoryStorage(StoragePort):
    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class FileStorage(StoragePort):
    """
    Stores each key as a UTF-8 file named `<key>.json` in a directory.

    Writes go to a temporary file in the same directory and are moved into
    place with os.replace, so a slot is never left half written.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def __path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.__path(key)
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.__path(key)
        file_descriptor, temp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=self.directory
        )
        try:
            with os.fdopen(file_descriptor, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(temp_name, path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
