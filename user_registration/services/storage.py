"""
Synchronous string key-value storage.

``LocalStorage`` persists every key to a single JSON file and mirrors the
browser ``localStorage`` contract: values are strings, a missing key reads as
``None``. ``MemoryStorage`` offers the same interface without touching disk.
"""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from ..utils.error_handling import StorageError
from ..utils.logging import LogCategory, get_logger

logger = get_logger("storage")


class MemoryStorage:
    """In-memory key-value storage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class LocalStorage:
    """
    Key-value storage backed by a JSON object in a file.

    A missing or unreadable file reads as an empty store. Writes replace the
    file atomically.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read_all(self) -> Dict[str, str]:
        try:
            with self.path.open('r', encoding='utf-8') as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning(
                "Local storage file unreadable, treating as empty",
                category=LogCategory.STORAGE.value,
                path=str(self.path),
                error=str(e),
            )
            return {}

        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: Dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=str(self.path.parent), prefix='.', suffix='.tmp')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                    json.dump(items, fh, ensure_ascii=False)
                os.replace(tmp, self.path)
            finally:
                if os.path.exists(tmp):
                    os.unlink(tmp)
        except OSError as e:
            raise StorageError(
                f"Failed to write local storage at {self.path}",
                original_error=e,
            ) from e

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            items = self._read_all()
            items[key] = str(value)
            self._write_all(items)

    def remove_item(self, key: str) -> None:
        with self._lock:
            items = self._read_all()
            if key in items:
                del items[key]
                self._write_all(items)

    def clear(self) -> None:
        with self._lock:
            self._write_all({})
