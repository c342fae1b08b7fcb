"""A dictionary guarded by a lock."""

import threading
from typing import Any, Hashable


class SafeMap:
    """Thread-safe key/value store."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: Hashable) -> bool:
        return self.check(key)

    def get(self, key: Hashable) -> Any:
        """Return the value for ``key``, or ``None`` if absent."""
        with self._lock:
            return self._data.get(key)

    def set(self, key: Hashable, value: Any) -> bool:
        """Store ``value`` under ``key``.

        Returns ``False`` and changes nothing if ``key`` already holds an
        equal value.
        """
        with self._lock:
            if key in self._data and self._data[key] == value:
                return False
            self._data[key] = value
            return True

    def check(self, key: Hashable) -> bool:
        """Return whether ``key`` is present."""
        with self._lock:
            return key in self._data

    def delete(self, key: Hashable) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            self._data.pop(key, None)

    def delete_all(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._data.clear()

    def items(self) -> dict:
        """Return a copy of all entries."""
        with self._lock:
            return dict(self._data)