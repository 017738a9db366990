from __future__ import annotations

import copy
import threading
from typing import Any, Iterable, Optional

from .kv_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store used for tests and STORE_BACKEND=memory.

    Values are deep-copied on the way in and out so callers never share state
    with the store, mirroring a serializing backend.
    """

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, Any] = {}
        self._lock = threading.Lock()
        for k, v in (initial or {}).items():
            self._data[k] = copy.deepcopy(v)

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            value = self._data.get(key)
        return copy.deepcopy(value)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def delete_many(self, keys: Iterable[str]) -> None:
        with self._lock:
            for k in keys:
                self._data.pop(k, None)

    def list_by_prefix(self, prefix: str) -> list[Any]:
        with self._lock:
            values = [v for k, v in self._data.items() if k.startswith(prefix)]
        return copy.deepcopy(values)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data)
