from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol


class KeyValueStore(Protocol):
    """Key-value collaborator: JSON-compatible values addressed by string keys.

    Implementations are expected to be durable and consistent per key
    (last write wins). All methods raise StoreError when storage fails.
    """

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def delete_many(self, keys: Iterable[str]) -> None:
        raise NotImplementedError

    def list_by_prefix(self, prefix: str) -> list[Any]:
        """Return the values of every key starting with ``prefix`` (any order)."""

        raise NotImplementedError
