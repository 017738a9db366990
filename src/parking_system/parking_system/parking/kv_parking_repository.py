from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import PARKING_KEY_PREFIX
from ..database.kv_store import KeyValueStore
from .model import ParkingRecord
from .repository import ParkingRepository

logger = logging.getLogger(__name__)


class KVParkingRepository(ParkingRepository):
    """Stores each record as JSON under ``parking:<id>``."""

    def __init__(self, store: KeyValueStore, *, prefix: str = PARKING_KEY_PREFIX):
        self._store = store
        self._prefix = prefix

    def _key(self, record_id: str) -> str:
        return f"{self._prefix}{record_id}"

    def list_all(self) -> Sequence[ParkingRecord]:
        out: list[ParkingRecord] = []
        for raw in self._store.list_by_prefix(self._prefix):
            try:
                out.append(ParkingRecord.from_dict(raw))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed parking value: %r", raw)
        return out

    def get(self, record_id: str) -> Optional[ParkingRecord]:
        raw = self._store.get(self._key(record_id))
        if not raw:
            return None
        return ParkingRecord.from_dict(raw)

    def save(self, record: ParkingRecord) -> None:
        self._store.set(self._key(record.id), record.to_dict())

    def delete(self, record_id: str) -> None:
        self._store.delete(self._key(record_id))

    def delete_all(self) -> int:
        # Keys are rebuilt from the stored ids, same as the values were written.
        keys = [self._key(str(raw["id"])) for raw in self._store.list_by_prefix(self._prefix) if raw and "id" in raw]
        if keys:
            self._store.delete_many(keys)
        return len(keys)
