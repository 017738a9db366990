from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ParkingRecord


class ParkingRepository(Protocol):
    def list_all(self) -> Sequence[ParkingRecord]:
        """Return every stored record (unordered)."""

        raise NotImplementedError

    def get(self, record_id: str) -> Optional[ParkingRecord]:
        raise NotImplementedError

    def save(self, record: ParkingRecord) -> None:
        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError
