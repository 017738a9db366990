from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from ..common.datetime_utils import parse_iso, to_iso
from ..core.enums import ParkingStatus


@dataclass(frozen=True)
class ParkingRecord:
    """Domain entity: one vehicle entry and its payment status."""

    id: str
    plate_number: str
    entry_time: datetime
    status: ParkingStatus

    def with_status(self, status: ParkingStatus) -> "ParkingRecord":
        return replace(self, status=status)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "plateNumber": self.plate_number,
            "entryTime": to_iso(self.entry_time),
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ParkingRecord":
        return cls(
            id=str(data["id"]),
            plate_number=str(data["plateNumber"]),
            entry_time=parse_iso(str(data["entryTime"])),
            status=ParkingStatus(data["status"]),
        )
