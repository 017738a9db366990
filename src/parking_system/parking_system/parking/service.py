from __future__ import annotations

import logging
import secrets
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_utc
from ..common.validators import require_choice, require_non_empty
from ..core.enums import ParkingStatus
from ..core.exceptions import NotFoundError
from .model import ParkingRecord
from .repository import ParkingRepository

logger = logging.getLogger(__name__)

_STATUS_BY_VALUE = {s.value: s for s in ParkingStatus}


def generate_record_id(now: datetime) -> str:
    """Millisecond timestamp plus a random suffix: sortable and unique."""
    millis = int(now.timestamp() * 1000)
    return f"{millis}-{secrets.token_hex(3)}"


class ParkingService:
    def __init__(
        self,
        records: ParkingRepository,
        *,
        clock: Callable[[], datetime] = now_utc,
        id_factory: Callable[[datetime], str] = generate_record_id,
    ):
        self._records = records
        self._clock = clock
        self._id_factory = id_factory

    def list_records(self) -> list[ParkingRecord]:
        """All records, most recent entry first."""
        return sorted(self._records.list_all(), key=lambda r: r.entry_time, reverse=True)

    def create(self, plate_number: Optional[str]) -> ParkingRecord:
        plate = require_non_empty(plate_number, "Plate number is required")

        now = self._clock()
        record = ParkingRecord(
            id=self._id_factory(now),
            plate_number=plate.upper(),
            entry_time=now,
            status=ParkingStatus.PENDING,
        )
        self._records.save(record)
        logger.info("Created parking record %s for %s", record.id, record.plate_number)
        return record

    def update_status(self, record_id: str, status: Optional[str]) -> ParkingRecord:
        # Any known status is accepted, including paid -> pending.
        new_status = require_choice(status, _STATUS_BY_VALUE, "Status must be 'pending' or 'paid'")

        existing = self._records.get(record_id)
        if existing is None:
            raise NotFoundError("Parking entry not found")

        updated = existing.with_status(new_status)
        self._records.save(updated)
        logger.info("Parking record %s status %s -> %s", record_id, existing.status.value, new_status.value)
        return updated

    def delete(self, record_id: str) -> None:
        self._records.delete(record_id)

    def delete_all(self) -> int:
        deleted = self._records.delete_all()
        logger.info("Deleted %d parking records", deleted)
        return deleted
