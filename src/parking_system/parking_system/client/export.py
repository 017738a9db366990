from __future__ import annotations

import csv
import io
from datetime import date, tzinfo
from typing import Iterable, Optional

from ..common.datetime_utils import format_id_locale
from ..core.constants import CSV_HEADERS, STATUS_LABELS
from ..parking.model import ParkingRecord


def status_label(record: ParkingRecord) -> str:
    return STATUS_LABELS.get(record.status.value, record.status.value)


def records_to_csv(records: Iterable[ParkingRecord], *, tz: Optional[tzinfo] = None) -> str:
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for r in records:
        writer.writerow([r.plate_number, format_id_locale(r.entry_time, tz), status_label(r)])
    return out.getvalue()


def export_filename(today: date) -> str:
    return f"data-parkir-{today.isoformat()}.csv"
