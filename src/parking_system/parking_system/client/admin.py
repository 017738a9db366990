from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import tzinfo
from typing import Callable, Optional

from ..core.constants import DEFAULT_POLL_INTERVAL_SECONDS
from ..core.enums import ParkingStatus, StatusFilter
from ..parking.model import ParkingRecord
from .api import ApiError, ParkingAPI
from .export import records_to_csv

logger = logging.getLogger(__name__)

LOAD_FAILED = "Gagal memuat data"
DELETE_FAILED = "Gagal menghapus data"
DELETE_ALL_FAILED = "Gagal menghapus semua data"
NO_MATCH = "Tidak ada data yang sesuai dengan filter"
NO_DATA = "Belum ada data parkir"


@dataclass(frozen=True)
class DashboardStats:
    total: int
    paid: int
    pending: int


class AdminDashboard:
    """Admin view state: loaded records, search/filter, counts and polling.

    ``start()`` loads once and then re-fetches every ``poll_interval`` seconds on a
    daemon thread until ``stop()``. ``on_change`` is called after every load.
    """

    def __init__(
        self,
        api: ParkingAPI,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
        on_change: Optional[Callable[["AdminDashboard"], None]] = None,
    ):
        self._api = api
        self._poll_interval = float(poll_interval)
        self._on_change = on_change

        self._lock = threading.RLock()
        self._records: list[ParkingRecord] = []
        self.search_term = ""
        self.status_filter = StatusFilter.ALL
        self.error: Optional[str] = None
        self.loading = False

        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    # -------- lifecycle --------
    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self.load()
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._poll_loop,
            args=(self._stop_event,),
            name="admin-dashboard-poller",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        if self._stop_event is not None:
            self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
        self._thread = None
        self._stop_event = None

    def _poll_loop(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._poll_interval):
            try:
                self.load()
            except Exception:
                logger.exception("Unexpected error while polling parking data")
                with self._lock:
                    self.error = LOAD_FAILED
                self._notify()

    # -------- data --------
    @property
    def records(self) -> list[ParkingRecord]:
        with self._lock:
            return list(self._records)

    def load(self) -> bool:
        try:
            data = self._api.get_all()
        except ApiError as e:
            logger.error("Error loading parking data: %s", e)
            with self._lock:
                self.error = LOAD_FAILED
            self._notify()
            return False

        with self._lock:
            self._records = list(data)
            self.error = None
        self._notify()
        return True

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self)

    # -------- filter / stats --------
    def set_search(self, term: str) -> None:
        self.search_term = term or ""

    def set_status_filter(self, value: str) -> None:
        self.status_filter = StatusFilter(value)

    def filtered_records(self) -> list[ParkingRecord]:
        term = self.search_term.lower()
        wanted = self.status_filter
        return [
            r
            for r in self.records
            if term in r.plate_number.lower()
            and (wanted == StatusFilter.ALL or r.status.value == wanted.value)
        ]

    def stats(self) -> DashboardStats:
        records = self.records
        return DashboardStats(
            total=len(records),
            paid=sum(1 for r in records if r.status == ParkingStatus.PAID),
            pending=sum(1 for r in records if r.status == ParkingStatus.PENDING),
        )

    def empty_message(self) -> Optional[str]:
        if self.filtered_records():
            return None
        if self.search_term or self.status_filter != StatusFilter.ALL:
            return NO_MATCH
        return NO_DATA

    # -------- actions --------
    def delete(self, record_id: str) -> bool:
        with self._lock:
            self.loading = True
        try:
            self._api.delete(record_id)
        except ApiError as e:
            logger.error("Error deleting parking entry: %s", e)
            with self._lock:
                self.error = DELETE_FAILED
            return False
        finally:
            with self._lock:
                self.loading = False
        self.load()
        return True

    def delete_all(self) -> Optional[int]:
        with self._lock:
            self.loading = True
        try:
            deleted = self._api.delete_all()
        except ApiError as e:
            logger.error("Error deleting all parking entries: %s", e)
            with self._lock:
                self.error = DELETE_ALL_FAILED
            return None
        finally:
            with self._lock:
                self.loading = False
        self.load()
        return deleted

    def export_csv(self, *, tz: Optional[tzinfo] = None) -> str:
        """CSV of the full loaded set, not the filtered subset."""
        return records_to_csv(self.records, tz=tz)
