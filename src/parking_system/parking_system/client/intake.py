from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import ParkingStatus
from ..parking.model import ParkingRecord
from .api import ApiError, ParkingAPI

logger = logging.getLogger(__name__)

SAVE_FAILED = "Gagal menyimpan data. Silakan coba lagi."
CONFIRM_FAILED = "Gagal mengkonfirmasi pembayaran. Silakan coba lagi."
PAYMENT_CONFIRMED = "Pembayaran berhasil dikonfirmasi! Terima kasih."


class IntakeScreen:
    """User intake flow: plate form -> QRIS payment view -> confirm or cancel."""

    def __init__(self, api: ParkingAPI):
        self._api = api
        self.plate_input = ""
        self.current_booking: Optional[ParkingRecord] = None
        self.loading = False
        self.error: Optional[str] = None
        self.notice: Optional[str] = None

    @property
    def show_payment(self) -> bool:
        return self.current_booking is not None

    @property
    def payment_image_url(self) -> str:
        return self._api.payment_image_url

    def submit(self, plate_number: str) -> Optional[ParkingRecord]:
        self.plate_input = plate_number
        if not plate_number or not plate_number.strip():
            return None

        self.loading = True
        self.error = None
        self.notice = None
        try:
            self.current_booking = self._api.create(plate_number)
            return self.current_booking
        except ApiError as e:
            logger.error("Error creating parking entry: %s", e)
            self.error = SAVE_FAILED
            return None
        finally:
            self.loading = False

    def confirm_payment(self) -> bool:
        if self.current_booking is None:
            return False

        self.loading = True
        self.error = None
        try:
            self._api.update_status(self.current_booking.id, ParkingStatus.PAID)
        except ApiError as e:
            logger.error("Error updating payment status: %s", e)
            self.error = CONFIRM_FAILED
            return False
        finally:
            self.loading = False

        self._reset()
        self.notice = PAYMENT_CONFIRMED
        return True

    def cancel(self) -> None:
        # The pending record stays on the server; only the view is reset.
        self._reset()

    def _reset(self) -> None:
        self.plate_input = ""
        self.current_booking = None
        self.error = None
