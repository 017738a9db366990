from __future__ import annotations

from enum import Enum


class ParkingStatus(str, Enum):
    """Status pembayaran parkir yang disimpan di store."""

    PENDING = "pending"
    PAID = "paid"


class StatusFilter(str, Enum):
    """Pilihan filter status di dashboard admin."""

    ALL = "all"
    PENDING = "pending"
    PAID = "paid"
