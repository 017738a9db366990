from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.parking_system.parking_system.container import build_container, build_store
from src.parking_system.parking_system.core.enums import ParkingStatus

DEMO_PLATES = [
    ("B 1234 XYZ", ParkingStatus.PAID),
    ("D 4821 AB", ParkingStatus.PENDING),
    ("L 77 QW", ParkingStatus.PAID),
]


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    store = build_store(backend=settings.STORE_BACKEND, db_config=settings.DB_CONFIG)
    service = build_container(store=store).parking_service

    for plate, status in DEMO_PLATES:
        record = service.create(plate)
        if status != record.status:
            service.update_status(record.id, status.value)

    print(f"OK: Seeded {len(DEMO_PLATES)} parking records -> store={settings.STORE_BACKEND}")


if __name__ == "__main__":
    main()
