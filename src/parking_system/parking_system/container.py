from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DatabaseConnection, DBConfig
from .database.kv_store import KeyValueStore
from .database.memory_kv_store import InMemoryKeyValueStore
from .database.mysql_kv_store import MySQLKeyValueStore
from .parking.kv_parking_repository import KVParkingRepository
from .parking.service import ParkingService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    parking_repo: KVParkingRepository
    parking_service: ParkingService


def build_store(*, backend: str, db_config: dict | None = None) -> KeyValueStore:
    backend = (backend or "mysql").lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql store backend")
        return MySQLKeyValueStore(DatabaseConnection(DBConfig.from_dict(db_config)))
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def build_container(*, store: KeyValueStore) -> Container:
    parking_repo = KVParkingRepository(store)
    parking_service = ParkingService(parking_repo)

    return Container(
        store=store,
        parking_repo=parking_repo,
        parking_service=parking_service,
    )
