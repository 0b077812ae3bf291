from __future__ import annotations

from sqlalchemy.orm import Session

from serial_validator.core.config import Settings
from serial_validator.stores.base import SerialStore
from serial_validator.stores.dynamodb import DynamoDbSerialStore
from serial_validator.stores.memory import InMemorySerialStore
from serial_validator.stores.sql import SqlSerialStore


def build_store(settings: Settings, db: Session | None = None, backend: str | None = None) -> SerialStore:
    """Build the store named by `backend`, defaulting to settings.STORE_BACKEND."""
    backend = (backend or settings.STORE_BACKEND).lower()

    if backend == "sql":
        if db is None:
            raise ValueError("sql store backend requires a database session")
        return SqlSerialStore(db)

    if backend == "dynamodb":
        return DynamoDbSerialStore.from_settings(settings)

    if backend == "memory":
        return InMemorySerialStore(settings.memory_serials_list)

    raise ValueError(f"Unknown store backend: {backend!r}")
