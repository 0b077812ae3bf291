from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from serial_validator.core.errors import StoreUnavailable
from serial_validator.models.asset import Asset

logger = logging.getLogger(__name__)


class SqlSerialStore:
    """Looks serial numbers up in the `assets` table by primary key."""

    name = "sql"

    def __init__(self, db: Session):
        self.db = db

    def exists(self, serial_number: str) -> bool:
        stmt = select(Asset.serial_number).where(Asset.serial_number == serial_number).limit(1)
        try:
            row = self.db.execute(stmt).first()
        except SQLAlchemyError as exc:
            logger.error("assets lookup failed for %r", serial_number, exc_info=True)
            raise StoreUnavailable(self.name) from exc
        return row is not None

    def ping(self) -> None:
        try:
            self.db.execute(select(1))
        except SQLAlchemyError as exc:
            raise StoreUnavailable(self.name) from exc
