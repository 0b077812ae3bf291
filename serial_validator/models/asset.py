from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from serial_validator.db.base import Base


class Asset(Base):
    """A previously accepted serial number. The validator only checks presence."""
    __tablename__ = "assets"

    serial_number: Mapped[str] = mapped_column(String(255), primary_key=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=sa.func.now()
    )
