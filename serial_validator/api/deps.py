from typing import Callable, Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from serial_validator.core.config import settings
from serial_validator.core.validator import SerialValidator
from serial_validator.db.session import get_session_factory, read_session
from serial_validator.stores.base import SerialStore
from serial_validator.stores.factory import build_store


def get_store(
    session_factory: Callable[[], Session] = Depends(get_session_factory),
) -> Iterator[SerialStore]:
    # Only the sql backend needs a database session
    if settings.STORE_BACKEND.lower() != "sql":
        yield build_store(settings)
        return

    with read_session(session_factory) as db:
        yield build_store(settings, db=db)


def get_validator(store: SerialStore = Depends(get_store)) -> SerialValidator:
    return SerialValidator(store)
