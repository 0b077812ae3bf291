"""
Function-as-a-service entry point.

The runtime hands us the decoded JSON event and serializes whatever we
return. Store faults are re-raised so the platform's own failure and
retry policy applies; no partial result is ever returned.
"""
import logging
from typing import Any

from serial_validator.core.config import settings
from serial_validator.core.logging_config import configure_logging
from serial_validator.core.validator import SerialValidator
from serial_validator.db.session import SessionLocal, read_session
from serial_validator.schemas.validation import ValidationRequest
from serial_validator.stores.base import SerialStore
from serial_validator.stores.factory import build_store

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def handle(event: dict[str, Any], store: SerialStore) -> dict[str, Any]:
    request = ValidationRequest.model_validate(event)
    result = SerialValidator(store).validate(request.serial_number)
    return result.to_response()


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    logger.debug("Received event: %s", event)
    backend = settings.HANDLER_STORE_BACKEND

    if backend.lower() != "sql":
        return handle(event, build_store(settings, backend=backend))

    with read_session(SessionLocal) as db:
        return handle(event, build_store(settings, db=db, backend=backend))
