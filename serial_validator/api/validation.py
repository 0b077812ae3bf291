from fastapi import APIRouter, Depends, HTTPException, status

from serial_validator.api.deps import get_validator
from serial_validator.core.errors import StoreUnavailable
from serial_validator.core.validator import SerialValidator
from serial_validator.schemas.validation import ValidationRequest, ValidationResult

router = APIRouter(tags=["validation"])


@router.post("/validate", response_model=ValidationResult)
def validate(
    payload: ValidationRequest,
    validator: SerialValidator = Depends(get_validator),
):
    """
    Validate one serial number.

    Format and duplicate findings come back as a normal 200 result.
    A store outage is a 503: no partial result is returned.
    """
    try:
        return validator.validate(payload.serial_number)
    except StoreUnavailable as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"message": "Serial store unavailable", "store": exc.store},
        )
