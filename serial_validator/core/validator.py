from __future__ import annotations

import logging
from dataclasses import dataclass

import regex

from serial_validator.core.errors import ErrorCode, StoreUnavailable
from serial_validator.schemas.validation import ValidationResult
from serial_validator.stores.base import SerialStore

logger = logging.getLogger(__name__)

MIN_SERIAL_LENGTH = 6

# Unicode Alphabetic property (includes combining vowel signs and circled
# letters) or any number category Nd/Nl/No.
ALPHANUMERIC_RE = regex.compile(r"[\p{Alphabetic}\p{N}]*")


def check_length(serial_number: str) -> bool:
    # len() counts code points, not bytes
    return len(serial_number) >= MIN_SERIAL_LENGTH


def check_alphanumeric(serial_number: str) -> bool:
    """
    Every character must be a letter or digit in any script.
    The empty string passes here; it is rejected by check_length.
    """
    return ALPHANUMERIC_RE.fullmatch(serial_number) is not None


def check_unique(serial_number: str, store: SerialStore) -> bool:
    """Exact-match lookup, no trimming or case folding. Raises StoreUnavailable."""
    return not store.exists(serial_number)


@dataclass(frozen=True)
class ValidationOutcome:
    """Either a result or a store fault, never both."""
    result: ValidationResult | None = None
    fault: StoreUnavailable | None = None

    def __post_init__(self):
        if (self.result is None) == (self.fault is None):
            raise ValueError("ValidationOutcome needs exactly one of result or fault")

    @property
    def ok(self) -> bool:
        return self.fault is None

    def unwrap(self) -> ValidationResult:
        if self.fault is not None:
            raise self.fault
        return self.result


class SerialValidator:
    """
    Runs the length, character-class and uniqueness checks against one
    serial number. All three checks always run; each failing check appends
    its code in evaluation order, so a short serial containing a symbol
    reports invalid_format twice unless dedupe_errors is set.
    """

    def __init__(self, store: SerialStore, *, dedupe_errors: bool = False):
        self.store = store
        self.dedupe_errors = dedupe_errors

    def validate(self, serial_number: str) -> ValidationResult:
        errors: list[ErrorCode] = []

        if not check_length(serial_number):
            errors.append(ErrorCode.INVALID_FORMAT)

        if not check_alphanumeric(serial_number):
            errors.append(ErrorCode.INVALID_FORMAT)

        if not check_unique(serial_number, self.store):
            errors.append(ErrorCode.ALREADY_EXISTS)

        if self.dedupe_errors:
            errors = list(dict.fromkeys(errors))

        result = ValidationResult(is_valid=not errors, errors=errors)
        logger.info(
            "Validated serial %r via %s store: valid=%s errors=%s",
            serial_number,
            self.store.name,
            result.is_valid,
            [e.value for e in result.errors],
        )
        return result

    def try_validate(self, serial_number: str) -> ValidationOutcome:
        try:
            return ValidationOutcome(result=self.validate(serial_number))
        except StoreUnavailable as exc:
            logger.warning("Validation of %r aborted: %s", serial_number, exc)
            return ValidationOutcome(fault=exc)


def validate_serial(serial_number: str, store: SerialStore) -> ValidationResult:
    return SerialValidator(store).validate(serial_number)
