from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable identifiers returned in ValidationResult.errors."""
    INVALID_FORMAT = "invalid_format"
    ALREADY_EXISTS = "already_exists"


class StoreUnavailable(Exception):
    """
    The backing store could not answer the uniqueness lookup.

    This is an infrastructure fault, not a validation finding: no
    ValidationResult is produced when it is raised. The driver error is
    kept as __cause__.
    """

    def __init__(self, store: str, message: str | None = None):
        self.store = store
        super().__init__(message or f"Serial store '{store}' unavailable")
