from __future__ import annotations

from typing import Iterable

from serial_validator.core.errors import StoreUnavailable


class InMemorySerialStore:
    """Set-backed store for tests and local runs."""

    name = "memory"

    def __init__(self, serials: Iterable[str] = (), fail_with: Exception | None = None):
        self._serials = set(serials)
        self.fail_with = fail_with
        self.reads = 0

    def add(self, serial_number: str) -> None:
        self._serials.add(serial_number)

    def exists(self, serial_number: str) -> bool:
        self.reads += 1
        if self.fail_with is not None:
            raise StoreUnavailable(self.name) from self.fail_with
        return serial_number in self._serials

    def ping(self) -> None:
        if self.fail_with is not None:
            raise StoreUnavailable(self.name) from self.fail_with
