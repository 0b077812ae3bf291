from typing import Protocol, runtime_checkable


@runtime_checkable
class SerialStore(Protocol):
    """
    Read-only view of previously accepted serial numbers.

    exists() performs exactly one point lookup keyed by the exact string and
    raises StoreUnavailable when the backend cannot answer.
    """
    name: str

    def exists(self, serial_number: str) -> bool: ...

    def ping(self) -> None: ...
