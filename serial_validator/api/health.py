from fastapi import APIRouter, Depends, HTTPException, status

from serial_validator.api.deps import get_store
from serial_validator.core.errors import StoreUnavailable
from serial_validator.stores.base import SerialStore

router = APIRouter(tags=["health"])


@router.get("/health")
def health(store: SerialStore = Depends(get_store)):
    try:
        store.ping()
    except StoreUnavailable as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"message": "Serial store unavailable", "store": exc.store},
        )
    return {"status": "ok", "store": store.name}
