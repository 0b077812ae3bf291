from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Serial Validator",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "validate": "/validate",
    }
