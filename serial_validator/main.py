from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from serial_validator.api.health import router as health_router
from serial_validator.api.root import router as root_router
from serial_validator.api.validation import router as validation_router
from serial_validator.core.config import settings
from serial_validator.core.logging_config import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Serial Validator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(validation_router)
