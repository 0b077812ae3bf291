from pathlib import Path
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]  # repo root

ENV_FILE = os.getenv("ENV_FILE", str(BASE_DIR / ".env"))

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, extra="ignore")

    APP_ENV: str = "local"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"  # Comma-separated list of allowed origins, or "*" for all

    # Which backing store answers the uniqueness check: sql | dynamodb | memory
    STORE_BACKEND: str = "sql"  # HTTP app
    HANDLER_STORE_BACKEND: str = "dynamodb"  # lambda_handler
    MEMORY_SERIALS: str = ""  # Comma-separated serials preloaded into the memory store
    DATABASE_URL: str = "sqlite:///./serials.db"

    ASSETS_TABLE: str = "assets"
    AWS_REGION: str = "eu-central-1"
    DYNAMODB_ENDPOINT_URL: str | None = None

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list, handling '*' for development"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def memory_serials_list(self) -> list[str]:
        return [s for s in self.MEMORY_SERIALS.split(",") if s]

settings = Settings()
