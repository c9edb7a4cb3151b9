# backend/config.py
from functools import lru_cache
from pathlib import Path
from typing import ClassVar, List, Optional

from pydantic_settings import BaseSettings

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

DEFAULT_SECRET_KEY = "dev-secret-change-me"

class Settings(BaseSettings):
    PROJECT_NAME: str = "Field Service API"
    API_VERSION: str = "1.0.0"

    SECRET_KEY: str = DEFAULT_SECRET_KEY
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    DATABASE_URL: str = "sqlite:///./field_service.db"

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Comma separated list, "*" allows every origin
    CORS_ORIGINS: str = "*"
    FRONTEND_URL: Optional[str] = None

    # Same minimum the mobile signup form enforces
    PASSWORD_MIN_LENGTH: int = 6

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

    @property
    def cors_origins(self) -> List[str]:
        origins = [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        if self.FRONTEND_URL:
            origins.append(self.FRONTEND_URL)
        return origins or ["*"]


# Built once per process; create_app() stores it on app.state
@lru_cache()
def get_settings() -> Settings:
    return Settings()
