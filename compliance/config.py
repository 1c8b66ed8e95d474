"""
Application settings, loaded from the environment or ``.env``.
"""
from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./data/compliance.db"

    # Shared access code for the single dashboard user
    ACCESS_CODE: str = "demo-123"

    # Month (1-12) whose last day is the annual state filing deadline
    ANNIVERSARY_MONTH: int = Field(default=8, ge=1, le=12)

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # File storage
    DATA_DIR: str = "./data"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def secure_cookies(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
