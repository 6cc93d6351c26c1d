import os
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Core database settings, combined into a PostgreSQL URL
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_HOST: str = "localhost"
    DB_PORT: str = "5432"
    DB_NAME: str = "task_manager"

    # Full SQLAlchemy URL, takes precedence over the DB_* parts (e.g. sqlite:///./tasks.db)
    DATABASE_URL: Optional[str] = None

    # JWT settings (required)
    JWT_SECRET: str
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    CORS_ORIGINS: List[str] = ["*"]

    # Optional development settings
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    class Config:
        # Look for env file in project root, even when running from subdirectories
        env_file = os.getenv("ENV_FILE") or str(Path(__file__).parent.parent.parent / "local.env")
        # Allow case-insensitive environment variable names
        case_sensitive = False

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

settings = Settings()


def get_settings() -> Settings:
    return settings
