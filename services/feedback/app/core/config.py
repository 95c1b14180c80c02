"""Settings for the bus feedback service."""

from functools import lru_cache
import os

from dotenv import load_dotenv

load_dotenv()


def _to_bool(value: str, *, default: bool = False) -> bool:
    lowered = value.strip().lower()
    if not lowered:
        return default
    return lowered in {"true", "1", "yes", "y", "on"}


def _to_int(value: str, *, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Settings:
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Bus Feedback Service")

    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_USER: str = os.getenv("DB_USER", "")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
    DB_NAME: str = os.getenv("DB_NAME", "")
    DB_PORT: int = _to_int(os.getenv("DB_PORT", "3306"), default=3306)
    # Full SQLAlchemy URL; takes precedence over the DB_* parts when set.
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    DB_POOL_SIZE: int = _to_int(os.getenv("DB_POOL_SIZE", "10"), default=10)
    DB_POOL_TIMEOUT: int = _to_int(os.getenv("DB_POOL_TIMEOUT", "30"), default=30)
    DB_CONNECT_TIMEOUT: int = _to_int(os.getenv("DB_CONNECT_TIMEOUT", "20"), default=20)
    DB_CREATE_TABLES: bool = _to_bool(os.getenv("DB_CREATE_TABLES", "true"), default=True)

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _to_int(os.getenv("PORT", "8800"), default=8800)
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

__all__ = ["settings", "Settings", "get_settings"]
