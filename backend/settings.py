import logging
import os

# Basic settings helper to read environment configuration.

DEFAULT_PORT = 4000

logger = logging.getLogger(__name__)


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError:
        logger.warning("Invalid %s=%r, using %d", name, val, default)
        return default


def _as_list(val: str | None, default: list[str]) -> list[str]:
    if val is None or not val.strip():
        return list(default)
    return [item.strip() for item in val.split(",") if item.strip()]


class Settings:
    def __init__(self) -> None:
        self.PORT: int = _as_int("PORT", DEFAULT_PORT)
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.BOOKS_DB_PATH: str = os.getenv("BOOKS_DB_PATH", "db.json")
        self.CORS_ORIGINS: list[str] = _as_list(os.getenv("CORS_ORIGINS"), ["*"])
        self.DOCS_URL: str = os.getenv("DOCS_URL", "/api-docs")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.REQUEST_LOGGING: bool = _as_bool(os.getenv("REQUEST_LOGGING"), True)
        self.SERVER_URL: str = os.getenv("SERVER_URL", f"http://localhost:{self.PORT}")


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
