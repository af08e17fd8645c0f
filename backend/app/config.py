from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Article Resource API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./articles.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Article listing & creation defaults
    article_list_default_limit: int = 10
    default_langcode: str = "en"

    # DELETE allow-list — first octet of the client address and the request port
    delete_allowed_first_octet: int = 198
    delete_required_port: int = 443

    # Accounts
    anonymous_permissions: list[str] = ["access content"]
    admin_api_token: str = ""                # Seeds an 'admin' account at startup when set

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_audit: str = "INFO"            # Created/Updated/Deleted article records

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
