"""Unit tests for application settings configuration."""

from pathlib import Path

from app.config import Settings
from app.infrastructure.database.session import get_async_url


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_article_defaults(monkeypatch):
    monkeypatch.delenv("ARTICLE_LIST_DEFAULT_LIMIT", raising=False)
    monkeypatch.delenv("DELETE_ALLOWED_FIRST_OCTET", raising=False)
    monkeypatch.delenv("DELETE_REQUIRED_PORT", raising=False)
    settings = Settings(_env_file=None)

    assert settings.article_list_default_limit == 10
    assert settings.delete_allowed_first_octet == 198
    assert settings.delete_required_port == 443
    assert settings.anonymous_permissions == ["access content"]


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DELETE_REQUIRED_PORT", "8443")
    monkeypatch.setenv("ANONYMOUS_PERMISSIONS", '["access content", "create article content"]')

    settings = Settings(_env_file=None)

    assert settings.delete_required_port == 8443
    assert "create article content" in settings.anonymous_permissions


def test_async_url_conversion():
    assert get_async_url("sqlite:///./articles.db") == "sqlite+aiosqlite:///./articles.db"
    assert get_async_url("postgresql://u:p@db/app") == "postgresql+asyncpg://u:p@db/app"
    assert get_async_url("postgres://u:p@db/app") == "postgresql+asyncpg://u:p@db/app"
    assert get_async_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"
