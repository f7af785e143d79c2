"""Unit tests for application settings configuration."""

from pathlib import Path

from app.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db:5432/users")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL_SQL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.database_url == "postgresql://user:pw@db:5432/users"
    assert settings.port == 8080
    assert settings.echo_sql is (settings.app_env == "development")


def test_settings_defaults_to_local_sqlite(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url.startswith("sqlite:///")
    assert settings.app_env == "development"
    assert settings.echo_sql is False
