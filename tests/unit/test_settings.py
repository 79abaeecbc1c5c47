import logging

import pytest

from userdir.settings import PROJECT_ROOT, Settings


@pytest.mark.unit
def test_settings_fails_fast_when_database_url_missing_in_production(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    # Prevent `load_dotenv()` from injecting a value from local `.env`.
    monkeypatch.setenv("DATABASE_URL", "")

    with pytest.raises(ValueError, match=r"DATABASE_URL.*production"):
        Settings.load()


@pytest.mark.unit
def test_settings_requires_secret_key_in_production(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "")
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost/userdir")

    with pytest.raises(ValueError, match="SECRET_KEY"):
        Settings.load()


@pytest.mark.unit
def test_settings_production_disables_api_docs_by_default(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost/userdir")

    settings = Settings.load()

    assert settings.debug is False
    assert settings.api_docs_enabled is False


@pytest.mark.unit
def test_settings_sqlite_fallback_outside_production(monkeypatch, caplog) -> None:
    monkeypatch.setenv("FLASK_ENV", "development")
    monkeypatch.setenv("DATABASE_URL", "")
    caplog.set_level(logging.WARNING, logger="userdir.settings")

    settings = Settings.load()

    assert settings.database_url.startswith("sqlite:///")
    assert settings.database_url.endswith("userdir_dev.db")
    assert str(PROJECT_ROOT) not in caplog.text


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("http://a.test, http://b.test", ("http://a.test", "http://b.test")),
        ('["http://a.test", " "]', ("http://a.test",)),
    ],
)
def test_settings_parses_cors_origins(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("CORS_ORIGINS", raw)

    assert Settings.load().cors_origins == expected


@pytest.mark.unit
def test_settings_rejects_default_page_size_above_max(monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "50")
    monkeypatch.setenv("MAX_PAGE_SIZE", "20")

    with pytest.raises(ValueError, match="DEFAULT_PAGE_SIZE"):
        Settings.load()


@pytest.mark.unit
def test_settings_to_flask_config(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("USERDIR_API_URL", "http://api.test/api")

    settings = Settings.load()
    config = settings.to_flask_config()

    assert config["LOG_LEVEL"] == "DEBUG"
    assert config["SQLALCHEMY_DATABASE_URI"] == "sqlite:///:memory:"
    assert config["DEFAULT_PAGE_SIZE"] == 10
    assert settings.client_base_url == "http://api.test/api"


@pytest.mark.unit
def test_settings_rejects_unknown_log_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings.load()


@pytest.mark.unit
def test_settings_engine_options_follow_database_backend(monkeypatch) -> None:
    sqlite_options = Settings.load().to_flask_config()["SQLALCHEMY_ENGINE_OPTIONS"]
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost/userdir")
    server_options = Settings.load().to_flask_config()["SQLALCHEMY_ENGINE_OPTIONS"]

    assert sqlite_options["connect_args"] == {"check_same_thread": False}
    assert "connect_args" not in server_options
    assert server_options["pool_pre_ping"] is True
