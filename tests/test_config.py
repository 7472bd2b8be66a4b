import pytest
from pydantic import ValidationError

from storefront.config import Settings
from storefront.main import create_app


@pytest.fixture
def bare_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("JWT_SECRET", raising=False)


def test_missing_database_url_is_fatal(bare_environment, monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "secret")
    with pytest.raises(ValidationError):
        Settings()
    with pytest.raises(ValidationError):
        create_app()


def test_settings_read_from_environment(bare_environment, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///storefront.db")
    monkeypatch.setenv("JWT_SECRET", "secret")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_DAYS", "3")
    settings = Settings()
    assert settings.DATABASE_URL == "sqlite:///storefront.db"
    assert settings.ACCESS_TOKEN_EXPIRE_DAYS == 3
    assert settings.BCRYPT_ROUNDS == 10
    assert settings.MAX_UPLOAD_SIZE == 5 * 1024 * 1024


def test_app_keeps_injected_settings(app, settings):
    assert app.state.settings is settings
