# tests/test_config.py
import pytest
from pydantic import ValidationError

from skuhook.config import Settings, get_database_url, get_settings

def test_secret_required_non_empty():
    with pytest.raises(ValidationError):
        Settings(SHOPIFY_WEBHOOK_SECRET="", _env_file=None)
    with pytest.raises(ValidationError):
        Settings(SHOPIFY_WEBHOOK_SECRET="   ", _env_file=None)

def test_secret_not_in_repr():
    s = Settings(SHOPIFY_WEBHOOK_SECRET="top-secret", _env_file=None)
    assert "top-secret" not in repr(s)
    assert s.SHOPIFY_WEBHOOK_SECRET.get_secret_value() == "top-secret"

def test_defaults():
    s = Settings(SHOPIFY_WEBHOOK_SECRET="x", _env_file=None)
    assert s.CATALOG_BACKEND == "memory"
    assert s.CATALOG_SKUS == ["SKU2006-001", "SKU2006-002", "SKU2006-003"]
    assert s.DISPATCH_STOP_ON_FIRST_MATCH is False
    assert s.FULFILLMENT_URL is None
    assert (s.HOST, s.PORT) == ("localhost", 8080)

def test_fulfillment_url_requires_internal_secret():
    with pytest.raises(ValidationError):
        Settings(SHOPIFY_WEBHOOK_SECRET="x", FULFILLMENT_URL="https://f.internal", _env_file=None)

def test_unknown_backend_rejected():
    with pytest.raises(ValidationError):
        Settings(SHOPIFY_WEBHOOK_SECRET="x", CATALOG_BACKEND="redis", _env_file=None)

def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SHOPIFY_WEBHOOK_SECRET", "from-env")
    monkeypatch.setenv("CATALOG_SKUS", '["A-1", "B-2"]')
    monkeypatch.setenv("DISPATCH_STOP_ON_FIRST_MATCH", "true")
    s = get_settings()
    assert s.SHOPIFY_WEBHOOK_SECRET.get_secret_value() == "from-env"
    assert s.CATALOG_SKUS == ["A-1", "B-2"]
    assert s.DISPATCH_STOP_ON_FIRST_MATCH is True

def test_empty_env_secret_fails_startup(monkeypatch):
    monkeypatch.setenv("SHOPIFY_WEBHOOK_SECRET", "")
    with pytest.raises(ValidationError):
        get_settings()

def test_database_url_read_from_dotenv_without_secret(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("SHOPIFY_WEBHOOK_SECRET", raising=False)
    (tmp_path / ".env").write_text("DATABASE_URL=sqlite:///./dbs/app.db\nCATALOG_BACKEND=database\n")
    assert get_database_url() == "sqlite:///./dbs/app.db"

def test_database_url_matches_app_settings(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    (tmp_path / ".env").write_text("DATABASE_URL=sqlite:///./dbs/app.db\n")
    assert get_database_url() == get_settings().DATABASE_URL

def test_database_url_env_beats_dotenv(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("DATABASE_URL=sqlite:///./dbs/app.db\n")
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@db/skuhook")
    assert get_database_url() == "postgres://u:p@db/skuhook"

def test_database_url_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert get_database_url() == "sqlite:///./skuhook.db"
