# tests/test_config.py
from __future__ import annotations

import pytest
from pydantic import ValidationError

from qr_api.core.config import Settings

ENV_KEYS = (
    "PORT", "DB_PATH", "UPLOADS_PATH", "KUTT_API_KEY", "KUTT_BASE_URL",
    "SHORT_DOMAIN", "PUBLIC_BASE_URL", "BACKEND_CORS_ORIGINS",
)


@pytest.fixture()
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = Settings(_env_file=None)

    assert s.PORT == 8080
    assert s.DB_PATH == "./.data/db.sqlite"
    assert s.kutt_base == "http://kutt:3000"
    assert s.SHORT_DOMAIN == "https://mifi.me"
    assert s.KUTT_API_KEY is None
    assert s.PUBLIC_BASE_URL == ""


def test_env_overrides(clean_env):
    clean_env.setenv("PORT", "3000")
    clean_env.setenv("KUTT_BASE_URL", "http://localhost:3000/")
    clean_env.setenv("BACKEND_CORS_ORIGINS", "http://a.test, http://b.test")

    s = Settings(_env_file=None)

    assert s.PORT == 3000
    assert s.kutt_base == "http://localhost:3000"
    assert s.BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_invalid_kutt_base_url(clean_env):
    clean_env.setenv("KUTT_BASE_URL", "not-a-url")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_db_url_and_short_domain_helpers(clean_env):
    s = Settings(_env_file=None, DB_PATH=":memory:", SHORT_DOMAIN="http://go.example/")

    assert s.DB_URL == "sqlite://"
    assert s.short_domain_base == "http://go.example"
    assert s.short_domain_host == "go.example"
    assert Settings(_env_file=None, DB_PATH="/data/db.sqlite").DB_URL == "sqlite:////data/db.sqlite"
