# tests/conftest.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from qr_api.core.config import Settings
from qr_api.db.session import build_engine, build_session_factory, init_db
from qr_api.main import create_app

DEFAULT_E2E_BASE_URL = os.getenv("QR_API_E2E_BASE_URL", "http://127.0.0.1:8080")
DEFAULT_E2E_TIMEOUT = float(os.getenv("QR_API_E2E_TIMEOUT", "10"))


# -----------------------------------------------------------------------------
# E2E switch (tests marked @pytest.mark.e2e need a running server)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class E2EConfig:
    enabled: bool
    base_url: str
    timeout_s: float


def pytest_addoption(parser: pytest.Parser) -> None:
    g = parser.getgroup("qr-api-e2e")
    g.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="Run E2E tests (marked with @pytest.mark.e2e).",
    )
    g.addoption(
        "--e2e-base-url",
        action="store",
        default=DEFAULT_E2E_BASE_URL,
        help=f"Base URL of the running API (default: {DEFAULT_E2E_BASE_URL}).",
    )
    g.addoption(
        "--e2e-timeout",
        action="store",
        type=float,
        default=DEFAULT_E2E_TIMEOUT,
        help="HTTP timeout seconds for E2E calls.",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "e2e: end-to-end tests (require running API server)"
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: List[pytest.Item]
) -> None:
    if config.getoption("--e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="E2E tests are disabled. Re-run with --e2e")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture(scope="session")
def e2e_cfg(pytestconfig: pytest.Config) -> E2EConfig:
    return E2EConfig(
        enabled=bool(pytestconfig.getoption("--e2e")),
        base_url=str(pytestconfig.getoption("--e2e-base-url")).rstrip("/"),
        timeout_s=float(pytestconfig.getoption("--e2e-timeout")),
    )


@pytest.fixture(scope="session")
def e2e_client(e2e_cfg: E2EConfig) -> Iterator[httpx.Client]:
    client = httpx.Client(base_url=e2e_cfg.base_url, timeout=e2e_cfg.timeout_s)
    try:
        client.get("/health")
    except httpx.HTTPError as exc:
        client.close()
        pytest.skip(f"E2E server not reachable: {exc}")
    yield client
    client.close()


# -----------------------------------------------------------------------------
# In-process fixtures
# -----------------------------------------------------------------------------
def make_settings(tmp_path: Path, **overrides) -> Settings:
    values = dict(
        APP_ENV="test",
        DB_PATH=str(tmp_path / "db.sqlite"),
        UPLOADS_PATH=str(tmp_path / "uploads"),
        KUTT_API_KEY=None,
        KUTT_BASE_URL="http://kutt:3000",
        SHORT_DOMAIN="https://mifi.me",
        PUBLIC_BASE_URL="",
        LOG_DIR=None,
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture()
def settings_factory(tmp_path: Path):
    def _make(**overrides) -> Settings:
        return make_settings(tmp_path, **overrides)

    return _make


@pytest.fixture()
def settings(settings_factory) -> Settings:
    return settings_factory()


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture()
def db_session() -> Iterator[Session]:
    engine = build_engine("sqlite://")
    init_db(engine)
    db = build_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()
