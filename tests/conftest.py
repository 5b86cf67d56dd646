"""Shared fixtures: a fresh SQLite database per test, store, service and API client."""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from space_fleet_api.app.core.config import settings
from space_fleet_api.app.core.db import get_connection, init_db
from space_fleet_api.app.main import app
from space_fleet_api.app.schemas.ship import ShipType
from space_fleet_api.app.services.ship_service import ShipService
from space_fleet_api.app.services.ship_store import ShipStore


@pytest.fixture
def year_millis():
    """Epoch millis for mid-year of ``year`` in local time, clear of any time zone edge."""
    def _millis(year: int) -> int:
        return int(datetime(year, 6, 15, 12, 0).timestamp() * 1000)
    return _millis


@pytest.fixture
def valid_fields(year_millis):
    return {
        "name": "Liberty",
        "planet": "Earth",
        "ship_type": ShipType.TRANSPORT,
        "prod_date": year_millis(3019),
        "is_used": False,
        "speed": 0.5,
        "crew_size": 100,
    }


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "ships.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def store(db_path):
    conn = get_connection()
    yield ShipStore(conn)
    conn.close()


@pytest.fixture
def service(store):
    return ShipService(store)


@pytest.fixture
def api_client(db_path):
    with TestClient(app) as client:
        yield client
