from datetime import date, timedelta

import httpx
import pytest
from fastapi.testclient import TestClient

from client.api_client import F1ApiClient
from fake_store import FakeDatabase, FakePool
from main import app
from utils.database import DatabaseManager

API_BASE_URL = "http://testserver/api"


@pytest.fixture
def fake_db(monkeypatch):
    db = FakeDatabase()
    monkeypatch.setattr(DatabaseManager, "_pool", FakePool(db))
    return db


@pytest.fixture
def seeded_db(fake_db):
    """Two teams, three contracted drivers, one free agent, two races."""
    today = date.today()
    red_bull = fake_db.add_team("Red Bull Racing", engine="Honda RBPT")
    ferrari = fake_db.add_team("Ferrari", engine="Ferrari")
    fake_db.add_team("Haas")

    max_id = fake_db.add_driver("Max", "Verstappen", "NL", date(1997, 9, 30), 4, 400, 1)
    checo_id = fake_db.add_driver("Sergio", "Perez", "MX", date(1990, 1, 26), 0, 150, 11)
    charles_id = fake_db.add_driver("Charles", "Leclerc", "MC", date(1997, 10, 16), 0, 300, 16)
    fake_db.add_driver("Free", "Agent", "GB", date(2000, 1, 1), 0, 5, None)

    fake_db.add_contract(max_id, red_bull, date(2016, 5, 1))
    fake_db.add_contract(checo_id, red_bull, date(2021, 1, 1), today + timedelta(days=30))
    fake_db.add_contract(charles_id, ferrari, date(2019, 1, 1))
    # Expired contract must not count
    fake_db.add_contract(charles_id, red_bull, date(2017, 1, 1), today - timedelta(days=1))

    fake_db.add_race("Dutch Grand Prix", "Zandvoort", date(2025, 8, 31), "Orange army")
    fake_db.add_race("Bahrain Grand Prix", "Sakhir", date(2025, 3, 2), "Season opener")
    return fake_db


@pytest.fixture
def client(fake_db):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def api(fake_db):
    async with F1ApiClient(base_url=API_BASE_URL, transport=httpx.ASGITransport(app=app)) as api_client:
        yield api_client
