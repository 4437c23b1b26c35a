"""
Runs the real SQL against PostgreSQL. Set F1_TEST_DATABASE_URL to a DSN the
tests may create a throwaway schema in; without it the module is skipped.
"""
import os
import uuid
from datetime import date, timedelta
from pathlib import Path

import asyncpg
import pytest

from api_pydantic_models.drivers import DriverRequest
from utils import database
from utils.database import DatabaseManager

DSN = os.getenv("F1_TEST_DATABASE_URL")
SCHEMA_SQL = Path(__file__).resolve().parent.parent / "sql" / "schema.sql"

pytestmark = pytest.mark.skipif(not DSN, reason="F1_TEST_DATABASE_URL is not set")


@pytest.fixture
async def pg(monkeypatch):
    schema = f"f1_test_{uuid.uuid4().hex[:12]}"
    admin = await asyncpg.connect(DSN)
    await admin.execute(f"CREATE SCHEMA {schema}")
    pool = await asyncpg.create_pool(DSN, min_size=1, max_size=2, server_settings={"search_path": schema})
    try:
        async with pool.acquire() as conn:
            await conn.execute(SCHEMA_SQL.read_text())
            await seed(conn)
        monkeypatch.setattr(DatabaseManager, "_pool", pool)
        yield pool
    finally:
        await pool.close()
        await admin.execute(f"DROP SCHEMA {schema} CASCADE")
        await admin.close()


async def seed(conn):
    today = date.today()
    red_bull = await conn.fetchval("INSERT INTO team (name) VALUES ('Red Bull Racing') RETURNING team_id")
    ferrari = await conn.fetchval("INSERT INTO team (name) VALUES ('Ferrari') RETURNING team_id")
    await conn.execute("INSERT INTO cars (team_id, engine) VALUES ($1, 'Honda RBPT'), ($2, 'Ferrari')", red_bull, ferrari)

    insert = """
        INSERT INTO driver (first_name, last_name, nationality, dob, championships, current_points, driver_number)
        VALUES ($1, $2, $3, $4, $5, $6, $7) RETURNING driver_id
    """
    max_id = await conn.fetchval(insert, "Max", "Verstappen", "NL", date(1997, 9, 30), 4, 400, 1)
    charles_id = await conn.fetchval(insert, "Charles", "Leclerc", "MC", date(1997, 10, 16), 0, 300, 16)
    await conn.fetchval(insert, "Free", "Agent", "GB", date(2000, 1, 1), 0, 5, None)

    contract = "INSERT INTO contract (driver_id, team_id, start_date, end_date) VALUES ($1, $2, $3, $4)"
    await conn.execute(contract, max_id, red_bull, date(2016, 5, 1), None)
    await conn.execute(contract, charles_id, ferrari, date(2019, 1, 1), None)
    await conn.execute(contract, charles_id, red_bull, date(2017, 1, 1), today - timedelta(days=1))

    await conn.execute(
        "INSERT INTO race (name, location, race_date) VALUES ('Dutch Grand Prix', 'Zandvoort', '2025-08-31'),"
        " ('Bahrain Grand Prix', 'Sakhir', '2025-03-02')"
    )


async def test_standings_use_current_contracts(pg):
    drivers = await database.get_driver_standings_from_db()
    assert [(d.last_name, d.team_name) for d in drivers] == [
        ("Verstappen", "Red Bull Racing"), ("Leclerc", "Ferrari"), ("Agent", None),
    ]
    teams = await database.get_team_standings_from_db()
    assert [(t.name, t.total_points) for t in teams][:2] == [("Red Bull Racing", 400), ("Ferrari", 300)]


async def test_races_and_ping(pg):
    assert await database.ping() == 1
    races = await database.get_races_from_db()
    assert [r.name for r in races] == ["Bahrain Grand Prix", "Dutch Grand Prix"]


async def test_update_keeps_driver_number_unless_sent(pg):
    request = DriverRequest.model_validate(
        {"FirstName": "Max", "LastName": "Verstappen", "Nationality": "NL", "DOB": "1997-09-30", "Championships": 5}
    )
    updated = await database.update_driver(1, request.to_update_args())
    assert updated.championships == 5
    assert updated.driver_number == 1
    assert updated.team_name == "Red Bull Racing"

    cleared = DriverRequest.model_validate(
        {"FirstName": "Max", "LastName": "Verstappen", "Nationality": "NL", "DOB": "1997-09-30", "DriverNumber": None}
    )
    assert (await database.update_driver(1, cleared.to_update_args())).driver_number is None
    assert await database.update_driver(999, request.to_update_args()) is None


async def test_insert_and_delete(pg):
    request = DriverRequest.model_validate(
        {"FirstName": "Lando", "LastName": "Norris", "Nationality": "GB", "DOB": "1999-11-13"}
    )
    created = await database.insert_driver(request.to_query_args())
    assert created.team_name is None
    assert created.championships == 0
    assert await database.delete_driver(created.driver_id) is True
    assert await database.delete_driver(created.driver_id) is False
