"""
Database utility functions for PostgreSQL operations.
Handles connection management and the parameterized statements behind every endpoint.
Each helper issues exactly one statement.
"""
import asyncpg
import logging
from typing import List, Optional, Tuple
from contextlib import asynccontextmanager
from config.database_config import DatabaseConfig
from api_pydantic_models.drivers import DriverRecord, DriverStanding
from api_pydantic_models.teams import TeamStanding
from api_pydantic_models.races import Race

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manager class for database connections and operations."""

    _pool: Optional[asyncpg.Pool] = None

    @classmethod
    async def get_pool(cls) -> asyncpg.Pool:
        """
        Get or create a connection pool.
        Uses singleton pattern to reuse the same pool across requests.
        Acquisitions beyond max_size wait for a free connection.
        """
        if cls._pool is None:
            logger.info("Creating database pool: %s", DatabaseConfig.describe())
            cls._pool = await asyncpg.create_pool(
                **DatabaseConfig.get_async_connection_params(),
                **DatabaseConfig.get_pool_options()
            )
        return cls._pool

    @classmethod
    async def close_pool(cls):
        """Close the database connection pool."""
        if cls._pool:
            await cls._pool.close()
            cls._pool = None

    @classmethod
    @asynccontextmanager
    async def get_connection(cls):
        """
        Context manager for database connections.
        Automatically returns connection to pool when done.
        """
        pool = await cls.get_pool()
        async with pool.acquire() as connection:
            yield connection


# -----------------------------
# Queries
# -----------------------------

# One current contract per driver: the latest-starting contract that has not ended.
CURRENT_CONTRACT_CTE = """
    current_contract AS (
        SELECT DISTINCT ON (c.driver_id) c.driver_id, c.team_id
        FROM contract c
        WHERE c.end_date IS NULL OR c.end_date >= CURRENT_DATE
        ORDER BY c.driver_id, c.start_date DESC NULLS LAST, c.contract_id DESC
    )
"""

HEALTH_QUERY = "SELECT 1 AS result"

DRIVER_STANDINGS_QUERY = f"""
    WITH {CURRENT_CONTRACT_CTE}
    SELECT
        d.driver_id AS "Driver_ID",
        d.first_name AS "FirstName",
        d.last_name AS "LastName",
        d.nationality AS "Nationality",
        d.dob AS "DOB",
        d.championships AS "Championships",
        d.current_points AS "Points",
        d.driver_number AS "Number",
        t.name AS "TeamName"
    FROM driver d
    LEFT JOIN current_contract cc ON cc.driver_id = d.driver_id
    LEFT JOIN team t ON t.team_id = cc.team_id
    ORDER BY d.current_points DESC, d.championships DESC, d.driver_id
"""

TEAM_STANDINGS_QUERY = f"""
    WITH {CURRENT_CONTRACT_CTE}
    SELECT
        t.team_id AS "Team_ID",
        t.name AS "Name",
        (SELECT cars.engine FROM cars WHERE cars.team_id = t.team_id ORDER BY cars.car_id LIMIT 1) AS "Engine",
        COALESCE(SUM(d.current_points), 0) AS "TotalPoints"
    FROM team t
    LEFT JOIN current_contract cc ON cc.team_id = t.team_id
    LEFT JOIN driver d ON d.driver_id = cc.driver_id
    GROUP BY t.team_id, t.name
    ORDER BY "TotalPoints" DESC, t.team_id
"""

RACES_QUERY = """
    SELECT
        race_id AS "Race_ID",
        name AS "Name",
        location AS "Location",
        race_date AS "RaceDate",
        details AS "Details"
    FROM race
    ORDER BY race_date ASC NULLS LAST, race_id
"""

DRIVERS_QUERY = f"""
    WITH {CURRENT_CONTRACT_CTE}
    SELECT
        d.driver_id AS "Driver_ID",
        d.first_name AS "FirstName",
        d.last_name AS "LastName",
        d.nationality AS "Nationality",
        d.dob AS "DOB",
        d.championships AS "Championships",
        d.current_points AS "CurrentPoints",
        d.driver_number AS "DriverNumber",
        t.name AS "TeamName"
    FROM driver d
    LEFT JOIN current_contract cc ON cc.driver_id = d.driver_id
    LEFT JOIN team t ON t.team_id = cc.team_id
    ORDER BY d.driver_id
"""

INSERT_DRIVER_QUERY = """
    INSERT INTO driver (
        first_name, last_name, nationality, dob,
        championships, current_points, driver_number
    ) VALUES ($1, $2, $3, $4, $5, $6, $7)
    RETURNING
        driver_id AS "Driver_ID",
        first_name AS "FirstName",
        last_name AS "LastName",
        nationality AS "Nationality",
        dob AS "DOB",
        championships AS "Championships",
        current_points AS "CurrentPoints",
        driver_number AS "DriverNumber",
        NULL::text AS "TeamName"
"""

UPDATE_DRIVER_QUERY = f"""
    WITH {CURRENT_CONTRACT_CTE},
    updated AS (
        UPDATE driver
        SET first_name = $1, last_name = $2, nationality = $3, dob = $4,
            championships = $5, current_points = $6,
            driver_number = CASE WHEN $8 THEN $7 ELSE driver_number END
        WHERE driver_id = $9
        RETURNING *
    )
    SELECT
        u.driver_id AS "Driver_ID",
        u.first_name AS "FirstName",
        u.last_name AS "LastName",
        u.nationality AS "Nationality",
        u.dob AS "DOB",
        u.championships AS "Championships",
        u.current_points AS "CurrentPoints",
        u.driver_number AS "DriverNumber",
        t.name AS "TeamName"
    FROM updated u
    LEFT JOIN current_contract cc ON cc.driver_id = u.driver_id
    LEFT JOIN team t ON t.team_id = cc.team_id
"""

DELETE_DRIVER_QUERY = "DELETE FROM driver WHERE driver_id = $1 RETURNING driver_id"


# -----------------------------
# Health helpers
# -----------------------------

async def ping() -> int:
    """Round-trip a trivial query; raises if the database is unreachable."""
    async with DatabaseManager.get_connection() as conn:
        return await conn.fetchval(HEALTH_QUERY)


# -----------------------------
# Standings and races helpers
# -----------------------------

async def get_driver_standings_from_db() -> List[DriverStanding]:
    async with DatabaseManager.get_connection() as conn:
        rows = await conn.fetch(DRIVER_STANDINGS_QUERY)
        return [DriverStanding.model_validate(dict(row)) for row in rows]


async def get_team_standings_from_db() -> List[TeamStanding]:
    async with DatabaseManager.get_connection() as conn:
        rows = await conn.fetch(TEAM_STANDINGS_QUERY)
        return [TeamStanding.model_validate(dict(row)) for row in rows]


async def get_races_from_db() -> List[Race]:
    async with DatabaseManager.get_connection() as conn:
        rows = await conn.fetch(RACES_QUERY)
        return [Race.model_validate(dict(row)) for row in rows]


# -----------------------------
# Driver helpers
# -----------------------------

async def get_drivers_from_db() -> List[DriverRecord]:
    async with DatabaseManager.get_connection() as conn:
        rows = await conn.fetch(DRIVERS_QUERY)
        return [DriverRecord.model_validate(dict(row)) for row in rows]


async def insert_driver(values: Tuple) -> DriverRecord:
    """Insert a driver and return the stored row, generated id included."""
    async with DatabaseManager.get_connection() as conn:
        row = await conn.fetchrow(INSERT_DRIVER_QUERY, *values)
        return DriverRecord.model_validate(dict(row))


async def update_driver(driver_id: int, values: Tuple) -> Optional[DriverRecord]:
    """Update a driver in place. Returns None when no row has that id."""
    async with DatabaseManager.get_connection() as conn:
        row = await conn.fetchrow(UPDATE_DRIVER_QUERY, *values, driver_id)
        if row is None:
            return None
        return DriverRecord.model_validate(dict(row))


async def delete_driver(driver_id: int) -> bool:
    """Delete a driver. Returns False when no row has that id."""
    async with DatabaseManager.get_connection() as conn:
        deleted_id = await conn.fetchval(DELETE_DRIVER_QUERY, driver_id)
        return deleted_id is not None
