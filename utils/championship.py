"""
Read-only championship views: driver standings, team standings and the race calendar.
Ordering comes from the queries; nothing is re-sorted here.
"""
from typing import List
import logging

from api_pydantic_models.drivers import DriverStanding
from api_pydantic_models.races import Race
from api_pydantic_models.teams import TeamStanding
from utils import database

logger = logging.getLogger(__name__)


async def get_driver_standings() -> List[DriverStanding]:
    standings = await database.get_driver_standings_from_db()
    logger.info("Fetched %d driver standings", len(standings))
    return standings


async def get_team_standings() -> List[TeamStanding]:
    standings = await database.get_team_standings_from_db()
    logger.info("Fetched %d team standings", len(standings))
    return standings


async def get_races() -> List[Race]:
    races = await database.get_races_from_db()
    logger.info("Fetched %d races", len(races))
    return races
