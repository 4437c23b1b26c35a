"""
Per-session read-through cache of the three collections every page renders from.
"""
import asyncio
import logging
from typing import List, Optional

from api_pydantic_models.drivers import DriverStanding
from api_pydantic_models.races import Race
from api_pydantic_models.teams import TeamStanding
from client.api_client import F1ApiClient

logger = logging.getLogger(__name__)


class ClientStore:
    """
    Holds driver standings, team standings and races for one session.

    load_all() fetches the three collections concurrently and replaces them
    only when all three succeed. Once loaded, further calls do no network
    work until invalidate() is called (after any admin mutation).
    """

    def __init__(self, api: F1ApiClient):
        self._api = api
        self._lock = asyncio.Lock()
        self._loaded = False
        # Bumped by invalidate() so a load that was already running cannot mark stale data as loaded
        self._generation = 0
        self.driver_standings: List[DriverStanding] = []
        self.team_standings: List[TeamStanding] = []
        self.races: List[Race] = []

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    async def load_all(self) -> bool:
        """Returns True when this call fetched from the API, False when the cache was already warm."""
        if self._loaded:
            return False
        async with self._lock:
            if self._loaded:
                return False
            generation = self._generation
            driver_standings, team_standings, races = await asyncio.gather(
                self._api.get_driver_standings(),
                self._api.get_team_standings(),
                self._api.get_races(),
            )
            self.driver_standings = driver_standings
            self.team_standings = team_standings
            self.races = races
            self._loaded = generation == self._generation
            logger.info(
                "Loaded %d driver standings, %d team standings, %d races",
                len(driver_standings), len(team_standings), len(races)
            )
            return True

    def invalidate(self) -> None:
        self._loaded = False
        self._generation += 1

    def find_driver(self, driver_id: int) -> Optional[DriverStanding]:
        return next((d for d in self.driver_standings if d.driver_id == driver_id), None)

    def find_race(self, race_id: int) -> Optional[Race]:
        return next((r for r in self.races if r.race_id == race_id), None)
