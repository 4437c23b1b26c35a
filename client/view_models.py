"""
Display records built from API models. Templates only ever see these.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel

from api_pydantic_models.drivers import DriverRecord, DriverStanding
from api_pydantic_models.races import Race
from api_pydantic_models.teams import TeamStanding

NO_TEAM = "No Team"
NOT_AVAILABLE = "N/A"

RANK_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def format_date(value: Optional[date], fallback: str = "Date TBC") -> str:
    return value.isoformat() if value else fallback


class RaceCard(BaseModel):
    race_id: int
    name: str
    location: str
    date_label: str
    details: Optional[str] = None


class DriverCard(BaseModel):
    driver_id: int
    full_name: str
    number_label: str
    team_label: str
    nationality: str
    points: int
    championships: int


class TeamCard(BaseModel):
    team_id: int
    name: str
    engine_label: str
    total_points: int


class StandingRow(BaseModel):
    position: int
    is_leader: bool
    name: str
    points: int
    nationality: Optional[str] = None
    team_label: Optional[str] = None


class PodiumSlot(BaseModel):
    position: int
    suffix: str
    driver: Optional[DriverCard] = None


class AdminRow(BaseModel):
    driver_id: int
    first_name: str
    last_name: str
    nationality: str
    dob_label: str
    championships: int


def race_card(race: Race) -> RaceCard:
    return RaceCard(
        race_id=race.race_id,
        name=race.name,
        location=race.location,
        date_label=format_date(race.race_date),
        details=race.details,
    )


def driver_card(driver: DriverStanding) -> DriverCard:
    return DriverCard(
        driver_id=driver.driver_id,
        full_name=driver.full_name,
        number_label=str(driver.number) if driver.number is not None else "-",
        team_label=driver.team_name or NO_TEAM,
        nationality=driver.nationality,
        points=driver.points,
        championships=driver.championships,
    )


def team_card(team: TeamStanding) -> TeamCard:
    return TeamCard(
        team_id=team.team_id,
        name=team.name,
        engine_label=team.engine or NOT_AVAILABLE,
        total_points=team.total_points,
    )


def driver_standing_row(index: int, driver: DriverStanding) -> StandingRow:
    return StandingRow(
        position=index + 1,
        is_leader=index == 0,
        name=driver.full_name,
        points=driver.points,
        nationality=driver.nationality,
        team_label=driver.team_name or NO_TEAM,
    )


def team_standing_row(index: int, team: TeamStanding) -> StandingRow:
    return StandingRow(position=index + 1, is_leader=index == 0, name=team.name, points=team.total_points)


def admin_row(driver: DriverRecord) -> AdminRow:
    return AdminRow(
        driver_id=driver.driver_id,
        first_name=driver.first_name,
        last_name=driver.last_name,
        nationality=driver.nationality,
        dob_label=format_date(driver.dob, fallback=""),
        championships=driver.championships,
    )
