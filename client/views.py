"""
View renderer: pure functions from cached collections to HTML fragments.

Collections are rendered in the order the API returned them. Every value that
comes from the database goes through Jinja2 autoescaping.
"""
from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from api_pydantic_models.drivers import DriverRecord, DriverStanding
from api_pydantic_models.races import Race
from api_pydantic_models.teams import TeamStanding
from client import view_models
from client.view_models import PodiumSlot

TEMPLATES_DIR = Path(__file__).parent / "templates"

HOME_RACE_COUNT = 3

# Podium cards left to right: 2nd, 1st, 3rd
PODIUM_LAYOUT = (2, 1, 3)

# Container ids of the page sections filled from the store
SECTION_IDS = (
    "upcoming-race-grid",
    "race-list-container",
    "driver-grid-container",
    "team-gallery-container",
    "driver-standings-body",
    "team-standings-body",
    "podium-grid-container",
)

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _render(template_name: str, **context) -> str:
    return _env.get_template(template_name).render(**context).strip()


def render_home_races(races: List[Race]) -> str:
    cards = [view_models.race_card(race) for race in races[:HOME_RACE_COUNT]]
    return _render("home_races.html", races=cards)


def render_race_list(races: List[Race]) -> str:
    return _render("race_list.html", races=[view_models.race_card(race) for race in races])


def render_driver_grid(standings: List[DriverStanding]) -> str:
    return _render("driver_grid.html", drivers=[view_models.driver_card(d) for d in standings])


def render_team_gallery(teams: List[TeamStanding]) -> str:
    return _render("team_gallery.html", teams=[view_models.team_card(t) for t in teams])


def render_driver_standings(standings: List[DriverStanding]) -> str:
    rows = [view_models.driver_standing_row(i, d) for i, d in enumerate(standings)]
    return _render("driver_standings.html", rows=rows)


def render_team_standings(teams: List[TeamStanding]) -> str:
    rows = [view_models.team_standing_row(i, t) for i, t in enumerate(teams)]
    return _render("team_standings.html", rows=rows)


def podium_slots(standings: List[DriverStanding]) -> List[PodiumSlot]:
    """Top three in visual order; slots past the end of the standings have no driver."""
    slots = []
    for position in PODIUM_LAYOUT:
        driver = standings[position - 1] if len(standings) >= position else None
        slots.append(PodiumSlot(
            position=position,
            suffix=view_models.RANK_SUFFIXES[position],
            driver=view_models.driver_card(driver) if driver else None,
        ))
    return slots


def render_podium(standings: List[DriverStanding]) -> str:
    return _render("podium.html", slots=podium_slots(standings), not_available=view_models.NOT_AVAILABLE)


def render_race_modal(race: Race) -> str:
    return _render("race_modal.html", race=view_models.race_card(race))


def render_driver_modal(driver: DriverStanding) -> str:
    return _render("driver_modal.html", driver=view_models.driver_card(driver))


def render_admin_table(drivers: List[DriverRecord]) -> str:
    return _render("admin_table.html", rows=[view_models.admin_row(d) for d in drivers])


def render_admin_error(message: str) -> str:
    return _render("admin_error.html", message=message)


def render_sections(
    driver_standings: List[DriverStanding],
    team_standings: List[TeamStanding],
    races: List[Race],
) -> Dict[str, str]:
    """Every store-backed page section, keyed by container id."""
    return {
        "upcoming-race-grid": render_home_races(races),
        "race-list-container": render_race_list(races),
        "driver-grid-container": render_driver_grid(driver_standings),
        "team-gallery-container": render_team_gallery(team_standings),
        "driver-standings-body": render_driver_standings(driver_standings),
        "team-standings-body": render_team_standings(team_standings),
        "podium-grid-container": render_podium(driver_standings),
    }


def render_page(
    sections: Dict[str, str],
    active_page: str = "home",
    admin_table: Optional[str] = None,
    active_tab: str = "drivers",
    menu_open: bool = False,
    modal_html: Optional[str] = None,
) -> str:
    """
    Full HTML document with every section filled in. An empty modal_html
    leaves the detail modal closed.
    """
    return _render(
        "page.html",
        sections=sections,
        active_page=active_page,
        admin_table=admin_table or "",
        active_tab=active_tab,
        menu_open=menu_open,
        modal_html=modal_html or "",
    )
