from datetime import date

from api_pydantic_models.drivers import DriverRecord, DriverStanding
from api_pydantic_models.races import Race
from api_pydantic_models.teams import TeamStanding
from client import views


def standing(driver_id, first, last, points, team="McLaren", number=None):
    return DriverStanding(
        driver_id=driver_id, first_name=first, last_name=last, nationality="GB",
        dob=date(1999, 1, 1), championships=0, points=points, number=number, team_name=team,
    )


def race(race_id, name, location="Monza", race_date=date(2025, 9, 7), details=None):
    return Race(race_id=race_id, name=name, location=location, race_date=race_date, details=details)


def test_fragments_render_placeholders_when_empty():
    assert "No upcoming races." in views.render_home_races([])
    assert "No races scheduled." in views.render_race_list([])
    assert "No drivers found." in views.render_driver_grid([])
    assert "No teams found." in views.render_team_gallery([])
    assert "No driver standings available." in views.render_driver_standings([])
    assert "No team standings available." in views.render_team_standings([])
    assert "No drivers found." in views.render_admin_table([])


def test_store_data_is_escaped():
    html = views.render_driver_grid([standing(1, "<script>alert(1)</script>", "O'Neil", 10, team="A & B")])
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "A &amp; B" in html
    assert "O&#39;Neil" in html


def test_standings_keep_api_order():
    drivers = [standing(2, "Low", "Scorer", 1), standing(1, "High", "Scorer", 99)]
    html = views.render_driver_standings(drivers)
    assert html.index("Low Scorer") < html.index("High Scorer")
    assert html.count("top-row") == 1
    assert "<td>1</td>" in html and "<td>2</td>" in html


def test_team_standings_and_gallery():
    teams = [TeamStanding(team_id=1, name="Ferrari", engine=None, total_points=300)]
    assert "Engine: N/A" in views.render_team_gallery(teams)
    assert "<strong>300</strong>" in views.render_team_standings(teams)


def test_podium_visual_order():
    drivers = [standing(1, "First", "Place", 30), standing(2, "Second", "Place", 20), standing(3, "Third", "Place", 10)]
    html = views.render_podium(drivers)
    assert html.index("Second Place") < html.index("First Place") < html.index("Third Place")
    assert "1<span>st</span>" in html
    assert "pos-2" in html


def test_podium_fills_missing_slots_with_na():
    slots = views.podium_slots([standing(1, "Only", "Driver", 5)])
    assert [s.position for s in slots] == [2, 1, 3]
    assert slots[0].driver is None and slots[2].driver is None
    assert slots[1].driver.full_name == "Only Driver"
    html = views.render_podium([standing(1, "Only", "Driver", 5)])
    assert html.count("N/A") == 2


def test_home_shows_first_three_races():
    races = [race(i, f"Race {i}") for i in range(1, 6)]
    html = views.render_home_races(races)
    assert "Race 3" in html
    assert "Race 4" not in html


def test_missing_team_and_number():
    html = views.render_driver_modal(standing(1, "Free", "Agent", 0, team=None))
    assert "No Team" in html
    assert "#-" in html


def test_race_modal_includes_details():
    html = views.render_race_modal(race(1, "Italian Grand Prix", details="Temple of speed"))
    assert "Location: Monza" in html
    assert "2025-09-07" in html
    assert "Temple of speed" in html


def test_admin_table_rows_carry_actions():
    driver = DriverRecord(
        driver_id=9, first_name="Oscar", last_name="Piastri", nationality="AU",
        dob=date(2001, 4, 6), championships=0, current_points=0,
    )
    html = views.render_admin_table([driver])
    assert 'data-action="edit" data-id="9"' in html
    assert 'data-action="delete" data-id="9"' in html
    assert "2001-04-06" in html


def test_admin_error_row():
    assert views.render_admin_error("Boom <b>") == '<tr><td colspan="7" class="error-row">Boom &lt;b&gt;</td></tr>'


def test_render_page_contains_every_section():
    sections = views.render_sections([standing(1, "Max", "Verstappen", 400)], [], [race(1, "Dutch Grand Prix")])
    assert set(sections) == set(views.SECTION_IDS)
    page = views.render_page(sections, active_page="standings")
    assert "Max Verstappen" in page
    assert "No team standings available." in page
    assert 'class="page active" id="standings"' in page
    assert 'class="tab-panel active" id="tab-drivers"' in page
    assert 'class="modal" id="detail-modal"' in page


def test_render_page_shows_tab_menu_and_modal_state():
    sections = views.render_sections([], [], [])
    page = views.render_page(sections, active_tab="teams", menu_open=True, modal_html="<h2>Detail</h2>")
    assert 'class="tab-panel active" id="tab-teams"' in page
    assert 'class="tab-panel" id="tab-drivers"' in page
    assert 'class="nav show-menu"' in page
    assert 'class="modal active" id="detail-modal"' in page
    assert "<h2>Detail</h2>" in page
