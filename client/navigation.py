"""
Page controller: navigation, mobile menu, standings tabs and detail modals.
"""
import logging
from typing import Any, Callable, Dict, Optional

from client import views
from client.admin import AdminController
from client.api_client import CLIENT_ERRORS
from client.store import ClientStore

logger = logging.getLogger(__name__)

PAGES = ("home", "races", "drivers", "teams", "standings", "admin")
TABS = ("drivers", "teams")

LOAD_ERROR_MESSAGE = "Error loading data from server. Is the backend running?"


class PageController:
    def __init__(
        self,
        store: ClientStore,
        notify: Callable[[str], None],
        admin: Optional[AdminController] = None,
    ):
        self._store = store
        self._notify = notify
        self._admin = admin
        self.active_page = "home"
        self.active_tab = "drivers"
        self.menu_open = False
        self.modal_open = False
        self.modal_html = ""
        self.sections: Dict[str, str] = {}
        self._handlers = {
            "navigate": self._navigate,
            "open-menu": self._open_menu,
            "close-menu": self._close_menu,
            "switch-tab": self._switch_tab,
            "open-modal": self._open_modal,
            "close-modal": self._close_modal,
        }

    async def dispatch(self, action: str, **payload: Any) -> None:
        handler = self._handlers.get(action)
        if handler is None:
            raise ValueError(f"Unknown page action: {action}")
        await handler(**payload)

    async def start(self) -> bool:
        return await self.refresh()

    async def refresh(self) -> bool:
        """
        Load the store if it is cold and re-render every section.
        On failure the previous sections stay as they were.
        """
        try:
            fetched = await self._store.load_all()
        except CLIENT_ERRORS:
            logger.exception("Error loading application data")
            self._notify(LOAD_ERROR_MESSAGE)
            return False
        if fetched or not self.sections:
            self.sections = views.render_sections(
                self._store.driver_standings,
                self._store.team_standings,
                self._store.races,
            )
        return True

    def render(self) -> str:
        admin_table = self._admin.table_html if self._admin else None
        return views.render_page(
            self.sections,
            active_page=self.active_page,
            admin_table=admin_table,
            active_tab=self.active_tab,
            menu_open=self.menu_open,
            modal_html=self.modal_html if self.modal_open else None,
        )

    async def _navigate(self, page: str) -> None:
        if page not in PAGES:
            raise ValueError(f"Unknown page: {page}")
        self.active_page = page
        self.menu_open = False
        if page == "admin":
            if self._admin:
                await self._admin.load()
        else:
            await self.refresh()

    async def _open_menu(self) -> None:
        self.menu_open = True

    async def _close_menu(self) -> None:
        self.menu_open = False

    async def _switch_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab}")
        self.active_tab = tab

    async def _open_modal(self, modal_type: str, item_id: int) -> None:
        if modal_type == "race":
            race = self._store.find_race(item_id)
            if race is None:
                return
            self.modal_html = views.render_race_modal(race)
        elif modal_type == "driver":
            driver = self._store.find_driver(item_id)
            if driver is None:
                return
            self.modal_html = views.render_driver_modal(driver)
        else:
            raise ValueError(f"Unknown modal type: {modal_type}")
        self.modal_open = True

    async def _close_modal(self) -> None:
        self.modal_open = False
