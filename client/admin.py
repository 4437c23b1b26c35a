"""
Admin screen controller: the driver form's create/edit state machine and the admin table.

Actions are dispatched by name through a table, so the controller can be driven
by any front end (or a test) without a document tree.
"""
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from api_pydantic_models.drivers import DriverRecord
from client import views
from client.api_client import CLIENT_ERRORS, F1ApiClient
from client.store import ClientStore

logger = logging.getLogger(__name__)

FORM_FIELDS = ("FirstName", "LastName", "Nationality", "DOB", "Championships", "CurrentPoints", "DriverNumber")

LOAD_ERROR_MESSAGE = "Error loading drivers. Is the server running?"


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


def empty_form() -> Dict[str, str]:
    return {field: "" for field in FORM_FIELDS}


def form_from_driver(driver: DriverRecord) -> Dict[str, str]:
    return {
        "FirstName": driver.first_name,
        "LastName": driver.last_name,
        "Nationality": driver.nationality,
        "DOB": driver.dob.isoformat() if driver.dob else "",
        "Championships": str(driver.championships),
        "CurrentPoints": str(driver.current_points),
        "DriverNumber": str(driver.driver_number) if driver.driver_number is not None else "",
    }


class AdminController:
    def __init__(
        self,
        api: F1ApiClient,
        store: ClientStore,
        confirm: Callable[[str], bool],
        notify: Callable[[str], None],
    ):
        self._api = api
        self._store = store
        self._confirm = confirm
        self._notify = notify
        self.editing_id: Optional[int] = None
        self.form: Dict[str, str] = empty_form()
        self.drivers: List[DriverRecord] = []
        self.table_html = ""
        self._handlers = {
            "load": self.load,
            "submit": self.submit,
            "edit": self.start_edit,
            "cancel": self.cancel,
            "delete": self.delete,
        }

    @property
    def mode(self) -> FormMode:
        return FormMode.CREATE if self.editing_id is None else FormMode.EDIT

    @property
    def form_title(self) -> str:
        if self.mode is FormMode.EDIT:
            return f"Edit Driver (ID: {self.editing_id})"
        return "Add New Driver"

    @property
    def submit_label(self) -> str:
        return "Update Driver" if self.mode is FormMode.EDIT else "Add Driver"

    @property
    def cancel_visible(self) -> bool:
        return self.mode is FormMode.EDIT

    async def dispatch(self, action: str, **payload: Any) -> bool:
        handler = self._handlers.get(action)
        if handler is None:
            raise ValueError(f"Unknown admin action: {action}")
        return await handler(**payload)

    def reset_form(self) -> None:
        self.form = empty_form()
        self.editing_id = None

    async def load(self) -> bool:
        """Fetch every driver and re-render the table; failures render an error row."""
        try:
            self.drivers = await self._api.list_drivers()
        except CLIENT_ERRORS:
            logger.exception("Error loading admin driver table")
            self.table_html = views.render_admin_error(LOAD_ERROR_MESSAGE)
            return False
        self.table_html = views.render_admin_table(self.drivers)
        return True

    async def submit(self, values: Optional[Dict[str, str]] = None) -> bool:
        """Create in create mode, update the recorded driver in edit mode."""
        if values:
            self.form.update({k: v for k, v in values.items() if k in FORM_FIELDS})
        payload = dict(self.form)
        try:
            if self.mode is FormMode.EDIT:
                await self._api.update_driver(self.editing_id, payload)
            else:
                await self._api.create_driver(payload)
        except CLIENT_ERRORS as e:
            logger.warning("Error saving driver: %s", e)
            self._notify(f"Error: {e}")
            return False
        self.reset_form()
        self._store.invalidate()
        await self.load()
        return True

    async def start_edit(self, driver_id: int) -> bool:
        driver = next((d for d in self.drivers if d.driver_id == driver_id), None)
        if driver is None:
            self._notify(f"Driver ID {driver_id} is not in the table")
            return False
        self.form = form_from_driver(driver)
        self.editing_id = driver_id
        return True

    async def cancel(self) -> bool:
        self.reset_form()
        return True

    async def delete(self, driver_id: int) -> bool:
        if not self._confirm(f"Are you sure you want to delete driver ID {driver_id}?"):
            return False
        try:
            await self._api.delete_driver(driver_id)
        except CLIENT_ERRORS as e:
            logger.warning("Error deleting driver %s: %s", driver_id, e)
            self._notify(f"Error: {e}")
            return False
        # The form cannot keep editing a row that no longer exists
        if self.editing_id == driver_id:
            self.reset_form()
        self._store.invalidate()
        await self.load()
        return True
