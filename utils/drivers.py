"""
Driver administration: listing, creating, updating and deleting drivers.
Validation happens here, before any connection is taken from the pool.
"""
from typing import List
import logging

from api_pydantic_models.drivers import DriverRecord, DriverRequest
from utils import database
from utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def validate_driver_request(request: DriverRequest, message: str) -> None:
    missing = request.missing_required_fields()
    if missing:
        raise ValidationError(message, details="Missing fields: {}".format(", ".join(missing)))


async def list_drivers() -> List[DriverRecord]:
    drivers = await database.get_drivers_from_db()
    logger.info("Fetched %d drivers", len(drivers))
    return drivers


async def create_driver(request: DriverRequest) -> DriverRecord:
    validate_driver_request(request, "First name, last name, nationality, and DOB are required")
    driver = await database.insert_driver(request.to_query_args())
    logger.info("Added new driver: %s %s (id=%s)", driver.first_name, driver.last_name, driver.driver_id)
    return driver


async def update_driver(driver_id: int, request: DriverRequest) -> DriverRecord:
    validate_driver_request(request, "All required fields must be provided")
    driver = await database.update_driver(driver_id, request.to_update_args())
    if driver is None:
        raise NotFoundError("Driver not found")
    logger.info("Updated driver id=%s", driver_id)
    return driver


async def delete_driver(driver_id: int) -> None:
    deleted = await database.delete_driver(driver_id)
    if not deleted:
        raise NotFoundError("Driver not found")
    logger.info("Deleted driver id=%s", driver_id)
