"""
Async HTTP client for the F1 management API.
One coroutine per endpoint; responses are parsed into the same pydantic models the server emits.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from api_pydantic_models.drivers import DriverRecord, DriverStanding
from api_pydantic_models.races import Race
from api_pydantic_models.teams import TeamStanding
from config.app_config import AppConfig

logger = logging.getLogger(__name__)


class ApiRequestError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


# Everything a caller of F1ApiClient has to be ready for
CLIENT_ERRORS = (ApiRequestError, httpx.HTTPError)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"API request failed with status {response.status_code}"


class F1ApiClient:
    def __init__(
        self,
        base_url: str = AppConfig.API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "F1ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._client.request(method, path, **kwargs)
        if response.is_error:
            message = _error_message(response)
            logger.warning("%s %s failed: %s %s", method, path, response.status_code, message)
            raise ApiRequestError(response.status_code, message)
        return response.json()

    async def health(self) -> Dict[str, Any]:
        return await self._request("GET", "/health")

    async def get_driver_standings(self) -> List[DriverStanding]:
        data = await self._request("GET", "/driver-standings")
        return [DriverStanding.model_validate(item) for item in data]

    async def get_team_standings(self) -> List[TeamStanding]:
        data = await self._request("GET", "/team-standings")
        return [TeamStanding.model_validate(item) for item in data]

    async def get_races(self) -> List[Race]:
        data = await self._request("GET", "/races")
        return [Race.model_validate(item) for item in data]

    async def list_drivers(self) -> List[DriverRecord]:
        data = await self._request("GET", "/drivers")
        return [DriverRecord.model_validate(item) for item in data]

    async def create_driver(self, payload: Dict[str, Any]) -> DriverRecord:
        data = await self._request("POST", "/drivers", json=payload)
        return DriverRecord.model_validate(data)

    async def update_driver(self, driver_id: int, payload: Dict[str, Any]) -> DriverRecord:
        data = await self._request("PUT", f"/drivers/{driver_id}", json=payload)
        return DriverRecord.model_validate(data)

    async def delete_driver(self, driver_id: int) -> str:
        data = await self._request("DELETE", f"/drivers/{driver_id}")
        return data["message"]
