from datetime import datetime, timezone
from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn

from api_pydantic_models.drivers import DeleteDriverResponse, DriverRecord, DriverRequest, DriverStanding
from api_pydantic_models.races import Race
from api_pydantic_models.system import HealthResponse, RootResponse
from api_pydantic_models.teams import TeamStanding
from config.app_config import AppConfig
from config.database_config import DatabaseConfig
from utils import championship, database, drivers
from utils.database import DatabaseManager
from utils.errors import ApiError, StoreError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

AVAILABLE_ROUTES = [
    "GET /",
    "GET /api/health",
    "GET /api/driver-standings",
    "GET /api/team-standings",
    "GET /api/races",
    "GET /api/drivers",
    "POST /api/drivers",
    "PUT /api/drivers/:id",
    "DELETE /api/drivers/:id",
]

app = FastAPI(title="F1 Management API")


@app.on_event("startup")
async def startup_event():
    """Initialize database connection pool on startup."""
    try:
        await DatabaseManager.get_pool()
        logging.info("Successfully connected to database %s@%s", DatabaseConfig.DB_NAME, DatabaseConfig.DB_HOST)
    except Exception:
        # Keep serving; /api/health reports the failure
        logging.exception("Error connecting to database")


@app.on_event("shutdown")
async def shutdown_event():
    """Close database connection pool on shutdown."""
    await DatabaseManager.close_pool()


app.add_middleware(
    CORSMiddleware,
    allow_origins=AppConfig.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
    allow_credentials=True,
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    include_details = AppConfig.EXPOSE_ERROR_DETAILS or not isinstance(exc, StoreError)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(include_details))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        "{}: {}".format(".".join(str(part) for part in error["loc"]), error["msg"])
        for error in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": details})


@app.exception_handler(StarletteHTTPException)
async def route_not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown path or unsupported method on a known path
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"Route {request.method} {request.url.path} not found",
                "availableRoutes": AVAILABLE_ROUTES,
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@app.get("/")
def root() -> RootResponse:
    return RootResponse(status="Server is alive!", timestamp=_now(), port=AppConfig.PORT)


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    try:
        await database.ping()
    except Exception as e:
        logging.exception("Health check failed")
        content = {"status": "ERROR", "message": "Database connection failed"}
        if AppConfig.EXPOSE_ERROR_DETAILS:
            content["error"] = str(e)
        return JSONResponse(status_code=500, content=content)
    return HealthResponse(
        status="OK",
        message="Backend and database are running",
        timestamp=_now(),
        database=DatabaseConfig.DB_NAME,
        port=AppConfig.PORT,
    )


# === Visual components ===

@app.get("/api/driver-standings")
async def get_driver_standings() -> List[DriverStanding]:
    try:
        logging.info("Request: driver standings")
        standings = await championship.get_driver_standings()
        logging.info("Response: returning %d driver standings", len(standings))
        return standings
    except ApiError:
        raise
    except Exception as e:
        logging.exception("Error in get_driver_standings")
        raise StoreError("Database error fetching driver standings", details=str(e))


@app.get("/api/team-standings")
async def get_team_standings() -> List[TeamStanding]:
    try:
        logging.info("Request: team standings")
        standings = await championship.get_team_standings()
        logging.info("Response: returning %d team standings", len(standings))
        return standings
    except ApiError:
        raise
    except Exception as e:
        logging.exception("Error in get_team_standings")
        raise StoreError("Database error fetching team standings", details=str(e))


@app.get("/api/races")
async def get_races() -> List[Race]:
    try:
        logging.info("Request: races")
        races = await championship.get_races()
        logging.info("Response: returning %d races", len(races))
        return races
    except ApiError:
        raise
    except Exception as e:
        logging.exception("Error in get_races")
        raise StoreError("Database error fetching races", details=str(e))


# === Admin panel ===

@app.get("/api/drivers")
async def list_drivers() -> List[DriverRecord]:
    try:
        logging.info("Request: all drivers")
        driver_list = await drivers.list_drivers()
        logging.info("Response: returning %d drivers", len(driver_list))
        return driver_list
    except ApiError:
        raise
    except Exception as e:
        logging.exception("Error in list_drivers")
        raise StoreError("Database error", details=str(e))


@app.post("/api/drivers", status_code=201)
async def create_driver(request: DriverRequest) -> DriverRecord:
    try:
        logging.info("Request: create driver %s %s", request.first_name, request.last_name)
        return await drivers.create_driver(request)
    except ApiError:
        raise
    except Exception as e:
        logging.exception("Error in create_driver")
        raise StoreError("Database error", details=str(e))


@app.put("/api/drivers/{driver_id}")
async def update_driver(driver_id: int, request: DriverRequest) -> DriverRecord:
    try:
        logging.info("Request: update driver id=%s", driver_id)
        return await drivers.update_driver(driver_id, request)
    except ApiError:
        raise
    except Exception as e:
        logging.exception("Error in update_driver for driver_id=%s", driver_id)
        raise StoreError("Database error", details=str(e))


@app.delete("/api/drivers/{driver_id}")
async def delete_driver(driver_id: int) -> DeleteDriverResponse:
    try:
        logging.info("Request: delete driver id=%s", driver_id)
        await drivers.delete_driver(driver_id)
        return DeleteDriverResponse(message="Driver deleted successfully")
    except ApiError:
        raise
    except Exception as e:
        logging.exception("Error in delete_driver for driver_id=%s", driver_id)
        raise StoreError("Database error", details=str(e))


if __name__ == "__main__":
    logging.info("Environment: %s", AppConfig.ENVIRONMENT)
    uvicorn.run(app, host="0.0.0.0", port=AppConfig.PORT)
