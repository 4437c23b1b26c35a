"""
Pydantic models for driver API requests and responses.
Field aliases carry the JSON keys used on the wire (Driver_ID, FirstName, ...).
"""
from datetime import date
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# (alias, attribute) pairs that must be present on create and update
REQUIRED_DRIVER_FIELDS = (
    ("FirstName", "first_name"),
    ("LastName", "last_name"),
    ("Nationality", "nationality"),
    ("DOB", "dob"),
)


class DriverRequest(BaseModel):
    """
    Body of POST /api/drivers and PUT /api/drivers/{id}.

    Every field is optional at the model level so a missing required field
    is reported by the handler as a 400 rather than by FastAPI as a 422.
    Empty strings (what an HTML form submits for a blank input) count as missing.
    """
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="FirstName")
    last_name: Optional[str] = Field(None, alias="LastName")
    nationality: Optional[str] = Field(None, alias="Nationality")
    dob: Optional[date] = Field(None, alias="DOB")
    championships: Optional[int] = Field(None, alias="Championships")
    current_points: Optional[int] = Field(None, alias="CurrentPoints")
    driver_number: Optional[int] = Field(None, alias="DriverNumber")

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def missing_required_fields(self) -> List[str]:
        return [alias for alias, attr in REQUIRED_DRIVER_FIELDS if getattr(self, attr) is None]

    def to_query_args(self) -> Tuple:
        """Positional arguments for the insert/update statements, defaults applied."""
        return (
            self.first_name,
            self.last_name,
            self.nationality,
            self.dob,
            self.championships or 0,
            self.current_points or 0,
            self.driver_number,
        )

    def to_update_args(self) -> Tuple:
        """
        Update arguments: the insert arguments plus a flag telling the statement
        whether DriverNumber was sent. An omitted DriverNumber keeps the stored value.
        """
        return self.to_query_args() + ("driver_number" in self.model_fields_set,)


class DriverRecord(BaseModel):
    """A driver row with its current team, as returned by /api/drivers."""
    model_config = ConfigDict(populate_by_name=True)

    driver_id: int = Field(..., alias="Driver_ID")
    first_name: str = Field(..., alias="FirstName")
    last_name: str = Field(..., alias="LastName")
    nationality: str = Field(..., alias="Nationality")
    dob: Optional[date] = Field(None, alias="DOB")
    championships: int = Field(0, alias="Championships")
    current_points: int = Field(0, alias="CurrentPoints")
    driver_number: Optional[int] = Field(None, alias="DriverNumber")
    team_name: Optional[str] = Field(None, alias="TeamName")


class DriverStanding(BaseModel):
    """Projection served by /api/driver-standings."""
    model_config = ConfigDict(populate_by_name=True)

    driver_id: int = Field(..., alias="Driver_ID")
    first_name: str = Field(..., alias="FirstName")
    last_name: str = Field(..., alias="LastName")
    nationality: str = Field(..., alias="Nationality")
    dob: Optional[date] = Field(None, alias="DOB")
    championships: int = Field(0, alias="Championships")
    points: int = Field(0, alias="Points")
    number: Optional[int] = Field(None, alias="Number")
    team_name: Optional[str] = Field(None, alias="TeamName")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class DeleteDriverResponse(BaseModel):
    message: str
