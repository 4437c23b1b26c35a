from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Race(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    race_id: int = Field(..., alias="Race_ID")
    name: str = Field(..., alias="Name")
    location: str = Field(..., alias="Location")
    race_date: Optional[date] = Field(None, alias="RaceDate")
    details: Optional[str] = Field(None, alias="Details")
