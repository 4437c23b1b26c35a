from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TeamStanding(BaseModel):
    """Team with the summed points of its currently contracted drivers."""
    model_config = ConfigDict(populate_by_name=True)

    team_id: int = Field(..., alias="Team_ID")
    name: str = Field(..., alias="Name")
    engine: Optional[str] = Field(None, alias="Engine")
    total_points: int = Field(0, alias="TotalPoints")
