"""
Pydantic models for liveness and health endpoints.
"""
from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    status: str
    timestamp: str
    port: int


class HealthResponse(BaseModel):
    """Response model for GET /api/health."""
    status: str = Field(..., description="OK when the database answered")
    message: str
    timestamp: str
    database: str = Field(..., description="Name of the configured database")
    port: int = Field(..., description="Port the API server listens on")
