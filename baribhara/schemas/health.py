"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str = Field(default="ok", description="ok when every dependency is up, else degraded")
    database: bool
    cache: bool
    events: bool
