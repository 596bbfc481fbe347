"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready when the dataset is available."""

    status: str = Field(default="ok", description="Readiness status")
    entries: int = Field(..., ge=0, description="Character names loaded")


class ReadinessErrorResponse(BaseModel):
    """Response for GET /health/ready when the dataset cannot be loaded (503)."""

    status: str = Field(default="not_ready", description="Readiness status")
    message: str = Field(..., description="Reason (e.g. dataset unavailable)")
