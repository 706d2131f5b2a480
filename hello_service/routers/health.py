"""Health check endpoint reporting process uptime and current time."""
from __future__ import annotations

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from hello_service.uptime import uptime_seconds, utc_timestamp

router = APIRouter()

HEALTHY = "healthy"
RUNNING_MESSAGE = "Application is running successfully"


class HealthResponse(BaseModel):
    """Schema for the health check payload."""
    status: str = Field(..., examples=[HEALTHY])
    timestamp: str = Field(..., examples=["2024-01-01T00:00:00.000Z"])
    uptime: float = Field(..., description="Seconds since the process started")
    message: str = Field(..., examples=[RUNNING_MESSAGE])


@router.api_route(
    "/health",
    methods=["GET", "HEAD"],
    status_code=status.HTTP_200_OK,
    response_model=HealthResponse,
)
async def health() -> HealthResponse:
    """Simple health check without external dependencies."""
    return HealthResponse(
        status=HEALTHY,
        timestamp=utc_timestamp(),
        uptime=uptime_seconds(),
        message=RUNNING_MESSAGE,
    )
