"""Health check route."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

API_VERSION = "0.1.0"

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness check. Does not touch the database."""
    return HealthResponse(
        status="healthy", timestamp=datetime.now(timezone.utc), version=API_VERSION
    )
