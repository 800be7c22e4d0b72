"""Liveness endpoint."""

import time
from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from atelier.config import SERVICE_VERSION, Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)

_STARTED_AT = time.monotonic()


class HealthResponse(BaseModel):
    """Process liveness and build information."""

    status: str
    version: str
    git_sha: str
    environment: str
    checked_at: datetime
    uptime_seconds: float


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving requests.

    Does not touch the database, so it stays green while PostgreSQL is
    unavailable and ledger requests answer 503.
    """
    return HealthResponse(
        status="healthy",
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
        environment=settings.environment,
        checked_at=datetime.now(timezone.utc),
        uptime_seconds=round(time.monotonic() - _STARTED_AT, 3),
    )
