"""Health and readiness endpoints."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from releasesite.services import site_store

router = APIRouter()

API_VERSION = "1.0.0"
SERVICE_STARTED_AT = datetime.now(timezone.utc)


def _iso_utc(ts: datetime) -> str:
    return ts.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _uptime_seconds(now: datetime) -> int:
    return max(0, int((now - SERVICE_STARTED_AT).total_seconds()))


class HealthResponse(BaseModel):
    """GET /api/health response."""

    model_config = ConfigDict(extra="forbid")
    status: Annotated[str, Field(description="Always 'ok'")]
    version: Annotated[str, Field(description="Semver MAJOR.MINOR.PATCH")]
    timestamp: Annotated[str, Field(description="ISO8601 UTC")]
    started_at: Annotated[str, Field(description="ISO8601 UTC when service process started")]
    uptime_seconds: Annotated[int, Field(description="Seconds service has been up")]


class ReadyResponse(BaseModel):
    """GET /api/ready response."""

    model_config = ConfigDict(extra="forbid")
    status: Annotated[str, Field(description="Always 'ready'")]
    version: str
    timestamp: str
    database: Annotated[str, Field(description="SQLAlchemy dialect name of the site store")]


@router.get("/health", response_model=HealthResponse)
async def health():
    """Return API health status."""
    now = datetime.now(timezone.utc)
    return HealthResponse(
        status="ok",
        version=API_VERSION,
        timestamp=_iso_utc(now),
        started_at=_iso_utc(SERVICE_STARTED_AT),
        uptime_seconds=_uptime_seconds(now),
    )


@router.get("/ready", response_model=ReadyResponse)
async def ready():
    """Readiness probe: 200 once the site store answers a trivial query."""
    try:
        with site_store.session_scope() as session:
            session.execute(text("SELECT 1"))
            dialect = session.get_bind().dialect.name
    except SQLAlchemyError as exc:
        raise HTTPException(status_code=503, detail="not ready") from exc
    return ReadyResponse(
        status="ready",
        version=API_VERSION,
        timestamp=_iso_utc(datetime.now(timezone.utc)),
        database=dialect,
    )
