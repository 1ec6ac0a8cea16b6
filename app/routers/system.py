# app/routers/system.py
import time
from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.config import get_settings
from app.schemas.common import HealthStatus, ServiceInfo

router = APIRouter(tags=["System"])

settings = get_settings()

STARTED_AT = time.monotonic()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/", response_model=ServiceInfo)
def root():
    """Service banner."""
    return ServiceInfo(
        message=f"Welcome to the {settings.PROJECT_NAME}",
        version=settings.APP_VERSION,
        status="operational",
        timestamp=_now(),
    )


@router.get("/health", response_model=HealthStatus)
def health():
    """Liveness probe; uptime is in seconds."""
    return HealthStatus(
        status="healthy",
        uptime=round(time.monotonic() - STARTED_AT, 3),
        timestamp=_now(),
    )
