"""Health check endpoints.

These endpoints are used by container orchestrators and the Docker
HEALTHCHECK to determine application health, readiness, and liveness.

- /health: General health check with version and uptime
- /health/ready: Readiness probe (can accept traffic?)
- /health/live: Liveness probe (is the app running?)
"""

from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..config import VERSION
from ..models.subnet import HealthResponse

router = APIRouter(tags=["health"])

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def format_uptime(uptime: timedelta) -> str:
    """Render a duration the way Go prints time.Duration, e.g. 1h2m3s."""
    total = int(uptime.total_seconds())
    if total <= 0:
        return "0s"

    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours:
        return f"{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{minutes}m{seconds}s"
    return f"{seconds}s"


@router.api_route(
    "/health",
    methods=["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH"],
    response_model=HealthResponse,
)
async def health_check(request: Request):
    """Health check endpoint, answers any method.

    Uptime is measured from the start time owned by the running application.

    Returns:
        Status, timestamp, version and uptime, never cached
    """
    now = datetime.now(timezone.utc)
    started_at: datetime = request.app.state.started_at

    health = HealthResponse(
        status="healthy",
        timestamp=now,
        version=VERSION,
        uptime=format_uptime(now - started_at),
    )

    return JSONResponse(content=health.model_dump(mode="json"), headers=NO_CACHE_HEADERS)


@router.get("/health/ready")
async def readiness_check():
    """Readiness check.

    The calculator has no external dependencies, so it is ready as soon as
    it is serving requests.
    """
    return {"status": "ready"}


@router.get("/health/live")
async def liveness_check():
    """Liveness check.

    If this fails, the orchestrator will restart the container.
    """
    return {"status": "alive"}
