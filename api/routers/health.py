from fastapi import APIRouter, Request

from api.schemas import HealthResponse
from core.clock import SystemClock, to_iso8601

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request):
    """Health check endpoint."""
    now = SystemClock().now()
    return HealthResponse(
        status="healthy",
        timestamp=to_iso8601(now),
        version=request.app.version,
        uptime_seconds=(now - request.app.state.started_at).total_seconds(),
    )
