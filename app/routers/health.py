# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# Liveness probe for monitoring and load balancers. Not authenticated and
# not covered by any credential gate.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel

from lib.utils import utcnow

router = APIRouter()


class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str


@router.get("/api/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns {"status": "ok", "timestamp": <ISO-8601 UTC time>}.
    """
    return HealthResponse(status="ok", timestamp=utcnow().isoformat())
