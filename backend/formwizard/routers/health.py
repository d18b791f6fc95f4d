"""Health check endpoint for load balancers and monitoring."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request):
    """Lightweight liveness probe. Returns 200 OK while the service runs."""
    settings = request.app.state.settings
    return {
        "status": "ok",
        "service": "FormWizard",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }
