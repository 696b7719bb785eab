"""Health check endpoint — always answers, reports whether the store opened."""

from fastapi import APIRouter, Request

from rent_inspector.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    store = getattr(request.app.state, "store", None)
    store_available = store is not None and store.available
    return {
        "status": "healthy" if store_available else "degraded",
        "version": settings.app_version,
        "environment": settings.app_env,
        "store": "available" if store_available else "unavailable",
    }
