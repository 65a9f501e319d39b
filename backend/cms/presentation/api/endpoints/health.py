"""Health check endpoint: reports version, environment and storage mode."""

from fastapi import APIRouter

from cms.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "storage": settings.storage_backend,
    }
