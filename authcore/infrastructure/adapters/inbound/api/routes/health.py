"""Health check endpoints."""

from typing import Any

from fastapi import APIRouter

from authcore.infrastructure.adapters.inbound.api.dependencies import ContainerDep

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check(container: ContainerDep) -> dict[str, Any]:
    """
    Health check endpoint.

    Reports application information and store connectivity.
    """
    settings = container.settings
    store_healthy = await container.health_check()

    return {
        "status": "healthy" if store_healthy else "degraded",
        "app": settings.app_name,
        "version": settings.version,
        "environment": settings.environment,
        "checks": {
            "storage": "ok" if store_healthy else "ko",
        },
    }
