"""
Health Routes
=============

FastAPI routes for health check endpoints.
"""

from fastapi import APIRouter, Depends

from tee_skin_api.config.logging import get_logger
from tee_skin_api.config.settings import get_settings
from tee_skin_api.core.rendering.gateway import RenderGateway, get_render_gateway
from tee_skin_api.models.schemas import HealthStatus

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthStatus)
async def health_check(gateway: RenderGateway = Depends(get_render_gateway)) -> HealthStatus:
    """
    Get application health status.

    The API stays up when the rendering engine is down, so an unreachable
    engine reports "degraded" rather than "unhealthy".
    """
    settings = get_settings()
    engine_healthy = await gateway.health_check()

    health_status = HealthStatus(
        status="healthy" if engine_healthy else "degraded",
        version=settings.app_version,
        render_engine=engine_healthy,
        render_engine_url=settings.render_engine_url,
    )

    logger.info("Health check completed", status=health_status.status)
    return health_status
