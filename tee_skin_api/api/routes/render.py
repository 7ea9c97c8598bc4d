"""
Render Routes
=============

FastAPI route for rendering tee skins to PNG.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse, Response

from tee_skin_api.config.logging import get_logger
from tee_skin_api.core.rendering.gateway import (
    RenderEngineError,
    RenderGateway,
    get_render_gateway,
)
from tee_skin_api.core.validation.validator import validate_render_request
from tee_skin_api.models.schemas import RenderSkinQuery, ValidationFailure

logger = get_logger(__name__)

router = APIRouter(tags=["Rendering"])


@router.get(
    "/render-skin",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "Rendered skin"},
        400: {"content": {"text/plain": {}}, "description": "Invalid query parameters"},
        500: {"content": {"text/plain": {}}, "description": "Rendering engine failure"},
    },
)
async def render_skin(
    request: Request,
    body_color: Optional[str] = Query(
        None, alias="bodyColor", description='Body color, "255,0,0" or "#FF0000"'
    ),
    feet_color: Optional[str] = Query(
        None, alias="feetColor", description="Feet color, same format as bodyColor"
    ),
    looking_degree: Optional[str] = Query(
        None, alias="lookingDegree", description="Eye direction in degrees, 0 looks right"
    ),
    size: Optional[str] = Query(None, description="Output image size in pixels"),
    skin_resource: Optional[str] = Query(
        None, alias="skinResource", description='Base skin name, defaults to "default"'
    ),
    gateway: RenderGateway = Depends(get_render_gateway),
) -> Response:
    """Render a skin with optional custom colors, eye direction and size."""
    log: Any = logger.bind(request_id=getattr(request.state, "request_id", None))

    query = RenderSkinQuery(
        body_color=body_color,
        feet_color=feet_color,
        looking_degree=looking_degree,
        size=size,
        skin_resource=skin_resource,
    )
    result = validate_render_request(query)

    if isinstance(result, ValidationFailure):
        log.info("Render request rejected", field=result.field, reason=result.message)
        return PlainTextResponse(result.message, status_code=400)

    log.info(
        "Render requested",
        skin_resource=result.skin_resource_name,
        custom_colors=result.custom_colors is not None,
        view_angle=result.view_angle_degrees,
        size=result.output_size_pixels,
    )

    try:
        image = await gateway.render(result)
    except RenderEngineError as e:
        log.error("Error rendering skin", error=str(e))
        return PlainTextResponse(
            f"Failed to render skin: {e}. Please check your input parameters and server logs.",
            status_code=500,
        )

    log.info("Render completed", file_size=len(image))
    return Response(content=image, media_type="image/png")
