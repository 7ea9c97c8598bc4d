"""
FastAPI Application
==================

Main FastAPI application exposing the skin rendering endpoint.
"""

from contextlib import asynccontextmanager
import uuid
from typing import AsyncGenerator, Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from tee_skin_api.config.settings import get_settings
from tee_skin_api.config.logging import get_logger, setup_logging
from tee_skin_api.core.rendering.gateway import close_render_gateway
from tee_skin_api.api.routes.health import router as health_router
from tee_skin_api.api.routes.render import router as render_router
from tee_skin_api.models.schemas import ErrorResponse

settings = get_settings()
setup_logging()

logger = get_logger(__name__)


def example_urls(base_url: str) -> List[Dict[str, str]]:
    """Sample render URLs shown at startup and on the root endpoint."""
    return [
        {
            "description": "Default skin, red body, blue feet, looking right, 256px",
            "url": f"{base_url}/render-skin?bodyColor=255,0,0&feetColor=0,0,255"
            "&lookingDegree=0&size=256",
        },
        {
            "description": "Default skin, green body (hex), orange feet (hex), looking left, 512px",
            "url": f"{base_url}/render-skin?bodyColor=%2300FF00&feetColor=%23FFA500"
            "&lookingDegree=180&size=512",
        },
        {
            "description": "Skin '10Fox', default colors, looking up, 128px",
            "url": f"{base_url}/render-skin?skinResource=10Fox&lookingDegree=90&size=128",
        },
    ]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info(
        "Skin renderer API starting",
        base_url=settings.base_url,
        render_engine_url=settings.render_engine_url,
    )
    for example in example_urls(settings.base_url):
        logger.info("Example request", description=example["description"], url=example["url"])

    try:
        yield
    finally:
        logger.info("Shutting down skin renderer API")
        try:
            await close_render_gateway()
            logger.info("Render gateway closed")
        except Exception as e:
            logger.error("Error closing render gateway", error=str(e))


app = FastAPI(
    title=settings.app_name,
    description="Render tee skins with custom colors, eye direction and size",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs" if settings.enable_docs else None,
    redoc_url="/redoc" if settings.enable_redoc else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_hosts,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)

app.include_router(render_router)
app.include_router(health_router)


# Request ID middleware
@app.middleware("http")
async def add_request_id(request: Request, call_next) -> Response:  # type: ignore
    """Add request ID to all requests."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    try:
        response = await call_next(request)
    except Exception as exc:
        response = await general_exception_handler(request, exc)
    response.headers["X-Request-ID"] = request_id

    return response


# Exception handlers
@app.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Custom HTTP exception handler with structured error response."""
    error_response = ErrorResponse(
        error=str(exc.detail),
        error_code=str(exc.status_code),
        details=None,
        request_id=getattr(request.state, "request_id", None),
    )

    logger.warning(
        "HTTP exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        request_id=error_response.request_id,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode="json"),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """General exception handler for unexpected errors."""
    logger.error(
        "Unhandled exception",
        exception=str(exc),
        path=request.url.path,
        request_id=getattr(request.state, "request_id", None),
        exc_info=True,
    )

    # Exception text stays in the logs only
    response = PlainTextResponse("Internal server error", status_code=500)
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers["X-Request-ID"] = request_id
    return response


@app.get("/", tags=["General"])
async def root() -> dict[str, Any]:
    """
    Root endpoint with basic API information.
    """
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs_url": "/docs" if settings.enable_docs else None,
        "health_check": "/health",
        "endpoints": {
            "render_skin": "GET /render-skin",
            "health": "GET /health",
        },
        "parameters": {
            "bodyColor": 'RGB "255,0,0", RGBA "255,0,0,0.5", "#RRGGBB" or "#AARRGGBB"',
            "feetColor": "Same format as bodyColor, required together with it",
            "lookingDegree": "Eye direction in degrees (0 right, 90 up, 180 left)",
            "size": "Output image size in pixels, positive integer",
            "skinResource": 'Base skin name, defaults to "default"',
        },
        "examples": example_urls(settings.base_url),
    }


def run_development_server() -> None:
    """Run development server with auto-reload."""
    uvicorn.run(
        "tee_skin_api.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


def create_app() -> FastAPI:
    """
    Application factory function for creating FastAPI app instance.
    Used by tests and external deployment scripts.

    Returns:
        FastAPI application instance
    """
    return app


if __name__ == "__main__":
    run_development_server()
