"""
Render Gateway
==============

Boundary to the external skin rendering engine. The engine owns image
synthesis; this module only ships validated RenderOptions to it and hands
back the PNG bytes it produces.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import aiohttp

from tee_skin_api.config.logging import get_logger
from tee_skin_api.config.settings import get_settings
from tee_skin_api.models.schemas import RenderOptions

logger = get_logger(__name__)


class RenderEngineError(Exception):
    """Exception raised when the rendering engine fails to produce an image."""

    pass


class RenderGateway(ABC):
    """Interface to a skin rendering engine."""

    @abstractmethod
    async def render(self, options: RenderOptions) -> bytes:
        """
        Render a skin.

        Args:
            options: Validated render options

        Returns:
            PNG image bytes

        Raises:
            RenderEngineError: If the engine fails
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """Check whether the engine is reachable."""

    async def close(self) -> None:
        """Release any held resources."""


class RenderServiceClient(RenderGateway):
    """HTTP client for the rendering engine service."""

    def __init__(
        self,
        service_url: Optional[str] = None,
        timeout: Optional[float] = None,
        connect_timeout: Optional[float] = None,
    ):
        self.settings = get_settings()
        self.service_url = (service_url or self.settings.render_engine_url).rstrip("/")
        self.timeout = timeout or self.settings.render_engine_timeout
        self.connect_timeout = connect_timeout or self.settings.render_engine_connect_timeout
        self.logger: Any = logger.bind(component="render_service_client")
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout, connect=self.connect_timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    @staticmethod
    def build_payload(options: RenderOptions) -> Dict[str, Any]:
        """Request body understood by the engine."""
        return {
            "skinResource": options.skin_resource_name,
            "options": options.engine_options(),
        }

    async def render(self, options: RenderOptions) -> bytes:
        """Render a skin through the engine service."""
        payload = self.build_payload(options)
        try:
            session = await self._get_session()
            async with session.post(f"{self.service_url}/render", json=payload) as response:
                if response.status == 200:
                    image = await response.read()
                    self.logger.debug(
                        "Skin rendered via engine",
                        skin_resource=options.skin_resource_name,
                        file_size=len(image),
                    )
                    return image

                error_text = await response.text()
                raise RenderEngineError(f"{response.status} - {error_text}")
        except RenderEngineError as e:
            self.logger.error("Render engine rejected request", error=str(e), payload=payload)
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            error_msg = f"Render engine unavailable: {str(e) or type(e).__name__}"
            self.logger.error("Render engine request error", error=error_msg)
            raise RenderEngineError(error_msg) from e

    async def health_check(self) -> bool:
        """Check if the rendering engine is healthy."""
        try:
            session = await self._get_session()
            async with session.get(f"{self.service_url}/health") as response:
                if response.status == 200:
                    self.logger.debug("Render engine health check successful")
                    return True
                self.logger.warning(
                    "Render engine health check failed",
                    status=response.status,
                    response=await response.text(),
                )
                return False
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.error("Render engine health check error", error=str(e))
            return False


# Global client instance
_render_gateway: Optional[RenderGateway] = None


async def get_render_gateway() -> RenderGateway:
    """Get or create the global render gateway."""
    global _render_gateway
    if _render_gateway is None:
        _render_gateway = RenderServiceClient()
    return _render_gateway


async def close_render_gateway() -> None:
    """Close the global render gateway."""
    global _render_gateway
    if _render_gateway:
        await _render_gateway.close()
        _render_gateway = None
