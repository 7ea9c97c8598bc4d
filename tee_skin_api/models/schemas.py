"""
Pydantic Models and Schemas
===========================

Core data models for colors, render options, validation results and API responses.
"""

from typing import Optional, Dict, Any, Literal
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_SKIN_RESOURCE = "default"

# Largest value a TW color code can take (0xFFFFFFFF)
MAX_TW_CODE = 2**32 - 1


# Color Models
class CanonicalColor(BaseModel):
    """Normalized color value, channels in 0-255 and alpha in 0-1."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    r: float = Field(..., ge=0, le=255, description="Red channel")
    g: float = Field(..., ge=0, le=255, description="Green channel")
    b: float = Field(..., ge=0, le=255, description="Blue channel")
    a: float = Field(1.0, ge=0.0, le=1.0, description="Alpha, 0 transparent to 1 opaque")


class CustomColors(BaseModel):
    """Body and feet color override. The engine only accepts both together."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    body_code: int = Field(..., ge=0, le=MAX_TW_CODE, alias="bodyTWcode")
    feet_code: int = Field(..., ge=0, le=MAX_TW_CODE, alias="feetTWcode")


# Rendering Models
class RenderOptions(BaseModel):
    """Normalized options handed to the rendering engine."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    custom_colors: Optional[CustomColors] = Field(
        None, alias="customColors", description="Packed body and feet colors"
    )
    view_angle_degrees: Optional[float] = Field(
        None, alias="viewAngle", description="Eye direction in degrees"
    )
    output_size_pixels: Optional[int] = Field(
        None, gt=0, alias="size", description="Output image size in pixels"
    )
    skin_resource_name: str = Field(
        DEFAULT_SKIN_RESOURCE, alias="skinResource", description="Base skin name"
    )

    def engine_options(self) -> Dict[str, Any]:
        """Options payload in the engine's wire format, unset fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"skin_resource_name"})


class ValidationFailure(BaseModel):
    """Reason a render query was rejected."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Offending query parameter")
    message: str = Field(..., description="Human readable reason")


# API Request/Response Models
class RenderSkinQuery(BaseModel):
    """Raw query parameters of the render endpoint. None means not supplied."""

    model_config = ConfigDict(populate_by_name=True)

    body_color: Optional[str] = Field(None, alias="bodyColor")
    feet_color: Optional[str] = Field(None, alias="feetColor")
    looking_degree: Optional[str] = Field(None, alias="lookingDegree")
    size: Optional[str] = Field(None)
    skin_resource: Optional[str] = Field(None, alias="skinResource")


# Health Check Models
class HealthStatus(BaseModel):
    """Health check status."""

    status: Literal["healthy", "unhealthy", "degraded"] = Field(..., description="Overall status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Check timestamp"
    )
    version: str = Field(..., description="Application version")
    render_engine: bool = Field(..., description="Rendering engine reachability")
    render_engine_url: str = Field(..., description="Rendering engine base URL")


# Error Models
class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(None, description="Error code")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Error timestamp"
    )
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")
