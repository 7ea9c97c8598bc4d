"""
Render Request Validator
========================

Turns raw render query parameters into RenderOptions for the rendering
engine, or a ValidationFailure describing why the query is unusable.

Rules:
- bodyColor and feetColor must be given together. The engine's color
  override for 0.6 skins is all-or-nothing and mis-renders silently when
  only one of the two is present.
- lookingDegree is optional; an unparsable value is ignored.
- size, when present, must be a positive integer.
- skinResource defaults to "default" and is otherwise passed through.
"""

import math
import re
from typing import Optional, Union

from tee_skin_api.core.color.encoder import encode_color
from tee_skin_api.core.color.parser import DECIMAL_NUMBER_PATTERN, parse_color_input
from tee_skin_api.models.schemas import (
    CustomColors,
    DEFAULT_SKIN_RESOURCE,
    RenderOptions,
    RenderSkinQuery,
    ValidationFailure,
)

_POSITIVE_INT_PATTERN = re.compile(r"\s*\+?([0-9]+)\s*")

PAIRED_COLORS_MESSAGE = (
    "For 0.6 skins, both `bodyColor` and `feetColor` must be provided "
    "if custom colors are specified for either."
)
INVALID_SIZE_MESSAGE = "Invalid `size` parameter. Must be a positive number."

ValidationResult = Union[RenderOptions, ValidationFailure]


class RenderRequestValidator:
    """Cross-field validation of render queries. Stateless."""

    def validate(self, query: RenderSkinQuery) -> ValidationResult:
        """
        Validate a render query.

        Args:
            query: Raw query parameters

        Returns:
            RenderOptions when the query is usable, otherwise ValidationFailure
        """
        custom_colors = self._resolve_custom_colors(query)
        if isinstance(custom_colors, ValidationFailure):
            return custom_colors

        size = self._resolve_size(query.size)
        if isinstance(size, ValidationFailure):
            return size

        skin_resource = query.skin_resource
        if skin_resource is None:
            skin_resource = DEFAULT_SKIN_RESOURCE

        return RenderOptions(
            custom_colors=custom_colors,
            view_angle_degrees=self._resolve_view_angle(query.looking_degree),
            output_size_pixels=size,
            skin_resource_name=skin_resource,
        )

    def _resolve_custom_colors(
        self, query: RenderSkinQuery
    ) -> Union[CustomColors, ValidationFailure, None]:
        body = parse_color_input(query.body_color)
        feet = parse_color_input(query.feet_color)

        if body is None and feet is None:
            return None

        if body is None:
            return ValidationFailure(
                field="bodyColor", message=self._pairing_message("bodyColor", query.body_color)
            )
        if feet is None:
            return ValidationFailure(
                field="feetColor", message=self._pairing_message("feetColor", query.feet_color)
            )

        return CustomColors(body_code=encode_color(body), feet_code=encode_color(feet))

    @staticmethod
    def _pairing_message(field: str, raw_value: Optional[str]) -> str:
        if raw_value is None or not raw_value.strip():
            return PAIRED_COLORS_MESSAGE
        return f"`{field}` is not a valid color. {PAIRED_COLORS_MESSAGE}"

    @staticmethod
    def _resolve_view_angle(raw_value: Optional[str]) -> Optional[float]:
        # Unparsable angles fall back to the engine default instead of failing
        if raw_value is None:
            return None
        raw_value = raw_value.strip()
        if not DECIMAL_NUMBER_PATTERN.fullmatch(raw_value):
            return None
        angle = float(raw_value)
        return angle if math.isfinite(angle) else None

    @staticmethod
    def _resolve_size(raw_value: Optional[str]) -> Union[int, ValidationFailure, None]:
        if raw_value is None:
            return None
        match = _POSITIVE_INT_PATTERN.fullmatch(raw_value)
        if match is None or int(match.group(1)) <= 0:
            return ValidationFailure(field="size", message=INVALID_SIZE_MESSAGE)
        return int(match.group(1))


_validator = RenderRequestValidator()


def validate_render_request(query: RenderSkinQuery) -> ValidationResult:
    """
    Validate a render query with the shared validator.

    Args:
        query: Raw query parameters

    Returns:
        RenderOptions or ValidationFailure
    """
    return _validator.validate(query)
