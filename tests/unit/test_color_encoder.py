"""
Unit Tests for TW Color Code Encoder
====================================

Tests for AARRGGBB packing, clamping and rounding.
"""

import pytest

from tee_skin_api.core.color.encoder import encode_color, rgba_to_tw_code
from tee_skin_api.models.schemas import CanonicalColor


class TestEncodeColor:
    """Test packing of canonical colors."""

    def test_opaque_red(self):
        assert encode_color(CanonicalColor(r=255, g=0, b=0, a=1.0)) == 0xFFFF0000

    def test_opaque_green(self):
        assert encode_color(CanonicalColor(r=0, g=255, b=0, a=1.0)) == 0xFF00FF00

    def test_opaque_blue(self):
        assert encode_color(CanonicalColor(r=0, g=0, b=255, a=1.0)) == 0xFF0000FF

    def test_transparent_black_is_zero(self):
        assert encode_color(CanonicalColor(r=0, g=0, b=0, a=0.0)) == 0

    def test_opaque_white_fills_all_bits(self):
        assert encode_color(CanonicalColor(r=255, g=255, b=255, a=1.0)) == 0xFFFFFFFF

    def test_code_is_unsigned(self):
        code = encode_color(CanonicalColor(r=1, g=2, b=3, a=1.0))

        assert code > 0
        assert code == 0xFF010203

    def test_byte_order(self):
        assert rgba_to_tw_code(0x12, 0x34, 0x56, 0x78 / 255) == 0x78123456

    def test_default_alpha_is_opaque(self):
        assert rgba_to_tw_code(255, 0, 0) == 0xFFFF0000


class TestRoundingAndClamping:
    """Channels are rounded half up and clamped to a byte."""

    @pytest.mark.parametrize(
        "channel, expected",
        [(0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (254.49, 254), (254.5, 255)],
    )
    def test_round_half_up(self, channel, expected):
        assert rgba_to_tw_code(channel, 0, 0, 0.0) == expected << 16

    def test_half_alpha(self):
        # 0.5 * 255 = 127.5 rounds up
        assert rgba_to_tw_code(0, 0, 0, 0.5) == 128 << 24

    @pytest.mark.parametrize("channel, expected", [(-10, 0), (300, 255), (255.9, 255)])
    def test_channels_are_clamped(self, channel, expected):
        assert rgba_to_tw_code(0, 0, channel, 0.0) == expected

    def test_alpha_is_clamped(self):
        assert rgba_to_tw_code(0, 0, 0, 2.0) == 0xFF000000
        assert rgba_to_tw_code(0, 0, 0, -1.0) == 0
