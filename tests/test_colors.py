"""Tests for pixelhabits.ui.colors – palette and color helpers."""

from __future__ import annotations

import pytest

from pixelhabits.ui.colors import PixelColors, blend_hex, with_alpha


# ===========================================================================
# PixelColors – constants exist
# ===========================================================================

class TestPixelColors:
    @pytest.mark.parametrize("name", ["BG_TOP", "BG_BOTTOM", "PRIMARY", "PRIMARY_DARK", "AMBER"])
    def test_is_hex(self, name):
        value = getattr(PixelColors, name)
        assert value.startswith("#")
        assert len(value) == 7

    def test_overlay_is_rgba(self):
        assert PixelColors.OVERLAY_BG.startswith("rgba(")


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        assert 126 <= int(result[1:3], 16) <= 128

    def test_clamps_t(self):
        assert blend_hex("#000000", "#FFFFFF", 5.0) == "#FFFFFF"
        assert blend_hex("#000000", "#FFFFFF", -1.0) == "#000000"

    def test_invalid_returns_a(self):
        assert blend_hex("red", "#FFFFFF", 0.5) == "red"
        assert blend_hex("#GGGGGG", "#FFFFFF", 0.5) == "#GGGGGG"


# ===========================================================================
# with_alpha
# ===========================================================================

class TestWithAlpha:
    def test_converts(self):
        assert with_alpha("#4CAF50", 0.3) == "rgba(76, 175, 80, 0.30)"

    def test_non_hex_unchanged(self):
        assert with_alpha("transparent", 0.5) == "transparent"

    def test_alpha_clamped(self):
        assert with_alpha("#000000", 2) == "rgba(0, 0, 0, 1.00)"
