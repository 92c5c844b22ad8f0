"""Tests for semantic style-token mapping."""

from __future__ import annotations

import pytest

from cardgen.render.style_tokens import (
    BORDER_RADIUS_PX,
    border_radius_css,
    border_radius_px,
    font_size_css,
    icon_size_px,
)


# ════════════════════════════════════════════════════════════════════
# Border radius
# ════════════════════════════════════════════════════════════════════


class TestBorderRadius:
    @pytest.mark.parametrize(
        "token, px",
        [("none", 0), ("sm", 4), ("md", 8), ("lg", 12), ("xl", 16), ("full", 9999)],
    )
    def test_table(self, token, px):
        assert border_radius_px(token) == px

    def test_absent_is_md(self):
        assert border_radius_px(None) == 8

    def test_unknown_is_md(self):
        assert border_radius_px("huge") == 8

    def test_css_zero_has_no_unit(self):
        assert border_radius_css("none") == "0"
        assert border_radius_css("lg") == "12px"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            BORDER_RADIUS_PX["sm"] = 2  # type: ignore[index]


# ════════════════════════════════════════════════════════════════════
# Font size
# ════════════════════════════════════════════════════════════════════


class TestFontSize:
    @pytest.mark.parametrize(
        "token, css",
        [
            ("xs", "12px"),
            ("sm", "14px"),
            ("md", "16px"),
            ("lg", "18px"),
            ("xl", "20px"),
            ("2xl", "24px"),
            ("3xl", "32px"),
        ],
    )
    def test_table(self, token, css):
        assert font_size_css(token) == css

    def test_pixel_token_passes_through(self):
        assert font_size_css("15px") == "15px"

    def test_numeric_token_becomes_px(self):
        assert font_size_css("22") == "22px"
        assert font_size_css("22.7") == "22px"

    def test_unknown_non_numeric_is_16(self):
        assert font_size_css("gigantic") == "16px"

    def test_unknown_ignores_caller_default(self):
        assert font_size_css("gigantic", 20) == "16px"

    def test_absent_uses_caller_default(self):
        assert font_size_css(None) == "16px"
        assert font_size_css(None, 13) == "13px"
        assert font_size_css("  ", 14) == "14px"


# ════════════════════════════════════════════════════════════════════
# Icon size
# ════════════════════════════════════════════════════════════════════


class TestIconSize:
    @pytest.mark.parametrize("token, px", [("sm", 16), ("md", 20), ("lg", 24), ("xl", 32)])
    def test_table(self, token, px):
        assert icon_size_px(token) == px

    def test_unknown_and_absent_are_20(self):
        assert icon_size_px("2xl") == 20
        assert icon_size_px(None) == 20
