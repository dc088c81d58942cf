"""Tests for text metrics and geometry helpers."""

import pytest

from pageframe.engine.geometry import (
    EXTERNAL_LINK_ICON,
    external_link_icon_lines,
    px_to_pt,
    rounded_rect_path,
)
from pageframe.engine.text_metrics import FontMetrics, winansi_safe


@pytest.mark.unit
class TestFontMetrics:

    def test_courier_is_monospaced(self):
        metrics = FontMetrics("Courier")

        assert metrics.width("abc", 12) == pytest.approx(21.6)
        assert metrics.width("WWW", 12) == pytest.approx(21.6)

    def test_empty_text_has_no_width(self):
        assert FontMetrics("Helvetica").width("", 9) == 0.0

    def test_non_standard_font_is_rejected(self):
        with pytest.raises(ValueError):
            FontMetrics("Comic Sans")

    def test_winansi_safe_replaces_unsupported_characters(self):
        assert winansi_safe("café →") == "café ?"


@pytest.mark.unit
class TestGeometry:

    def test_px_to_pt(self):
        assert px_to_pt(96) == pytest.approx(72)

    def test_rounded_rect_path(self):
        path = rounded_rect_path(10, 20, 100, 50, 12)

        assert [segment.op for segment in path] == ["m", "l", "c", "l", "c", "l", "c", "l", "c", "h"]
        assert path[0].points == (22, 20)
        assert path[2].points[-2:] == (110, 32)

    def test_radius_is_clamped_to_half_the_shorter_side(self):
        path = rounded_rect_path(0, 0, 10, 4, 12)

        assert path[0].points == (2, 0)

    def test_icon_lines_fit_requested_box(self):
        lines = external_link_icon_lines(100, 50, 8)

        assert len(lines) == len(EXTERNAL_LINK_ICON)
        for x1, y1, x2, y2 in lines:
            for x in (x1, x2):
                assert 100 <= x <= 108
            for y in (y1, y2):
                assert 50 <= y <= 58
