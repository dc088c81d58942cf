"""Tests for page layout computation."""

import pytest

from pageframe.engine.layout_engine import compute_layout
from pageframe.engine.text_metrics import FontMetrics
from pageframe.models import ElementRect, Spacing


@pytest.fixture
def courier():
    return FontMetrics("Courier")


def make_rect(width, height):
    return ElementRect(0, 0, width, height, width, height, width, height)


@pytest.mark.unit
class TestComputeLayout:

    def test_default_spacing(self, courier):
        layout = compute_layout(make_rect(400, 300), "https://example.com", courier)

        assert layout.content_width == pytest.approx(300)
        assert layout.content_height == pytest.approx(225)
        assert layout.padded_width == pytest.approx(340)
        assert layout.page_width == pytest.approx(372)
        assert layout.url_lines == ("https://example.", "com")
        assert layout.bottom_margin == pytest.approx(48)
        assert layout.page_height == pytest.approx(329)
        assert layout.text_x == pytest.approx(26)
        assert layout.available_text_width == pytest.approx(320)

    def test_url_path_breaks_after_last_slash(self, courier):
        layout = compute_layout(make_rect(400, 300), "https://example.com/docs", courier)

        assert layout.url_lines == ("https://example.com/", "docs")
        assert layout.bottom_margin == pytest.approx(48)
        assert layout.page_height == pytest.approx(225 + 40 + 16 + 48)

    def test_long_url_grows_bottom_margin(self, courier):
        url = "https://example.com/" + "segment/" * 20
        layout = compute_layout(make_rect(400, 300), url, courier)

        assert len(layout.url_lines) >= 4
        assert "".join(layout.url_lines) == url
        assert layout.bottom_margin == pytest.approx(20 + 14 * len(layout.url_lines))
        assert layout.bottom_margin == pytest.approx(layout.footer_height)

    def test_large_bottom_margin_is_kept(self, courier):
        margin = Spacing(10, 10, 100, 10)
        layout = compute_layout(make_rect(400, 300), "https://example.com", courier, margin=margin)

        assert layout.bottom_margin == 100
        assert layout.page_height == pytest.approx(225 + 40 + 10 + 100)

    def test_padding_override(self, courier):
        layout = compute_layout(
            make_rect(400, 300), "https://example.com", courier, padding=Spacing.uniform(0)
        )

        assert layout.padded_width == pytest.approx(300)
        assert layout.content_x == layout.margin.left
        assert layout.content_y == layout.bottom_margin

    @pytest.mark.parametrize("margin,padding", [
        (None, None),
        (Spacing(0, 0, 0, 0), Spacing(0, 0, 0, 0)),
        (Spacing(30, 5, 2, 40), Spacing(1, 2, 3, 4)),
        (Spacing(16, 16, 300, 16), None),
    ])
    @pytest.mark.parametrize("size", [(1, 1), (120, 80), (1920, 4000)])
    def test_invariants(self, courier, margin, padding, size):
        layout = compute_layout(
            make_rect(*size), "https://example.com/a/b/c?x=%20y", courier, margin=margin, padding=padding
        )

        assert layout.bottom_margin >= layout.margin.bottom
        assert layout.page_width == pytest.approx(layout.padded_width + layout.margin.left + layout.margin.right)
        assert layout.page_height == pytest.approx(layout.padded_height + layout.margin.top + layout.bottom_margin)
        assert "".join(layout.url_lines) == "https://example.com/a/b/c?x=%20y"
