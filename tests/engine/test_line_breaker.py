"""Tests for greedy and URL-aware line breaking."""

import pytest

from pageframe.engine.line_breaker import wrap_text
from pageframe.engine.text_metrics import FontMetrics


def unit_width(text):
    return float(len(text))


LONG_URL = "https://docs.example.com/guides/getting-started/install_and-configure.html?ref=nav&lang=en#step-2"


@pytest.mark.unit
class TestWrapText:

    def test_empty_text(self):
        assert wrap_text("", 10, unit_width) == []

    def test_text_that_fits_is_one_line(self):
        assert wrap_text("hello", 10, unit_width) == ["hello"]

    def test_generic_mode_breaks_at_width(self):
        assert wrap_text("abcdefghij", 3, unit_width) == ["abc", "def", "ghi", "j"]

    def test_character_wider_than_line_is_emitted_alone(self):
        assert wrap_text("abc", 5, lambda text: len(text) * 10.0) == ["a", "b", "c"]

    def test_url_mode_breaks_after_separator(self):
        lines = wrap_text("https://example.com/path/to/resource", 20, unit_width, url_mode=True)

        assert lines == ["https://example.com/", "path/to/", "resource"]

    def test_url_mode_breaks_final_candidate_after_separator(self):
        lines = wrap_text("https://example.com/docs", 1000, unit_width, url_mode=True)

        assert lines == ["https://example.com/", "docs"]

    def test_url_mode_ignores_escape_run_inside_a_word(self):
        lines = wrap_text("ab/cd%2Fefgh", 9, unit_width, url_mode=True)

        assert lines == ["ab/", "cd%2Fefgh"]

    def test_url_mode_escape_run_at_end_of_text_is_not_split(self):
        assert wrap_text("ab%2F", 10, unit_width, url_mode=True) == ["ab%2F"]

    def test_generic_mode_keeps_fitting_text_whole(self):
        assert wrap_text("https://example.com/docs", 1000, unit_width) == ["https://example.com/docs"]

    def test_url_mode_breaks_after_escape_run_before_separator(self):
        lines = wrap_text("aaaa%2F%2F-bbbbbbbbbb", 12, unit_width, url_mode=True)

        assert lines[0] == "aaaa%2F%2F-"

    def test_url_mode_hard_breaks_without_separator(self):
        lines = wrap_text("abcdefghijkl", 5, unit_width, url_mode=True)

        assert lines == ["abcde", "fghij", "kl"]

    @pytest.mark.parametrize("url_mode", [False, True])
    @pytest.mark.parametrize("width", [1, 2, 5, 13, 29, 64, 500])
    def test_lines_concatenate_to_input(self, url_mode, width):
        lines = wrap_text(LONG_URL, width, unit_width, url_mode=url_mode)

        assert "".join(lines) == LONG_URL
        assert all(len(line) <= width or len(line) == 1 for line in lines)

    def test_measured_with_font_metrics(self):
        measure = FontMetrics("Courier").measurer(12)

        lines = wrap_text(LONG_URL, 150, measure, url_mode=True)

        assert len(lines) > 1
        assert "".join(lines) == LONG_URL
        assert all(measure(line) <= 150 for line in lines)
