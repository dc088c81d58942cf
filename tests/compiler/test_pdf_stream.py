"""Tests for content stream building and PDF string encoding."""

import pytest

from pageframe.engine.geometry import PathSegment
from pageframe.engine.pdfcompiler.objects import PdfStream
from pageframe.engine.pdfcompiler.utils import encode_text_literal, escape_js_string, format_pdf_number


@pytest.mark.unit
class TestUtils:

    @pytest.mark.parametrize("value,expected", [(1.5, "1.5"), (2.0, "2"), (0.1234, "0.123"), (-0.0001, "0"), (0, "0")])
    def test_format_pdf_number(self, value, expected):
        assert format_pdf_number(value) == expected

    def test_encode_text_literal_escapes_delimiters(self):
        assert encode_text_literal("a(b)c\\") == "a\\(b\\)c\\\\"

    def test_encode_text_literal_uses_octal_for_non_ascii(self):
        assert encode_text_literal("ü") == "\\374"

    def test_encode_text_literal_replaces_unencodable(self):
        assert encode_text_literal("a→b") == "a?b"

    def test_escape_js_string(self):
        assert escape_js_string("it's a \\ test") == "it\\'s a \\\\ test"


@pytest.mark.unit
class TestPdfStream:

    def test_filled_rect(self):
        stream = PdfStream()
        stream.add_rect(0, 0, 10.5, 20, fill_color=(1.0, 0.5, 0.0))

        assert stream.get_content() == "q\n1 0.5 0 rg\n0 0 10.5 20 re\nf\nQ"

    def test_path(self):
        stream = PdfStream()
        stream.add_path([PathSegment("m", (0, 0)), PathSegment("l", (5, 0)), PathSegment("h")], (0, 0, 0))

        assert "0 0 m\n5 0 l\nh\nf" in stream.get_content()

    def test_text(self):
        stream = PdfStream()
        stream.add_text("/F1", 9, 26, 20, "Hello (world)")

        assert stream.commands == ["q", "BT", "/F1 9 Tf", "26 20 Td", "(Hello \\(world\\)) Tj", "ET", "Q"]

    def test_xobject(self):
        stream = PdfStream()
        stream.add_xobject("/Src", -49, -147.5)

        assert "1 0 0 1 -49 -147.5 cm\n/Src Do" in stream.get_content()

    def test_get_bytes_is_ascii(self):
        stream = PdfStream()
        stream.add_text("/F1", 9, 0, 0, "Öffnen")

        assert stream.get_bytes().endswith(b"Tj\nET\nQ\n")
