"""
Pytest configuration for pageframe
"""

import io
import logging
import struct
import sys
import zlib
from pathlib import Path

import pytest
from PIL import Image
from reportlab.pdfgen import canvas

from pageframe.models import ElementRect, PageInput, RGB


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


def png_chunk(chunk_type: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(chunk_type + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + chunk_type + payload + struct.pack(">I", crc)


def build_png(width, height, rows, color_type=2, bit_depth=8, interlace=0):
    """Assemble a PNG from already filtered rows (each row starts with its filter byte)."""
    header = struct.pack(">IIBBBBB", width, height, bit_depth, color_type, 0, 0, interlace)
    return (
        b"\x89PNG\r\n\x1a\n"
        + png_chunk(b"IHDR", header)
        + png_chunk(b"IDAT", zlib.compress(b"".join(rows)))
        + png_chunk(b"IEND", b"")
    )


def pillow_png(color, size=(40, 30), mode="RGB") -> bytes:
    """Encode a solid-color image with Pillow."""
    image = Image.new(mode, size, color)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def make_source_pdf(width_px: float, height_px: float) -> bytes:
    """Single-page PDF sized like a browser print of a width x height CSS px document."""
    width_pt = width_px * 72 / 96
    height_pt = height_px * 72 / 96
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=(width_pt, height_pt))
    pdf.setFillColorRGB(0.2, 0.4, 0.8)
    pdf.rect(10, 10, width_pt - 20, height_pt - 20, fill=1, stroke=0)
    pdf.setFillColorRGB(1, 1, 1)
    pdf.setFont("Helvetica", 14)
    pdf.drawString(20, height_pt - 40, "Captured element")
    pdf.showPage()
    pdf.save()
    return buffer.getvalue()


@pytest.fixture
def source_pdf():
    """Print rendering of an 800 x 600 px document."""
    return make_source_pdf(800, 600)


@pytest.fixture
def element_rect():
    """A 400 x 300 px element inside an 800 x 600 px document."""
    return ElementRect(
        left=100,
        top=50,
        right=500,
        bottom=350,
        width=400,
        height=300,
        full_width=800,
        full_height=600,
        background_color="rgb(250, 250, 250)",
    )


@pytest.fixture
def page_input_factory(source_pdf, element_rect):
    """Build PageInput records sharing the same source rendering."""

    def factory(url="https://example.com/docs", color=RGB(20, 60, 140), **kwargs):
        return PageInput(
            raw_pdf=kwargs.pop("raw_pdf", source_pdf),
            rect=kwargs.pop("rect", element_rect),
            dominant_color=color,
            url=url,
            **kwargs,
        )

    return factory


class FakeCapturePage:
    """In-memory stand-in for a browser page, scripted by its FakeBrowser."""

    def __init__(self, browser):
        self.browser = browser
        self.closed = False

    def open(self, url, wait, selector):
        self.browser.calls.append(("open", url, tuple(wait), selector))
        failure = self.browser.next_failure()
        if failure is not None:
            raise failure

    def remove_elements(self, selectors):
        self.browser.calls.append(("remove", tuple(selectors)))
        return len(selectors)

    def isolate_element(self, selector):
        self.browser.calls.append(("isolate", selector))
        return self.browser.rect

    def screenshot(self, selector):
        return self.browser.screenshot_png

    def fix_gradients(self):
        self.browser.calls.append(("fix_gradients",))
        return 0

    def print_pdf(self, rect):
        return self.browser.raw_pdf

    def close(self):
        self.closed = True
        self.browser.closed_pages += 1
        if self.browser.fail_on_page_close:
            raise RuntimeError("page already closed")


class FakeBrowser:
    """BrowserSession double: fails ``failures`` times, then captures ``rect``."""

    def __init__(self, raw_pdf, rect, failures=(), screenshot_png=None):
        self.raw_pdf = raw_pdf
        self.rect = rect
        self.failures = list(failures)
        self.screenshot_png = screenshot_png or pillow_png((220, 40, 40))
        self.calls = []
        self.pages = []
        self.closed_pages = 0
        self.closed = False
        self.fail_on_page_close = False
        self.fail_on_close = False

    def next_failure(self):
        return self.failures.pop(0) if self.failures else None

    def new_page(self):
        page = FakeCapturePage(self)
        self.pages.append(page)
        return page

    def close(self):
        self.closed = True
        if self.fail_on_close:
            raise RuntimeError("browser connection lost")


@pytest.fixture
def fake_browser(source_pdf, element_rect):
    return FakeBrowser(source_pdf, element_rect)


@pytest.fixture
def png_builder():
    """Factory assembling PNG bytes from filtered rows."""
    return build_png


@pytest.fixture
def solid_png():
    """Factory encoding a solid-color image with Pillow."""
    return pillow_png


@pytest.fixture
def source_pdf_factory():
    """Factory for print renderings of a given CSS pixel size."""
    return make_source_pdf


@pytest.fixture
def browser_factory(source_pdf, element_rect):
    """Factory for FakeBrowser instances with scripted failures."""

    def factory(failures=(), rect=element_rect, screenshot_png=None):
        return FakeBrowser(source_pdf, rect, failures=failures, screenshot_png=screenshot_png)

    return factory
