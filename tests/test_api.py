"""Tests for the high-level API."""

import io
from urllib.parse import urlsplit
from urllib.request import url2pathname
from pathlib import Path

import pytest
from pypdf import PdfReader

from pageframe.api import build_pdf, capture_request, render_request
from pageframe.capture.storage import LocalStorage
from pageframe.exceptions import CaptureFailedError, ElementNotFoundError
from pageframe.models import CaptureRequest

REQUEST = {
    "name": "Docs snapshot",
    "selectors": {"main": "main"},
    "items": [
        {"url": "https://example.com/docs"},
        {"url": "https://example.com/blog", "selectors": {"main": "article"}},
    ],
}


@pytest.mark.integration
class TestRenderRequest:

    def test_render_request_stores_document(self, fake_browser, temp_dir):
        request = CaptureRequest.from_dict(REQUEST)

        url = render_request(request, fake_browser, LocalStorage(temp_dir))

        path = Path(url2pathname(urlsplit(url).path))
        assert path.name.endswith("-Docs_snapshot.pdf")
        reader = PdfReader(io.BytesIO(path.read_bytes()))
        assert len(reader.pages) == 2
        assert reader.metadata.title == "Docs snapshot"
        assert fake_browser.closed
        selectors = [call[3] for call in fake_browser.calls if call[0] == "open"]
        assert selectors == ["main", "article"]

    def test_browser_closed_after_failure(self, browser_factory):
        browser = browser_factory(rect=None)

        with pytest.raises(ElementNotFoundError):
            capture_request(CaptureRequest.from_dict(REQUEST), browser)

        assert browser.closed

    def test_close_failure_does_not_mask_error(self, browser_factory):
        browser = browser_factory(failures=[RuntimeError("down")] * 3)
        browser.fail_on_close = True

        with pytest.raises(CaptureFailedError):
            capture_request(CaptureRequest.from_dict(REQUEST), browser)

    def test_close_failure_after_success_is_ignored(self, fake_browser):
        fake_browser.fail_on_close = True

        data = capture_request(CaptureRequest.from_dict(REQUEST), fake_browser)

        assert data.startswith(b"%PDF")


@pytest.mark.integration
def test_build_pdf(page_input_factory):
    data = build_pdf([page_input_factory()], title="Single")

    assert len(PdfReader(io.BytesIO(data)).pages) == 1
