"""
High-level API.

``build_pdf`` composes already captured pages; ``render_request`` runs a
whole request: capture every item, compose, store, return the URL.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .capture.browser import BrowserSession
from .capture.orchestrator import CaptureOrchestrator
from .capture.storage import Storage, document_file_name, storage_key
from .config import CaptureSettings, ComposerOptions
from .engine.pdfcompiler import compose_document
from .models.page_input import PageInput
from .models.request import CaptureRequest

logger = logging.getLogger(__name__)


def build_pdf(
    pages: Iterable[PageInput],
    options: Optional[ComposerOptions] = None,
    title: Optional[str] = None,
) -> bytes:
    """Compose capture records into one PDF document.

    Args:
        pages: Capture records, one page each, in output order
        options: Composer options (defaults to ComposerOptions())
        title: Optional document title

    Returns:
        PDF bytes
    """
    return compose_document(pages, options=options, title=title)


def capture_request(
    request: CaptureRequest,
    browser: BrowserSession,
    settings: Optional[CaptureSettings] = None,
    options: Optional[ComposerOptions] = None,
) -> bytes:
    """Capture every item of ``request`` and compose the document.

    The browser session is always closed; a failure while closing is
    logged and never replaces the original error.
    """
    try:
        orchestrator = CaptureOrchestrator(browser, settings)
        pages = orchestrator.capture_all(request.resolved_items())
    finally:
        try:
            browser.close()
        except Exception as exc:
            logger.warning("Failed to close browser: %s", exc)
    return build_pdf(pages, options=options, title=request.name)


def render_request(
    request: CaptureRequest,
    browser: BrowserSession,
    storage: Storage,
    settings: Optional[CaptureSettings] = None,
    options: Optional[ComposerOptions] = None,
) -> str:
    """Capture, compose and store ``request``; return the stored document's URL."""
    pdf_bytes = capture_request(request, browser, settings=settings, options=options)
    file_name = document_file_name(request.items[0].url, request.name)
    url = storage.put(storage_key(file_name), pdf_bytes)
    logger.info("Document for %d item(s) available at %s", len(request.items), url)
    return url
