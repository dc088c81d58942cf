"""
Capture orchestration: one capture record per requested URL.

Items are captured sequentially on a shared browser session. Each attempt
runs in a fresh page that is always closed. Failures are retried up to
``CaptureSettings.max_attempts`` times without backoff, except
``ElementNotFoundError``, which aborts immediately.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from ..config import CaptureSettings
from ..exceptions import CaptureFailedError, ElementNotFoundError
from ..media.color_extractor import extract_vibrant_color
from ..models.page_input import PageInput
from ..models.request import CaptureOptions
from .browser import BrowserSession

logger = logging.getLogger(__name__)


class CaptureOrchestrator:
    """Drive a browser session to turn URLs into PageInput records."""

    def __init__(self, browser: BrowserSession, settings: Optional[CaptureSettings] = None):
        self.browser = browser
        self.settings = settings or CaptureSettings()

    def capture(self, url: str, options: CaptureOptions) -> PageInput:
        """Capture ``url`` once.

        Raises:
            ElementNotFoundError: If ``options.selector`` matches nothing
        """
        page = self.browser.new_page()
        try:
            page.open(url, options.wait, options.selector)
            page.remove_elements(options.remove)

            rect = page.isolate_element(options.selector)
            if rect is None:
                raise ElementNotFoundError(options.selector, url)

            dominant_color = extract_vibrant_color(page.screenshot(options.selector))
            page.fix_gradients()
            raw_pdf = page.print_pdf(rect)

            return PageInput(
                raw_pdf=raw_pdf,
                rect=rect,
                dominant_color=dominant_color,
                url=url,
                margin=options.margin,
                padding=options.padding,
            )
        finally:
            try:
                page.close()
            except Exception as exc:
                logger.warning("Failed to close page for %s: %s", url, exc)

    def capture_with_retry(self, url: str, options: CaptureOptions) -> PageInput:
        """Capture ``url``, retrying transient failures.

        Raises:
            ElementNotFoundError: On the first attempt that finds no element
            CaptureFailedError: When every attempt failed
        """
        max_attempts = self.settings.max_attempts
        last_error: Optional[str] = None
        for attempt in range(1, max_attempts + 1):
            logger.info("Capturing %s (attempt %d/%d)", url, attempt, max_attempts)
            try:
                return self.capture(url, options)
            except ElementNotFoundError:
                raise
            except Exception as exc:
                last_error = str(exc) or exc.__class__.__name__
                logger.warning("Attempt %d/%d for %s failed: %s", attempt, max_attempts, url, last_error)
        raise CaptureFailedError(url, max_attempts, last_error)

    def capture_all(self, items: Iterable[Tuple[str, CaptureOptions]]) -> List[PageInput]:
        """Capture every item in order; the first fatal error aborts the batch."""
        return [self.capture_with_retry(url, options) for url, options in items]
