"""
Browser automation for element capture.

``BrowserSession`` and ``CapturePage`` describe what the orchestrator
needs from a browser. ``PlaywrightBrowser`` implements them on top of
Playwright's sync Chromium API; every page lives in its own browser
context so cookies and storage never leak between captured URLs.
"""

from __future__ import annotations

import io
import logging
import math
from typing import List, Optional, Protocol, Sequence, Tuple

from PIL import Image
from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from ..config import CaptureSettings
from ..models.geometry import ElementRect
from ..utils.color_utils import fix_gradient_transparency
from .scripts import (
    APPLY_GRADIENTS_JS,
    COLLECT_GRADIENTS_JS,
    GRADIENT_MARKER,
    ISOLATE_ELEMENT_JS,
    REMOVE_ELEMENTS_JS,
)

logger = logging.getLogger(__name__)


class CapturePage(Protocol):
    """One browsing context used to capture one URL."""

    def open(self, url: str, wait: Sequence[str], selector: str) -> None:
        """Navigate to ``url`` and wait for ``wait`` selectors, then ``selector``."""

    def remove_elements(self, selectors: Sequence[str]) -> int:
        """Remove elements matching ``selectors``; return how many were removed."""

    def isolate_element(self, selector: str) -> Optional[ElementRect]:
        """Hide everything but ``selector``; ``None`` when nothing matches."""

    def screenshot(self, selector: str) -> bytes:
        """Small PNG screenshot of the isolated element."""

    def fix_gradients(self) -> int:
        """Rewrite transparent-black gradient stops; return how many elements changed."""

    def print_pdf(self, rect: ElementRect) -> bytes:
        """Single-page print rendering of the whole document."""

    def close(self) -> None:
        ...


class BrowserSession(Protocol):
    """A browser connection that hands out capture pages."""

    def new_page(self) -> CapturePage:
        ...

    def close(self) -> None:
        ...


def downscale_png(png_bytes: bytes, scale: float) -> bytes:
    """Shrink a PNG by ``scale`` and re-encode it as 8-bit RGBA.

    Args:
        png_bytes: PNG data as produced by the browser
        scale: Factor in (0, 1]

    Returns:
        PNG bytes
    """
    with Image.open(io.BytesIO(png_bytes)) as image:
        image = image.convert("RGBA")
        if scale < 1.0:
            size = (
                max(1, round(image.width * scale)),
                max(1, round(image.height * scale)),
            )
            image = image.resize(size, Image.Resampling.BILINEAR)
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
    return buffer.getvalue()


class PlaywrightCapturePage:
    """CapturePage backed by a Playwright context and page."""

    def __init__(self, context: BrowserContext, settings: CaptureSettings):
        self.context = context
        self.settings = settings
        try:
            self.page: Page = context.new_page()
            self.page.set_default_timeout(settings.selector_timeout_ms)
        except Exception:
            # Nothing else holds the context yet
            try:
                context.close()
            except Exception as exc:
                logger.warning("Failed to close browser context: %s", exc)
            raise

    def open(self, url: str, wait: Sequence[str], selector: str) -> None:
        self.page.emulate_media(media="screen")
        logger.debug("Navigating to %s", url)
        self.page.goto(url, wait_until="networkidle", timeout=self.settings.navigation_timeout_ms)
        for wait_selector in wait:
            self.page.wait_for_selector(wait_selector, timeout=self.settings.selector_timeout_ms)
        self.page.wait_for_selector(selector, timeout=self.settings.selector_timeout_ms)

    def remove_elements(self, selectors: Sequence[str]) -> int:
        if not selectors:
            return 0
        removed = self.page.evaluate(REMOVE_ELEMENTS_JS, list(selectors))
        logger.debug("Removed %s element(s) for %d selector(s)", removed, len(selectors))
        return int(removed or 0)

    def isolate_element(self, selector: str) -> Optional[ElementRect]:
        data = self.page.evaluate(ISOLATE_ELEMENT_JS, selector)
        if data is None:
            return None
        return ElementRect.from_dict(data)

    def screenshot(self, selector: str) -> bytes:
        png = self.page.locator(selector).first.screenshot(type="png")
        return downscale_png(png, self.settings.screenshot_scale)

    def fix_gradients(self) -> int:
        collected: List[Tuple[str, str]] = self.page.evaluate(COLLECT_GRADIENTS_JS, GRADIENT_MARKER)
        updates = []
        for element_id, background in collected:
            fixed = fix_gradient_transparency(background)
            if fixed != background:
                updates.append([element_id, fixed])
        if not updates:
            return 0
        applied = self.page.evaluate(APPLY_GRADIENTS_JS, [GRADIENT_MARKER, updates])
        logger.debug("Patched %s gradient background(s)", applied)
        return int(applied or 0)

    def print_pdf(self, rect: ElementRect) -> bytes:
        return self.page.pdf(
            width=f"{math.ceil(rect.full_width)}px",
            height=f"{math.ceil(rect.full_height)}px",
            print_background=True,
        )

    def close(self) -> None:
        self.context.close()


class PlaywrightBrowser:
    """BrowserSession running a local Chromium through Playwright."""

    def __init__(self, settings: Optional[CaptureSettings] = None):
        self.settings = settings or CaptureSettings()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    def start(self) -> "PlaywrightBrowser":
        if self._browser is None:
            self._playwright = sync_playwright().start()
            self._browser = self._playwright.chromium.launch(headless=self.settings.headless)
            logger.info("Chromium started (headless=%s)", self.settings.headless)
        return self

    def new_page(self) -> PlaywrightCapturePage:
        self.start()
        context = self._browser.new_context(
            viewport={"width": self.settings.viewport_width, "height": self.settings.viewport_height},
            device_scale_factor=1,
            is_mobile=False,
            has_touch=True,
            user_agent=self.settings.user_agent,
        )
        return PlaywrightCapturePage(context, self.settings)

    def close(self) -> None:
        try:
            if self._browser is not None:
                self._browser.close()
        finally:
            if self._playwright is not None:
                self._playwright.stop()
            self._browser = None
            self._playwright = None

    def __enter__(self) -> "PlaywrightBrowser":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
