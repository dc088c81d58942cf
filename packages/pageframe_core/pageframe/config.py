"""
Configuration for composition and capture.

Both option sets are plain dataclasses with working defaults. ``from_env``
overlays ``PAGEFRAME_*`` environment variables on top of those defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from .exceptions import RequestValidationError
from .utils.dates import DEFAULT_TIMEZONE
from .version import __version__

logger = logging.getLogger(__name__)

ENV_PREFIX = "PAGEFRAME_"

DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _coerce(raw: str, current: Any, name: str) -> Any:
    if isinstance(current, bool):
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise RequestValidationError(f"{ENV_PREFIX}{name.upper()} must be a boolean", details=raw)
    try:
        if isinstance(current, int):
            return int(raw)
        if isinstance(current, float):
            return float(raw)
    except ValueError as exc:
        raise RequestValidationError(f"{ENV_PREFIX}{name.upper()} has an invalid value", details=raw) from exc
    return raw


def _overlay_env(options, environ: Optional[Mapping[str, str]]):
    environ = os.environ if environ is None else environ
    changes = {}
    for f in fields(options):
        key = f"{ENV_PREFIX}{f.name.upper()}"
        if key in environ:
            changes[f.name] = _coerce(environ[key], getattr(options, f.name), f.name)
            logger.debug("Config %s overridden from environment", key)
    return replace(options, **changes) if changes else options


@dataclass(frozen=True)
class ComposerOptions:
    """Texts, fonts and styling used when composing pages.

    Attributes:
        hint_text: Left-aligned text in the top banner
        label_text: Footer label in front of the external-link glyph
        timestamp_prefix: Text in front of the capture timestamp
        timezone: IANA timezone used for the capture timestamp
        secondary_opacity: Opacity of banner texts, label and glyph
        regular_font: Standard font for banner and label texts
        mono_font: Standard monospaced font for URL lines
        producer: Value written to the document /Producer entry
    """

    hint_text: str = "Open the link at the bottom of this page"
    label_text: str = "Click to open in a new tab"
    timestamp_prefix: str = "Captured on"
    timezone: str = DEFAULT_TIMEZONE
    secondary_opacity: float = 0.55
    regular_font: str = "Helvetica"
    mono_font: str = "Courier"
    producer: str = f"pageframe {__version__}"

    def __post_init__(self):
        if not 0.0 <= self.secondary_opacity <= 1.0:
            raise RequestValidationError("secondary_opacity must be between 0 and 1")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ComposerOptions":
        return _overlay_env(cls(), environ)


@dataclass(frozen=True)
class CaptureSettings:
    """Browser and retry settings for the capture stage."""

    viewport_width: int = 1920
    viewport_height: int = 1080
    user_agent: str = DESKTOP_USER_AGENT
    navigation_timeout_ms: int = 60000
    selector_timeout_ms: int = 60000
    max_attempts: int = 3
    screenshot_scale: float = 0.1
    headless: bool = True

    def __post_init__(self):
        if self.max_attempts < 1:
            raise RequestValidationError("max_attempts must be at least 1")
        if not 0.0 < self.screenshot_scale <= 1.0:
            raise RequestValidationError("screenshot_scale must be in (0, 1]")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CaptureSettings":
        return _overlay_env(cls(), environ)
