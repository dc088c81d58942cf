"""Greedy width-based line breaking, with a URL-aware variant."""

from __future__ import annotations

import logging
import re
from typing import Callable, List

logger = logging.getLogger(__name__)

MeasureFn = Callable[[str], float]

# Break after a URL separator, or after a run of %XX escapes that ends at a
# separator or at the end of the candidate. Never inside an escape.
URL_BREAK_RE = re.compile(r"[/?&#\-_.]|(?:%[0-9A-Fa-f]{2})+(?=[/?&#\-_.]|$)")


def _fit_end(text: str, start: int, max_width: float, measure: MeasureFn) -> int:
    """Largest end index such that ``text[start:end]`` fits in ``max_width``."""
    end = start + 1
    while end <= len(text) and measure(text[start:end]) <= max_width:
        end += 1
    return end - 1


def _last_url_break(segment: str) -> int:
    best = -1
    for match in URL_BREAK_RE.finditer(segment):
        best = match.end()
    return best


def wrap_text(text: str, max_width: float, measure: MeasureFn, url_mode: bool = False) -> List[str]:
    """Wrap ``text`` into lines no wider than ``max_width``.

    The lines always concatenate back to ``text``. A single character
    wider than ``max_width`` is emitted on its own line so wrapping always
    makes progress.

    Args:
        text: The string to wrap
        max_width: Maximum line width in points
        measure: Returns the rendered width of a string in points
        url_mode: Prefer breaking after URL separators and %XX escapes

    Returns:
        List of lines
    """
    lines: List[str] = []
    start = 0
    length = len(text)

    while start < length:
        line_end = _fit_end(text, start, max_width, measure)

        if line_end <= start:
            lines.append(text[start])
            start += 1
            continue

        if not url_mode:
            lines.append(text[start:line_end])
            start = line_end
            continue

        segment = text[start:line_end]
        cut = _last_url_break(segment)
        if cut <= 0:
            cut = len(segment)
        lines.append(segment[:cut])
        start += cut

    if len(lines) > 1:
        logger.debug("Wrapped %d characters into %d lines at %.1fpt", length, len(lines), max_width)
    return lines
