"""Layout and composition engine."""

from .layout_engine import PageLayout, compute_layout
from .line_breaker import wrap_text
from .text_metrics import FontMetrics

__all__ = [
    "PageLayout",
    "compute_layout",
    "wrap_text",
    "FontMetrics",
]
