"""Browser capture, orchestration and storage."""

from .browser import BrowserSession, CapturePage, PlaywrightBrowser, downscale_png
from .orchestrator import CaptureOrchestrator
from .storage import LocalStorage, Storage, build_file_name, document_file_name, slugify, storage_key

__all__ = [
    "BrowserSession",
    "CapturePage",
    "PlaywrightBrowser",
    "downscale_png",
    "CaptureOrchestrator",
    "LocalStorage",
    "Storage",
    "build_file_name",
    "document_file_name",
    "slugify",
    "storage_key",
]
