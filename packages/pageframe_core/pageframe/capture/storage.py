"""File naming and storage adapters for composed documents."""

from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path
from typing import Optional, Protocol
from urllib.parse import urlsplit

from ..exceptions import StorageError

logger = logging.getLogger(__name__)

DEFAULT_FILE_STEM = "document"

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]")
_UNDERSCORES_RE = re.compile(r"_+")


def slugify(text: str) -> str:
    """Replace unsafe characters with ``_``, collapse runs and trim the ends."""
    return _UNDERSCORES_RE.sub("_", _UNSAFE_RE.sub("_", text)).strip("_")


def build_file_name(url: str) -> str:
    """File name derived from the URL's host and path, e.g. ``example_com_docs.pdf``."""
    parts = urlsplit(url)
    stem = slugify(f"{parts.hostname or ''}{parts.path}") or DEFAULT_FILE_STEM
    return f"{stem}.pdf"


def document_file_name(first_url: str, name: Optional[str] = None) -> str:
    """File name for a request: its slugified ``name``, else the first URL's name."""
    if name:
        stem = slugify(name)
        if stem:
            return f"{stem}.pdf"
    return build_file_name(first_url)


def storage_key(file_name: str) -> str:
    """Unique object key: a random hex identifier prefixed to ``file_name``."""
    return f"{uuid.uuid4().hex}-{file_name}"


class Storage(Protocol):
    """Object storage that returns a URL for stored bytes."""

    def put(self, key: str, data: bytes) -> str:
        ...


class LocalStorage:
    """Storage writing objects into a local directory; URLs are ``file://`` URIs."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def put(self, key: str, data: bytes) -> str:
        path = self.root / key
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Could not write {path}", str(exc)) from exc
        logger.info("Stored %d bytes at %s", len(data), path)
        return path.resolve().as_uri()
