"""Capture request shape and per-item override resolution."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import urlsplit

from ..exceptions import RequestValidationError
from .geometry import Spacing

DEFAULT_MAIN_SELECTOR = "body"


def _string_list(value: Any, field_name: str) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise RequestValidationError(f"{field_name} must be a list of selectors", field_name=field_name)
    selectors = []
    for item in value:
        if not isinstance(item, str):
            raise RequestValidationError(f"{field_name} must contain only strings", field_name=field_name)
        item = item.strip()
        if item:
            selectors.append(item)
    return tuple(selectors)


def _validate_url(url: Any) -> str:
    if not isinstance(url, str) or not url.strip():
        raise RequestValidationError("Invalid URL", field_name="url", details=repr(url))
    url = url.strip()
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise RequestValidationError("Invalid URL", field_name="url", details=url)
    return url


@dataclass(frozen=True, slots=True)
class SelectorSettings:
    """Selector overrides; ``None`` fields inherit from the enclosing level."""

    main: Optional[str] = None
    wait: Optional[Tuple[str, ...]] = None
    remove: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SelectorSettings":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise RequestValidationError("selectors must be an object", field_name="selectors")
        main = data.get("main")
        if main is not None:
            if not isinstance(main, str):
                raise RequestValidationError("selectors.main must be a string", field_name="main")
            main = main.strip() or None
        return cls(
            main=main,
            wait=_string_list(data.get("wait"), "wait"),
            remove=_string_list(data.get("remove"), "remove"),
        )


@dataclass(frozen=True, slots=True)
class DocumentSettings:
    """Spacing overrides; ``None`` fields inherit from the enclosing level."""

    margin: Optional[Spacing] = None
    padding: Optional[Spacing] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "DocumentSettings":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise RequestValidationError("document must be an object", field_name="document")
        return cls(
            margin=Spacing.from_dict(data.get("margin")),
            padding=Spacing.from_dict(data.get("padding")),
        )


@dataclass(frozen=True, slots=True)
class CaptureItem:
    url: str
    selectors: SelectorSettings = field(default_factory=SelectorSettings)
    document: DocumentSettings = field(default_factory=DocumentSettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CaptureItem":
        if not isinstance(data, Mapping):
            raise RequestValidationError("Each item must be an object", field_name="items")
        return cls(
            url=_validate_url(data.get("url")),
            selectors=SelectorSettings.from_dict(data.get("selectors")),
            document=DocumentSettings.from_dict(data.get("document")),
        )


@dataclass(frozen=True, slots=True)
class CaptureOptions:
    """Fully resolved settings for capturing one item."""

    selector: str = DEFAULT_MAIN_SELECTOR
    wait: Tuple[str, ...] = ()
    remove: Tuple[str, ...] = ()
    margin: Optional[Spacing] = None
    padding: Optional[Spacing] = None


@dataclass(frozen=True, slots=True)
class CaptureRequest:
    """A batch of URLs to capture into one multi-page document."""

    items: Tuple[CaptureItem, ...]
    name: Optional[str] = None
    selectors: SelectorSettings = field(default_factory=SelectorSettings)
    document: DocumentSettings = field(default_factory=DocumentSettings)

    def __post_init__(self):
        if not self.items:
            raise RequestValidationError("Add at least one URL", field_name="items")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CaptureRequest":
        if not isinstance(data, Mapping):
            raise RequestValidationError("Request must be an object")
        items = data.get("items")
        if not isinstance(items, (list, tuple)) or not items:
            raise RequestValidationError("Add at least one URL", field_name="items")
        name = data.get("name")
        if name is not None and not isinstance(name, str):
            raise RequestValidationError("name must be a string", field_name="name")
        return cls(
            items=tuple(CaptureItem.from_dict(item) for item in items),
            name=(name or "").strip() or None,
            selectors=SelectorSettings.from_dict(data.get("selectors")),
            document=DocumentSettings.from_dict(data.get("document")),
        )

    @classmethod
    def from_json_file(cls, path: str | Path) -> "CaptureRequest":
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise RequestValidationError("Request file is not valid JSON", details=str(exc)) from exc
        return cls.from_dict(data)

    def resolve(self, item: CaptureItem) -> CaptureOptions:
        """Resolve overrides field by field: the item wins over the request."""
        item_sel, global_sel = item.selectors, self.selectors
        item_doc, global_doc = item.document, self.document

        def pick(item_value, global_value):
            return item_value if item_value is not None else global_value

        return CaptureOptions(
            selector=pick(item_sel.main, global_sel.main) or DEFAULT_MAIN_SELECTOR,
            wait=pick(item_sel.wait, global_sel.wait) or (),
            remove=pick(item_sel.remove, global_sel.remove) or (),
            margin=pick(item_doc.margin, global_doc.margin),
            padding=pick(item_doc.padding, global_doc.padding),
        )

    def resolved_items(self) -> List[Tuple[str, CaptureOptions]]:
        return [(item.url, self.resolve(item)) for item in self.items]
