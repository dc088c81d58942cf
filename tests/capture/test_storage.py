"""Tests for file naming and local storage."""

import re
from pathlib import Path
from urllib.parse import urlsplit
from urllib.request import url2pathname

import pytest

from pageframe.capture.storage import (
    LocalStorage,
    build_file_name,
    document_file_name,
    slugify,
    storage_key,
)
from pageframe.exceptions import StorageError


@pytest.mark.unit
class TestFileNames:

    @pytest.mark.parametrize("url,expected", [
        ("https://www.example.com/docs/getting-started?x=1#top", "www_example_com_docs_getting-started.pdf"),
        ("https://example.com/", "example_com.pdf"),
        ("https://example.com", "example_com.pdf"),
        ("https://Example.COM/a//b.html", "example_com_a_b_html.pdf"),
    ])
    def test_build_file_name(self, url, expected):
        assert build_file_name(url) == expected

    def test_slugify(self):
        assert slugify("__a..b__ c") == "a_b_c"

    def test_document_name_wins(self):
        assert document_file_name("https://example.com", "Quarterly Report!") == "Quarterly_Report.pdf"

    def test_unusable_document_name_falls_back_to_url(self):
        assert document_file_name("https://example.com/x", "!!!") == "example_com_x.pdf"

    def test_storage_key_is_unique(self):
        first = storage_key("file.pdf")

        assert re.fullmatch(r"[0-9a-f]{32}-file\.pdf", first)
        assert first != storage_key("file.pdf")


@pytest.mark.unit
class TestLocalStorage:

    def test_put_returns_file_uri(self, temp_dir):
        url = LocalStorage(temp_dir / "out").put("abc-file.pdf", b"%PDF-1.7")

        assert url.startswith("file://")
        path = Path(url2pathname(urlsplit(url).path))
        assert path.name == "abc-file.pdf"
        assert path.read_bytes() == b"%PDF-1.7"

    def test_put_into_unusable_root(self, temp_dir):
        blocker = temp_dir / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(StorageError):
            LocalStorage(blocker).put("file.pdf", b"data")
