"""Tests for the one-call API and async file extraction."""

from __future__ import annotations

import asyncio

import pytest

from metagen.api import (
    async_extract_metadata_from_file,
    extract_and_prepare_metadata,
    extract_keywords,
)
from metagen.errors import DecodeError, ExtractionError, FileReadError, MissingFieldError
from metagen.items import MetaTagGroups


class TestExtractKeywords:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("rust, metadata, testing", ["rust", "metadata", "testing"]),
            ("single", ["single"]),
            ("  padded ,  words  ", ["padded", "words"]),
            ("a,,b", ["a", "", "b"]),
            ("", [""]),
        ],
    )
    def test_split(self, raw, expected):
        assert extract_keywords({"keywords": raw}) == expected

    def test_absent(self):
        assert extract_keywords({"title": "x"}) == []


class TestExtractAndPrepare:
    def test_yaml_post(self, yaml_post):
        metadata, keywords, groups = extract_and_prepare_metadata(yaml_post)
        assert isinstance(metadata, dict)
        assert metadata["title"] == "Complex YAML Test"
        assert "slug" not in metadata
        assert keywords == ["rust", "metadata", "testing"]
        assert groups.og == '<meta name="og:title" content="OG Title">'

    def test_process(self, yaml_post):
        metadata, _, _ = extract_and_prepare_metadata(yaml_post, process=True)
        assert metadata["date"] == "2023-05-20"
        assert metadata["slug"] == "complex-yaml-test"

    def test_process_requires_date(self):
        with pytest.raises(MissingFieldError):
            extract_and_prepare_metadata("---\ntitle: No date\n---\n", process=True)

    def test_toml_post(self, toml_post):
        metadata, _, _ = extract_and_prepare_metadata(toml_post)
        assert metadata["title"]

    def test_no_front_matter(self):
        with pytest.raises(ExtractionError):
            extract_and_prepare_metadata("Plain text without any header.")


class TestAsyncExtractFromFile:
    def test_reads_file(self, tmp_path, yaml_post):
        path = tmp_path / "post.md"
        path.write_text(yaml_post, encoding="utf-8")
        metadata, keywords, _ = asyncio.run(async_extract_metadata_from_file(str(path)))
        assert metadata["title"] == "Complex YAML Test"
        assert keywords == ["rust", "metadata", "testing"]

    def test_process_flag(self, tmp_path):
        path = tmp_path / "post.md"
        path.write_text("---\ntitle: Hello World\ndate: 20/05/2023\n---\n", encoding="utf-8")
        metadata, _, _ = asyncio.run(
            async_extract_metadata_from_file(str(path), process=True),
        )
        assert metadata["date"] == "2023-05-20"
        assert metadata["slug"] == "hello-world"

    @pytest.mark.parametrize("content", ["", "   \n\t\n"])
    def test_blank_file(self, tmp_path, content):
        path = tmp_path / "empty.md"
        path.write_text(content, encoding="utf-8")
        metadata, keywords, groups = asyncio.run(async_extract_metadata_from_file(str(path)))
        assert metadata == {}
        assert keywords == []
        assert groups == MetaTagGroups()

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "nope.md"
        with pytest.raises(FileReadError) as exc_info:
            asyncio.run(async_extract_metadata_from_file(str(missing)))
        assert exc_info.value.path == str(missing)
        assert str(exc_info.value).startswith("I/O error:")

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "binary.md"
        path.write_bytes(b"\xff\xfe\xff")
        with pytest.raises(DecodeError) as exc_info:
            asyncio.run(async_extract_metadata_from_file(str(path)))
        assert str(path) in str(exc_info.value)

    def test_no_front_matter_in_file(self, tmp_path):
        path = tmp_path / "plain.md"
        path.write_text("Just prose.\n", encoding="utf-8")
        with pytest.raises(ExtractionError):
            asyncio.run(async_extract_metadata_from_file(str(path)))
