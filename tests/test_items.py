"""Tests for the flat Metadata mapping."""

from __future__ import annotations

import pytest

from metagen.items import Metadata


def test_mapping_interface():
    meta = Metadata({"title": "T", "date": "2023-05-20"})
    assert meta["title"] == "T"
    assert list(meta) == ["title", "date"]
    assert len(meta) == 2
    assert "date" in meta
    assert meta.get("missing") is None
    with pytest.raises(KeyError):
        meta["missing"]


def test_insert_returns_previous():
    meta = Metadata()
    assert meta.insert("title", "A") is None
    assert meta.insert("title", "B") == "A"
    assert meta["title"] == "B"


def test_copy_is_independent():
    meta = Metadata({"a": "1"})
    clone = meta.copy()
    clone.insert("b", "2")
    assert "b" not in meta


def test_equality_with_dict():
    assert Metadata({"a": "1"}) == {"a": "1"}
    assert Metadata({"a": "1"}) == Metadata({"a": "1"})
    assert Metadata({"a": "1"}) != {"a": "2"}


def test_to_dict_is_plain_copy():
    meta = Metadata({"a": "1"})
    data = meta.to_dict()
    data["a"] = "changed"
    assert meta["a"] == "1"
    assert type(data) is dict


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Metadata())
