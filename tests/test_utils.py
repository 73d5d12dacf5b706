"""
tests/test_utils.py
"""

from __future__ import annotations

import pytest

from models import normalize_hex_color
from utils import IdAllocator, ensure_extension, sort_keys


@pytest.mark.parametrize("raw,expected", [
    ("#ff0000", "#FF0000"),
    ("0000ff", "#0000FF"),
    ("#A1b2C3", "#A1B2C3"),
])
def test_normalize_hex_color(raw, expected):
    assert normalize_hex_color(raw) == expected


@pytest.mark.parametrize("raw", ["red", "#fff", "#12345G", "", "#1234567"])
def test_normalize_hex_color_rejects(raw):
    with pytest.raises(ValueError):
        normalize_hex_color(raw)


def test_id_allocator_skips_reserved():
    ids = IdAllocator("text-")
    ids.reserve(["text-1", "text-3"])
    assert [ids.next(), ids.next(), ids.next()] == ["text-2", "text-4", "text-5"]


def test_sort_keys_appends_unknown():
    assert list(sort_keys({"z": 1, "b": 2, "a": 3}, ["a", "b"])) == ["a", "b", "z"]


@pytest.mark.parametrize("path,expected", [
    ("proj", "proj.proof"),
    ("proj.proof", "proj.proof"),
    ("proj.JSON", "proj.JSON"),
    ("proj.txt", "proj.txt.proof"),
])
def test_ensure_extension(path, expected):
    assert ensure_extension(path, ["proof", "json"], default="proof") == expected
