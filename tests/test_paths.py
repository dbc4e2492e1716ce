import os
from pathlib import Path

import pytest

from pictures_manager.paths import from_unix_path, to_unix_path


def test_to_unix_path_with_backslash_separator():
    assert to_unix_path("trip\\day\\img.jpg", "\\") == "trip/day/img.jpg"


def test_from_unix_path_with_backslash_separator():
    result = from_unix_path("trip/day/img.jpg", "\\")
    assert "/" not in result
    assert result.split("\\") == ["trip", "day", "img.jpg"]


def test_slash_separator_leaves_path_unchanged():
    assert to_unix_path("a/b/c.png", "/") == "a/b/c.png"
    assert from_unix_path("a/b/c.png", "/") == "a/b/c.png"


@pytest.mark.parametrize("path", ["a\\b", "one\\two\\three.jpg", "single.png", ""])
def test_round_trip_with_backslash(path):
    assert from_unix_path(to_unix_path(path, "\\"), "\\") == path


def test_accepts_path_objects():
    path = Path("trip") / "img.jpg"
    assert to_unix_path(path).split("/") == ["trip", "img.jpg"]


def test_default_separator_round_trip():
    native = os.path.join("x", "y", "z.jpg")
    unix = to_unix_path(native)
    assert unix.split("/") == ["x", "y", "z.jpg"]
    assert from_unix_path(unix) == native