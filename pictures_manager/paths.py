"""Conversion between platform paths and unix-style path strings."""

from __future__ import annotations

import os


def to_unix_path(path: str | os.PathLike[str], separator: str = os.sep) -> str:
    """Return ``path`` as a string with ``/`` between its components."""
    text = os.fspath(path)
    if separator != "/":
        return text.replace(separator, "/")
    return text


def from_unix_path(path: str, separator: str = os.sep) -> str:
    """Return a unix-style ``path`` with ``separator`` between its components."""
    if separator != "/":
        return path.replace("/", separator)
    return path