"""Translations loaded from per-locale message files."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from locale import getlocale
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

logger = logging.getLogger(__name__)

RES_IDS = ("back", "common", "menu-bar")
DEFAULT_LOCALE = "en-US"

_MESSAGE_RE = re.compile(r"^(-?[A-Za-z][A-Za-z0-9_-]*)\s*=\s?(.*)$")
_PLACEABLE_RE = re.compile(r"\{\s*(?:\$([A-Za-z][A-Za-z0-9_-]*)|\"((?:[^\"\\]|\\.)*)\")\s*\}")


@dataclass
class FluentResource:
    """Messages of one translation file, keyed by id."""

    messages: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> FluentResource:
        """Parse ``key = value`` messages with indented continuation lines."""
        messages: dict[str, str] = {}
        current: str | None = None
        lines: list[str] = []

        def flush() -> None:
            if current is not None and not current.startswith("-"):
                value = "\n".join(lines).strip()
                if value:
                    messages[current] = value

        for number, raw in enumerate(text.splitlines(), start=1):
            line = raw.rstrip()
            if not line or line.startswith("#"):
                continue
            if raw[0] in " \t":
                if current is None:
                    raise ValueError(f"line {number}: continuation without a message")
                stripped = line.strip()
                if not stripped.startswith("."):
                    lines.append(stripped)
                continue
            match = _MESSAGE_RE.match(line)
            if match is None:
                raise ValueError(f"line {number}: expected 'key = value', got {line!r}")
            flush()
            current = match.group(1)
            lines = [match.group(2)] if match.group(2) else []
        flush()
        return cls(messages)

    def has_message(self, key: str) -> bool:
        return key in self.messages

    def format(self, key: str, args: Mapping[str, Any] | None = None) -> str:
        """Fill the placeholders of message ``key`` from ``args``."""
        pattern = self.messages[key]
        args = args or {}

        def fill(match: re.Match[str]) -> str:
            name, literal = match.group(1), match.group(2)
            if name is None:
                return literal.replace('\\"', '"').replace("\\\\", "\\")
            if name in args:
                return str(args[name])
            logger.warning("Error while formatting pattern: unknown variable $%s", name)
            return "{$" + name + "}"

        return _PLACEABLE_RE.sub(fill, pattern)


def _language(tag: str) -> str:
    return tag.replace("_", "-").split("-")[0].lower()


def negotiate_languages(
    requested: Sequence[str], available: Iterable[str], default: str | None = DEFAULT_LOCALE
) -> list[str]:
    """Available locales matching the requested ones, best first, then ``default``."""
    available = list(available)
    result: list[str] = []
    for wanted in requested:
        norm = wanted.replace("_", "-").lower()
        for candidate in available:
            if candidate.lower() == norm and candidate not in result:
                result.append(candidate)
        for candidate in available:
            if _language(candidate) == _language(wanted) and candidate not in result:
                result.append(candidate)
    if default is not None and default not in result:
        result.append(default)
    return result


def get_available_locales(translations_dir: str | os.PathLike[str]) -> list[str]:
    """Names of the locale directories in ``translations_dir``."""
    return sorted(entry.name for entry in Path(translations_dir).iterdir() if entry.is_dir())


def get_translation_file(translations_dir: str | os.PathLike[str], locale: str, resid: str) -> str:
    """Text of the ``resid`` message file of ``locale``."""
    return (Path(translations_dir) / locale / f"{resid}.ftl").read_text(encoding="utf-8")


def _system_locale() -> str | None:
    name = getlocale()[0]
    return name.replace("_", "-") if name else None


class Translator:
    """Resolves message keys through the negotiated locales in order."""

    def __init__(self, translations_dir: str | os.PathLike[str], app_language: str | None = None) -> None:
        requested = app_language or _system_locale() or DEFAULT_LOCALE
        self.locales = negotiate_languages([requested], get_available_locales(translations_dir), DEFAULT_LOCALE)
        self.bundles: list[tuple[str, list[FluentResource]]] = [
            (
                name,
                [FluentResource.parse(get_translation_file(translations_dir, name, res)) for res in RES_IDS],
            )
            for name in self.locales
        ]

    def _resource_for(self, key: str) -> FluentResource | None:
        for _, resources in self.bundles:
            for resource in resources:
                if resource.has_message(key):
                    return resource
        return None

    def tr(self, key: str) -> str:
        return self.translate(key, None)

    def tra(self, key: str, args: Mapping[str, Any]) -> str:
        return self.translate(key, args)

    def translate(self, key: str, args: Mapping[str, Any] | None = None) -> str:
        """The translated message, or ``key`` itself when no locale has it."""
        resource = self._resource_for(key)
        if resource is None:
            return key
        return resource.format(key, args)