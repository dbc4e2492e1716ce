"""Native context menus described as plain data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class MenuIcon:
    """Icon shown next to a menu item."""

    path: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path}


@dataclass
class MenuItem:
    """One entry of a context menu; ``event`` is emitted with ``payload`` when chosen."""

    label: str = ""
    disabled: bool = False
    checked: bool = False
    event: str = ""
    payload: str = ""
    shortcut: str = ""
    icon: MenuIcon | None = None
    sub_items: list[MenuItem] = field(default_factory=list)
    is_separator: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "disabled": self.disabled,
            "checked": self.checked,
            "event": self.event,
            "payload": self.payload,
            "shortcut": self.shortcut,
            "icon": self.icon.to_dict() if self.icon is not None else None,
            "sub_items": [item.to_dict() for item in self.sub_items],
            "is_separator": self.is_separator,
        }


@dataclass
class ContextMenu:
    """An ordered list of menu items."""

    items: list[MenuItem] = field(default_factory=list)

    def add_item(self, item: MenuItem) -> None:
        self.items.append(item)

    def add_separator(self) -> None:
        self.items.append(MenuItem(is_separator=True))

    def to_dict(self) -> dict[str, Any]:
        return {"items": [item.to_dict() for item in self.items]}