"""Tree of directories with an open/closed state and a selected path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from pictures_manager.contextmenu import ContextMenu, MenuItem

SelectCallback = Callable[[list[str]], object]


@dataclass(frozen=True)
class TreeItemData:
    """One node of the tree and its children."""

    id: str
    name: str
    children: tuple[TreeItemData, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


class TreeItem:
    """A node shown in a tree view; selecting it reports its full path upwards."""

    def __init__(
        self,
        data: TreeItemData,
        parent_path: Sequence[str] = (),
        parent_message: SelectCallback | None = None,
    ) -> None:
        self.data = data
        self.path: list[str] = [*parent_path, data.id]
        self.is_open = False
        self._parent_message = parent_message
        self._children: list[TreeItem] | None = None

    @property
    def id(self) -> str:
        return self.data.id

    @property
    def name(self) -> str:
        return self.data.name

    @property
    def children(self) -> tuple[TreeItemData, ...]:
        return self.data.children

    def is_selected_exactly(self, selected_path: Sequence[str]) -> bool:
        return list(selected_path) == self.path

    def is_selected(self, selected_path: Sequence[str]) -> bool:
        """Whether this item or one of its descendants is selected."""
        return list(selected_path[: len(self.path)]) == self.path

    def is_children_selected(self, selected_path: Sequence[str]) -> bool:
        """Whether a descendant, not the item itself, is selected."""
        return self.is_selected(selected_path) and len(selected_path) != len(self.path)

    def toggle_open(self, selected_path: Sequence[str]) -> bool:
        """Open or close the item; closing over a selected descendant selects the item.

        Returns False when the item selected itself instead of only toggling.
        """
        self.is_open = not self.is_open
        if not self.is_open and self.is_children_selected(selected_path):
            self.select()
            return False
        return True

    def select(self) -> None:
        """Report this item as the new selection to its parent."""
        self._emit([self.id])

    def _emit(self, path: list[str]) -> None:
        if self._parent_message is not None:
            self._parent_message(path)

    def _update_selected_path(self, path: list[str]) -> None:
        self._emit([self.id, *path])

    def context_menu(self) -> ContextMenu:
        """The menu shown when the item is right-clicked."""
        menu = ContextMenu()
        menu.add_item(
            MenuItem(label="Open in Finder", event="contex_menu_tree_item_files", payload=self.id)
        )
        menu.add_separator()
        menu.add_item(
            MenuItem(label="Open in Terminal", event="contex_menu_tree_item_terminal", payload=self.id)
        )
        return menu

    def child_items(self) -> list[TreeItem]:
        """Items of the children when the item is open, else nothing."""
        if not self.is_open or not self.children:
            return []
        if self._children is None:
            self._children = [
                TreeItem(child, self.path, self._update_selected_path) for child in self.children
            ]
        return list(self._children)

    def _sync(self, selected_path: Sequence[str]) -> None:
        if not self.is_open and self.is_children_selected(selected_path):
            self.toggle_open(selected_path)
        for child in self.child_items():
            child._sync(selected_path)


class TreeView:
    """Root of a tree; reports selected paths through ``selected_changed``."""

    def __init__(
        self,
        items: Sequence[TreeItemData],
        selected_changed: SelectCallback | None = None,
        selected_path: Sequence[str] = (),
    ) -> None:
        self.items = list(items)
        self.selected_changed = selected_changed
        self.selected_path: list[str] = list(selected_path)
        self._roots: list[TreeItem] | None = None

    def roots(self) -> list[TreeItem]:
        """Top-level items, opened down to the selected path."""
        if self._roots is None:
            self._roots = [TreeItem(item, (), self.select) for item in self.items]
        for root in self._roots:
            root._sync(self.selected_path)
        return list(self._roots)

    def select(self, path: Sequence[str]) -> bool:
        """Forward a newly selected path to the listener."""
        if self.selected_changed is not None:
            self.selected_changed(list(path))
        return True