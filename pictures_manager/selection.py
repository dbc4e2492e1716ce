"""State of the main pane: its content, dimensions and picture selection."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from pictures_manager.models import Theme

_UNIX_PROTOCOL = "reqimg://localhost"
_WINDOWS_PROTOCOL = "https://reqimg.localhost"


class _DisplayKind(enum.Enum):
    PICTURES_AND_DIRS = "PicturesAndDirs"
    PICTURE_AND_CAROUSEL = "PictureAndCarousel"
    NONE = "None"


@dataclass(frozen=True)
class MainPaneDisplayType:
    """What the main pane shows; ``root`` is the directory path for ``PicturesAndDirs``."""

    Kind = _DisplayKind

    kind: _DisplayKind = _DisplayKind.NONE
    root: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", tuple(self.root))
        if self.kind is not _DisplayKind.PICTURES_AND_DIRS and self.root:
            raise ValueError(f"{self.kind.value} takes no root path")

    @classmethod
    def pictures_and_dirs(cls, root: list[str] | tuple[str, ...]) -> MainPaneDisplayType:
        return cls(_DisplayKind.PICTURES_AND_DIRS, tuple(root))

    @classmethod
    def picture_and_carousel(cls) -> MainPaneDisplayType:
        return cls(_DisplayKind.PICTURE_AND_CAROUSEL)


@dataclass
class MainPaneDimensions:
    """Size and scroll position of the main pane."""

    width: int = 0
    height: int = 0
    scroll_top: int = 0
    scroll_bottom: int = 0


@dataclass(frozen=True)
class StaticContext:
    """Facts about the window that do not change while it is open."""

    macos: bool = False
    windows: bool = False
    protocol: str = ""
    window_label: str = ""
    home_dir: str = ""


def protocol_for(windows: bool) -> str:
    """Base URL of the image protocol on the current platform."""
    return _WINDOWS_PROTOCOL if windows else _UNIX_PROTOCOL


def resolve_theme(settings_theme: Theme, os_theme_is_light: bool) -> Theme:
    """The theme to display: the requested one, or the system's when asked for."""
    if settings_theme is Theme.SYSTEM:
        return Theme.LIGHT if os_theme_is_light else Theme.DARK
    return settings_theme


@dataclass
class Context:
    """Window-wide interface state, including the main pane selection."""

    theme: Theme = Theme.SYSTEM
    gallery_path: str = ""
    main_pane_content: MainPaneDisplayType = field(default_factory=MainPaneDisplayType)
    main_pane_pictures: list[str] = field(default_factory=list)
    main_pane_dirs: list[str] = field(default_factory=list)
    main_pane_selected_index: int | None = None
    main_pane_selected_indices: list[int] = field(default_factory=list)
    main_pane_dimensions: MainPaneDimensions = field(default_factory=MainPaneDimensions)

    def select_index(self, i: int, shift: bool = False, ctrl: bool = False) -> None:
        """Update the selection as a click on item ``i`` with modifier keys would."""
        if self.main_pane_selected_index is None:
            self.main_pane_selected_index = i
            self.main_pane_selected_indices = [i]
        elif shift:
            self._select_range(self.main_pane_selected_index, i, ctrl)
        else:
            self._select_single(i, ctrl)

    def _select_range(self, i_from: int, i_to: int, add: bool) -> None:
        low, high = sorted((i_from, i_to))
        new_indices = list(range(low, high + 1))
        if add:
            self.main_pane_selected_indices = sorted(set(self.main_pane_selected_indices).union(new_indices))
            self.main_pane_selected_index = i_to
        else:
            self.main_pane_selected_indices = new_indices

    def _select_single(self, i: int, add: bool) -> None:
        if not add:
            self.main_pane_selected_index = i
            self.main_pane_selected_indices = [i]
        elif i in self.main_pane_selected_indices:
            self.main_pane_selected_indices = [j for j in self.main_pane_selected_indices if j != i]
            if self.main_pane_selected_index == i:
                indices = self.main_pane_selected_indices
                self.main_pane_selected_index = indices[-1] if indices else None
        else:
            self.main_pane_selected_indices.append(i)
            self.main_pane_selected_index = i

    def get_selected_picture_ids(self) -> list[str]:
        """Ids of the selected pictures, in selection order."""
        if self.main_pane_selected_index is None:
            return []
        if len(self.main_pane_selected_indices) > 1:
            return [self.main_pane_pictures[i] for i in self.main_pane_selected_indices]
        return [self.main_pane_pictures[self.main_pane_selected_index]]