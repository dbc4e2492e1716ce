"""Settings, gallery data and picture cache records with their JSON forms."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from pictures_manager.paths import from_unix_path


class Theme(enum.Enum):
    """Colour theme requested by the user."""

    LIGHT = "Light"
    DARK = "Dark"
    SYSTEM = "System"


class Orientation(enum.Enum):
    """EXIF orientation of a picture."""

    UNSPECIFIED = "Unspecified"
    NORMAL = "Normal"
    HORIZONTAL_FLIP = "HorizontalFlip"
    ROTATE_180 = "Rotate180"
    VERTICAL_FLIP = "VerticalFlip"
    ROTATE_90_HORIZONTAL_FLIP = "Rotate90HorizontalFlip"
    ROTATE_90 = "Rotate90"
    ROTATE_90_VERTICAL_FLIP = "Rotate90VerticalFlip"
    ROTATE_270 = "Rotate270"


def _mapping(data: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{name} must be an object, got {type(data).__name__}")
    return data


def _required(data: Mapping[str, Any], key: str, name: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"{name} is missing field {key!r}") from None


def _list(value: Any, name: str) -> list:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{name} must be a list, got {type(value).__name__}")
    return list(value)


def _enum(enum_cls: type[enum.Enum], value: Any, name: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"unknown {name} {value!r}") from None


def _tuple(value: Any, size: int, convert: Callable[[Any], Any], name: str) -> tuple | None:
    if value is None:
        return None
    items = _list(value, name)
    if len(items) != size:
        raise ValueError(f"{name} must hold {size} values, got {len(items)}")
    return tuple(convert(item) for item in items)


@dataclass
class Settings:
    """Application-wide user settings."""

    theme: Theme = Theme.SYSTEM
    language: str | None = None
    force_win_header: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "theme": self.theme.value,
            "language": self.language,
            "force_win_header": self.force_win_header,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Settings:
        data = _mapping(data, "Settings")
        return cls(
            theme=_enum(Theme, _required(data, "theme", "Settings"), "theme"),
            language=data.get("language"),
            force_win_header=bool(_required(data, "force_win_header", "Settings")),
        )


@dataclass
class GalleryData:
    """Interface state stored with a gallery."""

    current_left_tab: int = 0
    files_tab_selected_dir: list[str] = field(default_factory=list)
    zoom_grid: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_left_tab": self.current_left_tab,
            "files_tab_selected_dir": list(self.files_tab_selected_dir),
            "zoom_grid": self.zoom_grid,
        }

    @classmethod
    def from_dict(cls, data: Any) -> GalleryData:
        data = _mapping(data, "GalleryData")
        default = cls()
        return cls(
            current_left_tab=int(data.get("current_left_tab", default.current_left_tab)),
            files_tab_selected_dir=[
                str(item)
                for item in _list(data.get("files_tab_selected_dir", []), "files_tab_selected_dir")
            ],
            zoom_grid=float(data.get("zoom_grid", default.zoom_grid)),
        )


@dataclass
class GallerySettings:
    """Per-gallery settings."""

    test: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"test": self.test}

    @classmethod
    def from_dict(cls, data: Any) -> GallerySettings:
        data = _mapping(data, "GallerySettings")
        return cls(test=str(data.get("test", "")))


@dataclass
class PictureCache:
    """Cached metadata of one picture; ``path`` is relative and in unix style."""

    path: str = ""
    uuid_generated: bool = False
    date: str | None = None
    location: tuple[float, float, float] | None = None
    orientation: Orientation = Orientation.UNSPECIFIED
    dimensions: tuple[int, int] = (0, 0)
    camera: str | None = None
    focal_length: float | None = None
    exposure_time: tuple[int, int] | None = None
    iso_speed: int | None = None
    f_number: float | None = None

    def get_path(self) -> str:
        """Return the stored path with the platform's separator."""
        return from_unix_path(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "uuid_generated": self.uuid_generated,
            "date": self.date,
            "location": list(self.location) if self.location is not None else None,
            "orientation": self.orientation.value,
            "dimensions": list(self.dimensions),
            "camera": self.camera,
            "focal_length": self.focal_length,
            "exposure_time": list(self.exposure_time) if self.exposure_time is not None else None,
            "iso_speed": self.iso_speed,
            "f_number": self.f_number,
        }

    @classmethod
    def from_dict(cls, data: Any) -> PictureCache:
        data = _mapping(data, "PictureCache")
        focal_length = data.get("focal_length")
        iso_speed = data.get("iso_speed")
        f_number = data.get("f_number")
        return cls(
            path=str(data.get("path", "")),
            uuid_generated=bool(data.get("uuid_generated", False)),
            date=data.get("date"),
            location=_tuple(data.get("location"), 3, float, "location"),
            orientation=_enum(Orientation, data.get("orientation", Orientation.UNSPECIFIED.value), "orientation"),
            dimensions=_tuple(data.get("dimensions", (0, 0)), 2, int, "dimensions"),
            camera=data.get("camera"),
            focal_length=float(focal_length) if focal_length is not None else None,
            exposure_time=_tuple(data.get("exposure_time"), 2, int, "exposure_time"),
            iso_speed=int(iso_speed) if iso_speed is not None else None,
            f_number=float(f_number) if f_number is not None else None,
        )


@dataclass
class PathsCache:
    """Directory tree of a gallery: sub-directories by name, picture ids by date."""

    dir_name: str = ""
    children: list[PathsCache] = field(default_factory=list)
    pictures: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "dir_name": self.dir_name,
            "children": [child.to_dict() for child in self.children],
            "pictures": list(self.pictures),
        }

    @classmethod
    def from_dict(cls, data: Any) -> PathsCache:
        data = _mapping(data, "PathsCache")
        return cls(
            dir_name=str(data.get("dir_name", "")),
            children=[cls.from_dict(child) for child in _list(data.get("children", []), "children")],
            pictures=[str(item) for item in _list(data.get("pictures", []), "pictures")],
        )


@dataclass
class Tag:
    """A tag and the pictures that carry it."""

    name: str
    color: str
    pictures: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "color": self.color, "pictures": list(self.pictures)}

    @classmethod
    def from_dict(cls, data: Any) -> Tag:
        data = _mapping(data, "Tag")
        return cls(
            name=str(_required(data, "name", "Tag")),
            color=str(_required(data, "color", "Tag")),
            pictures=[str(item) for item in _list(_required(data, "pictures", "Tag"), "pictures")],
        )


@dataclass
class TagGroup:
    """A named group of tags keyed by id."""

    name: str
    multiple: bool
    tags: dict[str, Tag] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "multiple": self.multiple,
            "tags": {key: tag.to_dict() for key, tag in self.tags.items()},
        }

    @classmethod
    def from_dict(cls, data: Any) -> TagGroup:
        data = _mapping(data, "TagGroup")
        tags = _mapping(_required(data, "tags", "TagGroup"), "tags")
        return cls(
            name=str(_required(data, "name", "TagGroup")),
            multiple=bool(_required(data, "multiple", "TagGroup")),
            tags={str(key): Tag.from_dict(value) for key, value in tags.items()},
        )


@dataclass
class LocationCluster:
    """Pictures grouped around one place."""

    name: str = ""
    pictures: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "pictures": list(self.pictures)}

    @classmethod
    def from_dict(cls, data: Any) -> LocationCluster:
        data = _mapping(data, "LocationCluster")
        return cls(
            name=str(data.get("name", "")),
            pictures=[int(item) for item in _list(data.get("pictures", []), "pictures")],
        )


@dataclass
class LocationClusters:
    """A named set of location clusters."""

    name: str = ""
    clusters: list[LocationCluster] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "clusters": [cluster.to_dict() for cluster in self.clusters]}

    @classmethod
    def from_dict(cls, data: Any) -> LocationClusters:
        data = _mapping(data, "LocationClusters")
        return cls(
            name=str(data.get("name", "")),
            clusters=[LocationCluster.from_dict(item) for item in _list(data.get("clusters", []), "clusters")],
        )


@dataclass
class DatesCluster:
    """Pictures grouped around one period."""

    name: str = ""
    pictures: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "pictures": list(self.pictures)}

    @classmethod
    def from_dict(cls, data: Any) -> DatesCluster:
        data = _mapping(data, "DatesCluster")
        return cls(
            name=str(data.get("name", "")),
            pictures=[int(item) for item in _list(data.get("pictures", []), "pictures")],
        )


@dataclass
class DatesClusters:
    """A named set of date clusters."""

    name: str = ""
    clusters: list[DatesCluster] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "clusters": [cluster.to_dict() for cluster in self.clusters]}

    @classmethod
    def from_dict(cls, data: Any) -> DatesClusters:
        data = _mapping(data, "DatesClusters")
        return cls(
            name=str(data.get("name", "")),
            clusters=[DatesCluster.from_dict(item) for item in _list(data.get("clusters", []), "clusters")],
        )