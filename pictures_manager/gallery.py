"""A gallery and its data file stored at the gallery's root."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from pictures_manager.models import (
    DatesClusters,
    GalleryData,
    GallerySettings,
    LocationClusters,
    PathsCache,
    PictureCache,
    TagGroup,
)

GALLERY_FILE = "pictures_manager.json"


def _mapping(data: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{name} must be an object, got {type(data).__name__}")
    return data


def _list(value: Any, name: str) -> list:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{name} must be a list, got {type(value).__name__}")
    return list(value)


@dataclass
class Gallery:
    """Settings, interface data, tags, caches and clusters of one gallery."""

    settings: GallerySettings = field(default_factory=GallerySettings)
    data: GalleryData = field(default_factory=GalleryData)
    tag_groups: dict[str, TagGroup] = field(default_factory=dict)
    datas_cache: dict[str, PictureCache] = field(default_factory=dict)
    paths_cache: PathsCache = field(default_factory=PathsCache)
    dates_cache: list[str] = field(default_factory=list)
    dates_clusters: list[DatesClusters] = field(default_factory=list)
    location_clusters: list[LocationClusters] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Gallery:
        """Read the gallery file under ``path``, or return an empty gallery."""
        file = Path(path) / GALLERY_FILE
        if not file.exists():
            return cls()
        try:
            data = json.loads(file.read_text(encoding="utf-8"))
        except ValueError as error:
            raise ValueError(f"Unable to parse gallery file {file}: {error}") from error
        return cls.from_dict(data)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the gallery as pretty JSON under ``path``, creating the directory."""
        directory = Path(path)
        directory.mkdir(parents=True, exist_ok=True)
        text = json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
        (directory / GALLERY_FILE).write_text(text, encoding="utf-8")

    def to_dict(self) -> dict[str, Any]:
        return {
            "settings": self.settings.to_dict(),
            "data": self.data.to_dict(),
            "tag_groups": {key: group.to_dict() for key, group in self.tag_groups.items()},
            "datas_cache": {key: cache.to_dict() for key, cache in self.datas_cache.items()},
            "paths_cache": self.paths_cache.to_dict(),
            "dates_cache": list(self.dates_cache),
            "dates_clusters": [clusters.to_dict() for clusters in self.dates_clusters],
            "location_clusters": [clusters.to_dict() for clusters in self.location_clusters],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Gallery:
        data = _mapping(data, "Gallery")
        gallery = cls()
        if "settings" in data:
            gallery.settings = GallerySettings.from_dict(data["settings"])
        if "data" in data:
            gallery.data = GalleryData.from_dict(data["data"])
        if "tag_groups" in data:
            gallery.tag_groups = {
                str(key): TagGroup.from_dict(value)
                for key, value in _mapping(data["tag_groups"], "tag_groups").items()
            }
        if "datas_cache" in data:
            gallery.datas_cache = {
                str(key): PictureCache.from_dict(value)
                for key, value in _mapping(data["datas_cache"], "datas_cache").items()
            }
        if "paths_cache" in data:
            gallery.paths_cache = PathsCache.from_dict(data["paths_cache"])
        if "dates_cache" in data:
            gallery.dates_cache = [str(item) for item in _list(data["dates_cache"], "dates_cache")]
        if "dates_clusters" in data:
            gallery.dates_clusters = [
                DatesClusters.from_dict(item) for item in _list(data["dates_clusters"], "dates_clusters")
            ]
        if "location_clusters" in data:
            gallery.location_clusters = [
                LocationClusters.from_dict(item)
                for item in _list(data["location_clusters"], "location_clusters")
            ]
        return gallery