"""Scanning a gallery directory into its picture and directory caches."""

from __future__ import annotations

import copy
import logging
import os
import time
from pathlib import Path

from pictures_manager.exif import ExifFile
from pictures_manager.models import PathsCache, PictureCache
from pictures_manager.paths import to_unix_path
from pictures_manager.thumbnails import is_supported_img
from pictures_manager.windows_galleries import WindowGallery

logger = logging.getLogger(__name__)


def _by_date(item: tuple[str, str | None]) -> tuple[bool, str]:
    date = item[1]
    return date is not None, date or ""


def read_dir_recursive(
    path: str | os.PathLike[str],
    datas_cache: dict[str, PictureCache],
    dates_cache: list[tuple[str, str | None]],
    gallery_path: str | os.PathLike[str],
) -> PathsCache:
    """Scan ``path`` and its visible sub-directories.

    Every picture found is added to ``datas_cache`` under its id and to
    ``dates_cache`` with its date; the returned tree lists sub-directories by
    name and picture ids by date.
    """
    path = Path(path)
    gallery_path = Path(gallery_path)
    paths_cache = PathsCache(dir_name=path.name)
    pictures: list[tuple[str, str | None]] = []

    for entry in sorted(path.iterdir(), key=lambda item: item.name):
        if entry.is_dir():
            if not entry.name.startswith("."):
                paths_cache.children.append(read_dir_recursive(entry, datas_cache, dates_cache, gallery_path))
        elif is_supported_img(entry):
            relative = entry.relative_to(gallery_path)
            exif_file = ExifFile.open(entry)
            if exif_file is None:
                logger.warning("File %s does not support EXIF or XMP data.", entry)
                continue
            if exif_file.uid in datas_cache:
                logger.info("Regenerating uid for file %s because this uid already exists.", entry)
                exif_file.regen_uid()
            date = exif_file.get_date()
            dates_cache.append((exif_file.uid, date))
            datas_cache[exif_file.uid] = exif_file.to_picture_cache(to_unix_path(relative))
            pictures.append((exif_file.uid, date))

    pictures.sort(key=_by_date)
    paths_cache.pictures = [uid for uid, _ in pictures]
    paths_cache.children.sort(key=lambda child: child.dir_name)
    return paths_cache


def update_gallery_cache(window_gallery: WindowGallery) -> tuple[dict[str, PictureCache], PathsCache]:
    """Rescan the gallery of a window, store and save its caches, and return them."""
    start = time.perf_counter()

    datas_cache: dict[str, PictureCache] = {}
    dated: list[tuple[str, str | None]] = []
    paths_cache = read_dir_recursive(window_gallery.path, datas_cache, dated, window_gallery.path)
    dated.sort(key=_by_date)

    logger.info(
        "Gallery cache updated %d pictures in %dms",
        len(datas_cache),
        (time.perf_counter() - start) * 1000,
    )

    gallery = window_gallery.gallery
    gallery.datas_cache = copy.deepcopy(datas_cache)
    gallery.paths_cache = copy.deepcopy(paths_cache)
    gallery.dates_cache = [uid for uid, _ in dated]
    gallery.save(window_gallery.path)

    return datas_cache, paths_cache