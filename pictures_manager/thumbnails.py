"""Picture dimensions, supported formats and PNG thumbnails stored in the gallery."""

from __future__ import annotations

import io
import logging
import os
import time
from pathlib import Path

from PIL import Image

from pictures_manager.models import Orientation, PictureCache

logger = logging.getLogger(__name__)

THUMBNAIL_HEIGHT = 280
THUMBNAILS_DIR = ".thumbnails"
SUPPORTED_EXTENSIONS = ("png", "jpg", "jpeg", "gif", "bmp", "webp")

_QUARTER_TURNS = {
    Orientation.ROTATE_90,
    Orientation.ROTATE_270,
    Orientation.ROTATE_90_HORIZONTAL_FLIP,
    Orientation.ROTATE_90_VERTICAL_FLIP,
}

# Transformations that bring a picture upright; rotations are clockwise.
_TRANSPOSES = {
    Orientation.ROTATE_90: (Image.Transpose.ROTATE_270,),
    Orientation.ROTATE_180: (Image.Transpose.ROTATE_180,),
    Orientation.ROTATE_270: (Image.Transpose.ROTATE_90,),
    Orientation.ROTATE_90_HORIZONTAL_FLIP: (Image.Transpose.ROTATE_270, Image.Transpose.FLIP_LEFT_RIGHT),
    Orientation.ROTATE_90_VERTICAL_FLIP: (Image.Transpose.ROTATE_270, Image.Transpose.FLIP_TOP_BOTTOM),
    Orientation.HORIZONTAL_FLIP: (Image.Transpose.FLIP_LEFT_RIGHT,),
    Orientation.VERTICAL_FLIP: (Image.Transpose.FLIP_TOP_BOTTOM,),
}


def _thumbnail_path(gallery_path: str | os.PathLike[str], picture_id: str) -> Path:
    return Path(gallery_path) / THUMBNAILS_DIR / f"{picture_id}.png"


def oriented_dimensions(cache: PictureCache) -> tuple[int, int]:
    """Width and height of the picture once its orientation is applied."""
    width, height = cache.dimensions
    if cache.orientation in _QUARTER_TURNS:
        return height, width
    return width, height


def gen_thumbnail(
    gallery_path: str | os.PathLike[str],
    image_path: str | os.PathLike[str],
    picture_id: str,
    orientation: Orientation,
    target_height: int = THUMBNAIL_HEIGHT,
) -> bool:
    """Make sure the thumbnail of a picture exists; return whether it does."""
    thumb_path = _thumbnail_path(gallery_path, picture_id)
    if thumb_path.exists():
        return True
    start = time.perf_counter()

    img_path = Path(gallery_path) / image_path
    try:
        with Image.open(img_path) as img:
            img.load()
            picture = img.convert("RGBA")
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as error:
        logger.warning("Unable to open image: %s, error: %s", img_path, error)
        return False

    for transpose in _TRANSPOSES.get(orientation, ()):
        picture = picture.transpose(transpose)

    width, height = picture.size
    if width == 0 or height == 0 or target_height <= 0:
        return False
    dst_width = target_height * width // height
    if dst_width == 0:
        return False

    thumbnail = picture.resize((dst_width, target_height), Image.Resampling.BOX)
    buffer = io.BytesIO()
    thumbnail.save(buffer, format="PNG")

    thumb_path.parent.mkdir(parents=True, exist_ok=True)
    thumb_path.write_bytes(buffer.getvalue())
    logger.info("Generating thumbnail took %.1fms", (time.perf_counter() - start) * 1000)
    return True


def get_existing_thumbnail(gallery_path: str | os.PathLike[str], picture_id: str) -> bytes | None:
    """The PNG bytes of an already generated thumbnail, if there is one."""
    try:
        return _thumbnail_path(gallery_path, picture_id).read_bytes()
    except OSError:
        return None


def is_supported_img_ext(ext: str) -> bool:
    """Whether ``ext`` (without the dot) is a supported picture extension."""
    return ext.lower() in SUPPORTED_EXTENSIONS


def is_supported_img(path: str | os.PathLike[str]) -> bool:
    suffix = Path(path).suffix
    if not suffix:
        return False
    return is_supported_img_ext(suffix[1:])