"""Serving thumbnails and pictures of open galleries by URL."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import parse_qs, urlsplit

from pictures_manager.thumbnails import get_existing_thumbnail
from pictures_manager.windows_galleries import WindowsGalleriesState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Response:
    status: int = 200
    mimetype: str = ""
    body: bytes = b""


NOT_FOUND = Response(status=404)


def _query(params: dict[str, list[str]], key: str) -> str:
    try:
        return params[key][0]
    except KeyError:
        raise ValueError(f"request has no {key!r} parameter") from None


def handle_request(galleries: WindowsGalleriesState, uri: str) -> Response:
    """Answer ``/get-thumbnail`` and ``/get-image`` requests for a window's gallery."""
    url = urlsplit(uri)
    params = parse_qs(url.query)
    gallery = galleries.get(_query(params, "window"))

    if url.path == "/get-thumbnail":
        picture_id = _query(params, "id")
        data = get_existing_thumbnail(gallery.path, picture_id)
        if data is None:
            logger.info("Can't read thumbnail %s", picture_id)
            return NOT_FOUND
        return Response(200, "image/png", data)
    if url.path == "/get-image":
        picture_id = _query(params, "id")
        try:
            cache = gallery.gallery.datas_cache[picture_id]
        except KeyError:
            raise LookupError(f"unknown picture {picture_id!r}") from None
        try:
            data = (Path(gallery.path) / cache.get_path()).read_bytes()
        except OSError:
            logger.info("Can't read image %s", picture_id)
            return NOT_FOUND
        return Response(200, "image", data)
    return NOT_FOUND