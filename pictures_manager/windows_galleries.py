"""Galleries opened in application windows, one per window label."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from pictures_manager.gallery import Gallery

logger = logging.getLogger(__name__)


@dataclass
class WindowGallery:
    """A gallery shown in the window with ``window_label``."""

    window_label: str
    path: str
    gallery: Gallery = field(default_factory=Gallery)


class WindowsGalleriesState:
    """Thread-safe list of the galleries open in windows."""

    def __init__(self) -> None:
        self.galleries: list[WindowGallery] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self.galleries)

    def _new_unique_label(self) -> str:
        labels = {gallery.window_label for gallery in self.galleries}
        i = 0
        while f"gallery-{i}" in labels:
            i += 1
        return f"gallery-{i}"

    def open_from_path(self, path: str) -> WindowGallery:
        """Load the gallery at ``path`` under a new unique window label."""
        with self._lock:
            window_gallery = WindowGallery(
                window_label=self._new_unique_label(),
                path=path,
                gallery=Gallery.load(path),
            )
            self.galleries.append(window_gallery)
        return window_gallery

    def on_close(self, label: str) -> None:
        """Save and forget the galleries of the window with ``label``."""
        with self._lock:
            kept = []
            for gallery in self.galleries:
                if gallery.window_label != label:
                    kept.append(gallery)
                else:
                    logger.info("Saving gallery data for window %s", label)
                    gallery.gallery.save(gallery.path)
            self.galleries = kept

    def get(self, label: str) -> WindowGallery:
        """Return the gallery of the window with ``label``."""
        with self._lock:
            for gallery in self.galleries:
                if gallery.window_label == label:
                    return gallery
        raise LookupError(f"Can't find a matching gallery to the window {label!r}")

    def get_gallery_path(self, label: str) -> str:
        return self.get(label).path

    def paths(self) -> list[str]:
        """Paths of all open galleries, in opening order."""
        with self._lock:
            return [gallery.path for gallery in self.galleries]