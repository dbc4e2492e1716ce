import pytest

from pictures_manager.gallery import Gallery
from pictures_manager.models import GallerySettings
from pictures_manager.windows_galleries import WindowsGalleriesState


def test_labels_are_unique_and_sequential(tmp_path):
    state = WindowsGalleriesState()
    first = state.open_from_path(str(tmp_path / "a"))
    second = state.open_from_path(str(tmp_path / "b"))
    assert first.window_label == "gallery-0"
    assert second.window_label == "gallery-1"
    assert len(state) == 2


def test_freed_label_is_reused(tmp_path):
    state = WindowsGalleriesState()
    state.open_from_path(str(tmp_path / "a"))
    state.open_from_path(str(tmp_path / "b"))
    state.on_close("gallery-0")
    third = state.open_from_path(str(tmp_path / "c"))
    assert third.window_label == "gallery-0"


def test_open_loads_existing_gallery(tmp_path):
    Gallery(settings=GallerySettings(test="stored")).save(tmp_path)
    state = WindowsGalleriesState()
    opened = state.open_from_path(str(tmp_path))
    assert opened.gallery.settings.test == "stored"


def test_on_close_saves_and_removes(tmp_path):
    state = WindowsGalleriesState()
    opened = state.open_from_path(str(tmp_path))
    opened.gallery.dates_cache = ["p1"]
    state.on_close(opened.window_label)
    assert state.paths() == []
    assert Gallery.load(tmp_path).dates_cache == ["p1"]


def test_on_close_unknown_label_keeps_others(tmp_path):
    state = WindowsGalleriesState()
    state.open_from_path(str(tmp_path))
    state.on_close("missing")
    assert state.paths() == [str(tmp_path)]


def test_get_and_path(tmp_path):
    state = WindowsGalleriesState()
    opened = state.open_from_path(str(tmp_path))
    assert state.get(opened.window_label) is opened
    assert state.get_gallery_path(opened.window_label) == str(tmp_path)


def test_get_unknown_raises():
    state = WindowsGalleriesState()
    with pytest.raises(LookupError):
        state.get("gallery-0")


def test_paths_keep_order(tmp_path):
    state = WindowsGalleriesState()
    paths = [str(tmp_path / name) for name in ("x", "y", "z")]
    for path in paths:
        state.open_from_path(path)
    assert state.paths() == paths