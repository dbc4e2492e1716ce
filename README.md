# pictures_manager

A library for managing a photo gallery kept in an ordinary directory tree.
It scans the pictures of a gallery, gives each one a stable identifier stored
in the picture's own EXIF data, caches what it reads about every picture
(date, GPS location, camera, exposure, orientation, dimensions) and keeps that
cache, the gallery's interface state and its tag groups in a
`pictures_manager.json` file at the root of the gallery.

## Modules

- `pictures_manager.models` — `Settings`, `Theme`, `GalleryData`,
  `GallerySettings`, `PictureCache`, `PathsCache`, `Tag`, `TagGroup` and the
  date and location cluster records, each with `to_dict()` and `from_dict()`.
  `Orientation` lists the EXIF orientations.
- `pictures_manager.app_data` — `AppData.load(directory)` reads
  `app_data.json` (or returns defaults); `AppDataState` holds it under a lock,
  `save(directory)` writes it as indented JSON, and
  `set_settings(settings, directory)` stores and saves new settings and returns
  whether the language changed.
- `pictures_manager.gallery` — `Gallery.load(path)` reads a gallery's
  `pictures_manager.json`, or starts an empty gallery; `Gallery.save(path)`
  writes it back.
- `pictures_manager.windows_galleries` — `WindowsGalleriesState` tracks the
  galleries open in windows. `open_from_path(path)` loads a gallery under a new
  `gallery-N` label and returns its `WindowGallery`; `get(label)` finds it
  (raising `LookupError` when there is none); `on_close(label)` saves and
  forgets it; `paths()` lists the open galleries' paths.
- `pictures_manager.exif` — `ExifFile.open(path)` reads a picture's metadata
  and, when the picture has no identifier yet, writes a new one from
  `gen_new_uid()` into the file. Only JPEG, PNG and WebP files can be tagged;
  for other files `open` returns `None`.
- `pictures_manager.gallery_cache` — `update_gallery_cache(window_gallery)`
  walks the gallery (skipping directories whose name starts with `.`), gives a
  fresh identifier to any picture whose identifier is already taken, rebuilds
  the picture cache, the directory tree (sub-directories by name, pictures by
  date) and the date-ordered identifier list, saves the gallery and returns
  the picture cache and the tree.
- `pictures_manager.thumbnails` — `gen_thumbnail(gallery_path, image_path,
  picture_id, orientation, target_height=280)` writes an upright, resized PNG
  to `.thumbnails/<id>.png` in the gallery unless it already exists;
  `get_existing_thumbnail` reads it back; `oriented_dimensions(cache)` swaps
  width and height for quarter-turn orientations; `is_supported_img(path)`
  accepts png, jpg, jpeg, gif, bmp and webp files.
- `pictures_manager.selection` — `Context.select_index(i, shift, ctrl)` does
  click, shift-click and ctrl-click selection over the pictures of the main
  pane, and `Context.get_selected_picture_ids()` returns the selected ids.
  `resolve_theme` and `protocol_for` give the displayed theme and the base URL
  of the image protocol.
- `pictures_manager.tree` and `pictures_manager.contextmenu` — `TreeView`,
  `TreeItem` and `TreeItemData` model a folder tree with open/closed items and
  a selected path; `ContextMenu` and `MenuItem` describe a right-click menu as
  data (`to_dict()`).
- `pictures_manager.hierarchy` — `HierarchyConfig`, `HierarchyGroupRule` and
  the filter and group types that describe nested grouping of pictures.
- `pictures_manager.translator` — `Translator(translations_dir, app_language)`
  negotiates a locale with `negotiate_languages`, loads the `back`, `common`
  and `menu-bar` `.ftl` files of each chosen locale, and looks messages up with
  `tr(key)` or `tra(key, args)`, returning the key itself when no locale has
  it. `FluentResource.parse` reads `key = value` messages with indented
  continuation lines and `{ $name }` placeholders.
- `pictures_manager.logger` — `configure_logging()` sends records to standard
  error as `[HH:MM:SS][target] LEVEL message`; `log_from_front(message, level)`
  logs at a numeric level (1 error, 2 warning, 4 debug, 5 trace, else info).
- `pictures_manager.protocol` — `handle_request(galleries, uri)` answers
  `/get-thumbnail?window=...&id=...` and `/get-image?window=...&id=...` with a
  `Response`, or a 404 one.

## Example

```python
from pictures_manager.gallery_cache import update_gallery_cache
from pictures_manager.windows_galleries import WindowsGalleriesState

galleries = WindowsGalleriesState()
window_gallery = galleries.open_from_path("/home/me/Pictures/Gallery")

datas_cache, paths_cache = update_gallery_cache(window_gallery)

galleries.on_close(window_gallery.window_label)  # saves pictures_manager.json
```

## What it does not do

The package is a library. It opens no windows, draws no interface, builds no
menu bar and installs no command; the tree, selection and context-menu classes
only hold state for an interface built on top of them. `handle_request` turns
a URL into a `Response` but does not run a server. The translator reads a
plain subset of the `.ftl` format, not selectors or terms.