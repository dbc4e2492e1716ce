"""Photo gallery management: metadata caches, picture ids, thumbnails, selection and translations."""

__version__ = "0.1.0"