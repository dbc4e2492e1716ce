"""Application data stored in the user's data directory."""

from __future__ import annotations

import json
import os
import threading
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

from pictures_manager.models import Settings

_APP_DATA_FILE = "app_data.json"


@dataclass
class AppData:
    """Settings and the last opened gallery."""

    settings: Settings = field(default_factory=Settings)
    last_gallery: str | None = None

    @classmethod
    def load(cls, directory: str | os.PathLike[str]) -> AppData:
        """Read the data file in ``directory``, or return defaults if there is none."""
        file = Path(directory) / _APP_DATA_FILE
        if not file.exists():
            return cls()
        try:
            data = json.loads(file.read_text(encoding="utf-8"))
        except ValueError as error:
            raise ValueError(f"Unable to parse settings file {file}: {error}") from error
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {"settings": self.settings.to_dict(), "last_gallery": self.last_gallery}

    @classmethod
    def from_dict(cls, data: Any) -> AppData:
        if not isinstance(data, Mapping):
            raise ValueError(f"AppData must be an object, got {type(data).__name__}")
        settings = data.get("settings")
        last_gallery = data.get("last_gallery")
        return cls(
            settings=Settings.from_dict(settings) if settings is not None else Settings(),
            last_gallery=str(last_gallery) if last_gallery is not None else None,
        )


class AppDataState:
    """Thread-safe holder of the application data."""

    def __init__(self, data: AppData | None = None) -> None:
        self.data = data if data is not None else AppData()
        self._lock = threading.RLock()

    def save(self, directory: str | os.PathLike[str]) -> None:
        """Write the data as pretty JSON into ``directory``, creating it if needed."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        with self._lock:
            text = json.dumps(self.data.to_dict(), indent=2, ensure_ascii=False)
        (directory / _APP_DATA_FILE).write_text(text, encoding="utf-8")

    def get_settings(self) -> Settings:
        with self._lock:
            return replace(self.data.settings)

    def set_settings(self, settings: Settings, directory: str | os.PathLike[str]) -> bool:
        """Store and save new settings; return whether the language changed."""
        with self._lock:
            old = self.data.settings
            self.data.settings = replace(settings)
            self.save(directory)
        return old.language != settings.language