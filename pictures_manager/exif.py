"""Reading picture metadata and tagging pictures with a persistent unique id."""

from __future__ import annotations

import io
import math
import os
import threading
import time
from fractions import Fraction
from pathlib import Path
from typing import Any

from PIL import Image

from pictures_manager.models import Orientation, PictureCache

_EXIF_IFD = 0x8769
_GPS_IFD = 0x8825
_INTEROP_IFD = 0xA005

_TAG_MODEL = 0x0110
_TAG_ORIENTATION = 0x0112
_TAG_EXPOSURE_TIME = 0x829A
_TAG_F_NUMBER = 0x829D
_TAG_ISO_SPEED = 0x8827
_TAG_DATE_ORIGINAL = 0x9003
_TAG_APERTURE_VALUE = 0x9202
_TAG_FOCAL_LENGTH = 0x920A
_TAG_UNIQUE_ID = 0xA420

_GPS_LATITUDE_REF = 1
_GPS_LATITUDE = 2
_GPS_LONGITUDE_REF = 3
_GPS_LONGITUDE = 4
_GPS_ALTITUDE_REF = 5
_GPS_ALTITUDE = 6

# Formats whose metadata can be written back, and the encoder used to do it.
_WRITABLE_FORMATS = {"JPEG": "JPEG", "MPO": "JPEG", "PNG": "PNG", "WEBP": "WEBP"}

_ORIENTATIONS = {
    1: Orientation.NORMAL,
    2: Orientation.HORIZONTAL_FLIP,
    3: Orientation.ROTATE_180,
    4: Orientation.VERTICAL_FLIP,
    5: Orientation.ROTATE_90_HORIZONTAL_FLIP,
    6: Orientation.ROTATE_90,
    7: Orientation.ROTATE_90_VERTICAL_FLIP,
    8: Orientation.ROTATE_270,
}


class _UidClock:
    """Hands out ids made of the current second and a counter within it."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_secs = 0
        self._count = 0

    def next(self) -> str:
        secs = int(time.time())
        with self._lock:
            if secs != self._last_secs:
                self._last_secs = secs
                self._count = 0
            count = self._count
            self._count += 1
        return f"{secs:X}-{count:X}"


_UID_CLOCK = _UidClock()


def gen_new_uid() -> str:
    """A new unique id built from the current time and a per-second counter."""
    return _UID_CLOCK.next()


def _text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    text = str(value).strip("\x00").strip()
    return text or None


def _first(value: Any) -> Any:
    if isinstance(value, (tuple, list)):
        return value[0] if value else None
    return value


def _float(value: Any) -> float | None:
    value = _first(value)
    if value is None:
        return None
    try:
        result = float(value)
    except (TypeError, ValueError, ZeroDivisionError):
        return None
    return None if math.isnan(result) else result


def _ratio(value: Any) -> tuple[int, int] | None:
    value = _first(value)
    if value is None:
        return None
    numerator = getattr(value, "numerator", None)
    denominator = getattr(value, "denominator", None)
    if numerator is None or denominator is None:
        try:
            fraction = Fraction(float(value)).limit_denominator()
        except (TypeError, ValueError, OverflowError):
            return None
        numerator, denominator = fraction.numerator, fraction.denominator
    numerator, denominator = int(numerator), int(denominator)
    if denominator == 0 or numerator == 0:
        return None
    fraction = Fraction(numerator, denominator)
    return fraction.numerator, fraction.denominator


def _degrees(value: Any, ref: Any) -> float | None:
    if not isinstance(value, (tuple, list)) or len(value) != 3:
        return None
    parts = [_float(part) for part in value]
    if any(part is None for part in parts):
        return None
    degrees, minutes, seconds = parts
    result = degrees + minutes / 60 + seconds / 3600
    return -result if _text(ref) in ("S", "W") else result


def _altitude_below_sea(ref: Any) -> bool:
    if isinstance(ref, bytes):
        return bool(ref) and ref[0] == 1
    try:
        return int(_first(ref) or 0) == 1
    except (TypeError, ValueError):
        return False


def _save_params(img: Image.Image) -> dict[str, Any]:
    params: dict[str, Any] = {}
    icc_profile = img.info.get("icc_profile")
    if icc_profile:
        params["icc_profile"] = icc_profile
    if img.format == "JPEG":
        params.update(quality="keep", subsampling="keep")
    elif img.format == "PNG" and "transparency" in img.info:
        params["transparency"] = img.info["transparency"]
    return params


def _store_uid(path: Path, uid: str) -> None:
    """Write ``uid`` into the metadata of the picture at ``path``."""
    with Image.open(path) as img:
        img.load()
        exif = img.getexif()
        exif_ifd = dict(exif.get_ifd(_EXIF_IFD))
        interop = exif.get_ifd(_INTEROP_IFD)
        if interop:
            exif_ifd[_INTEROP_IFD] = dict(interop)
        else:
            exif_ifd.pop(_INTEROP_IFD, None)
        exif_ifd[_TAG_UNIQUE_ID] = uid
        exif[_EXIF_IFD] = exif_ifd
        buffer = io.BytesIO()
        img.save(buffer, format=_WRITABLE_FORMATS[img.format], exif=exif.tobytes(), **_save_params(img))
    path.write_bytes(buffer.getvalue())


class ExifFile:
    """Metadata of a picture that carries a persistent unique id."""

    def __init__(
        self,
        path: Path,
        tags: dict[int, Any],
        exif_tags: dict[int, Any],
        gps_tags: dict[int, Any],
        size: tuple[int, int],
        uid: str,
        uuid_generated: bool,
    ) -> None:
        self.path = path
        self._tags = tags
        self._exif_tags = exif_tags
        self._gps_tags = gps_tags
        self._size = size
        self.uid = uid
        self.uuid_generated = uuid_generated

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> ExifFile | None:
        """Read the picture at ``path``; give it an id if it has none.

        Returns None when the file is not a picture whose metadata can be written.
        """
        path = Path(path)
        try:
            with Image.open(path) as img:
                image_format = img.format
                exif = img.getexif()
                tags = dict(exif)
                exif_tags = dict(exif.get_ifd(_EXIF_IFD))
                gps_tags = dict(exif.get_ifd(_GPS_IFD))
                size = img.size
        except (OSError, ValueError, SyntaxError, Image.DecompressionBombError):
            return None
        if image_format not in _WRITABLE_FORMATS:
            return None

        uid = _text(exif_tags.get(_TAG_UNIQUE_ID))
        uuid_generated = uid is None
        if uid is None:
            uid = gen_new_uid()
            _store_uid(path, uid)
            exif_tags[_TAG_UNIQUE_ID] = uid
        return cls(path, tags, exif_tags, gps_tags, size, uid, uuid_generated)

    def get_date(self) -> str | None:
        return _text(self._exif_tags.get(_TAG_DATE_ORIGINAL))

    def get_location(self) -> tuple[float, float, float] | None:
        """Latitude, longitude and altitude, when all three are recorded."""
        gps = self._gps_tags
        latitude = _degrees(gps.get(_GPS_LATITUDE), gps.get(_GPS_LATITUDE_REF))
        longitude = _degrees(gps.get(_GPS_LONGITUDE), gps.get(_GPS_LONGITUDE_REF))
        altitude = _float(gps.get(_GPS_ALTITUDE))
        if latitude is None or longitude is None or altitude is None:
            return None
        if _altitude_below_sea(gps.get(_GPS_ALTITUDE_REF)):
            altitude = -altitude
        return latitude, longitude, altitude

    def get_camera(self) -> str | None:
        return _text(self._tags.get(_TAG_MODEL))

    def get_orientation(self) -> Orientation:
        try:
            value = int(_first(self._tags.get(_TAG_ORIENTATION)) or 0)
        except (TypeError, ValueError):
            return Orientation.UNSPECIFIED
        return _ORIENTATIONS.get(value, Orientation.UNSPECIFIED)

    def get_focal_length(self) -> float | None:
        return _float(self._exif_tags.get(_TAG_FOCAL_LENGTH))

    def get_exposure_time(self) -> tuple[int, int] | None:
        return _ratio(self._exif_tags.get(_TAG_EXPOSURE_TIME))

    def get_iso_speed(self) -> int | None:
        value = _first(self._exif_tags.get(_TAG_ISO_SPEED))
        if value is None:
            return None
        try:
            iso = int(value)
        except (TypeError, ValueError):
            return None
        return iso or None

    def get_f_number(self) -> float | None:
        f_number = _float(self._exif_tags.get(_TAG_F_NUMBER))
        if f_number is not None:
            return f_number
        aperture = _float(self._exif_tags.get(_TAG_APERTURE_VALUE))
        if aperture is None:
            return None
        return math.exp(math.log(2.0) * aperture / 2.0)

    def get_dimensions(self) -> tuple[int, int]:
        """Pixel size as stored, without applying the orientation."""
        return self._size

    def regen_uid(self) -> str:
        """Give the picture a new id and write it to the file."""
        self.uid = gen_new_uid()
        _store_uid(self.path, self.uid)
        self._exif_tags[_TAG_UNIQUE_ID] = self.uid
        return self.uid

    def to_picture_cache(self, path: str) -> PictureCache:
        return PictureCache(
            path=path,
            uuid_generated=self.uuid_generated,
            date=self.get_date(),
            location=self.get_location(),
            orientation=self.get_orientation(),
            dimensions=self.get_dimensions(),
            camera=self.get_camera(),
            focal_length=self.get_focal_length(),
            exposure_time=self.get_exposure_time(),
            iso_speed=self.get_iso_speed(),
            f_number=self.get_f_number(),
        )