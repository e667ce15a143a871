"""GPS fix state, updated from parsed NMEA sentences."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

_POSITION_PREFIXES = ("$GPGGA", "$GNGGA", "$GPRMC", "$GNRMC")

_READING_KEYS = (
    "fix",
    "fix_quality",
    "latitude",
    "longitude",
    "hour",
    "minute",
    "seconds",
    "day",
    "month",
    "year",
    "satellites",
    "hdop",
    "altitude",
    "speed",
    "angle",
)


@dataclass(frozen=True)
class GpsData:
    """A snapshot of the receiver's latest fix."""

    fix: bool = False
    fix_quality: int = 0
    lat: float = 0.0
    lon: float = 0.0
    hour: int = 0
    minute: int = 0
    second: int = 0
    day: int = 0
    month: int = 0
    year: int = 0
    sats: int = 0
    hdop: float = 99.0
    altitude: float = 0.0
    speed_knots: float = 0.0
    track_angle: float = 0.0


def is_position_sentence(sentence: str) -> bool:
    """Return True for GGA and RMC sentences from GPS or multi-GNSS talkers."""
    return sentence.startswith(_POSITION_PREFIXES)


class GpsManager:
    """Keeps the latest fix and whether it has been read since it changed."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data = GpsData()
        self._new_data = False

    def update(self, sentence: str, reading: Mapping[str, Any]) -> bool:
        """Take a parsed reading if the sentence is a position sentence.

        ``reading`` holds the parser's fields: fix, fix_quality, latitude,
        longitude (decimal degrees), hour, minute, seconds, day, month,
        year (two digits), satellites, hdop, altitude, speed (knots) and
        angle. Returns True when the reading was taken.
        """
        if not is_position_sentence(sentence):
            return False
        missing = [key for key in _READING_KEYS if key not in reading]
        if missing:
            raise ValueError(f"reading lacks fields: {', '.join(missing)}")
        data = GpsData(
            fix=bool(reading["fix"]),
            fix_quality=int(reading["fix_quality"]),
            lat=float(reading["latitude"]),
            lon=float(reading["longitude"]),
            hour=int(reading["hour"]),
            minute=int(reading["minute"]),
            second=int(reading["seconds"]),
            day=int(reading["day"]),
            month=int(reading["month"]),
            year=int(reading["year"]) + 2000,
            sats=int(reading["satellites"]),
            hdop=float(reading["hdop"]),
            altitude=float(reading["altitude"]),
            speed_knots=float(reading["speed"]),
            track_angle=float(reading["angle"]),
        )
        with self._lock:
            self._data = data
            self._new_data = True
        return True

    def has_new_data(self) -> bool:
        """True if a reading arrived since the last fetch."""
        return self._new_data

    def fetch_data(self) -> GpsData:
        """Return a snapshot of the latest fix and clear the new-data flag."""
        with self._lock:
            snapshot = replace(self._data)
            self._new_data = False
        return snapshot