"""Great-circle distance and the distance texts shown on the pages."""

from __future__ import annotations

import math

EARTH_RADIUS_M = 6_371_000.0


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in metres between two points given in degrees."""
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlon / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def format_course_distance(meters: float) -> str:
    """Distance to a course: whole metres below 1 km, else km to one decimal."""
    if meters >= 1000:
        return f"{meters / 1000.0:.1f} km"
    return f"{meters:.0f} m"


def format_hole_distance(meters: float) -> str:
    """Distance to a green: truncated metres below 1 km, else km to one decimal."""
    if meters >= 1000.0:
        return f"{meters / 1000.0:.1f}"
    return str(int(meters))