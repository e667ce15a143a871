"""The location page: raw and smoothed position, HDOP and satellites."""

from __future__ import annotations

from golfgps.gps import GpsData
from golfgps.page import App, Page

SMOOTHING_ALPHA = 0.2
MAX_SMOOTHING_HDOP = 3.0
PLACEHOLDER_LAT = "Lat: --"
PLACEHOLDER_LON = "Lon: --"


class EmaSmoother:
    """Exponential moving average of a latitude/longitude pair."""

    def __init__(self, alpha: float = SMOOTHING_ALPHA) -> None:
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha
        self.value: tuple[float, float] | None = None

    @property
    def initialized(self) -> bool:
        """True once a first position has been taken."""
        return self.value is not None

    def update(self, lat: float, lon: float) -> tuple[float, float]:
        """Blend a new position in and return the smoothed position."""
        if self.value is None:
            self.value = (lat, lon)
        else:
            old_lat, old_lon = self.value
            a = self.alpha
            self.value = (a * lat + (1 - a) * old_lat, a * lon + (1 - a) * old_lon)
        return self.value


class LocationPage(Page):
    """Shows the current fix, its smoothed value and its quality."""

    title = "Location"

    def __init__(self, app: App) -> None:
        super().__init__(app)
        self.smoother = EmaSmoother(SMOOTHING_ALPHA)
        self.raw_lat = PLACEHOLDER_LAT
        self.raw_lon = PLACEHOLDER_LON
        self.smooth_lat = PLACEHOLDER_LAT
        self.smooth_lon = PLACEHOLDER_LON
        self.hdop = "HDOP: --"
        self.sats = "Sats: --"

    def on_create(self) -> None:
        super().on_create()
        self.raw_lat = self.smooth_lat = PLACEHOLDER_LAT
        self.raw_lon = self.smooth_lon = PLACEHOLDER_LON
        self.hdop = "HDOP: --"
        self.sats = "Sats: --"
        self.on_gps_update(self.app.gps.fetch_data())

    def on_gps_update(self, data: GpsData) -> None:
        if data.fix:
            self.raw_lat = f"Lat: {data.lat:.8f}"
            self.raw_lon = f"Lon: {data.lon:.8f}"
        else:
            self.raw_lat = PLACEHOLDER_LAT
            self.raw_lon = PLACEHOLDER_LON

        if data.fix and 0 < data.hdop <= MAX_SMOOTHING_HDOP:
            lat, lon = self.smoother.update(data.lat, data.lon)
            self.smooth_lat = f"Lat: {lat:.6f}"
            self.smooth_lon = f"Lon: {lon:.6f}"
        else:
            self.smooth_lat = PLACEHOLDER_LAT
            self.smooth_lon = PLACEHOLDER_LON

        if data.fix:
            self.hdop = f"HDOP: {data.hdop:.1f}"
            self.sats = f"Sats: {data.sats}"
        else:
            self.hdop = "HDOP: --"
            self.sats = "Sats: --"