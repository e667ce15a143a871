"""Golf GPS rangefinder logic: course data, GPS fix state, distances, pages and IMU readings."""

__version__ = "0.1.0"