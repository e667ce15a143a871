[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "golfgps"
version = "0.1.0"
description = "Golf course rangefinder logic: course data, GPS fix state, distances to the green and a page stack for a display"
requires-python = ">=3.10"
dependencies = []
keywords = ["golf", "gps", "haversine", "rangefinder", "nmea", "imu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["golfgps"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
