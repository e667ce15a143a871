# golfgps

The logic of a handheld golf GPS rangefinder as a plain Python library. It has
no third-party dependencies.

## What is in it

- **Course data** (`golfgps.courses`). The records are `Geo`, `Hazard`,
  `Hole` and `Course`, and they are frozen dataclasses.
  - `load_courses(text)` reads a JSON document that has a top-level `courses`
    array. Text that is not valid JSON raises `CourseDataError`.
  - `parse_courses(data)` builds courses from already-decoded course objects.
    A missing number reads as zero and a missing name as `""`. A hole with no
    `par` gets par 4.
  - `CoursesManager` collects the courses:
    - `begin_from_flash()` loads the built-in table, which holds the "Irene"
      and "Centurion" courses with 18 holes each.
    - `load(text)` adds courses from JSON.
    - `courses` is a property that returns every course loaded so far.
    - `set_loaded_callback(callback)` sets a function that runs after each
      load.
- **GPS state** (`golfgps.gps`).
  - `GpsManager.update(sentence, reading)` takes a reading that has already
    been parsed, but only when the sentence is a GGA or RMC position sentence
    (see `is_position_sentence`). It returns whether the reading was taken.
    - `reading` must contain `fix`, `fix_quality`, `latitude`, `longitude`,
      `hour`, `minute`, `seconds`, `day`, `month`, `year`, `satellites`,
      `hdop`, `altitude`, `speed` and `angle`. A missing field raises
      `ValueError`.
    - `year` is the two-digit year; 2000 is added to it.
  - `has_new_data()` says whether a reading has arrived since the last fetch.
  - `fetch_data()` returns a `GpsData` snapshot and clears the new-data flag.
- **Distances** (`golfgps.geo`).
  - `haversine(lat1, lon1, lat2, lon2)` returns metres.
  - `format_course_distance` gives text like `"850 m"` or `"1.2 km"`.
  - `format_hole_distance` gives text like `"999"` (metres, truncated) or
    `"1.2"` (km).
- **Pages** (`golfgps.page`, `golfgps.home`, `golfgps.courses_page`,
  `golfgps.hole_page`, `golfgps.location`). An `App` bundles a
  `CoursesManager`, a `GpsManager` and a `PageManager` stack. Pages hold the
  text a display would show: the header, the `FixColor` of the fix indicator
  (from `fix_color`) and the page's own labels. `Page.tick()` runs one
  periodic refresh. `go_back()` and `swipe(Direction.RIGHT)` pop back to the
  previous page, but never past the root.
  - `HomePage` is the root page. `select(HomeButton.COURSES)` opens a
    `CoursesPage` and `select(HomeButton.LOCATION)` opens a `LocationPage`.
  - `CoursesPage` lists `CourseRow`s. With a fix they are nearest first, with
    distances; without one they are sorted by name (see `order_courses`).
    `select(row)` opens a `HolePage`.
  - `HolePage` shows `#<number>  Par <par>` and the distances to the front,
    middle and back of the green. With no fix it shows the placeholders
    `360`, `345` and `329`. `gesture(Direction.TOP)` moves to the next hole
    and `gesture(Direction.BOTTOM)` to the previous one; the hole number is
    clamped to the course.
  - `LocationPage` shows the raw position and HDOP/satellites. It also shows
    a position smoothed by `EmaSmoother` (alpha 0.2), which is only fed while
    the HDOP is above 0 and at most 3.0.
- **Motion sensor** (`golfgps.imu`). `ImuManager(sensor)` wraps any object
  that has the methods of the `MotionSensor` protocol.
  - `begin()` configures the sensor and raises `ImuError` on failure.
  - `update()` takes a sample when one is ready.
  - `calibrate(samples)` averages gyroscope readings into a zero offset.
  - `raw` holds the last offset-corrected `ImuRaw`.

## Installing

```
pip install .
```

## Example

```python
from golfgps.courses import CoursesManager
from golfgps.gps import GpsManager
from golfgps.page import App
from golfgps.home import HomePage, HomeButton

courses = CoursesManager()
courses.begin_from_flash()
gps = GpsManager()
gps.update("$GPGGA", {
    "fix": True, "fix_quality": 1, "latitude": -25.8870, "longitude": 28.2210,
    "hour": 10, "minute": 0, "seconds": 0, "day": 1, "month": 6, "year": 24,
    "satellites": 9, "hdop": 0.9, "altitude": 1450.0, "speed": 0.0, "angle": 0.0,
})

app = App(courses, gps)
home = HomePage(app)
app.pages.push_page(home)
course_list = home.select(HomeButton.COURSES)
for row in course_list.rows:
    print(row.name, row.distance)

hole = course_list.select(0)
print(hole.header, hole.front, hole.mid, hole.back)
```

## What it does not do

- It draws nothing. The pages only compute their text and state, and a
  display layer has to render them.
- It does not read a serial port and does not parse NMEA text. You pass
  `GpsManager.update` the sentence and its fields, already parsed.
- It contains no driver for any particular motion sensor.
- It has no command-line program.

## Tests

```
pip install .[test]
pytest
```