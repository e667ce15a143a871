import pytest

from golfgps.courses import CoursesManager
from golfgps.geo import format_hole_distance, haversine
from golfgps.gps import GpsManager
from golfgps.hole_page import NO_FIX_DISTANCES, NO_HOLE_TITLE, HolePage
from golfgps.page import App, Direction, Page


def reading(lat, lon, fix=True):
    return {
        "fix": fix, "fix_quality": 1, "latitude": lat, "longitude": lon,
        "hour": 0, "minute": 0, "seconds": 0, "day": 1, "month": 1, "year": 24,
        "satellites": 8, "hdop": 0.9, "altitude": 0.0, "speed": 0.0, "angle": 0.0,
    }


@pytest.fixture
def app():
    courses = CoursesManager()
    courses.begin_from_flash()
    return App(courses, GpsManager())


def test_first_hole_without_fix(app):
    page = HolePage(app, 0)
    page.on_create()
    assert page.header == "#1  Par 4"
    assert (page.front, page.mid, page.back) == NO_FIX_DISTANCES
    assert page.back_enabled


def test_gesture_moves_between_holes(app):
    page = HolePage(app, 0)
    page.on_create()
    assert page.gesture(Direction.TOP)
    assert page.hole_index == 1
    assert page.header == "#2  Par 5"
    page.gesture(Direction.BOTTOM)
    page.gesture(Direction.BOTTOM)
    assert page.hole_index == 0
    assert page.header == "#1  Par 4"


def test_navigate_clamps(app):
    page = HolePage(app, 0)
    page.on_create()
    hole = page.navigate_to(100)
    assert page.hole_index == len(page.holes) - 1
    assert hole == page.holes[-1]
    page.navigate_to(-5)
    assert page.hole_index == 0


def test_distances_with_fix(app):
    hole = app.courses.courses[0].holes[0]
    app.gps.update("$GPGGA", reading(hole.front.lat, hole.front.lon))
    page = HolePage(app, 0)
    page.on_create()
    to_back = haversine(hole.front.lat, hole.front.lon, hole.back.lat, hole.back.lon)
    assert page.front == "0"
    assert page.back == format_hole_distance(to_back)
    assert page.mid == format_hole_distance(to_back / 2.0)


def test_tick_follows_current_hole(app):
    page = HolePage(app, 0)
    page.on_create()
    page.gesture(Direction.TOP)
    second = app.courses.courses[0].holes[1]
    app.gps.update("$GNRMC", reading(second.back.lat, second.back.lon))
    page.tick()
    assert page.back == "0"
    assert page.header == "#2  Par 5"


def test_course_without_holes():
    courses = CoursesManager()
    courses.load('{"courses":[{"name":"Empty","location":{"lat":0,"lon":0},"holes":[]}]}')
    page = HolePage(App(courses, GpsManager()), 0)
    page.on_create()
    assert page.header == NO_HOLE_TITLE
    assert page.navigate_to(3) is None
    assert (page.front, page.mid, page.back) == ("", "", "")


def test_right_gesture_goes_back(app):
    root = Page(app)
    app.pages.push_page(root)
    page = HolePage(app, 1)
    app.pages.push_page(page)
    assert page.gesture(Direction.RIGHT)
    assert app.pages.current is root
    assert not page.shown


def test_bad_course_index(app):
    with pytest.raises(IndexError):
        HolePage(app, 9).on_create()