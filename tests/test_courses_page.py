import pytest

from golfgps.courses import CoursesManager
from golfgps.courses_page import CoursesPage, order_courses
from golfgps.geo import format_course_distance, haversine
from golfgps.gps import GpsData, GpsManager
from golfgps.hole_page import HolePage
from golfgps.page import App


def reading(lat, lon):
    return {
        "fix": True, "fix_quality": 1, "latitude": lat, "longitude": lon,
        "hour": 0, "minute": 0, "seconds": 0, "day": 1, "month": 1, "year": 24,
        "satellites": 8, "hdop": 0.9, "altitude": 0.0, "speed": 0.0, "angle": 0.0,
    }


@pytest.fixture
def app():
    courses = CoursesManager()
    courses.begin_from_flash()
    return App(courses, GpsManager())


def test_order_by_name_without_fix(app):
    courses = app.courses.courses
    order = order_courses(courses, GpsData())
    assert [courses[i].name for i in order] == ["Centurion", "Irene"]


def test_order_by_distance_with_fix(app):
    courses = app.courses.courses
    irene = courses[0].location
    near_irene = GpsData(fix=True, lat=irene.lat, lon=irene.lon)
    assert order_courses(courses, near_irene) == [0, 1]
    centurion = courses[1].location
    near_centurion = GpsData(fix=True, lat=centurion.lat, lon=centurion.lon)
    assert order_courses(courses, near_centurion) == [1, 0]


def test_rows_without_fix(app):
    page = CoursesPage(app)
    page.on_create()
    assert page.header == "Courses"
    assert [row.name for row in page.rows] == ["Centurion", "Irene"]
    assert all(row.spinner_visible and not row.distance_visible for row in page.rows)


def test_rows_with_fix(app):
    irene = app.courses.courses[0].location
    centurion = app.courses.courses[1].location
    app.gps.update("$GPGGA", reading(irene.lat, irene.lon))
    page = CoursesPage(app)
    page.on_create()
    assert [row.name for row in page.rows] == ["Irene", "Centurion"]
    assert page.rows[0].distance == "0 m"
    expected = format_course_distance(
        haversine(irene.lat, irene.lon, centurion.lat, centurion.lon)
    )
    assert page.rows[1].distance == expected
    assert all(row.distance_visible and not row.spinner_visible for row in page.rows)


def test_select_opens_hole_page(app):
    page = CoursesPage(app)
    app.pages.push_page(page)
    hole_page = page.select(0)
    assert app.pages.current is hole_page
    assert isinstance(hole_page, HolePage)
    assert hole_page.course_index == 1
    assert page.rows == []


def test_back_rebuilds_list(app):
    page = CoursesPage(app)
    app.pages.push_page(page)
    page.select(1)
    app.pages.pop_page()
    assert app.pages.current is page
    assert [row.course_index for row in page.rows] == [1, 0]


def test_select_out_of_range(app):
    page = CoursesPage(app)
    page.on_create()
    with pytest.raises(IndexError):
        page.select(5)