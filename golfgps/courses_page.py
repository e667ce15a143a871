"""The course list, ordered by distance when there is a fix."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from golfgps.courses import Course
from golfgps.geo import format_course_distance, haversine
from golfgps.gps import GpsData
from golfgps.hole_page import HolePage
from golfgps.page import Page


@dataclass
class CourseRow:
    """One button in the course list."""

    course_index: int
    name: str
    distance: str = ""
    distance_visible: bool = False
    spinner_visible: bool = True


def order_courses(courses: Sequence[Course], data: GpsData) -> list[int]:
    """Indices of ``courses``: nearest first with a fix, else by name."""
    indices = range(len(courses))
    if data.fix:
        return sorted(
            indices,
            key=lambda i: (courses[i].location.lat - data.lat) ** 2
            + (courses[i].location.lon - data.lon) ** 2,
        )
    return sorted(indices, key=lambda i: courses[i].name)


class CoursesPage(Page):
    """Lists the courses with their distance from the current fix."""

    title = "Courses"

    def __init__(self, app) -> None:
        super().__init__(app)
        self.rows: list[CourseRow] = []

    def on_create(self) -> None:
        super().on_create()
        courses = self.app.courses.courses
        order = order_courses(courses, self.app.gps.fetch_data())
        self.rows = [CourseRow(i, courses[i].name) for i in order]
        self.on_gps_update(self.app.gps.fetch_data())

    def on_destroy(self) -> None:
        super().on_destroy()
        self.rows = []

    def on_gps_update(self, data: GpsData) -> None:
        courses = self.app.courses.courses
        for row in self.rows:
            if data.fix:
                location = courses[row.course_index].location
                meters = haversine(data.lat, data.lon, location.lat, location.lon)
                row.distance = format_course_distance(meters)
                row.distance_visible = True
                row.spinner_visible = False
            else:
                row.distance_visible = False
                row.spinner_visible = True

    def select(self, row: int) -> HolePage:
        """Open the hole page for the course shown in list position ``row``."""
        page = HolePage(self.app, self.rows[row].course_index)
        self.app.pages.push_page(page)
        return page