"""The home page: the root of the page stack."""

from __future__ import annotations

from enum import Enum

from golfgps.courses_page import CoursesPage
from golfgps.location import LocationPage
from golfgps.page import Page


class HomeButton(Enum):
    """Buttons on the home page, valued by their label."""

    COURSES = "Courses"
    LOCATION = "Location"


class HomePage(Page):
    """Root page with buttons to the course list and the location page."""

    title = "GOLF GPS"
    back_button = False

    def __init__(self, app) -> None:
        super().__init__(app)
        self.buttons: tuple[HomeButton, ...] = ()

    def on_create(self) -> None:
        super().on_create()
        self.buttons = tuple(HomeButton)
        self.on_gps_update(self.app.gps.fetch_data())

    def on_destroy(self) -> None:
        super().on_destroy()
        self.buttons = ()

    def select(self, button: HomeButton) -> Page:
        """Open the page behind ``button`` and return it."""
        if button is HomeButton.COURSES:
            page: Page = CoursesPage(self.app)
        elif button is HomeButton.LOCATION:
            page = LocationPage(self.app)
        else:
            raise ValueError(f"unknown button: {button!r}")
        self.app.pages.push_page(page)
        return page