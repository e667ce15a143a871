"""Screen pages, the page stack and the state they share."""

from __future__ import annotations

from enum import Enum

from golfgps.courses import CoursesManager
from golfgps.gps import GpsData, GpsManager

LCD_WIDTH = 368
LCD_HEIGHT = 448
PAD = 24
CORNER = 52

GPS_INTERVAL_MS = 200
"""How often a shown page refreshes its fix indicator and readings."""


class FixColor(Enum):
    """Colour of the fix indicator in a page header."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    ORANGE = "orange"


class Direction(Enum):
    """Direction of a swipe gesture."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


def fix_color(data: GpsData) -> FixColor:
    """Pick the indicator colour for a fix.

    Red without a fix, blue for a differential fix, green when HDOP is at
    most 1.5 and orange otherwise.
    """
    if not data.fix:
        return FixColor.RED
    if data.fix_quality == 2:
        return FixColor.BLUE
    if data.hdop <= 1.5:
        return FixColor.GREEN
    return FixColor.ORANGE


class App:
    """The course table, the GPS state and the page stack shown to the user."""

    def __init__(self, courses: CoursesManager, gps: GpsManager) -> None:
        self.courses = courses
        self.gps = gps
        self.pages = PageManager()


class Page:
    """A screen with a header, a fix indicator and a periodic GPS refresh.

    Subclasses set ``title`` and ``back_button`` or override ``on_create``.
    """

    title = ""
    back_button = True

    def __init__(self, app: App) -> None:
        self.app = app
        self.header: str | None = None
        self.back_enabled = False
        self.led: FixColor | None = None
        self.timer_running = False

    @property
    def shown(self) -> bool:
        """True while the page's screen exists."""
        return self.header is not None

    def on_create(self) -> None:
        """Build the page's screen."""
        self.create_base(self.title, self.back_button)

    def on_destroy(self) -> None:
        """Stop the refresh timer and tear the screen down."""
        self.timer_running = False
        self.header = None
        self.led = None
        self.back_enabled = False

    def on_gps_update(self, data: GpsData) -> None:
        """Refresh the page from a new fix; the base page shows nothing more."""

    def create_base(self, title: str, can_go_back: bool) -> None:
        """Show the header with ``title``, the fix indicator and start the timer."""
        self.header = title
        self.back_enabled = can_go_back
        self.led = fix_color(self.app.gps.fetch_data())
        self.timer_running = True

    def tick(self) -> GpsData | None:
        """Run one refresh: update the indicator and pass the fix to the page.

        Returns the fix used, or None when the page is not shown.
        """
        if not self.timer_running:
            return None
        data = self.app.gps.fetch_data()
        self.led = fix_color(data)
        self.on_gps_update(data)
        return data

    def go_back(self) -> bool:
        """Handle the back button; returns False if the page has none."""
        if not self.back_enabled:
            return False
        self.app.pages.pop_page()
        return True

    def swipe(self, direction: Direction) -> bool:
        """Handle a swipe; a right swipe goes back on pages that allow it."""
        if not self.back_enabled or direction is not Direction.RIGHT:
            return False
        self.app.pages.pop_page()
        return True


class PageManager:
    """A stack of pages whose bottom page is never popped."""

    def __init__(self) -> None:
        self._stack: list[Page] = []

    def push_page(self, page: Page) -> None:
        """Show ``page``, then tear down the page it covers."""
        old = self._stack[-1] if self._stack else None
        self._stack.append(page)
        page.on_create()
        if old is not None:
            old.on_destroy()

    def pop_page(self) -> Page | None:
        """Show the previous page, then destroy and return the top one.

        Does nothing and returns None when only the root page is left.
        """
        if len(self._stack) <= 1:
            return None
        top = self._stack[-1]
        self._stack[-2].on_create()
        top.on_destroy()
        self._stack.pop()
        return top

    @property
    def current(self) -> Page | None:
        """The page on top of the stack, or None if the stack is empty."""
        return self._stack[-1] if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)