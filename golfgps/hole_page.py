"""The hole page: distances to the front, middle and back of the green."""

from __future__ import annotations

from golfgps.courses import Hole
from golfgps.geo import format_hole_distance, haversine
from golfgps.gps import GpsData
from golfgps.page import App, Direction, Page

NO_HOLE_TITLE = "No hole data"
NO_FIX_DISTANCES = ("360", "345", "329")


def _hole_title(hole: Hole) -> str:
    return f"#{hole.number}  Par {hole.par}"


class HolePage(Page):
    """Shows one hole of a course; swipe up and down to change holes."""

    def __init__(self, app: App, course_index: int) -> None:
        super().__init__(app)
        self.course_index = course_index
        self.hole_index = 0
        self.front = ""
        self.mid = ""
        self.back = ""

    @property
    def holes(self) -> tuple[Hole, ...]:
        """The holes of this page's course."""
        return self.app.courses.courses[self.course_index].holes

    def on_create(self) -> None:
        holes = self.holes
        self.create_base(_hole_title(holes[0]) if holes else NO_HOLE_TITLE, True)
        self.front = self.mid = self.back = ""
        self.navigate_to(0)
        self._update_distances(self.app.gps.fetch_data())

    def navigate_to(self, index: int) -> Hole | None:
        """Show the hole at ``index``, clamped to the course; None if it has no holes."""
        holes = self.holes
        if not holes:
            return None
        self.hole_index = max(0, min(index, len(holes) - 1))
        hole = holes[self.hole_index]
        self.header = _hole_title(hole)
        return hole

    def on_gps_update(self, data: GpsData) -> None:
        self._update_distances(data)

    def gesture(self, direction: Direction) -> bool:
        """Swipe up for the next hole, down for the previous, right to go back."""
        if direction is Direction.TOP:
            self.navigate_to(self.hole_index + 1)
            return True
        if direction is Direction.BOTTOM:
            self.navigate_to(self.hole_index - 1)
            return True
        return self.swipe(direction)

    def _update_distances(self, data: GpsData) -> None:
        holes = self.holes
        if not holes:
            return
        hole = holes[self.hole_index]
        if data.fix:
            to_front = haversine(data.lat, data.lon, hole.front.lat, hole.front.lon)
            to_back = haversine(data.lat, data.lon, hole.back.lat, hole.back.lon)
            to_mid = (to_front + to_back) / 2.0
            self.front = format_hole_distance(to_front)
            self.mid = format_hole_distance(to_mid)
            self.back = format_hole_distance(to_back)
        else:
            self.front, self.mid, self.back = NO_FIX_DISTANCES