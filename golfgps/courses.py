"""Golf course data: the model, JSON parsing and the built-in course table."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any


class CourseDataError(ValueError):
    """Raised when course data cannot be parsed."""


@dataclass(frozen=True)
class Geo:
    """A point given by latitude and longitude in degrees."""

    lat: float = 0.0
    lon: float = 0.0


@dataclass(frozen=True)
class Hazard:
    """A named hazard at a location on a hole."""

    type: str
    loc: Geo


@dataclass(frozen=True)
class Hole:
    """One hole with its pin and the front and back of the green."""

    number: int
    par: int
    pin: Geo
    front: Geo
    back: Geo
    hazards: tuple[Hazard, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Course:
    """A course with its clubhouse location and its holes."""

    name: str
    location: Geo
    holes: tuple[Hole, ...] = field(default_factory=tuple)


DEFAULT_PAR = 4


def _obj(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _arr(value: Any) -> list:
    return value if isinstance(value, list) else []


def _num(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def _int(value: Any) -> int:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return int(value)
    return 0


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _geo(value: Any) -> Geo:
    obj = _obj(value)
    return Geo(_num(obj.get("lat")), _num(obj.get("lon")))


def _hazard(value: Any) -> Hazard:
    obj = _obj(value)
    return Hazard(
        type=_str(obj.get("type")),
        loc=Geo(_num(obj.get("lat")), _num(obj.get("lon"))),
    )


def _hole(value: Any) -> Hole:
    obj = _obj(value)
    return Hole(
        number=_int(obj.get("number")),
        par=_int(obj["par"]) if "par" in obj else DEFAULT_PAR,
        pin=_geo(obj.get("pin")),
        front=_geo(obj.get("front")),
        back=_geo(obj.get("back")),
        hazards=tuple(_hazard(h) for h in _arr(obj.get("hazards"))),
    )


def parse_courses(data: Iterable[Any]) -> list[Course]:
    """Build courses from a sequence of decoded JSON course objects.

    Missing numbers read as zero, a missing name as an empty string and a
    missing par as 4.
    """
    courses = []
    for entry in data:
        obj = _obj(entry)
        courses.append(
            Course(
                name=_str(obj.get("name")),
                location=_geo(obj.get("location")),
                holes=tuple(_hole(h) for h in _arr(obj.get("holes"))),
            )
        )
    return courses


def load_courses(text: str | bytes) -> list[Course]:
    """Parse a JSON document holding a top-level ``courses`` array."""
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CourseDataError(f"JSON parse failed: {exc}") from exc
    return parse_courses(_arr(_obj(document).get("courses")))


# (number, par, pin, front, back)
_IRENE_HOLES = (
    (1, 4, (-25.887849, 28.221689), (-25.887716, 28.221712), (-25.887970, 28.221664)),
    (2, 5, (-25.882923, 28.220810), (-25.883033, 28.220789), (-25.882812, 28.220832)),
    (3, 4, (-25.884191, 28.214476), (-25.884200, 28.214620), (-25.884170, 28.214337)),
    (4, 3, (-25.886364, 28.215381), (-25.886229, 28.215376), (-25.886496, 28.215382)),
    (5, 4, (-25.884222, 28.218473), (-25.884314, 28.218345), (-25.884111, 28.218589)),
    (6, 4, (-25.886998, 28.218954), (-25.886923, 28.218914), (-25.887059, 28.218967)),
    (7, 3, (-25.887103, 28.220589), (-25.887114, 28.220515), (-25.887066, 28.220678)),
    (8, 4, (-25.889629, 28.221866), (-25.889513, 28.221897), (-25.889732, 28.221801)),
    (9, 5, (-25.885279, 28.223354), (-25.885380, 28.223323), (-25.885188, 28.223375)),
    (10, 5, (-25.878190, 28.222731), (-25.878305, 28.222722), (-25.878072, 28.222745)),
    (11, 4, (-25.878542, 28.219323), (-25.878475, 28.219447), (-25.878594, 28.219225)),
    (12, 4, (-25.880113, 28.215956), (-25.880005, 28.216014), (-25.880211, 28.215909)),
    (13, 3, (-25.879924, 28.217219), (-25.879943, 28.217128), (-25.879895, 28.217315)),
    (14, 4, (-25.882610, 28.213946), (-25.882531, 28.214017), (-25.882692, 28.213844)),
    (15, 4, (-25.882402, 28.216603), (-25.882421, 28.216473), (-25.882373, 28.216708)),
    (16, 3, (-25.883044, 28.215559), (-25.882990, 28.215655), (-25.883118, 28.215439)),
    (17, 5, (-25.883076, 28.219592), (-25.883075, 28.219498), (-25.883075, 28.219694)),
    (18, 4, (-25.882949, 28.223237), (-25.882912, 28.223079), (-25.882973, 28.223394)),
)

_CENTURION_PIN = (-25.887849, 28.221689)

# (front, back) for holes 1..18, all par 4
_CENTURION_GREENS = (
    ((-25.872973, 28.204899), (-25.872943, 28.204879)),
    ((-25.87299, 28.204929), (-25.87296, 28.204909)),
    ((-25.873017, 28.204952), (-25.872987, 28.204932)),
    ((-25.87305, 28.204963), (-25.87302, 28.204943)),
    ((-25.873084, 28.204963), (-25.873054, 28.204943)),
    ((-25.873117, 28.204952), (-25.873087, 28.204932)),
    ((-25.873144, 28.204929), (-25.873114, 28.204909)),
    ((-25.873161, 28.204899), (-25.873131, 28.204879)),
    ((-25.873167, 28.204865), (-25.873137, 28.204845)),
    ((-25.873161, 28.204831), (-25.873131, 28.204811)),
    ((-25.873144, 28.204801), (-25.873114, 28.204781)),
    ((-25.873117, 28.204778), (-25.873087, 28.204758)),
    ((-25.873084, 28.204767), (-25.873054, 28.204747)),
    ((-25.87305, 28.204767), (-25.87302, 28.204747)),
    ((-25.873017, 28.204778), (-25.872987, 28.204758)),
    ((-25.87299, 28.204801), (-25.87296, 28.204781)),
    ((-25.872973, 28.204831), (-25.872943, 28.204811)),
    ((-25.872967, 28.204865), (-25.872937, 28.204845)),
)


def _point(pair: tuple[float, float]) -> dict:
    return {"lat": pair[0], "lon": pair[1]}


def _builtin_document() -> list[dict]:
    irene = {
        "name": "Irene",
        "location": _point((-25.88387, 28.22328)),
        "holes": [
            {
                "number": number,
                "par": par,
                "pin": _point(pin),
                "front": _point(front),
                "back": _point(back),
                "hazards": [],
            }
            for number, par, pin, front, back in _IRENE_HOLES
        ],
    }
    centurion = {
        "name": "Centurion",
        "location": _point((-25.873067, 28.204865)),
        "holes": [
            {
                "number": number,
                "par": 4,
                "pin": _point(_CENTURION_PIN),
                "front": _point(front),
                "back": _point(back),
                "hazards": [],
            }
            for number, (front, back) in enumerate(_CENTURION_GREENS, start=1)
        ],
    }
    return [irene, centurion]


class CoursesManager:
    """Holds the loaded courses and notifies a listener once loading is done."""

    def __init__(self) -> None:
        self._courses: list[Course] = []
        self._on_loaded: Callable[[], None] | None = None

    def begin_from_flash(self) -> None:
        """Load the built-in course table."""
        self._add(parse_courses(_builtin_document()))

    def load(self, text: str | bytes) -> None:
        """Load courses from a JSON document; raises CourseDataError if invalid."""
        self._add(load_courses(text))

    def set_loaded_callback(self, callback: Callable[[], None] | None) -> None:
        """Set the function called after each successful load."""
        self._on_loaded = callback

    @property
    def courses(self) -> tuple[Course, ...]:
        """All courses loaded so far, in load order."""
        return tuple(self._courses)

    def _add(self, courses: list[Course]) -> None:
        self._courses.extend(courses)
        if self._on_loaded is not None:
            self._on_loaded()