import json

import pytest

from golfgps.courses import (
    Course,
    CourseDataError,
    CoursesManager,
    Geo,
    Hazard,
    load_courses,
    parse_courses,
)


@pytest.fixture
def builtin():
    manager = CoursesManager()
    manager.begin_from_flash()
    return manager.courses


def test_builtin_course_names(builtin):
    assert [c.name for c in builtin] == ["Irene", "Centurion"]


def test_builtin_courses_have_eighteen_numbered_holes(builtin):
    for course in builtin:
        assert [h.number for h in course.holes] == list(range(1, 19))


def test_builtin_irene_values(builtin):
    irene = builtin[0]
    assert irene.location == Geo(-25.88387, 28.22328)
    assert irene.holes[1].par == 5
    assert irene.holes[0].front == Geo(-25.887716, 28.221712)
    assert all(h.hazards == () for h in irene.holes)


def test_builtin_centurion_all_par_four(builtin):
    assert {h.par for h in builtin[1].holes} == {4}


def test_par_defaults_to_four_when_missing():
    courses = parse_courses([{"name": "A", "holes": [{"number": 1}]}])
    assert courses[0].holes[0].par == 4


def test_explicit_par_is_kept():
    courses = parse_courses([{"name": "A", "holes": [{"number": 1, "par": 3}]}])
    assert courses[0].holes[0].par == 3


def test_hazards_are_parsed():
    data = [
        {
            "name": "A",
            "holes": [
                {
                    "number": 7,
                    "hazards": [{"type": "water", "lat": 1.5, "lon": -2.5}],
                }
            ],
        }
    ]
    hole = parse_courses(data)[0].holes[0]
    assert hole.hazards == (Hazard("water", Geo(1.5, -2.5)),)


def test_missing_fields_read_as_zero_and_empty():
    course = parse_courses([{}])[0]
    assert course == Course(name="", location=Geo(0.0, 0.0), holes=())


def test_load_courses_round_trip():
    doc = {
        "courses": [
            {
                "name": "Test",
                "location": {"lat": 10.0, "lon": 20.0},
                "holes": [
                    {
                        "number": 1,
                        "par": 5,
                        "pin": {"lat": 1.0, "lon": 2.0},
                        "front": {"lat": 3.0, "lon": 4.0},
                        "back": {"lat": 5.0, "lon": 6.0},
                        "hazards": [],
                    }
                ],
            }
        ]
    }
    (course,) = load_courses(json.dumps(doc))
    assert course.name == "Test"
    assert course.location == Geo(10.0, 20.0)
    hole = course.holes[0]
    assert (hole.pin, hole.front, hole.back) == (Geo(1.0, 2.0), Geo(3.0, 4.0), Geo(5.0, 6.0))


def test_document_without_courses_gives_empty_list():
    assert load_courses('{"other": 1}') == []


def test_invalid_json_raises():
    with pytest.raises(CourseDataError):
        load_courses("{not json")


def test_callback_called_after_load():
    calls = []
    manager = CoursesManager()
    manager.set_loaded_callback(lambda: calls.append(len(manager.courses)))
    manager.begin_from_flash()
    assert calls == [2]


def test_callback_not_called_on_error():
    calls = []
    manager = CoursesManager()
    manager.set_loaded_callback(lambda: calls.append(1))
    with pytest.raises(CourseDataError):
        manager.load("[")
    assert calls == []
    assert manager.courses == ()


def test_loading_twice_appends():
    manager = CoursesManager()
    manager.load('{"courses": [{"name": "X"}]}')
    manager.load('{"courses": [{"name": "Y"}]}')
    assert [c.name for c in manager.courses] == ["X", "Y"]