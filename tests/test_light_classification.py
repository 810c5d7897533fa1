#!/usr/bin/env python3
"""
Light Classification Test
=========================

1. Light mark 해석 (대소문자 무시, 인식 불가 mark)
2. 항해등 조합 -> Heading 분류표
3. Vessel heading 판단 (일부 mark 인식 불가 시 UNKNOWN)
"""
import pytest

from navlights_core import (
    Heading,
    HeadingClassifier,
    LightColor,
    Vessel,
    parse_light_mark,
)

RED, GREEN, WHITE = LightColor.RED, LightColor.GREEN, LightColor.WHITE


@pytest.mark.parametrize("mark, expected", [
    ("r", RED), ("R", RED),
    ("g", GREEN), ("G", GREEN),
    ("w", WHITE), ("W", WHITE),
])
def test_parse_recognized_marks(mark, expected):
    assert parse_light_mark(mark) is expected


@pytest.mark.parametrize("mark", ["", "c", "b", "235", "sa24r", "rg", " r", None, 3])
def test_parse_unrecognized_marks(mark):
    assert parse_light_mark(mark) is None


@pytest.mark.parametrize("lights, expected", [
    ([WHITE], Heading.AWAY),
    ([GREEN, RED], Heading.TOWARDS),
    ([RED, GREEN], Heading.TOWARDS),
    ([GREEN], Heading.RIGHT),
    ([RED], Heading.LEFT),
    ([RED, WHITE], Heading.UNKNOWN),
    ([WHITE, RED], Heading.UNKNOWN),
    ([GREEN, WHITE], Heading.UNKNOWN),
    ([WHITE, GREEN], Heading.UNKNOWN),
    ([RED, WHITE, GREEN], Heading.UNKNOWN),
    ([WHITE, GREEN, RED], Heading.UNKNOWN),
    ([], Heading.UNKNOWN),
])
def test_heading_rule_table(lights, expected):
    assert HeadingClassifier.classify(lights) is expected


def test_duplicate_lights_collapse():
    assert HeadingClassifier.classify([RED, RED, GREEN]) is Heading.TOWARDS
    assert HeadingClassifier.classify([WHITE, WHITE]) is Heading.AWAY


@pytest.mark.parametrize("marks, expected", [
    (("xsaf", "g"), Heading.UNKNOWN),
    (("r", "g"), Heading.TOWARDS),
    (("w", "g"), Heading.UNKNOWN),
    (("w", "r"), Heading.UNKNOWN),
    (("g",), Heading.RIGHT),
    (("W",), Heading.AWAY),
    (("b",), Heading.UNKNOWN),
    ((), Heading.UNKNOWN),
])
def test_vessel_heading(marks, expected):
    assert Vessel(marks).heading is expected


def test_vessel_lights_none_on_partial_parse():
    assert Vessel(("r", "x")).lights is None
    assert Vessel(("R", "g")).lights == (RED, GREEN)


def test_every_heading_has_description():
    for heading in Heading:
        assert HeadingClassifier.get_heading_description(heading) != "Unknown"
