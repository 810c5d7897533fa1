import pytest

from navlights_core import build_horizon

TOWARDS = ("R", "G")

FIXTURE_MARKS = {
    0: ("b",), 3: ("R",), 5: TOWARDS, 14: ("W",), 19: ("W",),
    21: ("R",), 26: ("G",), 35: TOWARDS, 42: TOWARDS, 47: TOWARDS,
    55: TOWARDS, 67: ("W", "G"), 74: TOWARDS, 78: ("W",), 82: ("R",),
    95: TOWARDS, 137: TOWARDS, 145: TOWARDS, 172: TOWARDS, 182: ("W",),
    198: TOWARDS, 207: TOWARDS, 212: TOWARDS, 229: TOWARDS, 231: TOWARDS,
    246: TOWARDS, 259: TOWARDS, 263: TOWARDS, 301: TOWARDS, 328: TOWARDS,
    346: TOWARDS, 358: TOWARDS, 359: ("W",),
}


@pytest.fixture
def horizon():
    return build_horizon(FIXTURE_MARKS)


@pytest.fixture
def empty_horizon():
    return build_horizon({})
