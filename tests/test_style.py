import pytest
from rich.color import Color

from figclock.errors import InvalidColorFormat
from figclock.style import StyleSpec, compose, parse_rgb


def test_parse_rgb():
    assert parse_rgb("255,128,0") == (255, 128, 0)
    assert parse_rgb(" 1, 2 ,3 ") == (1, 2, 3)


@pytest.mark.parametrize("value", ["1,2", "1,2,3,4", "a,b,c", "", "256,0,0", "-1,0,0", "white"])
def test_parse_rgb_rejects(value):
    with pytest.raises(InvalidColorFormat):
        parse_rgb(value)


def test_compose_foreground_and_background():
    segment = compose("AB", StyleSpec((255, 0, 0), (0, 0, 255)))
    assert segment.text == "AB"
    assert segment.style.color == Color.from_rgb(255, 0, 0)
    assert segment.style.bgcolor == Color.from_rgb(0, 0, 255)


def test_compose_foreground_only():
    segment = compose("AB", StyleSpec(foreground=(0, 0, 0)))
    assert segment.style.color == Color.from_rgb(0, 0, 0)
    assert segment.style.bgcolor is None


def test_compose_background_only():
    segment = compose("AB", StyleSpec(background=(10, 20, 30)))
    assert segment.style.color is None
    assert segment.style.bgcolor == Color.from_rgb(10, 20, 30)


def test_compose_unstyled():
    segment = compose("AB", StyleSpec())
    assert segment.text == "AB"
    assert segment.style is None
