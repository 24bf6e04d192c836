import numpy as np
import pytest

from offscreen_canvas import Color, WHITE, BLACK, RED, GREEN, BLUE, TRANSPARENT


def test_constants():
    assert WHITE == (255, 255, 255, 255)
    assert BLACK == (0, 0, 0, 255)
    assert RED == (255, 0, 0, 255)
    assert GREEN == (0, 255, 0, 255)
    assert BLUE == (0, 0, 255, 255)
    assert TRANSPARENT.a == 0


@pytest.mark.parametrize('value, expected', [
    ('red', RED),
    ('#0000ff', BLUE),
    ((0, 255, 0), GREEN),
    ((1, 2, 3, 4), Color(1, 2, 3, 4)),
    ((1.0, 1.0, 1.0), WHITE),
    ((0.0, 0.0, 0.0, 0.0), TRANSPARENT),
    (np.array([10, 20, 30, 40], dtype=np.uint8), Color(10, 20, 30, 40)),
])
def test_parse(value, expected):
    assert Color.parse(value) == expected


def test_parse_unknown_name():
    with pytest.raises(ValueError):
        Color.parse('not-a-colour')


def test_parse_wrong_length():
    with pytest.raises(AssertionError):
        Color.parse((1, 2))


def test_with_alpha():
    assert RED.with_alpha(10) == Color(255, 0, 0, 10)


@pytest.mark.parametrize('color, packed', [
    (WHITE, 0xFFFF),
    (BLACK, 0x0000),
    (RED, 0xF800),
    (GREEN, 0x07E0),
    (BLUE, 0x001F),
    (Color(7, 3, 7), 0x0000),
    (Color(8, 4, 8), 0x0821),
])
def test_rgb565_truncates(color, packed):
    assert color.to_rgb565() == packed
