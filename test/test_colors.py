from pytest import raises

from pycpar.colors import Color, get_alpha, get_blue, get_green, get_red, make_color
from pycpar.errors import ColorParseError
from pycpar.status import Status


def test_make_color():
    assert make_color(1, 2, 3, 4) == 0x01020304
    assert make_color(255, 0, 0) == 0xFF0000FF
    assert make_color(0x1FF, 0, 0, 0) == 0xFF000000


def test_channel_accessors():
    value = 0x12345678
    assert get_red(value) == 0x12
    assert get_green(value) == 0x34
    assert get_blue(value) == 0x56
    assert get_alpha(value) == 0x78


def test_color_from_channels():
    color = Color(255, 128, 0)
    assert color.value == 0xFF8000FF
    assert (color.red, color.green, color.blue, color.alpha) == (255, 128, 0, 255)
    assert int(color) == 0xFF8000FF
    assert Color().value == 0x000000FF


def test_color_from_string():
    assert Color.from_string("red") == Color(255, 0, 0)
    assert Color.from_string("rgba(0, 0, 255, 0)") == Color(0, 0, 255, 0)

    with raises(ColorParseError) as info:
        Color.from_string("rgb(1,2)")
    assert info.value.status is Status.SYNTAX_ERROR
    assert info.value.color == "rgb(1,2)"


def test_color_to_string():
    assert Color(255, 0, 0).to_string() == "#ff0000ff"
    assert str(Color(1, 2, 3, 4)) == "#01020304"
    assert repr(Color(1, 2, 3, 4)) == "Color.from_value(0x01020304)"
    assert Color.from_string(str(Color(10, 20, 30, 40))) == Color(10, 20, 30, 40)


def test_color_equality_and_hashing():
    assert Color(1, 2, 3) == Color.from_value(0x010203FF)
    assert Color(1, 2, 3) != Color(1, 2, 4)
    assert Color(1, 2, 3) != 0x010203FF
    assert len({Color(1, 2, 3), Color.from_value(0x010203FF)}) == 1


def test_color_name():
    assert Color(0, 255, 255).name == "aqua"
    assert Color(255, 0, 0).name == "red"
    assert Color(255, 0, 0, 0).name is None
