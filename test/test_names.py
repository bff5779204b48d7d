from pytest import mark

from pycpar.names import (
    COLOR_TABLE,
    color_names,
    lookup_color_name,
    lookup_color_value,
)
from pycpar.parser import parse_color


def test_table_is_sorted_and_complete():
    names = color_names()
    assert list(names) == sorted(names)
    assert len(set(names)) == len(names) == 147
    assert "rebeccapurple" not in names


def test_lookup_color_value():
    assert lookup_color_value("red") == 0xFF0000FF
    assert lookup_color_value("MediumOrchid") == 0xBA55D3FF
    assert lookup_color_value("aliceblue") == 0xF0F8FFFF
    assert lookup_color_value("yellowgreen") == 0x9ACD32FF
    assert lookup_color_value("not_a_real_color") is None
    assert lookup_color_value("") is None
    assert lookup_color_value("zzz") is None
    assert lookup_color_value("blac\u212a") is None
    assert lookup_color_value("BLACK") == 0x000000FF


@mark.parametrize(
    "value,name",
    [
        (0x00FFFFFF, "aqua"),
        (0xFF00FFFF, "fuchsia"),
        (0x808080FF, "gray"),
        (0xA9A9A9FF, "darkgray"),
        (0x000000FF, "black"),
        (0x20B2AAFF, "lightseagreen"),
    ],
)
def test_lookup_color_name(value, name):
    assert lookup_color_name(value) == name


def test_lookup_color_name_without_match():
    assert lookup_color_name(0x12345678) is None
    assert lookup_color_name(0xFF000000) is None
    assert lookup_color_name(-1) is None
    assert lookup_color_name(1 << 40) is None


def test_every_name_parses_to_its_value():
    for name, value in COLOR_TABLE:
        assert parse_color(name) == value
        assert parse_color(name.upper()) == value
        assert lookup_color_value(lookup_color_name(value)) == value
