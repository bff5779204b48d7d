"""Table of the named colours recognised by the parser.

The table contains the extended colour keywords of CSS, including the
synonyms (e.g. ``aqua`` and ``cyan``) that map to the same value.
"""

from bisect import bisect_left
from string import ascii_lowercase, ascii_uppercase
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .colors import make_color

__all__ = (
    "COLOR_TABLE",
    "color_names",
    "lookup_color_name",
    "lookup_color_value",
)


COLOR_TABLE: Tuple[Tuple[str, int], ...] = (
    ("aliceblue", make_color(240, 248, 255)),
    ("antiquewhite", make_color(250, 235, 215)),
    ("aqua", make_color(0, 255, 255)),
    ("aquamarine", make_color(127, 255, 212)),
    ("azure", make_color(240, 255, 255)),
    ("beige", make_color(245, 245, 220)),
    ("bisque", make_color(255, 228, 196)),
    ("black", make_color(0, 0, 0)),
    ("blanchedalmond", make_color(255, 235, 205)),
    ("blue", make_color(0, 0, 255)),
    ("blueviolet", make_color(138, 43, 226)),
    ("brown", make_color(165, 42, 42)),
    ("burlywood", make_color(222, 184, 135)),
    ("cadetblue", make_color(95, 158, 160)),
    ("chartreuse", make_color(127, 255, 0)),
    ("chocolate", make_color(210, 105, 30)),
    ("coral", make_color(255, 127, 80)),
    ("cornflowerblue", make_color(100, 149, 237)),
    ("cornsilk", make_color(255, 248, 220)),
    ("crimson", make_color(220, 20, 60)),
    ("cyan", make_color(0, 255, 255)),
    ("darkblue", make_color(0, 0, 139)),
    ("darkcyan", make_color(0, 139, 139)),
    ("darkgoldenrod", make_color(184, 134, 11)),
    ("darkgray", make_color(169, 169, 169)),
    ("darkgreen", make_color(0, 100, 0)),
    ("darkgrey", make_color(169, 169, 169)),
    ("darkkhaki", make_color(189, 183, 107)),
    ("darkmagenta", make_color(139, 0, 139)),
    ("darkolivegreen", make_color(85, 107, 47)),
    ("darkorange", make_color(255, 140, 0)),
    ("darkorchid", make_color(153, 50, 204)),
    ("darkred", make_color(139, 0, 0)),
    ("darksalmon", make_color(233, 150, 122)),
    ("darkseagreen", make_color(143, 188, 143)),
    ("darkslateblue", make_color(72, 61, 139)),
    ("darkslategray", make_color(47, 79, 79)),
    ("darkslategrey", make_color(47, 79, 79)),
    ("darkturquoise", make_color(0, 206, 209)),
    ("darkviolet", make_color(148, 0, 211)),
    ("deeppink", make_color(255, 20, 147)),
    ("deepskyblue", make_color(0, 191, 255)),
    ("dimgray", make_color(105, 105, 105)),
    ("dimgrey", make_color(105, 105, 105)),
    ("dodgerblue", make_color(30, 144, 255)),
    ("firebrick", make_color(178, 34, 34)),
    ("floralwhite", make_color(255, 250, 240)),
    ("forestgreen", make_color(34, 139, 34)),
    ("fuchsia", make_color(255, 0, 255)),
    ("gainsboro", make_color(220, 220, 220)),
    ("ghostwhite", make_color(248, 248, 255)),
    ("gold", make_color(255, 215, 0)),
    ("goldenrod", make_color(218, 165, 32)),
    ("gray", make_color(128, 128, 128)),
    ("green", make_color(0, 128, 0)),
    ("greenyellow", make_color(173, 255, 47)),
    ("grey", make_color(128, 128, 128)),
    ("honeydew", make_color(240, 255, 240)),
    ("hotpink", make_color(255, 105, 180)),
    ("indianred", make_color(205, 92, 92)),
    ("indigo", make_color(75, 0, 130)),
    ("ivory", make_color(255, 255, 240)),
    ("khaki", make_color(240, 230, 140)),
    ("lavender", make_color(230, 230, 250)),
    ("lavenderblush", make_color(255, 240, 245)),
    ("lawngreen", make_color(124, 252, 0)),
    ("lemonchiffon", make_color(255, 250, 205)),
    ("lightblue", make_color(173, 216, 230)),
    ("lightcoral", make_color(240, 128, 128)),
    ("lightcyan", make_color(224, 255, 255)),
    ("lightgoldenrodyellow", make_color(250, 250, 210)),
    ("lightgray", make_color(211, 211, 211)),
    ("lightgreen", make_color(144, 238, 144)),
    ("lightgrey", make_color(211, 211, 211)),
    ("lightpink", make_color(255, 182, 193)),
    ("lightsalmon", make_color(255, 160, 122)),
    ("lightseagreen", make_color(32, 178, 170)),
    ("lightskyblue", make_color(135, 206, 250)),
    ("lightslategray", make_color(119, 136, 153)),
    ("lightslategrey", make_color(119, 136, 153)),
    ("lightsteelblue", make_color(176, 196, 222)),
    ("lightyellow", make_color(255, 255, 224)),
    ("lime", make_color(0, 255, 0)),
    ("limegreen", make_color(50, 205, 50)),
    ("linen", make_color(250, 240, 230)),
    ("magenta", make_color(255, 0, 255)),
    ("maroon", make_color(128, 0, 0)),
    ("mediumaquamarine", make_color(102, 205, 170)),
    ("mediumblue", make_color(0, 0, 205)),
    ("mediumorchid", make_color(186, 85, 211)),
    ("mediumpurple", make_color(147, 112, 219)),
    ("mediumseagreen", make_color(60, 179, 113)),
    ("mediumslateblue", make_color(123, 104, 238)),
    ("mediumspringgreen", make_color(0, 250, 154)),
    ("mediumturquoise", make_color(72, 209, 204)),
    ("mediumvioletred", make_color(199, 21, 133)),
    ("midnightblue", make_color(25, 25, 112)),
    ("mintcream", make_color(245, 255, 250)),
    ("mistyrose", make_color(255, 228, 225)),
    ("moccasin", make_color(255, 228, 181)),
    ("navajowhite", make_color(255, 222, 173)),
    ("navy", make_color(0, 0, 128)),
    ("oldlace", make_color(253, 245, 230)),
    ("olive", make_color(128, 128, 0)),
    ("olivedrab", make_color(107, 142, 35)),
    ("orange", make_color(255, 165, 0)),
    ("orangered", make_color(255, 69, 0)),
    ("orchid", make_color(218, 112, 214)),
    ("palegoldenrod", make_color(238, 232, 170)),
    ("palegreen", make_color(152, 251, 152)),
    ("paleturquoise", make_color(175, 238, 238)),
    ("palevioletred", make_color(219, 112, 147)),
    ("papayawhip", make_color(255, 239, 213)),
    ("peachpuff", make_color(255, 218, 185)),
    ("peru", make_color(205, 133, 63)),
    ("pink", make_color(255, 192, 203)),
    ("plum", make_color(221, 160, 221)),
    ("powderblue", make_color(176, 224, 230)),
    ("purple", make_color(128, 0, 128)),
    ("red", make_color(255, 0, 0)),
    ("rosybrown", make_color(188, 143, 143)),
    ("royalblue", make_color(65, 105, 225)),
    ("saddlebrown", make_color(139, 69, 19)),
    ("salmon", make_color(250, 128, 114)),
    ("sandybrown", make_color(244, 164, 96)),
    ("seagreen", make_color(46, 139, 87)),
    ("seashell", make_color(255, 245, 238)),
    ("sienna", make_color(160, 82, 45)),
    ("silver", make_color(192, 192, 192)),
    ("skyblue", make_color(135, 206, 235)),
    ("slateblue", make_color(106, 90, 205)),
    ("slategray", make_color(112, 128, 144)),
    ("slategrey", make_color(112, 128, 144)),
    ("snow", make_color(255, 250, 250)),
    ("springgreen", make_color(0, 255, 127)),
    ("steelblue", make_color(70, 130, 180)),
    ("tan", make_color(210, 180, 140)),
    ("teal", make_color(0, 128, 128)),
    ("thistle", make_color(216, 191, 216)),
    ("tomato", make_color(255, 99, 71)),
    ("turquoise", make_color(64, 224, 208)),
    ("violet", make_color(238, 130, 238)),
    ("wheat", make_color(245, 222, 179)),
    ("white", make_color(255, 255, 255)),
    ("whitesmoke", make_color(245, 245, 245)),
    ("yellow", make_color(255, 255, 0)),
    ("yellowgreen", make_color(154, 205, 50)),
)
"""Colour name entries, sorted by name."""

_names: Tuple[str, ...] = tuple(name for name, _ in COLOR_TABLE)

_lowercase_table = str.maketrans(ascii_uppercase, ascii_lowercase)


def _build_reverse_table() -> Mapping[int, str]:
    # The first name wins for values with multiple names
    result = {}
    for name, value in COLOR_TABLE:
        result.setdefault(value, name)
    return MappingProxyType(result)


_names_by_value = _build_reverse_table()


def color_names() -> Tuple[str, ...]:
    """Returns the names of all the known colours in alphabetical order."""
    return _names


def lookup_color_value(name: str) -> Optional[int]:
    """Looks up the packed value of a colour from its name.

    Parameters:
        name: the name of the colour. The case of ASCII letters is ignored;
            whitespace is not.

    Returns:
        the packed value of the colour or ``None`` if there is no colour
        with the given name
    """
    name = name.translate(_lowercase_table)
    index = bisect_left(_names, name)
    if index < len(_names) and _names[index] == name:
        return COLOR_TABLE[index][1]
    return None


def lookup_color_name(value: int) -> Optional[str]:
    """Looks up a name of a colour from its packed value.

    When multiple names belong to the same value, the one that comes first in
    alphabetical order is returned.

    Returns:
        the name of the colour or ``None`` if the value has no name
    """
    return _names_by_value.get(value)
