"""
======
PyCpar
======
---------------------------------------------
Parser for CSS-like colour specifications
---------------------------------------------

:Author: Matt
"""

from .colors import Color, get_alpha, get_blue, get_green, get_red, make_color
from .errors import ColorParseError
from .names import color_names, lookup_color_name, lookup_color_value
from .parser import ColorSyntax, ParseResult, is_valid_color, parse, parse_color
from .status import (
    Status,
    describe_status,
    get_message_translator,
    set_message_translator,
)
from .version import __author__, __email__, __version_info__, __version__

__all__ = (
    "__author__",
    "__email__",
    "__version_info__",
    "__version__",
    "Color",
    "ColorParseError",
    "ColorSyntax",
    "ParseResult",
    "Status",
    "color_names",
    "describe_status",
    "get_alpha",
    "get_blue",
    "get_green",
    "get_message_translator",
    "get_red",
    "is_valid_color",
    "lookup_color_name",
    "lookup_color_value",
    "make_color",
    "parse",
    "parse_color",
    "set_message_translator",
)
