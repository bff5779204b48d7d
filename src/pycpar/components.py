"""Parsers for the individual numeric components of a colour string.

Each parser receives a single token from a colour string that has already
been normalised (whitespace removed, letters lower-cased) and returns the
8-bit channel value encoded by the token.

All the parsers raise `ColorParseError` with `Status.INVALID_NUMBER` if the
token cannot be converted to a number and with `Status.NUMBER_RANGE` if the
number is outside the valid range of the component.
"""

import re

from typing import Callable, List, Sequence

from .errors import ColorParseError
from .status import Status

__all__ = (
    "ComponentParser",
    "parse_alpha_component",
    "parse_components",
    "parse_hex_byte",
    "parse_rgb_component",
)


ComponentParser = Callable[[str], int]
"""Type specification for functions that parse a single token into an 8-bit
channel value.
"""

_hex_integer = re.compile(r"[+-]?[0-9a-fA-F]+\Z")
_decimal_integer = re.compile(r"[+-]?[0-9]+\Z")
_decimal_float = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?\Z")


def parse_hex_byte(token: str) -> int:
    """Parses a hexadecimal representation of a single byte.

    Parameters:
        token: the token to parse; must be a base-16 integer with no
            trailing characters

    Returns:
        the value of the byte
    """
    if not _hex_integer.match(token):
        raise ColorParseError(Status.INVALID_NUMBER, token)

    value = int(token, 16)

    if value < 0 or value > 255:
        raise ColorParseError(Status.NUMBER_RANGE, token)

    return value


def parse_rgb_component(token: str) -> int:
    """Parses a red, green or blue component of a functional colour
    notation.

    The component is a decimal integer between 0 and 255, or a percentage
    between 0% and 100% that is mapped linearly to the 0-255 range. The
    scaled value of a percentage is truncated rather than rounded, so ``50%``
    becomes 127 (0x7f) and not 128; ``rgb(0, 50%, 100%)`` is ``#007fffff``.

    Parameters:
        token: the token to parse

    Returns:
        the value of the channel
    """
    percent = token.endswith("%")
    number = token[:-1] if percent else token

    if not _decimal_integer.match(number):
        raise ColorParseError(Status.INVALID_NUMBER, token)

    value = int(number)
    if value < 0 or value > (100 if percent else 255):
        raise ColorParseError(Status.NUMBER_RANGE, token)

    return int(value / 100.0 * 255.0) if percent else value


def parse_alpha_component(token: str) -> int:
    """Parses the alpha component of a functional colour notation.

    The component is a decimal fraction between 0 and 1 (inclusive) that is
    mapped linearly to the 0-255 range, truncating the result in the same
    way as percentages; ``0.5`` becomes 127 (0x7f), not 128.

    Parameters:
        token: the token to parse

    Returns:
        the value of the alpha channel
    """
    if not _decimal_float.match(token):
        raise ColorParseError(Status.INVALID_NUMBER, token)

    value = float(token)
    if value < 0.0 or value > 1.0:
        raise ColorParseError(Status.NUMBER_RANGE, token)

    return int(value * 255.0)


def parse_components(string: str, parsers: Sequence[ComponentParser]) -> List[int]:
    """Splits a comma-separated list of components and parses each
    component with the corresponding parser.

    Components are parsed from left to right and the first failure is
    propagated to the caller. An empty component is a syntax error. The
    number of components is checked after that.

    Parameters:
        string: the comma-separated list of components, without the
            enclosing parentheses
        parsers: the parsers to use for the components, one for each
            expected component

    Returns:
        the parsed channel values, one for each parser

    Raises:
        ColorParseError: if one of the components failed to parse or if the
            number of components is not equal to the number of parsers
    """
    tokens = string.split(",")
    result = []
    for parser, token in zip(parsers, tokens):
        if not token:
            raise ColorParseError(Status.SYNTAX_ERROR, string)
        result.append(parser(token))

    if len(tokens) != len(parsers):
        raise ColorParseError(Status.SYNTAX_ERROR, string)

    return result
