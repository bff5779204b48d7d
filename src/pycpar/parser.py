"""Parser that turns CSS-like colour specifications into packed RGBA
integers.

The following syntaxes are supported and are all equivalent (fully opaque
red):

  * ``#f00``
  * ``#ff0000``
  * ``#ff0000ff``
  * ``rgb(255,0,0)``
  * ``rgb(100%,0%,0%)``
  * ``rgba(255,0,0,1)``
  * ``red``

Whitespace is ignored anywhere in the string and the parsing is case
insensitive. Strings that do not start with ``#``, ``rgb(`` or ``rgba(``
are looked up in the colour name table.
"""

from enum import Enum
from string import ascii_lowercase, ascii_uppercase
from typing import Any, Callable, Dict, NamedTuple, Optional

from .colors import make_color
from .components import (
    parse_alpha_component,
    parse_components,
    parse_hex_byte,
    parse_rgb_component,
)
from .config import DEFAULT_ALPHA, MAX_INPUT_LENGTH
from .errors import ColorParseError
from .logger import log
from .names import lookup_color_value
from .status import Status

__all__ = ("ColorSyntax", "ParseResult", "is_valid_color", "parse", "parse_color")

#: Lower-cases ASCII letters and deletes ASCII whitespace
_normalization_table = str.maketrans(ascii_uppercase, ascii_lowercase, " \t\n\v\f\r")


class ColorSyntax(Enum):
    """Enum representing the syntaxes that a colour string may use."""

    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    NAME = "name"

    @staticmethod
    def detect(string: str) -> "ColorSyntax":
        """Classifies a normalised colour string by its leading characters.

        Parameters:
            string: the normalised colour string

        Returns:
            the syntax that the string should be parsed with
        """
        if string.startswith("#"):
            return ColorSyntax.HEX
        elif string.startswith("rgb("):
            return ColorSyntax.RGB
        elif string.startswith("rgba("):
            return ColorSyntax.RGBA
        else:
            return ColorSyntax.NAME


class ParseResult(NamedTuple):
    """Outcome of a parse attempt."""

    status: Status
    """The status code of the parse attempt."""

    value: Optional[int] = None
    """The packed value of the colour; ``None`` unless the status is OK."""

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


def _normalize(string: Any) -> str:
    """Validates the input of the parser and returns a copy of it with all
    ASCII whitespace removed and ASCII letters converted to lowercase.
    """
    if isinstance(string, bytes):
        string = string.decode("latin-1")
    elif not isinstance(string, str):
        raise ColorParseError(Status.INVALID_PARAMETER, string)

    if not string:
        raise ColorParseError(Status.INVALID_PARAMETER, string)

    if len(string) > MAX_INPUT_LENGTH:
        raise ColorParseError(Status.TOO_BIG, string)

    result = string.translate(_normalization_table)
    if not result:
        raise ColorParseError(Status.INVALID_PARAMETER, string)

    return result


def _parse_hex(string: str) -> int:
    digits = string[1:]
    if len(digits) == 3:
        pairs = [digit * 2 for digit in digits] + ["ff"]
    elif len(digits) == 6:
        pairs = [digits[0:2], digits[2:4], digits[4:6], "ff"]
    elif len(digits) == 8:
        pairs = [digits[0:2], digits[2:4], digits[4:6], digits[6:8]]
    else:
        raise ColorParseError(Status.SYNTAX_ERROR, string)

    return make_color(*(parse_hex_byte(pair) for pair in pairs))


def _strip_function_call(string: str, prefix: str) -> str:
    """Strips the function name, the opening and the closing parenthesis
    from a functional colour notation.
    """
    body = string[len(prefix) :]
    if not body.endswith(")"):
        raise ColorParseError(Status.SYNTAX_ERROR, string)
    return body[:-1]


def _parse_rgb(string: str) -> int:
    body = _strip_function_call(string, "rgb(")
    red, green, blue = parse_components(body, [parse_rgb_component] * 3)
    return make_color(red, green, blue, DEFAULT_ALPHA)


def _parse_rgba(string: str) -> int:
    body = _strip_function_call(string, "rgba(")
    red, green, blue, alpha = parse_components(
        body, [parse_rgb_component] * 3 + [parse_alpha_component]
    )
    return make_color(red, green, blue, alpha)


def _parse_name(string: str) -> int:
    value = lookup_color_value(string)
    if value is None:
        raise ColorParseError(Status.NO_COLOR_NAME, string)
    return value


_syntax_parsers: Dict[ColorSyntax, Callable[[str], int]] = {
    ColorSyntax.HEX: _parse_hex,
    ColorSyntax.RGB: _parse_rgb,
    ColorSyntax.RGBA: _parse_rgba,
    ColorSyntax.NAME: _parse_name,
}


def parse_color(string: str) -> int:
    """Parses a string specification of a colour and returns its packed
    RGBA representation.

    Parameters:
        string: the colour specification to parse. Its length, including
            whitespace, must not exceed ``MAX_INPUT_LENGTH``. Byte strings are
            accepted as well.

    Returns:
        the colour as a 32-bit integer, red being the most significant byte
        and alpha being the least significant byte

    Raises:
        ColorParseError: if the string specification cannot be parsed. The
            ``status`` attribute of the exception tells the reason and the
            ``color`` attribute holds the input that was passed in.
    """
    try:
        normalized = _normalize(string)
        syntax = ColorSyntax.detect(normalized)
        return _syntax_parsers[syntax](normalized)
    except ColorParseError as ex:
        if ex.color is string:
            raise
        raise ColorParseError(ex.status, string) from ex


def parse(string: str) -> ParseResult:
    """Parses a string specification of a colour without raising an
    exception on failure.

    Returns:
        the status of the parse attempt and the packed value of the colour
        if the parsing was successful
    """
    try:
        value = parse_color(string)
    except ColorParseError as ex:
        log.debug("Rejected color string {0!r}: {1}".format(string, ex))
        return ParseResult(ex.status)
    return ParseResult(Status.OK, value)


def is_valid_color(string: str) -> bool:
    """Returns whether the given string is a valid colour specification."""
    return parse(string).ok
