"""Packed RGBA colour values and the `Color` value type built on top of them.

A packed colour is a 32-bit unsigned integer holding four 8-bit channels;
red is the most significant byte and alpha is the least significant one.
"""

from typing import Optional

from .config import DEFAULT_ALPHA

__all__ = (
    "Color",
    "get_alpha",
    "get_blue",
    "get_green",
    "get_red",
    "make_color",
)


def make_color(red: int, green: int, blue: int, alpha: int = DEFAULT_ALPHA) -> int:
    """Packs the given 8-bit channels into a single 32-bit integer.

    Each channel is masked to its lowest 8 bits.
    """
    return (
        ((red & 0xFF) << 24)
        | ((green & 0xFF) << 16)
        | ((blue & 0xFF) << 8)
        | (alpha & 0xFF)
    )


def get_red(color: int) -> int:
    """Returns the red channel of a packed colour."""
    return (color >> 24) & 0xFF


def get_green(color: int) -> int:
    """Returns the green channel of a packed colour."""
    return (color >> 16) & 0xFF


def get_blue(color: int) -> int:
    """Returns the blue channel of a packed colour."""
    return (color >> 8) & 0xFF


def get_alpha(color: int) -> int:
    """Returns the alpha channel of a packed colour."""
    return color & 0xFF


class Color:
    """Value type wrapping a packed RGBA colour."""

    __slots__ = ("_value",)

    _value: int
    """The packed 32-bit representation of the colour."""

    @classmethod
    def from_string(cls, string: str) -> "Color":
        """Creates a colour from its string specification.

        Raises:
            ColorParseError: if the string specification cannot be parsed
        """
        from .parser import parse_color

        return cls.from_value(parse_color(string))

    @classmethod
    def from_value(cls, value: int) -> "Color":
        """Creates a colour from its packed 32-bit representation."""
        result = cls.__new__(cls)
        result._value = int(value) & 0xFFFFFFFF
        return result

    def __init__(
        self, red: int = 0, green: int = 0, blue: int = 0, alpha: int = DEFAULT_ALPHA
    ):
        """Constructor.

        Parameters:
            red: the red channel
            green: the green channel
            blue: the blue channel
            alpha: the alpha channel; fully opaque when omitted
        """
        self._value = make_color(red, green, blue, alpha)

    @property
    def value(self) -> int:
        return self._value

    @property
    def red(self) -> int:
        return get_red(self._value)

    @property
    def green(self) -> int:
        return get_green(self._value)

    @property
    def blue(self) -> int:
        return get_blue(self._value)

    @property
    def alpha(self) -> int:
        return get_alpha(self._value)

    @property
    def name(self) -> Optional[str]:
        """The name of the colour in the colour name table, or ``None`` if
        the colour has no name.
        """
        from .names import lookup_color_name

        return lookup_color_name(self._value)

    def to_string(self) -> str:
        """Returns the canonical ``#rrggbbaa`` representation of the colour
        that the parser accepts as well.
        """
        return "#{0:08x}".format(self._value)

    def __eq__(self, other) -> bool:
        if isinstance(other, Color):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return "{0.__class__.__name__}.from_value(0x{0._value:08x})".format(self)

    def __str__(self) -> str:
        return self.to_string()
