"""Status codes reported by the colour parser and their human-readable
descriptions.
"""

from enum import IntEnum
from typing import Callable, Dict, Optional, Union

__all__ = (
    "Status",
    "StatusLike",
    "describe_status",
    "get_message_translator",
    "set_message_translator",
)


class Status(IntEnum):
    """Enum representing the outcome of a single parse attempt."""

    OK = 0
    """No error occurred."""

    INVALID_PARAMETER = 1
    """The input did not meet the preconditions, e.g. it was ``None`` or empty."""

    TOO_BIG = 2
    """The input was too long to fit into the working buffer of the parser."""

    INVALID_NUMBER = 3
    """One of the numeric components of the colour string failed to parse."""

    NUMBER_RANGE = 4
    """One of the numeric components of the colour string was out of range,
    e.g. larger than 255 for an RGB component.
    """

    SYNTAX_ERROR = 5
    """Any other problem with the syntax of the colour string, e.g.
    ``rgb(1,2)`` is missing one of its components.
    """

    NO_COLOR_NAME = 6
    """The string was looked up in the colour name table but no match was found."""

    @property
    def description(self) -> str:
        """Human-readable (and possibly translated) description of the status."""
        return describe_status(self) or ""


StatusLike = Union[Status, int]

_messages: Dict[Status, str] = {
    Status.OK: "success",
    Status.INVALID_PARAMETER: "invalid parameter",
    Status.TOO_BIG: "color string too big",
    Status.INVALID_NUMBER: "numeric component failed to parse",
    Status.NUMBER_RANGE: "numeric component out-of-range",
    Status.SYNTAX_ERROR: "syntax error",
    Status.NO_COLOR_NAME: "no color with the given name",
}


def _identity(message: str) -> str:
    return message


_translator: Callable[[str], str] = _identity


def get_message_translator() -> Callable[[str], str]:
    """Returns the function that is currently applied to every status
    message before it is returned from `describe_status()`.
    """
    return _translator


def set_message_translator(func: Optional[Callable[[str], str]]) -> None:
    """Installs a function that is applied to every status message before it
    is returned from `describe_status()`.

    This is the hook for localising the messages; for instance, pass
    ``gettext.gettext`` to run them through the message catalogs of the
    application.

    Parameters:
        func: the function to apply to the messages. ``None`` restores the
            default behaviour, which returns the messages unchanged.
    """
    global _translator
    _translator = func if func is not None else _identity


def describe_status(status: StatusLike) -> Optional[str]:
    """Returns a human-readable description of the given status code.

    Parameters:
        status: the status code, either as a `Status` or as a plain integer

    Returns:
        the description of the status code, or ``None`` if the code is not a
        valid status code
    """
    try:
        status = Status(status)
    except ValueError:
        return None
    return _translator(_messages[status])
