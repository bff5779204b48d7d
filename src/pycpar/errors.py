"""Exceptions thrown by the colour parser."""

from typing import Any, Optional

from .status import Status, StatusLike, describe_status

__all__ = ("ColorParseError",)


class ColorParseError(ValueError):
    """Exception thrown when a colour string cannot be parsed.

    The reason of the failure is available in the ``status`` attribute; it is
    never `Status.OK`.
    """

    def __init__(
        self, status: StatusLike, color: Any = None, message: Optional[str] = None
    ):
        """Constructor.

        Parameters:
            status: the status code describing the reason of the failure
            color: the colour specification that failed to parse, if known
            message: the message of the exception. When omitted, it is
                derived from the description of the status code.
        """
        self.status = Status(status)
        self.color = color

        if message is None:
            message = describe_status(self.status) or "unknown error"
            if color is not None:
                message = "{0}: {1!r}".format(message, color)

        super().__init__(message)
