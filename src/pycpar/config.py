"""Constants that control the behaviour of the colour parser."""

__all__ = ("BUFFER_SIZE", "DEFAULT_ALPHA", "MAX_INPUT_LENGTH")

#: Size of the working buffer of the parser, including the terminator slot
BUFFER_SIZE = 64

#: Maximum number of characters accepted in a colour string, whitespace included
MAX_INPUT_LENGTH = BUFFER_SIZE - 1

#: Alpha channel assigned to colour notations that do not specify one
DEFAULT_ALPHA = 255
