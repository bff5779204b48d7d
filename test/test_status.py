import pytest

from pycpar.errors import ColorParseError
from pycpar.status import (
    Status,
    describe_status,
    get_message_translator,
    set_message_translator,
)


@pytest.fixture
def translator():
    yield set_message_translator
    set_message_translator(None)


def test_status_codes():
    assert [int(status) for status in Status] == list(range(7))
    assert Status.OK == 0
    assert Status.NO_COLOR_NAME == 6


def test_describe_status():
    assert describe_status(Status.OK) == "success"
    assert describe_status(Status.TOO_BIG) == "color string too big"
    assert describe_status(5) == "syntax error"
    assert Status.NUMBER_RANGE.description == "numeric component out-of-range"

    for status in Status:
        assert describe_status(status)


@pytest.mark.parametrize("code", [-1, 7, 255])
def test_describe_unknown_status(code):
    assert describe_status(code) is None


def test_message_translator(translator):
    translator(lambda message: "<{0}>".format(message.upper()))
    assert describe_status(Status.SYNTAX_ERROR) == "<SYNTAX ERROR>"
    assert describe_status(99) is None
    assert str(ColorParseError(Status.TOO_BIG)) == "<COLOR STRING TOO BIG>"

    translator(None)
    assert describe_status(Status.SYNTAX_ERROR) == "syntax error"
    assert get_message_translator()("foo") == "foo"


def test_parse_error_message():
    assert str(ColorParseError(Status.NO_COLOR_NAME, "foo")) == (
        "no color with the given name: 'foo'"
    )
    assert str(ColorParseError(Status.SYNTAX_ERROR, message="custom")) == "custom"
    assert ColorParseError(3).status is Status.INVALID_NUMBER
