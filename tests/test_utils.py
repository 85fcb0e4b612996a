import logging

import pytest

from seqdiff.errors import (
    DegenerateSpacing,
    InsufficientLength,
    InvalidOrder,
    InvalidTolerance,
    LengthMismatch,
    SequenceError,
)
from seqdiff.types import ExtremaResult, Interval
from seqdiff.utils.logging import get_logger


def test_types():
    iv = Interval(1.0, 3.5)
    assert iv.width == 2.5
    assert iv.contains(2.0)
    assert not iv.contains(4.0)
    start, end = iv
    assert (start, end) == (1.0, 3.5)
    res = ExtremaResult()
    assert res.minima == [] and res.maxima == []


@pytest.mark.parametrize(
    "exc",
    [
        InvalidOrder(0),
        InsufficientLength(1, 2, order=1),
        DegenerateSpacing(3, 1.0),
        InvalidTolerance(-1.0),
        LengthMismatch(2, 3),
    ],
)
def test_error_hierarchy(exc):
    assert isinstance(exc, SequenceError)
    assert isinstance(exc, ValueError)
    assert str(exc)


def test_error_messages():
    assert "x[3] == x[4]" in str(DegenerateSpacing(3, 1.0))
    assert "order 2" in str(InsufficientLength(2, 3, order=2))
    assert "2 and 3" in str(LengthMismatch(2, 3))


def test_logging():
    logger = get_logger("test")
    logger2 = get_logger("test")
    assert logger is logger2
    assert len(logger.handlers) == 1
    logger.debug("debug message")


def test_logging_level_by_name():
    logger = get_logger("test.named", level="debug")
    assert logger.level == logging.DEBUG


def test_logging_reuses_handler_with_new_format():
    logger = get_logger("test.fmt", fmt="%(message)s")
    get_logger("test.fmt", fmt="[%(levelname)s] %(message)s")
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == "[%(levelname)s] %(message)s"


def test_logging_unknown_level():
    with pytest.raises(ValueError):
        get_logger("test.bad", level="loud")
