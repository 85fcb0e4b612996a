"""Logging setup for the command line interface.

The library modules only create ``logging.getLogger(__name__)`` loggers and
never attach handlers; :func:`get_logger` wires a single stream handler onto
the package logger when the CLI starts.
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown logging level: {level!r}")
    return resolved


def get_logger(name: str = "seqdiff", level: int | str = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """Return the ``name`` logger with exactly one stream handler attached.

    Repeated calls reuse the existing handler but apply the new ``fmt``, so
    settings loaded after a first call still take effect.  ``level`` may be a
    numeric level or a name such as ``"debug"``.
    """

    logger = logging.getLogger(name)
    streams = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    if streams:
        handler = streams[0]
    else:
        handler = logging.StreamHandler()
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(fmt))
    logger.setLevel(_resolve_level(level))
    return logger
