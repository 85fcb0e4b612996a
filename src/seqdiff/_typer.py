"""Helpers translating library errors into Typer parameter errors."""

from __future__ import annotations

from typing import Any, NoReturn, Optional

import typer

from .errors import (
    DegenerateSpacing,
    InsufficientLength,
    InvalidOrder,
    InvalidTolerance,
    LengthMismatch,
    SequenceError,
)

_PARAM_HINTS = {
    InvalidOrder: "--order",
    InvalidTolerance: "--epsilon",
    DegenerateSpacing: "--x",
    LengthMismatch: "--x",
    InsufficientLength: "VALUES",
}


def bad_parameter(
    message: str,
    *,
    ctx: Optional[typer.Context] = None,
    param: Any = None,
    param_hint: Optional[str] = None,
) -> NoReturn:
    """Raise :class:`typer.BadParameter` forwarding only the supplied hints."""

    kwargs: dict[str, Any] = {}
    if ctx is not None:
        kwargs["ctx"] = ctx
    if param is not None:
        kwargs["param"] = param
    if param_hint is not None:
        kwargs["param_hint"] = param_hint
    raise typer.BadParameter(message, **kwargs)


def reraise(exc: SequenceError, *, ctx: Optional[typer.Context] = None) -> NoReturn:
    """Re-raise a :class:`~seqdiff.errors.SequenceError` as ``BadParameter``.

    The parameter hint names the command line option responsible for the
    failure so Typer's usage message points at it.
    """

    hint = _PARAM_HINTS.get(type(exc))
    raise typer.BadParameter(str(exc), ctx=ctx, param_hint=hint) from exc
