from __future__ import annotations

"""Command line interface for seqdiff using Typer."""

from pathlib import Path
from typing import Dict, List, Optional

import json
import logging

import typer
import yaml
from pydantic import ValidationError

from ._typer import bad_parameter, reraise
from .config import Settings, load_settings
from .core import difference, difference_xy, find_extrema, find_extrema_xy, integrate, integrate_xy
from .errors import SequenceError
from .utils.logging import get_logger

app = typer.Typer(help="Finite differences, integrals and local extrema of numeric series")
logger = logging.getLogger(__name__)

# negative samples such as "-2" are values, not options
VALUES_CONTEXT = {"ignore_unknown_options": True}


def _split_floats(value: str) -> list[float]:
    try:
        return [float(item) for item in value.split(",") if item.strip()]
    except ValueError:
        bad_parameter(f"expected comma-separated numbers, got {value!r}", param_hint="--x")


def _parse_override_value(raw: str) -> object:
    """Interpret ``raw`` as a YAML scalar, list or mapping."""

    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        raise typer.BadParameter(f"invalid override value: {raw}") from None


def _apply_override(settings: Settings, data: Dict[str, object], dotted: str, value: object) -> None:
    """Set ``dotted`` (e.g. ``extrema.epsilon``) in the dumped ``data`` tree.

    Every component must name an existing section or field of ``settings``.
    """

    *sections, field = dotted.split(".")
    model: object = settings
    target = data
    for key in sections:
        if not hasattr(model, key) or not isinstance(target.get(key), dict):
            raise typer.BadParameter(f"unknown configuration key: {dotted}")
        model = getattr(model, key)
        target = target[key]
    if not hasattr(model, field):
        raise typer.BadParameter(f"unknown configuration key: {dotted}")
    target[field] = value


def _format(values) -> str:
    return " ".join(map(str, values))


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. extrema.epsilon=0.5",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Initialise the Typer context with validated settings."""

    if config is not None and not config.exists():
        raise typer.BadParameter(f"configuration file not found: {config}")

    try:
        settings = load_settings(config) if config else Settings()
    except (FileNotFoundError, TypeError, ValueError) as exc:
        raise typer.BadParameter(f"failed to load configuration: {exc}") from exc

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            if "=" not in override:
                raise typer.BadParameter(
                    "overrides must be of the form --set section.key=value"
                )
            key, raw_value = override.split("=", 1)
            if not key:
                raise typer.BadParameter("override key cannot be empty")
            _apply_override(settings, data, key, _parse_override_value(raw_value))
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            raise typer.BadParameter(f"invalid configuration override: {exc}") from exc

    level = "DEBUG" if verbose else settings.logging.level
    get_logger("seqdiff", level=level, fmt=settings.logging.format)
    ctx.obj = settings


@app.command(context_settings=VALUES_CONTEXT)
def diff(
    ctx: typer.Context,
    values: List[float] = typer.Argument(..., help="Sample values."),
    x: Optional[str] = typer.Option(None, "--x", help="Comma-separated sample coordinates."),
    order: Optional[int] = typer.Option(None, "--order", "-n", help="Differencing order."),
) -> None:
    """Print the ``order``-th differences of VALUES.

    Without ``--x`` unit spacing is assumed; with it the differences are
    divided by the coordinate spacing to approximate the derivative.
    """

    cfg: Settings = ctx.obj
    try:
        if x is None:
            result = difference(values, order, settings=cfg)
        else:
            result = difference_xy(_split_floats(x), values, order, settings=cfg)
    except SequenceError as exc:
        reraise(exc, ctx=ctx)
    typer.echo(_format(result.tolist()))


@app.command("integrate", context_settings=VALUES_CONTEXT)
def integrate_cmd(
    ctx: typer.Context,
    values: List[float] = typer.Argument(..., help="Sample values."),
    x: Optional[str] = typer.Option(None, "--x", help="Comma-separated sample coordinates."),
    order: Optional[int] = typer.Option(None, "--order", "-n", help="Integration order."),
) -> None:
    """Print the ``order``-th reverse accumulation of VALUES."""

    cfg: Settings = ctx.obj
    try:
        if x is None:
            result = integrate(values, order, settings=cfg)
        else:
            result = integrate_xy(_split_floats(x), values, order, settings=cfg)
    except SequenceError as exc:
        reraise(exc, ctx=ctx)
    typer.echo(_format(result.tolist()))


@app.command(context_settings=VALUES_CONTEXT)
def extrema(
    ctx: typer.Context,
    values: List[float] = typer.Argument(..., help="Sample values."),
    x: Optional[str] = typer.Option(None, "--x", help="Comma-separated sample coordinates."),
    epsilon: Optional[float] = typer.Option(None, "--epsilon", "-e", help="Noise tolerance."),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON object."),
) -> None:
    """Print the local minima and maxima of VALUES.

    Without ``--x`` the index of each extremum is printed.  With ``--x`` the
    coordinate interval containing each extremum is printed instead.
    """

    cfg: Settings = ctx.obj
    try:
        if x is None:
            result = find_extrema(values, epsilon, settings=cfg)
            minima, maxima = result.minima, result.maxima
        else:
            result = find_extrema_xy(_split_floats(x), values, epsilon, settings=cfg)
            minima = [list(iv) for iv in result.minima]
            maxima = [list(iv) for iv in result.maxima]
    except SequenceError as exc:
        reraise(exc, ctx=ctx)

    logger.debug("extrema: %d minima, %d maxima", len(minima), len(maxima))
    if as_json:
        typer.echo(json.dumps({"minima": minima, "maxima": maxima}))
        return
    typer.echo(f"minima: {_format(minima)}")
    typer.echo(f"maxima: {_format(maxima)}")


def main() -> None:  # pragma: no cover - console entry point
    app()
