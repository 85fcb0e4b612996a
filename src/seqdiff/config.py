from __future__ import annotations

"""Configuration utilities for seqdiff.

Runtime defaults are described by a small hierarchical schema built from
Pydantic models.  The :class:`Settings` container groups the sections used by
the core algorithms (default differencing order and extrema tolerance) and by
the command line interface (logging).  Instances can be populated from
environment variables such as ``SEQDIFF_EXTREMA__EPSILON=0.5`` or from
YAML/JSON files with matching nested keys.
"""

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.logging import DEFAULT_FORMAT


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class CalculusSettings(SectionModel):
    """Defaults for differencing and integration."""

    order: int = 1


class ExtremaSettings(SectionModel):
    """Defaults for local extrema detection.

    ``epsilon`` is the half-width of the noise band.  It has to be tuned to
    the fluctuations of each dataset; smaller values find extrema more
    reliably but are more easily fooled by noise.
    """

    epsilon: float = 0.1


class LoggingSettings(SectionModel):
    """Logging level and format used by the command line interface."""

    level: str = "INFO"
    format: str = DEFAULT_FORMAT


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    calculus: CalculusSettings = Field(default_factory=CalculusSettings)
    extrema: ExtremaSettings = Field(default_factory=ExtremaSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="SEQDIFF_",
        env_nested_delimiter="__",
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
