"""Configuration for the module cohesion rule.

The rule has exactly two tunables: the namespace segment that marks the root
of the module hierarchy, and the markers that exempt a target namespace from
the isolation check. Both can be set in ``pyproject.toml``::

    [tool.modcohesion]
    root_marker = "Modules"
    exemption_markers = ["Facades", "DTO"]
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modcohesion.errors.config import (
    ConfigError,
    ConfigFileMissing,
    ConfigSectionInvalid,
    ConfigValidationFailed,
)
from modcohesion.result import Failure, Result
from modcohesion.validation import validate_model


__all__: list[str] = [
    "DEFAULT_ROOT_MARKER",
    "DEFAULT_EXEMPTION_MARKERS",
    "CohesionConfig",
    "load_cohesion_config",
]

DEFAULT_ROOT_MARKER = "Modules"
DEFAULT_EXEMPTION_MARKERS: tuple[str, ...] = ("Facades", "DTO")

NAMESPACE_SEPARATOR = "\\"


def _check_marker(marker: str) -> str:
    if not marker:
        raise ValueError("marker must not be empty")
    if NAMESPACE_SEPARATOR in marker:
        raise ValueError(f"marker {marker!r} must be a single namespace segment")
    return marker


class CohesionConfig(BaseModel):
    """Validated configuration for the cohesion rule.

    Attributes
    ----------
    root_marker
        Segment after which the owning module name appears
        (``App\\Modules\\<Module>\\...``).
    exemption_markers
        Substrings that make a target namespace freely accessible from any
        module. Matching is substring containment, not segment equality.
    """

    root_marker: Annotated[str, Field(description="Root segment of the module hierarchy")] = (
        DEFAULT_ROOT_MARKER
    )
    exemption_markers: Annotated[
        tuple[str, ...], Field(description="Namespace markers exempt from isolation")
    ] = DEFAULT_EXEMPTION_MARKERS

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("root_marker")
    @classmethod
    def _validate_root_marker(cls, value: str) -> str:
        return _check_marker(value)

    @field_validator("exemption_markers")
    @classmethod
    def _validate_exemption_markers(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(_check_marker(marker) for marker in value)


def load_cohesion_config(pyproject_path: Path) -> Result[CohesionConfig, ConfigError]:
    """Load ``[tool.modcohesion]`` from a pyproject file.

    Args:
        pyproject_path: Path to ``pyproject.toml``

    Returns:
        Success(CohesionConfig) with defaults filled in when the section is
        absent, or Failure describing why the configuration is unusable.
    """
    if not pyproject_path.exists():
        return Failure(ConfigFileMissing(path=pyproject_path))

    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        return Failure(ConfigSectionInvalid(message=f"{pyproject_path}: {exc}"))

    tool = data.get("tool", {})
    raw_config: object = tool.get("modcohesion", {}) if isinstance(tool, dict) else {}
    if not isinstance(raw_config, dict):
        return Failure(ConfigSectionInvalid(message="[tool.modcohesion] must be a table"))

    return validate_model(CohesionConfig, **raw_config).map_error(
        lambda error: ConfigValidationFailed(error=error)
    )
