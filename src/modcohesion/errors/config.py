"""Error ADTs for loading the cohesion rule configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import ValidationError


@dataclass(frozen=True)
class ConfigFileMissing:
    """The pyproject file to read the configuration from does not exist."""

    path: Path
    kind: Literal["ConfigFileMissing"] = "ConfigFileMissing"


@dataclass(frozen=True)
class ConfigSectionInvalid:
    """``[tool.modcohesion]`` exists but is not a table, or the TOML is unreadable."""

    message: str
    kind: Literal["ConfigSectionInvalid"] = "ConfigSectionInvalid"


@dataclass(frozen=True)
class ConfigValidationFailed:
    """Pydantic rejected the configuration values."""

    error: ValidationError
    kind: Literal["ConfigValidationFailed"] = "ConfigValidationFailed"


ConfigError = ConfigFileMissing | ConfigSectionInvalid | ConfigValidationFailed
