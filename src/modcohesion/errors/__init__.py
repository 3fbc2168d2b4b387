"""modcohesion error ADTs."""

from modcohesion.errors.config import (
    ConfigError,
    ConfigFileMissing,
    ConfigSectionInvalid,
    ConfigValidationFailed,
)

__all__ = [
    "ConfigError",
    "ConfigFileMissing",
    "ConfigSectionInvalid",
    "ConfigValidationFailed",
]
