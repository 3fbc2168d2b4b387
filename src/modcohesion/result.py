"""
Result type for explicit error handling at the modcohesion boundaries.

Configuration loading and model validation return ``Result[T, E]`` instead of
raising, so callers pattern-match on the outcome:

    >>> match load_cohesion_config(Path("pyproject.toml")):
    ...     case Success(config):
    ...         analyzer = CohesionAnalyzer(config)
    ...     case Failure(error):
    ...         print(f"bad config: {error.kind}")

The rule engine itself never fails; only its inputs can be invalid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar


T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value of type T."""

    value: T

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map the error value through function f. No-op on Success."""
        result: Result[T, F] = Success(self.value)
        return result


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error of type E."""

    error: E

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map the error value through function f."""
        return Failure(f(self.error))


Result = Success[T] | Failure[E]


__all__ = ["Success", "Failure", "Result"]
