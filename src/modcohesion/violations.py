"""Violation records produced by the cohesion checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


__all__: list[str] = ["ViolationKind", "ViolationRecord", "ISSUE_TYPE"]

ISSUE_TYPE = "ModuleCohesion"


class ViolationKind(Enum):
    """Which kind of reference crossed a module boundary."""

    IMPORT = "import-violation"
    PARAMETER_TYPE = "parameter-type-violation"
    INSTANTIATION = "instantiation-violation"
    ASSIGNMENT = "assignment-violation"
    RETURN = "return-violation"


@dataclass(frozen=True)
class ViolationRecord:
    """A single denied cross-module reference.

    Attributes:
        kind: Node kind that produced the finding
        current_module: Module the offending code lives in; None when the code
            matches the root marker only as a substring (``App\\ModulesLegacy``)
        current_class: Enclosing class FQSEN, None outside a class
        symbol: Offending name - imported class, parameter, instantiated
            class token, assigned variable, or returned type
        target_module: Module owning the referenced symbol
        target_namespace: Resolved namespace of the referenced symbol
    """

    kind: ViolationKind
    current_module: str | None
    current_class: str | None
    symbol: str | None
    target_module: str | None
    target_namespace: str
