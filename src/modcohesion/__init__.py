"""Module cohesion rule: detect references that cross module boundaries.

Code under ``App\\Modules\\<Module>\\...`` may reference its own module,
facades, DTOs and code outside the module hierarchy. Any other reference to
a class owned by another module is reported as a :class:`ViolationRecord`.
"""

from __future__ import annotations

from modcohesion.analyzer import AnalysisReport, CohesionAnalyzer, analyze
from modcohesion.checks import visit
from modcohesion.codebase import CodeBase, MethodSignature, ReturnType, StaticCodeBase
from modcohesion.config import CohesionConfig, load_cohesion_config
from modcohesion.context import VisitContext
from modcohesion.imports import ImportEntry, ImportTable
from modcohesion.namespace import is_under_module_root, module_of
from modcohesion.policy import decide, is_allowed
from modcohesion.resolver import resolve
from modcohesion.violations import ViolationKind, ViolationRecord

__all__ = [
    "AnalysisReport",
    "CohesionAnalyzer",
    "analyze",
    "visit",
    "CodeBase",
    "MethodSignature",
    "ReturnType",
    "StaticCodeBase",
    "CohesionConfig",
    "load_cohesion_config",
    "VisitContext",
    "ImportEntry",
    "ImportTable",
    "is_under_module_root",
    "module_of",
    "decide",
    "is_allowed",
    "resolve",
    "ViolationKind",
    "ViolationRecord",
]
