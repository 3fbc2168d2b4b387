"""Per-visit lexical context supplied by the host analysis engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from modcohesion.codebase import EMPTY_CODE_BASE, CodeBase
from modcohesion.imports import ImportTable


__all__: list[str] = ["VisitContext"]


@dataclass(frozen=True)
class VisitContext:
    """Where a visited node lives.

    Attributes:
        namespace: Namespace enclosing the node (``App\\Modules\\Billing\\Handlers``)
        class_fqsen: Enclosing class, or None at namespace level
        imports: Import table in effect for the node's scope
        code_base: Symbol index used to look up method return types
    """

    namespace: str
    class_fqsen: str | None = None
    imports: ImportTable = field(default_factory=ImportTable)
    code_base: CodeBase = EMPTY_CODE_BASE
