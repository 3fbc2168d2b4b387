"""
Namespace resolution for the node kinds the cohesion rule checks.

Every resolver answers "which fully qualified namespace does this node
reference?" and returns None when it cannot tell. An import-table entry
always wins over the bare token written in the code, because the entry
carries the namespace the token was imported from.

Assignments are resolved by an ordered list of independent strategies, each
contributing zero or more candidates:

1. :func:`assign_import_candidates` - import-table entry for the class named
   on the right-hand side, directly or under one chained call;
2. :func:`assign_literal_candidates` - the class token itself, only when (1)
   found nothing;
3. :func:`assign_return_type_candidates` - object types the called method
   declares it returns, when the code base knows the method.
"""

from __future__ import annotations

from collections.abc import Callable

from modcohesion.codebase import method_fqsen
from modcohesion.context import VisitContext
from modcohesion.imports import ImportTable
from modcohesion.nodes import (
    AssignNode,
    ClassConstExpr,
    NewNode,
    ParamNode,
    ReturnNode,
    StaticCallExpr,
    StaticPropExpr,
    UseNode,
    class_scoped_of,
    method_name_of,
)


__all__: list[str] = [
    "AssignStrategy",
    "ASSIGN_STRATEGIES",
    "resolve",
    "resolve_use",
    "resolve_param",
    "resolve_new",
    "resolve_return",
    "resolve_assign_primary",
    "resolve_assign_targets",
    "assign_import_candidates",
    "assign_literal_candidates",
    "assign_return_type_candidates",
]


def _lookup_or_literal(token: str | None, imports: ImportTable) -> str | None:
    return imports.lookup(token) or token or None


def _direct_class_name(expr: object) -> str | None:
    match expr:
        case NewNode(class_name=name) | StaticCallExpr(class_name=name):
            return name
        case ClassConstExpr(class_name=name) | StaticPropExpr(class_name=name):
            return name
        case _:
            return None


def resolve_use(node: UseNode) -> str | None:
    """First imported name; a use statement names its own target."""
    return next((clause.name for clause in node.clauses if clause.name), None)


def resolve_param(node: ParamNode, imports: ImportTable) -> str | None:
    return _lookup_or_literal(node.type_name, imports)


def resolve_new(node: NewNode, imports: ImportTable) -> str | None:
    return _lookup_or_literal(node.class_name, imports)


def resolve_return(node: ReturnNode, imports: ImportTable) -> str | None:
    return _lookup_or_literal(_direct_class_name(node.expr), imports)


# --------------------------------------------------------------------------- #
# Assignment strategies                                                       #
# --------------------------------------------------------------------------- #

AssignStrategy = Callable[[AssignNode, VisitContext, tuple[str, ...]], tuple[str, ...]]


def assign_import_candidates(
    node: AssignNode, context: VisitContext, found: tuple[str, ...]
) -> tuple[str, ...]:
    """Import entry for ``Class::x`` or ``Class::x()->y()`` on the right-hand side."""
    scoped = class_scoped_of(node.expr)
    fqsen = context.imports.lookup(scoped.class_name) if scoped is not None else None
    return (fqsen,) if fqsen else ()


def assign_literal_candidates(
    node: AssignNode, context: VisitContext, found: tuple[str, ...]
) -> tuple[str, ...]:
    """Bare class token of a direct class-scoped access, when nothing was imported."""
    if found:
        return ()
    name = _direct_class_name(node.expr)
    return (name,) if name else ()


def assign_return_type_candidates(
    node: AssignNode, context: VisitContext, found: tuple[str, ...]
) -> tuple[str, ...]:
    """Declared object return types of the method called on the right-hand side.

    Unknown methods contribute nothing; the primary candidate is unaffected.
    """
    method = method_name_of(node.expr)
    if method is None or not found:
        return ()
    fqsen = method_fqsen(found[0], method)
    if not context.code_base.has_method(fqsen):
        return ()
    return tuple(
        return_type.fqsen
        for return_type in context.code_base.return_types(fqsen)
        if return_type.is_object
    )


ASSIGN_STRATEGIES: tuple[AssignStrategy, ...] = (
    assign_import_candidates,
    assign_literal_candidates,
    assign_return_type_candidates,
)


def resolve_assign_targets(
    node: AssignNode,
    context: VisitContext,
    strategies: tuple[AssignStrategy, ...] = ASSIGN_STRATEGIES,
) -> tuple[str, ...]:
    """Run the assignment strategies in order and collect every candidate.

    Each strategy sees the candidates found so far. The first candidate, when
    present, is the primary target; the rest come from the return-type
    expansion.
    """
    found: tuple[str, ...] = ()
    for strategy in strategies:
        found = found + strategy(node, context, found)
    return found


def resolve_assign_primary(node: AssignNode, imports: ImportTable) -> str | None:
    scoped = class_scoped_of(node.expr)
    imported = imports.lookup(scoped.class_name) if scoped is not None else None
    return imported or _direct_class_name(node.expr) or None


def resolve(node: object, imports: ImportTable) -> str | None:
    """Best-known namespace referenced by ``node``, or None.

    Nodes of any kind other than Use, Param, New, Assign and Return resolve
    to None.
    """
    match node:
        case UseNode():
            return resolve_use(node)
        case ParamNode():
            return resolve_param(node, imports)
        case NewNode():
            return resolve_new(node, imports)
        case AssignNode():
            return resolve_assign_primary(node, imports)
        case ReturnNode():
            return resolve_return(node, imports)
        case _:
            return None
