"""
Per-node cohesion checks.

:func:`visit` is the single entry point the host calls for every node it
walks. It is pure: the result depends only on the node, its context and the
configuration, so trees may be checked in any order or in parallel.

A node is checked only when the code around it lives inside a module;
code outside the module hierarchy is never itself reported, though it may
be the target of a reference.
"""

from __future__ import annotations

from modcohesion.config import CohesionConfig
from modcohesion.context import VisitContext
from modcohesion.namespace import is_under_module_root, module_of
from modcohesion.nodes import AssignNode, NewNode, ParamNode, ReturnNode, UseNode
from modcohesion.policy import decide
from modcohesion.resolver import (
    resolve_assign_targets,
    resolve_new,
    resolve_param,
    resolve_return,
)
from modcohesion.violations import ViolationKind, ViolationRecord


__all__: list[str] = [
    "visit",
    "check_use",
    "check_param",
    "check_new",
    "check_assign",
    "check_return",
]

_DEFAULT_CONFIG = CohesionConfig()


def _violation(
    kind: ViolationKind,
    context: VisitContext,
    config: CohesionConfig,
    symbol: str | None,
    target: str | None,
    current_module: str | None = None,
) -> list[ViolationRecord]:
    """Zero or one record for ``target`` as referenced from ``context``."""
    if current_module is None:
        current_module = module_of(context.namespace, config.root_marker)
    decision = decide(current_module, target, config)
    if not decision.denied or decision.target is None:
        return []
    return [
        ViolationRecord(
            kind=kind,
            current_module=current_module,
            current_class=context.class_fqsen,
            symbol=symbol,
            target_module=decision.target_module,
            target_namespace=decision.target,
        )
    ]


def check_use(
    node: UseNode, context: VisitContext, config: CohesionConfig
) -> list[ViolationRecord]:
    """One record per imported name owned by another module."""
    return [
        violation
        for clause in node.clauses
        if clause.name
        for violation in _violation(
            ViolationKind.IMPORT, context, config, clause.name, clause.name
        )
    ]


def check_param(
    node: ParamNode, context: VisitContext, config: CohesionConfig
) -> list[ViolationRecord]:
    target = resolve_param(node, context.imports)
    return _violation(ViolationKind.PARAMETER_TYPE, context, config, node.name, target)


def check_new(
    node: NewNode, context: VisitContext, config: CohesionConfig
) -> list[ViolationRecord]:
    target = resolve_new(node, context.imports)
    return _violation(ViolationKind.INSTANTIATION, context, config, node.class_name, target)


def check_assign(
    node: AssignNode, context: VisitContext, config: CohesionConfig
) -> list[ViolationRecord]:
    """One record per denied candidate: the primary target plus each returned type."""
    if node.var_name is None:
        return []
    current_module = module_of(context.namespace, config.root_marker)
    return [
        violation
        for target in resolve_assign_targets(node, context)
        for violation in _violation(
            ViolationKind.ASSIGNMENT, context, config, node.var_name, target, current_module
        )
    ]


def check_return(
    node: ReturnNode, context: VisitContext, config: CohesionConfig
) -> list[ViolationRecord]:
    if node.expr is None:
        return []
    target = resolve_return(node, context.imports)
    return _violation(ViolationKind.RETURN, context, config, target, target)


def visit(
    node: object,
    context: VisitContext,
    config: CohesionConfig = _DEFAULT_CONFIG,
) -> list[ViolationRecord]:
    """Check one visited node.

    Args:
        node: Node handed over by the host walker; unknown kinds are ignored
        context: Lexical context of the node
        config: Root and exemption markers

    Returns:
        Violation records, possibly several for a single assignment
    """
    if not is_under_module_root(context.namespace, config.root_marker):
        return []

    match node:
        case UseNode():
            return check_use(node, context, config)
        case ParamNode():
            return check_param(node, context, config)
        case NewNode():
            return check_new(node, context, config)
        case AssignNode():
            return check_assign(node, context, config)
        case ReturnNode():
            return check_return(node, context, config)
        case _:
            return []
