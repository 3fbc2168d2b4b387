"""
Syntax node ADTs consumed by the cohesion checks.

The host parser owns the real tree; it hands the rule these read-only views,
one per visited node. Every child is optional so that partial or malformed
trees can be represented: a missing child simply makes the node unresolvable.

Statement nodes (the kinds the rule checks):

* :class:`UseNode` - ``use App\\Modules\\Shipping\\Service;``
* :class:`ParamNode` - ``function f(Order $order)``
* :class:`NewNode` - ``new Order()`` (also an expression)
* :class:`AssignNode` - ``$x = <expr>;``
* :class:`ReturnNode` - ``return <expr>;``

Expression nodes appear on the right-hand side of assignments and returns.
``new``, static calls, class constants and static properties are
*class-scoped*: they name a class directly via ``class_name``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


__all__: list[str] = [
    "UseClause",
    "UseNode",
    "ParamNode",
    "NewNode",
    "StaticCallExpr",
    "ClassConstExpr",
    "StaticPropExpr",
    "MethodCallExpr",
    "OpaqueExpr",
    "AssignNode",
    "ReturnNode",
    "ClassScopedExpr",
    "Expression",
    "SyntaxNode",
    "class_scoped_of",
    "method_name_of",
]


# --------------------------------------------------------------------------- #
# Expressions                                                                 #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class NewNode:
    """Object instantiation; ``class_name`` is the token as written."""

    class_name: str | None = None
    kind: Literal["New"] = "New"


@dataclass(frozen=True)
class StaticCallExpr:
    """``Class::method()``."""

    class_name: str | None = None
    method: str | None = None
    kind: Literal["StaticCall"] = "StaticCall"


@dataclass(frozen=True)
class ClassConstExpr:
    """``Class::CONSTANT``."""

    class_name: str | None = None
    constant: str | None = None
    kind: Literal["ClassConst"] = "ClassConst"


@dataclass(frozen=True)
class StaticPropExpr:
    """``Class::$property``."""

    class_name: str | None = None
    prop: str | None = None
    kind: Literal["StaticProp"] = "StaticProp"


@dataclass(frozen=True)
class MethodCallExpr:
    """``<receiver>->method()``, e.g. a call chained on ``Class::make()``."""

    receiver: Expression | None = None
    method: str | None = None
    kind: Literal["MethodCall"] = "MethodCall"


@dataclass(frozen=True)
class OpaqueExpr:
    """Any expression the rule does not look into (variables, literals, ...)."""

    label: str = ""
    kind: Literal["Opaque"] = "Opaque"


ClassScopedExpr = NewNode | StaticCallExpr | ClassConstExpr | StaticPropExpr
Expression = ClassScopedExpr | MethodCallExpr | OpaqueExpr


# --------------------------------------------------------------------------- #
# Statements                                                                  #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class UseClause:
    """One imported name of a ``use`` statement."""

    name: str | None = None


@dataclass(frozen=True)
class UseNode:
    """An import statement; group imports carry several clauses."""

    clauses: tuple[UseClause, ...] = ()
    kind: Literal["Use"] = "Use"


@dataclass(frozen=True)
class ParamNode:
    """A function or method parameter with an optional declared type."""

    name: str | None = None
    type_name: str | None = None
    kind: Literal["Param"] = "Param"


@dataclass(frozen=True)
class AssignNode:
    """``$var_name = expr``."""

    var_name: str | None = None
    expr: Expression | None = None
    kind: Literal["Assign"] = "Assign"


@dataclass(frozen=True)
class ReturnNode:
    """``return expr``; ``expr`` is None for a bare ``return;``."""

    expr: Expression | None = None
    kind: Literal["Return"] = "Return"


SyntaxNode = UseNode | ParamNode | NewNode | AssignNode | ReturnNode


# --------------------------------------------------------------------------- #
# Shape helpers                                                               #
# --------------------------------------------------------------------------- #


def class_scoped_of(expr: Expression | None) -> ClassScopedExpr | None:
    """Return the class-scoped access at ``expr``, looking through one chained call."""
    match expr:
        case NewNode() | StaticCallExpr() | ClassConstExpr() | StaticPropExpr():
            return expr
        case MethodCallExpr(
            receiver=NewNode() | StaticCallExpr() | ClassConstExpr() | StaticPropExpr() as inner
        ):
            return inner
        case _:
            return None


def method_name_of(expr: Expression | None) -> str | None:
    """Method named directly by ``expr`` (static or instance call), if any."""
    match expr:
        case StaticCallExpr(method=method) | MethodCallExpr(method=method):
            return method
        case _:
            return None
