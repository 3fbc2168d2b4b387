"""Message templates for module cohesion violations.

Each violation kind has a rule code and a one-line template. Templates use
``str.format`` fields filled from a :class:`ViolationRecord`:
``current_class``, ``current_module``, ``symbol`` and ``target_module``.
"""

from __future__ import annotations

from dataclasses import dataclass

from modcohesion.violations import ISSUE_TYPE, ViolationKind, ViolationRecord


@dataclass(frozen=True)
class RuleMessage:
    """Message template for one violation kind."""

    code: str
    kind: ViolationKind
    short_message: str
    template: str
    long_message: str


MOD001_MESSAGE = RuleMessage(
    code="MOD001",
    kind=ViolationKind.IMPORT,
    short_message="import of a class owned by another module",
    template="Module:{current_module} used {symbol} from other Module:{target_module}",
    long_message=(
        "A module may only import classes of its own module, facades, DTOs,\n"
        "and code outside the module hierarchy.\n"
        "Expose what other modules need through a Facades namespace instead."
    ),
)

MOD002_MESSAGE = RuleMessage(
    code="MOD002",
    kind=ViolationKind.PARAMETER_TYPE,
    short_message="parameter typed with a class owned by another module",
    template=(
        "{current_class}::class Module:{current_module} used Param: {symbol} "
        "with type from other Module:{target_module}"
    ),
    long_message=(
        "Parameters must not be typed with another module's internal classes.\n"
        "Accept a DTO or a facade contract instead."
    ),
)

MOD003_MESSAGE = RuleMessage(
    code="MOD003",
    kind=ViolationKind.INSTANTIATION,
    short_message="instantiation of a class owned by another module",
    template=(
        "{current_class}::class Module:{current_module} try to make {symbol} "
        "object from other Module:{target_module}"
    ),
    long_message=(
        "Objects of another module's internal classes must not be created directly.\n"
        "Ask the owning module's facade for them."
    ),
)

MOD004_MESSAGE = RuleMessage(
    code="MOD004",
    kind=ViolationKind.ASSIGNMENT,
    short_message="assignment of a value typed by another module",
    template=(
        "{current_class}::class Module:{current_module} try to assign ${symbol} "
        "value type from other Module:{target_module}"
    ),
    long_message=(
        "A variable receives a value whose class, or whose declared return type,\n"
        "belongs to another module. Call the owning module's facade instead."
    ),
)

MOD005_MESSAGE = RuleMessage(
    code="MOD005",
    kind=ViolationKind.RETURN,
    short_message="return of a class owned by another module",
    template=(
        "{current_class}::class Module:{current_module} try to return type:{symbol} "
        "from other Module:{target_module}"
    ),
    long_message=(
        "Returning another module's internal classes leaks them to callers.\n"
        "Return a DTO instead."
    ),
)

RULE_MESSAGES: dict[str, RuleMessage] = {
    message.code: message
    for message in (
        MOD001_MESSAGE,
        MOD002_MESSAGE,
        MOD003_MESSAGE,
        MOD004_MESSAGE,
        MOD005_MESSAGE,
    )
}

MESSAGES_BY_KIND: dict[ViolationKind, RuleMessage] = {
    message.kind: message for message in RULE_MESSAGES.values()
}


def format_violation(record: ViolationRecord) -> str:
    """Render a violation as ``ModuleCohesion MOD00X: <message>``.

    Args:
        record: Violation to render

    Returns:
        Single-line message
    """
    message = MESSAGES_BY_KIND[record.kind]
    text = message.template.format(
        current_class=record.current_class or "",
        current_module=record.current_module or "",
        symbol=record.symbol or "",
        target_module=record.target_module or "",
    )
    return f"{ISSUE_TYPE} {message.code}: {text}"


def explain_rule(rule_code: str) -> str:
    """Get detailed explanation for a rule code (MOD001..MOD005)."""
    message = RULE_MESSAGES.get(rule_code.upper())
    if not message:
        return f"Unknown rule: {rule_code}"

    return (
        f"Rule {message.code} ({message.kind.value}): {message.short_message}\n"
        f"\n{message.long_message}"
    )


__all__ = [
    "RuleMessage",
    "RULE_MESSAGES",
    "MESSAGES_BY_KIND",
    "format_violation",
    "explain_rule",
]
