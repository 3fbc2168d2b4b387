"""Cross-module access policy.

Access to a target namespace is granted when any one of these holds:

1. the namespace contains an exemption marker (``Facades``, ``DTO``);
2. the namespace is not owned by any module (framework or vendor code);
3. the namespace is owned by the current module.

Everything else is denied. Exemption markers match as substrings anywhere in
the namespace, so ``App\\Modules\\Shipping\\DTOs\\Parcel`` is exempt too.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from modcohesion.config import CohesionConfig
from modcohesion.namespace import module_of


__all__: list[str] = ["Access", "AccessDecision", "is_exempt", "is_allowed", "decide"]

_DEFAULT_CONFIG = CohesionConfig()


class Access(Enum):
    ALLOWED = "allowed"
    DENIED = "denied"


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of the policy for one candidate target."""

    access: Access
    target: str | None
    target_module: str | None = None

    @property
    def denied(self) -> bool:
        return self.access is Access.DENIED


def is_exempt(target: str, config: CohesionConfig = _DEFAULT_CONFIG) -> bool:
    return any(marker in target for marker in config.exemption_markers)


def is_allowed(
    current_module: str | None,
    target: str,
    config: CohesionConfig = _DEFAULT_CONFIG,
) -> bool:
    """Decide whether code in ``current_module`` may reference ``target``.

    Args:
        current_module: Module of the referencing code
        target: Fully qualified namespace of the referenced symbol
        config: Root and exemption markers

    Returns:
        True when access is permitted
    """
    target_module = module_of(target, config.root_marker)
    return is_exempt(target, config) or target_module is None or target_module == current_module


def decide(
    current_module: str | None,
    target: str | None,
    config: CohesionConfig = _DEFAULT_CONFIG,
) -> AccessDecision:
    """Like :func:`is_allowed`, treating an unresolved target as allowed."""
    if target is None:
        return AccessDecision(access=Access.ALLOWED, target=None)
    access = Access.ALLOWED if is_allowed(current_module, target, config) else Access.DENIED
    return AccessDecision(
        access=access,
        target=target,
        target_module=module_of(target, config.root_marker),
    )
