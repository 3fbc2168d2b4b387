"""Code-base symbol index consulted by the assignment check.

The host analysis engine knows which methods exist and what they declare to
return. The rule only needs two questions answered, captured by the
:class:`CodeBase` protocol. :class:`StaticCodeBase` is an in-memory index for
hosts that precompute signatures, and for tests.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from modcohesion.namespace import join_namespace, normalize_namespace


__all__: list[str] = [
    "ReturnType",
    "MethodSignature",
    "CodeBase",
    "StaticCodeBase",
    "method_fqsen",
    "EMPTY_CODE_BASE",
]


@dataclass(frozen=True)
class ReturnType:
    """A single member of a method's declared return type set.

    Attributes:
        namespace: Declaring namespace of the type (empty for builtins)
        name: Short type name
        is_object: False for scalars, ``void``, ``array`` and similar
    """

    namespace: str
    name: str
    is_object: bool = True

    @property
    def fqsen(self) -> str:
        return join_namespace(self.namespace, self.name)


@dataclass(frozen=True)
class MethodSignature:
    """A method known to the code base, with its declared return types."""

    class_fqsen: str
    name: str
    return_types: tuple[ReturnType, ...] = ()

    @property
    def fqsen(self) -> str:
        return method_fqsen(self.class_fqsen, self.name)


def method_fqsen(class_fqsen: str, method: str) -> str:
    """Build ``Class\\Name::method``."""
    return f"{normalize_namespace(class_fqsen)}::{method}"


class CodeBase(Protocol):
    """Read-only view of the host's symbol index."""

    def has_method(self, fqsen: str) -> bool: ...

    def return_types(self, fqsen: str) -> tuple[ReturnType, ...]: ...


@dataclass(frozen=True)
class StaticCodeBase:
    """In-memory :class:`CodeBase` keyed by method FQSEN.

    Method lookups are case-insensitive, as method names are in the analyzed
    language.
    """

    methods: dict[str, MethodSignature] = field(default_factory=dict)

    @classmethod
    def from_signatures(cls, signatures: Iterable[MethodSignature]) -> StaticCodeBase:
        return cls({sig.fqsen.lower(): sig for sig in signatures})

    def has_method(self, fqsen: str) -> bool:
        return normalize_namespace(fqsen).lower() in self.methods

    def return_types(self, fqsen: str) -> tuple[ReturnType, ...]:
        signature = self.methods.get(normalize_namespace(fqsen).lower())
        return signature.return_types if signature is not None else ()


EMPTY_CODE_BASE = StaticCodeBase()
