"""Namespace helpers and the module classifier.

A namespace is a backslash-separated string such as
``App\\Modules\\Billing\\Service``. The owning module is the segment right
after the root marker; nothing else about the namespace is interpreted.
"""

from __future__ import annotations

from modcohesion.config import DEFAULT_ROOT_MARKER, NAMESPACE_SEPARATOR


__all__: list[str] = [
    "split_namespace",
    "join_namespace",
    "normalize_namespace",
    "module_of",
    "is_under_module_root",
]


def normalize_namespace(namespace: str) -> str:
    """Drop the leading separator of a fully qualified name (``\\App\\X`` -> ``App\\X``)."""
    return namespace.lstrip(NAMESPACE_SEPARATOR)


def split_namespace(namespace: str) -> list[str]:
    return normalize_namespace(namespace).split(NAMESPACE_SEPARATOR)


def join_namespace(*parts: str) -> str:
    """Join namespace parts, ignoring empty ones and stray separators."""
    stripped = (part.strip(NAMESPACE_SEPARATOR) for part in parts)
    return NAMESPACE_SEPARATOR.join(part for part in stripped if part)


def module_of(namespace: str | None, root_marker: str = DEFAULT_ROOT_MARKER) -> str | None:
    """Return the module owning ``namespace``.

    Args:
        namespace: Fully qualified namespace, or None when unresolved
        root_marker: Segment that marks the root of the module hierarchy

    Returns:
        The segment following the first ``root_marker`` segment, or None when
        the marker is missing or is the last segment.
    """
    if namespace is None:
        return None
    parts = split_namespace(namespace)
    if root_marker not in parts:
        return None
    index = parts.index(root_marker) + 1
    return parts[index] if index < len(parts) and parts[index] else None


def is_under_module_root(namespace: str, root_marker: str = DEFAULT_ROOT_MARKER) -> bool:
    """True when the marker occurs anywhere in ``namespace``.

    This is a substring test, unlike the positional :func:`module_of`: code in
    ``App\\ModulesLegacy\\Foo`` counts as inside the hierarchy and is checked,
    but has no module of its own, so its records carry ``current_module=None``.
    """
    return root_marker in namespace
