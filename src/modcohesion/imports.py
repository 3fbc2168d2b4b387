"""Per-scope import table: short or aliased name -> fully qualified name."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


__all__: list[str] = ["ImportEntry", "ImportTable"]


@dataclass(frozen=True)
class ImportEntry:
    """One ``use`` declaration visible in the current scope.

    Attributes:
        original_name: Name the code refers to (the alias when one is given)
        fqsen: Fully qualified name the alias stands for
    """

    original_name: str
    fqsen: str


@dataclass(frozen=True)
class ImportTable:
    """Immutable, ordered collection of import entries for one lexical scope."""

    entries: tuple[ImportEntry, ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> ImportTable:
        return cls(tuple(ImportEntry(alias, fqsen) for alias, fqsen in mapping.items()))

    @classmethod
    def from_entries(cls, entries: Iterable[ImportEntry]) -> ImportTable:
        return cls(tuple(entries))

    def lookup(self, name: str | None) -> str | None:
        """Return the FQSEN of the first entry named ``name``, in table order."""
        if name is None:
            return None
        return next((entry.fqsen for entry in self.entries if entry.original_name == name), None)

    def __len__(self) -> int:
        return len(self.entries)
