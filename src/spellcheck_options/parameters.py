"""Ordered, copy-on-write parameter storage."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TypeAlias

ParameterValue: TypeAlias = bool | int | float | str


class ParameterSet(Mapping[str, ParameterValue]):
    """
    Insertion-ordered mapping of request parameter names to scalar values.

    Typed options write a ``ParameterValue``.  Collation override values
    (``spellcheck.collateParam.*``) are opaque and stored as given, so
    values need not be hashable.

    Instances are never modified after construction.  ``with_entry`` copies
    the underlying dict, so a set handed to one configuration is unaffected
    by extensions made through another.  Re-adding an existing name replaces
    its value and keeps its original position.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, ParameterValue] | None = None) -> None:
        self._entries: dict[str, ParameterValue] = dict(entries or {})

    def with_entry(self, name: str, value: ParameterValue) -> ParameterSet:
        """Return a copy of this set with ``name`` added or overwritten."""
        entries = dict(self._entries)
        entries[name] = value
        return ParameterSet(entries)

    def contains(self, name: str) -> bool:
        return name in self._entries

    def snapshot(self) -> Mapping[str, ParameterValue]:
        """Read-only ordered view; writes raise ``TypeError``."""
        return MappingProxyType(self._entries)

    # -- Mapping protocol -----------------------------------------------------

    def __getitem__(self, key: str) -> ParameterValue:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __hash__(self) -> int:
        # Keys only: override values may be unhashable.
        return hash(frozenset(self._entries))

    def __repr__(self) -> str:
        return f"ParameterSet({self._entries!r})"
