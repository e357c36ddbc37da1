"""Lookup of values by name from two parallel sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

__all__ = ["FindValues"]

T = TypeVar("T")


class FindValues(Generic[T]):
    """Pairs a sequence of names with a sequence of values of the same length."""

    def __init__(self, names: Sequence[str], values: Sequence[T]) -> None:
        if len(names) != len(values):
            raise ValueError(
                f"names and values differ in length ({len(names)} != {len(values)})"
            )
        self._names = names
        self._values = values

    def find(self, name: str, default: T | None = None) -> T | None:
        """Return the value paired with the first occurrence of ``name``, else ``default``."""
        for candidate, value in zip(self._names, self._values):
            if candidate == name:
                return value
        return default