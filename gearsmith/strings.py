"""Formatting and lookup helpers for report strings."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

__all__ = [
    "format_percent",
    "percent_stat",
    "percent_stat_pair",
    "string_with_precision",
    "find_string",
    "find_value",
]

_log = logging.getLogger(__name__)


def _significant(value: float) -> str:
    """Format with three significant digits, switching to exponent form when needed."""
    return f"{value:.3g}"


def format_percent(value: float) -> str:
    """Return ``value`` with three significant digits followed by a percent sign."""
    return f"{_significant(value)}%"


def percent_stat(stat_name: str, value: float, description: str) -> str:
    """Return an HTML line showing one percentage for a named stat."""
    return f"{stat_name}: <b>{_significant(value)}%</b> {description}<br>"


def percent_stat_pair(
    stat_name: str,
    value1: float,
    description1: str,
    value2: float,
    description2: str,
) -> str:
    """Return an HTML line showing a percentage with a second one in parentheses."""
    return (
        f"{stat_name}: <b>{_significant(value1)}%</b> {description1}. "
        f"(<b>{_significant(value2)}%</b> {description2})<br>"
    )


def string_with_precision(amount: float, precision: int | None = None) -> str:
    """Format ``amount``; with a precision, use fixed notation with that many decimals.

    Without a precision an integer amount is written as it is.
    """
    if precision is None:
        if isinstance(amount, float) and amount.is_integer():
            return str(int(amount))
        return str(amount)
    if precision < 0:
        raise ValueError("precision must not be negative")
    return f"{amount:.{precision}f}"


def find_string(strings: Iterable[str], match: str) -> bool:
    """Return whether ``match`` is one of ``strings``."""
    return any(s == match for s in strings)


def find_value(strings: Sequence[str], values: Sequence[float], match: str) -> float:
    """Return the value paired with the first occurrence of ``match``, or 0.0 if absent."""
    for name, value in zip(strings, values):
        if name == match:
            return value
    _log.warning("Could not find: %s", match)
    return 0.0