"""Natural (human) string ordering.

Strings are split into alternating runs of decimal digits and non-digits.
Digit runs compare by numeric value, so ``".NET 9.0"`` sorts before
``".NET 10.0"``. Non-digit runs compare case-insensitively using
``str.casefold``, which does not depend on the process locale. When two
strings are equal under those rules (``"a1"`` vs ``"A01"``) the plain ordinal
comparison decides, so the ordering is total.
"""

from __future__ import annotations

import functools
import re
import unicodedata
from typing import Any, Callable, Iterable, List, Tuple, TypeVar

__all__ = ["compare_natural", "natural_key", "natural_sorted", "split_runs"]

T = TypeVar("T")

_RUN = re.compile(r"\d+|\D+")


def split_runs(text: str) -> List[Tuple[bool, str]]:
    """Return ``(is_digit_run, run)`` pairs covering ``text``."""
    return [(run[0].isdecimal(), run) for run in _RUN.findall(text)]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _digits(run: str) -> str:
    """ASCII digits of ``run`` without leading zeros."""
    return "".join(str(unicodedata.decimal(char)) for char in run).lstrip("0")


def _compare_runs(left: Tuple[bool, str], right: Tuple[bool, str]) -> int:
    left_digits, left_run = left
    right_digits, right_run = right
    if left_digits and right_digits:
        a, b = _digits(left_run), _digits(right_run)
        if len(a) != len(b):
            return _sign(len(a) - len(b))
        return (a > b) - (a < b)
    if not left_digits and not right_digits:
        a, b = left_run.casefold(), right_run.casefold()
        return (a > b) - (a < b)
    return (left_run > right_run) - (left_run < right_run)


def compare_natural(left: str, right: str) -> int:
    """Three-way natural comparison: negative, zero or positive."""
    if left == right:
        return 0
    left_runs = split_runs(left)
    right_runs = split_runs(right)
    for a, b in zip(left_runs, right_runs):
        result = _compare_runs(a, b)
        if result:
            return result
    if len(left_runs) != len(right_runs):
        return _sign(len(left_runs) - len(right_runs))
    # Equal by value and case-insensitively; fall back to ordinal.
    return (left > right) - (left < right)


natural_key: Callable[[str], Any] = functools.cmp_to_key(compare_natural)


def natural_sorted(items: Iterable[T], *, key: Callable[[T], str] | None = None) -> List[T]:
    if key is None:
        return sorted(items, key=natural_key)  # type: ignore[arg-type]
    return sorted(items, key=lambda item: natural_key(key(item)))
