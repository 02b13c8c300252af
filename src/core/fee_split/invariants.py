"""Invariant checkers for `fee_split`.

Each function returns True when the invariant holds for ``(amount, result)``
at the given width, and `check_all()` returns the list of violated invariant
IDs (empty = all pass). The exactness checks compare against unbounded
Python arithmetic, so they hold independently of the overflow-avoidance path.
"""

from __future__ import annotations

from typing import Callable

from .math import DEFAULT_BITS, uint_max
from .types import SplitResult


def inv_conservation(amount: int, r: SplitResult, bits: int) -> bool:
    return r.thirty + r.ten + r.remaining == amount


def inv_parts_in_range(amount: int, r: SplitResult, bits: int) -> bool:
    hi = uint_max(bits)
    return all(0 <= v <= hi for v in r.as_tuple())


def inv_thirty_exact(amount: int, r: SplitResult, bits: int) -> bool:
    return r.thirty == (amount * 3) // 10


def inv_ten_exact(amount: int, r: SplitResult, bits: int) -> bool:
    return r.ten == amount // 10


def inv_multiple_of_ten_exact(amount: int, r: SplitResult, bits: int) -> bool:
    if amount % 10 != 0:
        return True
    k = amount // 10
    return (r.thirty, r.ten, r.remaining) == (3 * k, k, 6 * k)


def inv_total_remainder_bounded(amount: int, r: SplitResult, bits: int) -> bool:
    return 0 <= r.total_remainder <= 1


INVARIANT_REGISTRY: dict[str, Callable[[int, SplitResult, int], bool]] = {
    "inv_conservation": inv_conservation,
    "inv_parts_in_range": inv_parts_in_range,
    "inv_thirty_exact": inv_thirty_exact,
    "inv_ten_exact": inv_ten_exact,
    "inv_multiple_of_ten_exact": inv_multiple_of_ten_exact,
    "inv_total_remainder_bounded": inv_total_remainder_bounded,
}


def check_all(amount: int, result: SplitResult, *, bits: int = DEFAULT_BITS) -> list[str]:
    """Return the sorted list of violated invariant IDs."""
    return sorted(name for name, fn in INVARIANT_REGISTRY.items() if not fn(amount, result, bits))
