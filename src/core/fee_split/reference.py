"""
Arbitrary-precision reference formulas for the `fee_split` kernel.

These are the contract formulas written literally (multiply first, then
divide) on unbounded Python ints. They never overflow here, so they serve as
the test oracle for the width-checked implementation in `splitter.py`.
Nothing in the package imports this module; it is not part of the public API.
"""

from __future__ import annotations


def ref_thirty_percent(amount: int) -> tuple[int, int]:
    share = (amount * 3) // 10
    return share, amount - (share * 10) // 3


def ref_ten_percent(amount: int) -> tuple[int, int]:
    share = amount // 10
    return share, amount - share * 10


def ref_split(amount: int) -> tuple[int, int, int, int]:
    thirty, _ = ref_thirty_percent(amount)
    ten, _ = ref_ten_percent(amount)
    remaining = amount - thirty - ten
    perfect_forty = (amount * 4) // 10
    total_remainder = max(0, perfect_forty - (thirty + ten))
    return thirty, ten, remaining, total_remainder


def ref_is_divisible_by_ten(amount: int) -> bool:
    return amount % 10 == 0


def ref_remainder_mod_ten(amount: int) -> int:
    return amount % 10
