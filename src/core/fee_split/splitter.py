"""
Fixed 30% / 10% / 60% splitter (deterministic, integer-only).

Every operation is a pure function of ``amount`` and the integer width
``bits`` (``uint256`` unless told otherwise). Intermediate values are
computed through the width-checked helpers in `math.py`; the quotient /
remainder decomposition keeps them in range for every amount in ``[0, MAX]``,
so none of these functions can fail on a valid input.

Truncation always rounds toward zero. The lost units end up in
``remaining``, which is what makes ``thirty + ten + remaining == amount`` exact.
"""

from __future__ import annotations

from .errors import FeeSplitInvariantError
from .invariants import check_all
from .math import (
    DEFAULT_BITS,
    DENOM,
    checked_add,
    checked_div,
    checked_mod,
    checked_mul,
    checked_sub,
    mul_div_down,
    mul_div_down_decomposed,
    mul_div_down_direct,
    require_uint,
    scale_back_thirty,
)
from .types import PercentResult, SplitResult

THIRTY_NUM: int = 3
TEN_NUM: int = 1
FORTY_NUM: int = THIRTY_NUM + TEN_NUM


def thirty_percent_direct(amount: int, *, bits: int = DEFAULT_BITS) -> int:
    """``(amount * 3) / 10``; raises `FeeSplitOverflowError` when ``amount > MAX // 3``."""
    require_uint("amount", amount, bits=bits)
    return mul_div_down_direct(amount, THIRTY_NUM, bits=bits)


def thirty_percent_decomposed(amount: int, *, bits: int = DEFAULT_BITS) -> int:
    """``(amount / 10) * 3 + ((amount % 10) * 3) / 10``; safe on the whole domain."""
    require_uint("amount", amount, bits=bits)
    return mul_div_down_decomposed(amount, THIRTY_NUM, bits=bits)


def thirty_percent(amount: int, *, bits: int = DEFAULT_BITS) -> PercentResult:
    """
    30% of ``amount``, truncated.

    Uses the direct product while ``amount <= MAX // 3`` and the decomposed
    form above that. ``diag = amount - floor(share * 10 / 3)``.
    """
    require_uint("amount", amount, bits=bits)
    share = mul_div_down(amount, THIRTY_NUM, bits=bits)
    diag = checked_sub(amount, scale_back_thirty(share, bits=bits), bits=bits)
    return PercentResult(share=share, diag=diag)


def ten_percent(amount: int, *, bits: int = DEFAULT_BITS) -> PercentResult:
    """10% of ``amount``, truncated. ``diag`` is exactly ``amount % 10``."""
    require_uint("amount", amount, bits=bits)
    share = checked_div(amount, DENOM, bits=bits)
    diag = checked_sub(amount, checked_mul(share, DENOM, bits=bits), bits=bits)
    return PercentResult(share=share, diag=diag)


def split(amount: int, *, bits: int = DEFAULT_BITS) -> SplitResult:
    """
    Partition ``amount`` into (thirty, ten, remaining, total_remainder).

    ``total_remainder`` counts the units lost to truncating 30% and 10%
    separately instead of 40% at once. It is 0 or 1.
    """
    require_uint("amount", amount, bits=bits)

    thirty = thirty_percent(amount, bits=bits).share
    ten = ten_percent(amount, bits=bits).share

    # thirty + ten <= floor(4 * amount / 10) <= amount
    distributed = checked_add(thirty, ten, bits=bits)
    remaining = checked_sub(amount, distributed, bits=bits)

    perfect_forty = mul_div_down(amount, FORTY_NUM, bits=bits)
    total_remainder = checked_sub(perfect_forty, distributed, bits=bits) if perfect_forty > distributed else 0

    if thirty + ten + remaining != amount:
        raise AssertionError("internal error: split does not conserve amount")

    return SplitResult(
        thirty=thirty,
        ten=ten,
        remaining=remaining,
        total_remainder=total_remainder,
    )


def split_or_raise(amount: int, *, bits: int = DEFAULT_BITS) -> SplitResult:
    """Like `split` but raises `FeeSplitInvariantError` on any invariant violation."""
    result = split(amount, bits=bits)
    violations = check_all(amount, result, bits=bits)
    if violations:
        raise FeeSplitInvariantError(violations)
    return result


def is_divisible_by_ten(amount: int, *, bits: int = DEFAULT_BITS) -> bool:
    require_uint("amount", amount, bits=bits)
    return checked_mod(amount, DENOM, bits=bits) == 0


def remainder_mod_ten(amount: int, *, bits: int = DEFAULT_BITS) -> int:
    """``amount % 10``, in ``[0, 9]``."""
    require_uint("amount", amount, bits=bits)
    return checked_mod(amount, DENOM, bits=bits)
