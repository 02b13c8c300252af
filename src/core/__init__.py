"""
Core splitting algorithms
"""

from .fee_split import (
    PercentResult,
    SplitResult,
    is_divisible_by_ten,
    remainder_mod_ten,
    split,
    split_or_raise,
    ten_percent,
    thirty_percent,
)

__all__ = [
    "thirty_percent",
    "ten_percent",
    "split",
    "split_or_raise",
    "is_divisible_by_ten",
    "remainder_mod_ten",
    "PercentResult",
    "SplitResult",
]
