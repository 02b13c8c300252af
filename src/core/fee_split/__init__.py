"""`fee_split`: fixed 30% / 10% / 60% splitting of a fixed-width unsigned amount.

- deterministic, integer-only, truncating division,
- exact conservation: ``thirty + ten + remaining == amount``,
- no intermediate value leaves ``[0, 2**bits - 1]`` (``bits`` defaults to 256).

Public API:
- `thirty_percent(amount) -> PercentResult`
- `ten_percent(amount) -> PercentResult`
- `split(amount) -> SplitResult`
- `split_or_raise(amount) -> SplitResult` (raises on invariant violation)
- `is_divisible_by_ten(amount) -> bool`
- `remainder_mod_ten(amount) -> int`

`reference.py` holds the unbounded multiply-then-divide formulas used as the
test oracle; it is not re-exported here.
"""

from .errors import FeeSplitInvariantError, FeeSplitOverflowError, FeeSplitRangeError
from .invariants import INVARIANT_REGISTRY, check_all
from .math import DEFAULT_BITS, U256_MAX, uint_max
from .splitter import (
    is_divisible_by_ten,
    remainder_mod_ten,
    split,
    split_or_raise,
    ten_percent,
    thirty_percent,
    thirty_percent_decomposed,
    thirty_percent_direct,
)
from .types import PercentResult, SplitResult

__all__ = [
    "thirty_percent",
    "thirty_percent_direct",
    "thirty_percent_decomposed",
    "ten_percent",
    "split",
    "split_or_raise",
    "is_divisible_by_ten",
    "remainder_mod_ten",
    "check_all",
    "INVARIANT_REGISTRY",
    "PercentResult",
    "SplitResult",
    "DEFAULT_BITS",
    "U256_MAX",
    "uint_max",
    "FeeSplitRangeError",
    "FeeSplitOverflowError",
    "FeeSplitInvariantError",
]
