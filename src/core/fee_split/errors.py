"""Exception types for the `fee_split` kernel.

Used by ``split_or_raise()`` in ``splitter.py`` and by the width-checked
arithmetic in ``math.py``.
"""

from __future__ import annotations


class FeeSplitRangeError(ValueError):
    """Raised when an amount or width lies outside its domain."""


class FeeSplitOverflowError(Exception):
    """Raised when an intermediate value leaves ``[0, MAX]`` for the chosen width."""

    def __init__(self, op: str, value: int, bits: int) -> None:
        self.op = op
        self.value = value
        self.bits = bits
        super().__init__(f"{op} left uint{bits} range: {value}")


class FeeSplitInvariantError(Exception):
    """Raised when a split result violates one or more invariants."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")
