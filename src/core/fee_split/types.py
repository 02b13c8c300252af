"""Result types for the `fee_split` kernel.

All types are frozen dataclasses holding plain non-negative ints.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .errors import FeeSplitRangeError


def _require_nonneg(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value < 0:
        raise FeeSplitRangeError(f"{name} must be non-negative: {value}")


@dataclass(frozen=True)
class PercentResult:
    """A single truncated percentage share.

    `diag` is informational only; `share + diag == amount` does not hold in
    general.
    """

    share: int
    diag: int

    def __post_init__(self) -> None:
        _require_nonneg("share", self.share)
        _require_nonneg("diag", self.diag)

    def as_tuple(self) -> tuple[int, int]:
        return (self.share, self.diag)

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class SplitResult:
    """The 30% / 10% / change partition of an amount."""

    thirty: int
    ten: int
    remaining: int
    total_remainder: int

    def __post_init__(self) -> None:
        for name, v in (
            ("thirty", self.thirty),
            ("ten", self.ten),
            ("remaining", self.remaining),
            ("total_remainder", self.total_remainder),
        ):
            _require_nonneg(name, v)

    @property
    def total(self) -> int:
        return self.thirty + self.ten + self.remaining

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.thirty, self.ten, self.remaining, self.total_remainder)

    def to_dict(self) -> dict[str, int]:
        return asdict(self)
