"""Width-checked unsigned arithmetic for the `fee_split` kernel.

Python ints never overflow, so a fixed-width contract (``uint256`` by default)
is emulated explicitly: every intermediate value the splitter produces goes
through one of the ``checked_*`` helpers below, which raise
`FeeSplitOverflowError` instead of wrapping.

All division is truncating (``//`` on non-negative operands).
"""

from __future__ import annotations

from .errors import FeeSplitOverflowError, FeeSplitRangeError

DEFAULT_BITS: int = 256
MIN_BITS: int = 8
MAX_BITS: int = 256
U256_MAX: int = (1 << 256) - 1

# Percentages are expressed over a denominator of 10 (3/10, 1/10, 4/10).
DENOM: int = 10


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def uint_max(bits: int = DEFAULT_BITS) -> int:
    """Largest value representable in ``uint<bits>``."""
    _require_int("bits", bits)
    if bits < MIN_BITS or bits > MAX_BITS or bits % 8 != 0:
        raise FeeSplitRangeError(f"bits must be a multiple of 8 in [{MIN_BITS}, {MAX_BITS}]: {bits}")
    return (1 << bits) - 1


def require_uint(name: str, value: int, *, bits: int = DEFAULT_BITS) -> int:
    """Validate ``value`` as a ``uint<bits>`` and return it unchanged."""
    _require_int(name, value)
    hi = uint_max(bits)
    if value < 0 or value > hi:
        raise FeeSplitRangeError(f"{name} must be in [0, {hi}] for uint{bits}: {value}")
    return value


def _fit(op: str, value: int, bits: int) -> int:
    if value < 0 or value > uint_max(bits):
        raise FeeSplitOverflowError(op, value, bits)
    return value


def checked_add(x: int, y: int, *, bits: int = DEFAULT_BITS) -> int:
    return _fit("add", x + y, bits)


def checked_sub(x: int, y: int, *, bits: int = DEFAULT_BITS) -> int:
    return _fit("sub", x - y, bits)


def checked_mul(x: int, y: int, *, bits: int = DEFAULT_BITS) -> int:
    return _fit("mul", x * y, bits)


def checked_div(x: int, d: int, *, bits: int = DEFAULT_BITS) -> int:
    if d == 0:
        raise ZeroDivisionError("division by zero")
    return _fit("div", x // d, bits)


def checked_mod(x: int, d: int, *, bits: int = DEFAULT_BITS) -> int:
    if d == 0:
        raise ZeroDivisionError("modulo by zero")
    return _fit("mod", x % d, bits)


def mul_div_down_direct(amount: int, numerator: int, *, bits: int = DEFAULT_BITS) -> int:
    """``floor(amount * numerator / 10)`` via the plain product.

    Overflows (raises) when ``amount > MAX // numerator``.
    """
    return checked_div(checked_mul(amount, numerator, bits=bits), DENOM, bits=bits)


def mul_div_down_decomposed(amount: int, numerator: int, *, bits: int = DEFAULT_BITS) -> int:
    """``floor(amount * numerator / 10)`` without forming ``amount * numerator``.

    With ``amount = q*10 + r`` and ``0 <= r < 10``:
    ``floor(amount*n/10) == q*n + floor(r*n/10)``.
    """
    q = checked_div(amount, DENOM, bits=bits)
    r = checked_mod(amount, DENOM, bits=bits)
    whole = checked_mul(q, numerator, bits=bits)
    frac = checked_div(checked_mul(r, numerator, bits=bits), DENOM, bits=bits)
    return checked_add(whole, frac, bits=bits)


def mul_div_down(amount: int, numerator: int, *, bits: int = DEFAULT_BITS) -> int:
    """Overflow-safe ``floor(amount * numerator / 10)`` for ``0 < numerator < 10``."""
    if amount <= uint_max(bits) // numerator:
        return mul_div_down_direct(amount, numerator, bits=bits)
    return mul_div_down_decomposed(amount, numerator, bits=bits)


def scale_back_thirty(share: int, *, bits: int = DEFAULT_BITS) -> int:
    """``floor(share * 10 / 3)`` without forming ``share * 10``.

    ``share = 3q + r`` with ``r < 3`` gives ``10q + floor(10r/3)``. For a 30%
    share the result never exceeds the amount it came from.
    """
    q = checked_div(share, 3, bits=bits)
    r = checked_mod(share, 3, bits=bits)
    return checked_add(
        checked_mul(q, DENOM, bits=bits),
        checked_div(checked_mul(r, DENOM, bits=bits), 3, bits=bits),
        bits=bits,
    )
