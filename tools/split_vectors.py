#!/usr/bin/env python3
"""
Run the 30/10/60 fee splitter over a set of amounts and print the results.

Amounts are decimal, `0x`-prefixed hex, or the keyword `max` (the largest
value of the chosen width). The width defaults to `FEE_SPLIT_BITS` (256).

Examples:
  python3 tools/split_vectors.py 10 7 15 max
  python3 tools/split_vectors.py --bits 64 --check --json 0xffffffffffffffff
  python3 tools/split_vectors.py --vectors amounts.json --check
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.core.fee_split import (
    DEFAULT_BITS,
    FeeSplitInvariantError,
    FeeSplitRangeError,
    split,
    split_or_raise,
    uint_max,
)
from src.core.fee_split.math import MAX_BITS, MIN_BITS

TAG = "[split-vectors]"


class VectorError(Exception):
    pass


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


def default_bits() -> int:
    bits = _env_int("FEE_SPLIT_BITS", DEFAULT_BITS, lo=MIN_BITS, hi=MAX_BITS)
    return bits - (bits % 8)


def parse_amount(text: Any, *, bits: int) -> int:
    """Parse one amount (int, decimal string, hex string or `max`) and range-check it."""
    if isinstance(text, bool):
        raise VectorError(f"not an amount: {text!r}")
    if isinstance(text, int):
        value = text
    elif isinstance(text, str):
        raw = text.strip().lower().replace("_", "")
        if raw == "max":
            return uint_max(bits)
        try:
            value = int(raw, 16) if raw.startswith("0x") else int(raw, 10)
        except ValueError:
            raise VectorError(f"not an amount: {text!r}") from None
    else:
        raise VectorError(f"not an amount: {text!r}")
    if value < 0 or value > uint_max(bits):
        raise VectorError(f"amount out of range for uint{bits}: {value}")
    return value


def _load_vectors(path: Path, *, bits: int) -> list[int]:
    try:
        obj = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise VectorError(f"{path}: not a JSON file: {exc}") from None
    if not isinstance(obj, list):
        raise VectorError(f"{path}: expected a JSON list of amounts")
    return [parse_amount(v, bits=bits) for v in obj]


def build_vector(amount: int, *, bits: int, check: bool = False) -> dict[str, str]:
    """One output record. Ints are rendered as decimal strings (uint256 exceeds JSON-safe range)."""
    result = split_or_raise(amount, bits=bits) if check else split(amount, bits=bits)
    out = {"amount": str(amount), "bits": str(bits)}
    out.update({k: str(v) for k, v in result.to_dict().items()})
    return out


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Split amounts 30/10/60 with uint overflow checks.")
    ap.add_argument("amounts", nargs="*", help="amounts: decimal, 0x-hex, or 'max'")
    ap.add_argument("--bits", type=int, default=None, help="integer width (multiple of 8, 8..256)")
    ap.add_argument("--vectors", type=Path, default=None, help="JSON file with a list of amounts")
    ap.add_argument("--check", action="store_true", help="verify every invariant on each result")
    ap.add_argument("--json", action="store_true", help="emit one JSON object per line")
    return ap.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    bits = args.bits if args.bits is not None else default_bits()

    try:
        uint_max(bits)
        amounts = [parse_amount(a, bits=bits) for a in args.amounts]
        if args.vectors is not None:
            amounts.extend(_load_vectors(args.vectors, bits=bits))
    except (VectorError, FeeSplitRangeError, OSError) as exc:
        print(f"{TAG} ERROR: {exc}", file=sys.stderr)
        return 2

    if not amounts:
        print(f"{TAG} ERROR: no amounts given", file=sys.stderr)
        return 2

    failures = 0
    for amount in amounts:
        try:
            rec = build_vector(amount, bits=bits, check=args.check)
        except FeeSplitInvariantError as exc:
            failures += 1
            print(f"{TAG} FAIL amount={amount}: {exc}")
            continue
        if args.json:
            print(json.dumps(rec, sort_keys=True))
        else:
            print(
                f"{TAG} amount={rec['amount']} thirty={rec['thirty']} ten={rec['ten']} "
                f"remaining={rec['remaining']} total_remainder={rec['total_remainder']}"
            )

    if failures:
        print(f"{TAG} FAIL: {failures}/{len(amounts)} amounts violated invariants")
        return 1
    if args.check and not args.json:
        print(f"{TAG} OK: {len(amounts)} amounts checked (uint{bits})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
