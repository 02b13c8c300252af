"""Tests for src/core/fee_split/splitter.py — concrete scenarios and boundaries."""

import pytest

from src.core.fee_split import (
    U256_MAX,
    FeeSplitOverflowError,
    FeeSplitRangeError,
    PercentResult,
    SplitResult,
    is_divisible_by_ten,
    remainder_mod_ten,
    split,
    ten_percent,
    thirty_percent,
    thirty_percent_decomposed,
    thirty_percent_direct,
    uint_max,
)
from src.core.fee_split.reference import ref_split, ref_ten_percent, ref_thirty_percent


# ---------------------------------------------------------------------------
# split: concrete scenarios
# ---------------------------------------------------------------------------

class TestSplitScenarios:
    def test_ten(self):
        r = split(10)
        assert (r.thirty, r.ten, r.remaining) == (3, 1, 6)
        assert r.total == 10

    def test_seven(self):
        # 2.1 -> 2, 0.7 -> 0
        r = split(7)
        assert (r.thirty, r.ten, r.remaining) == (2, 0, 5)

    def test_fifteen(self):
        r = split(15)
        assert (r.thirty, r.ten, r.remaining) == (4, 1, 10)
        # 40% of 15 is 6, 4 + 1 = 5 distributed
        assert r.total_remainder == 1

    def test_one(self):
        assert split(1).as_tuple() == (0, 0, 1, 0)

    def test_zero(self):
        assert split(0).as_tuple() == (0, 0, 0, 0)

    def test_max_does_not_overflow(self):
        r = split(U256_MAX)
        assert r.total == U256_MAX
        assert r.thirty == (U256_MAX * 3) // 10
        assert r.ten == U256_MAX // 10

    def test_returns_split_result(self):
        r = split(100)
        assert isinstance(r, SplitResult)
        assert r.to_dict() == {"thirty": 30, "ten": 10, "remaining": 60, "total_remainder": 0}


class TestSplitBoundaries:
    @pytest.mark.parametrize("amount", [1, 2, 3])
    def test_thirty_zero_below_four(self, amount):
        assert split(amount).thirty == 0

    def test_thirty_first_unit_at_four(self):
        assert split(4).thirty == 1

    @pytest.mark.parametrize("amount", range(1, 10))
    def test_ten_zero_below_ten(self, amount):
        assert split(amount).ten == 0

    def test_just_above_direct_threshold(self):
        t = U256_MAX // 3
        for amount in (t - 1, t, t + 1, t + 2):
            assert split(amount).as_tuple() == ref_split(amount)

    def test_just_above_forty_threshold(self):
        t = U256_MAX // 4
        for amount in (t - 1, t, t + 1, t + 2):
            assert split(amount).as_tuple() == ref_split(amount)

    def test_every_u8_amount(self):
        # Every intermediate is width-checked, so this covers overflow-freedom for a whole width.
        for amount in range(uint_max(8) + 1):
            r = split(amount, bits=8)
            assert r.as_tuple() == ref_split(amount)
            assert r.total == amount
            assert r.total_remainder in (0, 1)

    def test_u64_max(self):
        hi = uint_max(64)
        assert split(hi, bits=64).as_tuple() == ref_split(hi)


# ---------------------------------------------------------------------------
# thirty_percent / ten_percent
# ---------------------------------------------------------------------------

class TestThirtyPercent:
    def test_exact_multiple(self):
        assert thirty_percent(10) == PercentResult(share=3, diag=0)

    def test_truncating(self):
        # share 2, floor(20 / 3) = 6, diag = 1
        assert thirty_percent(7).as_tuple() == (2, 1)

    def test_diag_small_values(self):
        assert thirty_percent(13).as_tuple() == (3, 3)
        # 0.9 -> 0
        assert thirty_percent(3).as_tuple() == (0, 3)

    def test_diag_depends_only_on_last_digit(self):
        # amount = 10k + r: diag = r - floor(10 * floor(3r / 10) / 3)
        expected = [0, 1, 2, 3, 1, 2, 3, 1, 2, 3]
        for amount in range(0, 1000):
            assert thirty_percent(amount).diag == expected[amount % 10]

    def test_matches_reference_formula(self):
        for amount in list(range(0, 500)) + [U256_MAX // 3, U256_MAX // 3 + 1]:
            assert thirty_percent(amount).as_tuple() == ref_thirty_percent(amount)

    def test_max(self):
        r = thirty_percent(U256_MAX)
        assert r.share == (U256_MAX * 3) // 10
        assert r.diag == U256_MAX - (r.share * 10) // 3


class TestThirtyPercentPaths:
    def test_direct_overflows_above_threshold(self):
        with pytest.raises(FeeSplitOverflowError):
            thirty_percent_direct(U256_MAX // 3 + 1)

    def test_direct_ok_at_threshold(self):
        t = U256_MAX // 3
        assert thirty_percent_direct(t) == (t * 3) // 10

    def test_decomposed_total(self):
        assert thirty_percent_decomposed(U256_MAX) == (U256_MAX * 3) // 10

    def test_paths_agree_u8(self):
        for amount in range(uint_max(8) // 3 + 1):
            assert thirty_percent_direct(amount, bits=8) == thirty_percent_decomposed(amount, bits=8)


class TestTenPercent:
    def test_values(self):
        assert ten_percent(0).as_tuple() == (0, 0)
        assert ten_percent(9).as_tuple() == (0, 9)
        assert ten_percent(10).as_tuple() == (1, 0)
        assert ten_percent(123).as_tuple() == (12, 3)

    def test_diag_is_mod_ten(self):
        for amount in range(0, 300):
            assert ten_percent(amount).diag == amount % 10
            assert ten_percent(amount).as_tuple() == ref_ten_percent(amount)

    def test_max(self):
        assert ten_percent(U256_MAX).as_tuple() == (U256_MAX // 10, U256_MAX % 10)


# ---------------------------------------------------------------------------
# Divisibility helpers
# ---------------------------------------------------------------------------

class TestDivisibility:
    def test_divisible(self):
        assert is_divisible_by_ten(0) is True
        assert is_divisible_by_ten(10) is True
        assert is_divisible_by_ten(1_000_000) is True

    def test_not_divisible(self):
        assert is_divisible_by_ten(7) is False
        assert is_divisible_by_ten(U256_MAX) is False

    def test_remainder(self):
        assert remainder_mod_ten(0) == 0
        assert remainder_mod_ten(19) == 9
        # 2**256 - 1 ends in ...935
        assert remainder_mod_ten(U256_MAX) == 5


# ---------------------------------------------------------------------------
# Domain validation
# ---------------------------------------------------------------------------

class TestDomain:
    @pytest.mark.parametrize("fn", [thirty_percent, ten_percent, split, is_divisible_by_ten, remainder_mod_ten])
    def test_negative_rejected(self, fn):
        with pytest.raises(FeeSplitRangeError):
            fn(-1)

    @pytest.mark.parametrize("fn", [thirty_percent, ten_percent, split, is_divisible_by_ten, remainder_mod_ten])
    def test_above_width_rejected(self, fn):
        with pytest.raises(FeeSplitRangeError):
            fn(U256_MAX + 1)

    def test_narrow_width_rejects_wide_amount(self):
        with pytest.raises(FeeSplitRangeError):
            split(256, bits=8)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            split(True)

    def test_bad_width_rejected(self):
        with pytest.raises(FeeSplitRangeError):
            split(1, bits=7)
