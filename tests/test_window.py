"""
Tests for the swing window predicates.
"""
from decimal import Decimal

from conftest import make_bar, make_bars
from swing_engine.indicators.window import is_flat_window, is_swing_high, is_swing_low


class TestIsSwingHigh:

    def test_clear_peak(self):
        bars = make_bars([8, 9, 10, 9, 8], [7, 8, 9, 8, 7])
        assert is_swing_high(bars, 2, 2)

    def test_equal_high_on_left_disqualifies(self):
        bars = make_bars([8, 10, 10, 9, 8], [7, 8, 9, 8, 7])
        assert not is_swing_high(bars, 2, 2)

    def test_equal_high_on_right_is_allowed(self):
        bars = make_bars([8, 9, 10, 10, 10], [7, 8, 9, 9, 9])
        assert is_swing_high(bars, 2, 2)

    def test_higher_high_on_right_disqualifies(self):
        bars = make_bars([8, 9, 10, 11, 8], [7, 8, 9, 8, 7])
        assert not is_swing_high(bars, 2, 2)

    def test_missing_left_bars_are_skipped(self):
        bars = make_bars([10, 9, 8], [9, 8, 7])
        assert is_swing_high(bars, 0, 2)

    def test_incomplete_right_window_is_false(self):
        bars = make_bars([8, 9, 10, 9], [7, 8, 9, 8])
        assert not is_swing_high(bars, 2, 2)

    def test_missing_pivot_price_is_false(self):
        bars = [make_bar(0, 8, 7), make_bar(1, None, 8), make_bar(2, 8, 7)]
        assert not is_swing_high(bars, 1, 1)

    def test_missing_neighbour_price_is_false(self):
        bars = [make_bar(0, None, 7), make_bar(1, 10, 8), make_bar(2, 8, 7)]
        assert not is_swing_high(bars, 1, 1)

    def test_exact_decimal_tie_counts_as_tie(self):
        # 0.1 + 0.2 == 0.3 in Decimal, so the right side is a tie, not a higher high
        bars = [
            make_bar(0, Decimal("0.2"), Decimal("0.1")),
            make_bar(1, Decimal("0.3"), Decimal("0.1")),
            make_bar(2, Decimal("0.1") + Decimal("0.2"), Decimal("0.1")),
        ]
        assert is_swing_high(bars, 1, 1)


class TestIsSwingLow:

    def test_clear_valley(self, valley_bars):
        assert is_swing_low(valley_bars, 2, 2)

    def test_equal_low_on_left_disqualifies(self):
        bars = make_bars([10, 9, 9, 9, 10, 11], [9, 8, 7, 7, 8, 9])
        assert not is_swing_low(bars, 3, 2)

    def test_equal_low_on_right_is_allowed(self):
        bars = make_bars([10, 9, 9, 9, 10, 11], [9, 8, 7, 7, 8, 9])
        assert is_swing_low(bars, 2, 2)

    def test_lower_low_on_right_disqualifies(self):
        bars = make_bars([10, 9, 8, 9, 10], [9, 8, 7, 6, 9])
        assert not is_swing_low(bars, 2, 2)

    def test_incomplete_right_window_is_false(self):
        bars = make_bars([10, 9, 8, 9], [9, 8, 7, 8])
        assert not is_swing_low(bars, 2, 2)

    def test_peak_is_not_a_low(self, valley_bars):
        assert not is_swing_low(valley_bars, 0, 2)


class TestIsFlatWindow:

    def test_flat_window(self):
        bars = make_bars([10, 10, 10], [9, 9, 9])
        assert is_flat_window(bars, 1, 1)

    def test_out_of_range_indices_are_skipped(self):
        bars = make_bars([10, 10], [9, 9])
        assert is_flat_window(bars, 0, 3)

    def test_different_high_breaks_flatness(self):
        bars = make_bars([10, 10, 10.5], [9, 9, 9])
        assert not is_flat_window(bars, 1, 1)

    def test_different_low_breaks_flatness(self):
        bars = make_bars([10, 10, 10], [9, 8.5, 9])
        assert not is_flat_window(bars, 1, 1)

    def test_equal_values_with_different_scale_are_flat(self):
        bars = [
            make_bar(0, Decimal("10.0"), Decimal("9")),
            make_bar(1, Decimal("10"), Decimal("9.00")),
        ]
        assert is_flat_window(bars, 0, 1)
