import pytest

from finance_engine.domain import Trend
from finance_engine.trends import calculate_trend, inverted, round_half_up


def test_zero_baseline_no_change():
    trend = calculate_trend(0, 0)
    assert trend.percent == 0
    assert trend.is_positive is True


def test_zero_baseline_growth_is_full_increase():
    trend = calculate_trend(100, 0)
    assert trend.percent == 100
    assert trend.is_positive is True


def test_zero_baseline_drop_below_zero():
    trend = calculate_trend(-20, 0)
    assert trend.percent == -100
    assert trend.is_positive is False


def test_increase():
    trend = calculate_trend(150, 100)
    assert trend.percent == 50
    assert trend.is_positive is True


def test_decrease():
    trend = calculate_trend(50, 100)
    assert trend.percent == -50
    assert trend.is_positive is False


def test_unrounded_change_is_kept():
    trend = calculate_trend(1, 3)
    assert trend.change == pytest.approx(-66.6666667)
    assert trend.percent == -67


def test_equal_values_are_positive():
    assert calculate_trend(80, 80) == Trend(percent=0, change=0.0, is_positive=True)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.49) == 0


def test_inverted_for_growth_is_bad_metrics():
    more_spending = inverted(calculate_trend(150, 100))
    assert more_spending.percent == 50
    assert more_spending.is_positive is False

    less_spending = inverted(calculate_trend(50, 100))
    assert less_spending.is_positive is True

    assert inverted(calculate_trend(0, 0)).is_positive is True
