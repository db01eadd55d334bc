import math

from finance_engine.domain import Trend


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_trend(current: float, previous: float) -> Trend:
    """
    Signed percentage change from ``previous`` to ``current``.

    A zero baseline never raises: growth from nothing reports +100%, a
    0 -> 0 change reports 0% and counts as positive. A drop below zero from
    a zero baseline reports -100%.

    The result is polarity-neutral. ``is_positive`` only says whether the
    value went up; callers decide whether that is good news.
    """
    if previous == 0:
        if current > 0:
            return Trend(percent=100, change=100.0, is_positive=True)
        if current == 0:
            return Trend(percent=0, change=0.0, is_positive=True)
        return Trend(percent=-100, change=-100.0, is_positive=False)

    change = (current - previous) / previous * 100
    return Trend(
        percent=round_half_up(change),
        change=change,
        is_positive=(current - previous) >= 0,
    )


def inverted(trend: Trend) -> Trend:
    """Reinterpret ``trend`` for a metric where growth is bad, e.g. expenses."""
    return Trend(
        percent=trend.percent,
        change=trend.change,
        is_positive=trend.change <= 0,
    )
