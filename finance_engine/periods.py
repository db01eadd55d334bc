"""Calendar-month periods and time-series bucketing."""

from datetime import date
from typing import Iterable, Sequence

from finance_engine.domain import FilterCriteria, MonthBucket, Period, Transaction
from finance_engine.filters import filter_transactions
from finance_engine.flows import aggregate_flows, expense_transactions

# Fixed English labels, independent of the process locale.
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# preset -> number of calendar months ending with the current one
TIME_RANGES = {"1m": 1, "3m": 3, "6m": 6, "1y": 12}


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_period(year: int, month: int) -> Period:
    ny, nm = shift_month(year, month, 1)
    return Period(start=date(year, month, 1), end=date(ny, nm, 1), label=MONTH_ABBR[month - 1])


def current_month(today: date) -> Period:
    return month_period(today.year, today.month)


def previous_month(today: date) -> Period:
    return month_period(*shift_month(today.year, today.month, -1))


def last_n_months(n: int, today: date) -> tuple[Period, ...]:
    """The ``n`` calendar months ending with the month of ``today``, oldest first."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return tuple(
        month_period(*shift_month(today.year, today.month, -i))
        for i in reversed(range(n))
    )


def months_between(start: date, end: date) -> tuple[Period, ...]:
    """Every calendar month touched by the inclusive range [start, end]."""
    periods = []
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        periods.append(month_period(year, month))
        year, month = shift_month(year, month, 1)
    return tuple(periods)


def time_range_window(time_range: str, today: date) -> tuple[date, date]:
    """Inclusive (start, end) dates for an analytics preset such as ``"3m"``."""
    if time_range not in TIME_RANGES:
        raise ValueError(f"unknown time range {time_range!r}, expected one of {sorted(TIME_RANGES)}")
    months = last_n_months(TIME_RANGES[time_range], today)
    return months[0].start, months[-1].last_day


def bucket_by_period(
    trans: Iterable[Transaction], periods: Sequence[Period]
) -> tuple[MonthBucket, ...]:
    """One bucket per period, in the order the caller supplied them."""
    trans = tuple(trans)
    buckets = []
    for p in periods:
        in_period = filter_transactions(trans, FilterCriteria(start_date=p.start, end_date=p.last_day))
        flows = aggregate_flows(in_period)
        buckets.append(MonthBucket(label=p.label, income=flows.income, expenses=flows.expenses))
    return tuple(buckets)


def month_label(day: date) -> str:
    return f"{MONTH_ABBR[day.month - 1]} {day.year}"


def monthly_spending(trans: Iterable[Transaction]) -> tuple[tuple[str, float], ...]:
    """Expense totals per "Mon YYYY" label, in first-encountered order."""
    totals: dict[str, float] = {}
    for t in expense_transactions(trans):
        label = month_label(t.day)
        totals[label] = totals.get(label, 0.0) + t.magnitude
    return tuple(totals.items())
