from typing import Iterable, Optional

from finance_engine.domain import CategoryTotal, Transaction
from finance_engine.flows import expense_transactions


def category_totals(trans: Iterable[Transaction]) -> dict[str, float]:
    """Expense magnitude per category label, keyed in first-encountered order."""
    totals: dict[str, float] = {}
    for t in expense_transactions(trans):
        totals[t.category] = totals.get(t.category, 0.0) + t.magnitude
    return totals


def spending_by_category(
    trans: Iterable[Transaction], limit: Optional[int] = None
) -> tuple[CategoryTotal, ...]:
    """
    Expense totals per category, largest first.

    Income never contributes. Ties keep first-encountered order since the
    sort is stable. Categories without expenses are omitted.
    """
    ordered = sorted(
        (CategoryTotal(category=name, total=total) for name, total in category_totals(trans).items()),
        key=lambda item: item.total,
        reverse=True,
    )
    if limit is not None:
        ordered = ordered[: max(0, limit)]
    return tuple(ordered)
