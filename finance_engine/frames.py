"""pandas adapters turning engine view models into chart-ready frames."""

from typing import Iterable

import pandas as pd

from finance_engine.domain import (
    BalanceSummary,
    BudgetProgress,
    CategoryTotal,
    Kind,
    MonthBucket,
    Transaction,
)
from finance_engine.trends import round_half_up


def buckets_to_frame(buckets: Iterable[MonthBucket]) -> pd.DataFrame:
    rows = [{"month": b.label, "income": b.income, "expenses": b.expenses} for b in buckets]
    return pd.DataFrame(rows, columns=["month", "income", "expenses"])


def spending_to_frame(series: Iterable[tuple[str, float]]) -> pd.DataFrame:
    return pd.DataFrame(list(series), columns=["month", "amount"])


def categories_to_frame(totals: Iterable[CategoryTotal]) -> pd.DataFrame:
    rows = [{"category": c.category, "total": c.total} for c in totals]
    return pd.DataFrame(rows, columns=["category", "total"])


def budgets_to_frame(progress: Iterable[BudgetProgress]) -> pd.DataFrame:
    rows = [
        {
            "category": p.category,
            "spent": p.spent,
            "budget": p.budget,
            "percent_used": round_half_up(p.utilization * 100),
            "over_budget": p.over_budget,
        }
        for p in progress
    ]
    return pd.DataFrame(rows, columns=["category", "spent", "budget", "percent_used", "over_budget"])


def balances_to_frame(summary: BalanceSummary) -> pd.DataFrame:
    rows = [
        {
            "account": s.account.name,
            "type": s.account.type,
            "balance": s.account.balance,
            "credit_limit": s.account.credit_limit,
            "percentage": s.percentage,
            "near_limit": s.near_limit,
        }
        for s in summary.per_account
    ]
    return pd.DataFrame(
        rows, columns=["account", "type", "balance", "credit_limit", "percentage", "near_limit"]
    )


def transactions_to_frame(trans: Iterable[Transaction]) -> pd.DataFrame:
    rows = [
        {
            "date": pd.Timestamp(t.day),
            "name": t.name,
            "category": t.category,
            "kind": str(getattr(t.kind, "value", t.kind)),
            # display sign follows kind, never the stored amount
            "amount": t.magnitude if t.kind == Kind.INCOME else -t.magnitude,
            "account_id": t.account_id,
        }
        for t in trans
    ]
    return pd.DataFrame(rows, columns=["date", "name", "category", "kind", "amount", "account_id"])
