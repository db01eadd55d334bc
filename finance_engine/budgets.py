from typing import Iterable

from finance_engine.categories import category_totals
from finance_engine.domain import BudgetCategory, BudgetProgress, Transaction


def progress_for(category: BudgetCategory, spent: float) -> BudgetProgress:
    budget = category.budget_amount
    if budget <= 0:
        return BudgetProgress(category=category.name, spent=spent, budget=budget,
                              utilization=0.0, over_budget=False)

    ratio = spent / budget
    return BudgetProgress(
        category=category.name,
        spent=spent,
        budget=budget,
        utilization=min(ratio, 1.0),
        over_budget=ratio > 1.0,
    )


def budget_progress(
    budget_categories: Iterable[BudgetCategory], trans: Iterable[Transaction]
) -> tuple[BudgetProgress, ...]:
    """
    Utilization per budget category, in input order.

    Spending is matched by label: a transaction counts towards a budget when
    its ``category`` equals the budget's ``name``. Renaming a budget category
    therefore detaches it from its earlier transactions.
    """
    spent_by_label = category_totals(trans)
    return tuple(
        progress_for(c, spent_by_label.get(c.name, 0.0))
        for c in budget_categories
    )


def over_budget(progress: Iterable[BudgetProgress]) -> tuple[BudgetProgress, ...]:
    return tuple(p for p in progress if p.over_budget)
