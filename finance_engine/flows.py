from functools import reduce
from typing import Iterable

from finance_engine.domain import FlowTotals, Kind, Transaction
from finance_engine.functional import require_kind


def _add(acc: FlowTotals, t: Transaction) -> FlowTotals:
    if require_kind(t) == Kind.INCOME:
        return FlowTotals(acc.income + t.magnitude, acc.expenses)
    return FlowTotals(acc.income, acc.expenses + t.magnitude)


def aggregate_flows(trans: Iterable[Transaction]) -> FlowTotals:
    """Income and expense magnitudes; the stored sign of ``amount`` is ignored."""
    return reduce(_add, trans, FlowTotals())


def income_transactions(trans: Iterable[Transaction]) -> tuple[Transaction, ...]:
    return tuple(filter(lambda t: require_kind(t) == Kind.INCOME, trans))


def expense_transactions(trans: Iterable[Transaction]) -> tuple[Transaction, ...]:
    return tuple(filter(lambda t: require_kind(t) == Kind.EXPENSE, trans))
