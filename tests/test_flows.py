from datetime import date

import pytest

from finance_engine.domain import FlowTotals, Kind, Transaction
from finance_engine.errors import DataIntegrityError
from finance_engine.flows import aggregate_flows, expense_transactions, income_transactions


def make_tx(id, kind, amount, category="Misc"):
    return Transaction(id=id, account_id="a1", name=id, amount=amount,
                       kind=kind, category=category, date=date(2024, 1, 1))


def test_aggregate_flows_splits_income_and_expenses():
    trans = (
        make_tx("t1", "income", 3000),
        make_tx("t2", "expense", 1200),
        make_tx("t3", "expense", 800),
    )
    flows = aggregate_flows(trans)
    assert flows.income == 3000
    assert flows.expenses == 2000
    assert flows.net == 1000


def test_aggregate_flows_empty():
    flows = aggregate_flows(())
    assert flows == FlowTotals(0.0, 0.0)
    assert flows.net == 0


def test_aggregate_flows_uses_magnitudes_regardless_of_stored_sign():
    trans = (
        make_tx("t1", "expense", -250),
        make_tx("t2", "expense", 250),
        make_tx("t3", "income", -100),
    )
    flows = aggregate_flows(trans)
    assert flows.expenses == 500
    assert flows.income == 100


def test_aggregate_flows_accepts_enum_kinds():
    trans = (make_tx("t1", Kind.INCOME, 10), make_tx("t2", Kind.EXPENSE, 4))
    assert aggregate_flows(trans) == FlowTotals(10, 4)


def test_unknown_kind_is_not_skipped():
    trans = (make_tx("t1", "income", 10), make_tx("t2", "refund", 4))
    with pytest.raises(DataIntegrityError) as exc:
        aggregate_flows(trans)
    assert exc.value.details["error"] == "unknown_kind"
    assert exc.value.details["transaction_id"] == "t2"


def test_savings_rate():
    assert FlowTotals(4000, 1000).savings_rate == pytest.approx(75.0)
    assert FlowTotals(1000, 1500).savings_rate == pytest.approx(-50.0)
    assert FlowTotals(0, 300).savings_rate == 0


def test_income_and_expense_transactions():
    trans = (make_tx("t1", "income", 1), make_tx("t2", "expense", 2), make_tx("t3", "income", 3))
    assert [t.id for t in income_transactions(trans)] == ["t1", "t3"]
    assert [t.id for t in expense_transactions(trans)] == ["t2"]
