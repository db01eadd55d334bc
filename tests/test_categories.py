from datetime import date
from typing import Iterable

from finance_engine.categories import category_totals, spending_by_category
from finance_engine.domain import CategoryTotal, Transaction
from finance_engine.flows import aggregate_flows


def make_tx(id, kind, amount, category):
    return Transaction(id=id, account_id="a1", name=id, amount=amount,
                       kind=kind, category=category, date=date(2025, 1, 1))


def make_sample():
    return (
        make_tx("t1", "expense", 300, "Food"),
        make_tx("t2", "expense", 200, "Transport"),
        make_tx("t3", "income", 5000, "Salary"),
        make_tx("t4", "expense", 700, "Food"),
        make_tx("t5", "expense", 100, "Transport"),
    )


def test_spending_by_category_sums_and_orders():
    result = spending_by_category(make_sample())
    assert result == (
        CategoryTotal("Food", 1000),
        CategoryTotal("Transport", 300),
    )


def test_income_is_excluded():
    names = [c.category for c in spending_by_category(make_sample())]
    assert "Salary" not in names


def test_ties_keep_first_encountered_order():
    trans = (
        make_tx("t1", "expense", 50, "Books"),
        make_tx("t2", "expense", 80, "Games"),
        make_tx("t3", "expense", 50, "Art"),
        make_tx("t4", "expense", 30, "Books"),
    )
    assert [c.category for c in spending_by_category(trans)] == ["Books", "Games", "Art"]


def test_totals_match_flow_expenses_and_are_sorted():
    trans = make_sample() + (make_tx("t6", "expense", 12.5, "Misc"),)
    result = spending_by_category(trans)
    totals = [c.total for c in result]
    assert totals == sorted(totals, reverse=True)
    assert sum(totals) == aggregate_flows(trans).expenses


def test_limit_and_empty_input():
    assert spending_by_category(make_sample(), limit=1) == (CategoryTotal("Food", 1000),)
    assert spending_by_category(make_sample(), limit=10) == spending_by_category(make_sample())
    assert spending_by_category(()) == ()


def test_accepts_generator_input():
    def tx_stream() -> Iterable[Transaction]:
        for t in make_sample():
            yield t

    assert spending_by_category(tx_stream())[0] == CategoryTotal("Food", 1000)


def test_category_totals_uses_magnitudes():
    trans = (make_tx("t1", "expense", -40, "Food"), make_tx("t2", "expense", 60, "Food"))
    assert category_totals(trans) == {"Food": 100}
