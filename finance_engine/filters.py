from datetime import date
from typing import Callable, Iterable, Optional

from finance_engine.domain import ALL_KINDS, FilterCriteria, Transaction
from finance_engine.functional import parse_kind, require_kind

Predicate = Callable[[Transaction], bool]


def by_date_range(start: Optional[date], end: Optional[date]) -> Predicate:
    """Inclusive on both ends; a missing bound is open."""
    def _filter(t: Transaction) -> bool:
        day = t.day
        if start is not None and day < start:
            return False
        if end is not None and day > end:
            return False
        return True

    return _filter


def by_kind(kind: str) -> Predicate:
    if kind != ALL_KINDS and parse_kind(kind) is None:
        raise ValueError(f"kind must be 'income', 'expense' or 'all', got {kind!r}")

    def _filter(t: Transaction) -> bool:
        if kind == ALL_KINDS:
            return True
        return require_kind(t) == kind

    return _filter


def by_category(category: str) -> Predicate:
    def _filter(t: Transaction) -> bool:
        return t.category == category

    return _filter


def by_account(account_id: str) -> Predicate:
    def _filter(t: Transaction) -> bool:
        return t.account_id == account_id

    return _filter


def predicates_for(criteria: FilterCriteria) -> tuple[Predicate, ...]:
    preds: list[Predicate] = []
    if criteria.start_date is not None or criteria.end_date is not None:
        preds.append(by_date_range(criteria.start_date, criteria.end_date))
    if criteria.kind and criteria.kind != ALL_KINDS:
        preds.append(by_kind(criteria.kind))
    if criteria.category is not None:
        preds.append(by_category(criteria.category))
    if criteria.account_id is not None:
        preds.append(by_account(criteria.account_id))
    return tuple(preds)


def filter_transactions(
    trans: Iterable[Transaction], criteria: FilterCriteria
) -> tuple[Transaction, ...]:
    """Transactions satisfying every criterion, in input order."""
    preds = predicates_for(criteria)
    return tuple(t for t in trans if all(p(t) for p in preds))


def recent(trans: Iterable[Transaction], limit: int = 4) -> tuple[Transaction, ...]:
    ordered = sorted(trans, key=lambda t: t.day, reverse=True)
    return tuple(ordered[: max(0, limit)])


def page_count(total: int, page_size: int = 10) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, -(-total // page_size))


def paginate(
    trans: Iterable[Transaction], page: int, page_size: int = 10
) -> tuple[Transaction, ...]:
    """1-based page of ``trans``; out-of-range pages clamp to the first/last page."""
    items = tuple(trans)
    pages = page_count(len(items), page_size)
    page = min(max(1, page), pages)
    start = (page - 1) * page_size
    return items[start:start + page_size]
