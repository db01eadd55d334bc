"""
Snapshot providers.

The engine never fetches anything itself: a provider materializes the
current records synchronously and the caller hands them to the aggregators.
Providers keep no cache, so every ``snapshot()`` call reflects the source as
it is at that moment.
"""

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, Protocol

from finance_engine.domain import Account, BudgetCategory, Snapshot, Transaction
from finance_engine.errors import SnapshotLoadError
from finance_engine.log import get_logger

logger = get_logger(__name__)


class SnapshotProvider(Protocol):
    def snapshot(self) -> Snapshot:
        ...


class StaticSnapshotProvider:
    """Serves a fixed in-memory snapshot, mostly for tests and demos."""

    def __init__(self, snapshot: Snapshot):
        self._snapshot = snapshot

    def snapshot(self) -> Snapshot:
        return self._snapshot


def parse_day(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        if "T" in value:
            # full ISO timestamp, only the calendar date is kept
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        return date.fromisoformat(value)
    raise ValueError(f"cannot interpret {value!r} as a date")


def account_from_dict(d: dict) -> Account:
    credit_limit = d.get("credit_limit")
    return Account(
        id=str(d["id"]),
        name=d["name"],
        type=d.get("type", "other"),
        balance=float(d["balance"]),
        credit_limit=float(credit_limit) if credit_limit is not None else None,
        color=d.get("color", ""),
    )


def transaction_from_dict(d: dict) -> Transaction:
    return Transaction(
        id=str(d["id"]),
        account_id=str(d["account_id"]),
        name=d.get("name", ""),
        amount=float(d["amount"]),
        kind=d["kind"] if "kind" in d else d["type"],
        category=d.get("category", ""),
        date=parse_day(d["date"]),
        created_at=d.get("created_at"),
        updated_at=d.get("updated_at"),
    )


def budget_category_from_dict(d: dict) -> BudgetCategory:
    return BudgetCategory(
        id=str(d["id"]),
        name=d["name"],
        budget_amount=float(d["budget_amount"]),
        color=d.get("color", ""),
    )


def snapshot_from_dict(data: dict) -> Snapshot:
    return Snapshot(
        accounts=tuple(account_from_dict(a) for a in data.get("accounts", ())),
        transactions=tuple(transaction_from_dict(t) for t in data.get("transactions", ())),
        budget_categories=tuple(budget_category_from_dict(b) for b in data.get("budget_categories", ())),
    )


class JsonSnapshotProvider:
    """Reads accounts, transactions and budget categories from a JSON seed file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def snapshot(self) -> Snapshot:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            snap = snapshot_from_dict(data)
        except FileNotFoundError as e:
            logger.error("snapshot.load_failed", path=str(self.path), reason="missing")
            raise SnapshotLoadError(f"snapshot file not found: {self.path}") from e
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error("snapshot.load_failed", path=str(self.path), reason=str(e))
            raise SnapshotLoadError(f"malformed snapshot {self.path}: {e}") from e

        logger.info(
            "snapshot.loaded",
            path=str(self.path),
            accounts=len(snap.accounts),
            transactions=len(snap.transactions),
            budget_categories=len(snap.budget_categories),
        )
        return snap
