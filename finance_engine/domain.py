from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional


class Kind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


# filter value meaning "no kind constraint"
ALL_KINDS = "all"


@dataclass(frozen=True)
class Account:
    id: str
    name: str
    type: str                             # checking | savings | credit | investment | cash | other
    balance: float                        # signed
    credit_limit: Optional[float] = None
    color: str = ""


@dataclass(frozen=True)
class BudgetCategory:
    id: str
    name: str              # joined against Transaction.category by label
    budget_amount: float
    color: str = ""


@dataclass(frozen=True)
class Transaction:
    id: str
    account_id: str
    name: str
    amount: float          # magnitude, direction comes from kind
    kind: str              # Kind value
    category: str
    date: date
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def day(self) -> date:
        if isinstance(self.date, datetime):
            return self.date.date()
        return self.date

    @property
    def magnitude(self) -> float:
        return abs(self.amount)


@dataclass(frozen=True)
class Period:
    """Half-open date interval [start, end)."""

    start: date
    end: date
    label: str = ""

    @property
    def last_day(self) -> date:
        return self.end - timedelta(days=1)

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end


@dataclass(frozen=True)
class FilterCriteria:
    start_date: Optional[date] = None   # inclusive
    end_date: Optional[date] = None     # inclusive
    kind: str = ALL_KINDS
    category: Optional[str] = None
    account_id: Optional[str] = None


@dataclass(frozen=True)
class Snapshot:
    accounts: tuple[Account, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    budget_categories: tuple[BudgetCategory, ...] = ()


# View models handed to the presentation layer


@dataclass(frozen=True)
class FlowTotals:
    income: float = 0.0
    expenses: float = 0.0

    @property
    def net(self) -> float:
        return self.income - self.expenses

    @property
    def savings_rate(self) -> float:
        """Net as a percentage of income, 0 when there is no income."""
        if self.income == 0:
            return 0.0
        return self.net / self.income * 100


@dataclass(frozen=True)
class MonthBucket:
    label: str
    income: float
    expenses: float


@dataclass(frozen=True)
class Trend:
    percent: int         # rounded for display
    change: float        # unrounded percentage
    is_positive: bool


@dataclass(frozen=True)
class CategoryTotal:
    category: str
    total: float


@dataclass(frozen=True)
class BudgetProgress:
    category: str
    spent: float
    budget: float
    utilization: float   # capped at 1.0
    over_budget: bool

    @property
    def remaining(self) -> float:
        return self.budget - self.spent


@dataclass(frozen=True)
class AccountShare:
    account: Account
    share_of_total: Optional[float]        # None for credit accounts
    credit_utilization: Optional[float] = None
    near_limit: bool = False

    @property
    def percentage(self) -> float:
        ratio = self.credit_utilization if self.credit_utilization is not None else self.share_of_total
        return (ratio or 0.0) * 100


@dataclass(frozen=True)
class BalanceSummary:
    total: float
    per_account: tuple[AccountShare, ...] = field(default_factory=tuple)
