from dataclasses import dataclass
from datetime import date
from typing import Optional

from finance_engine.balances import summarize_balances
from finance_engine.budgets import budget_progress
from finance_engine.categories import spending_by_category
from finance_engine.config import Settings
from finance_engine.domain import (
    BalanceSummary,
    BudgetProgress,
    CategoryTotal,
    FilterCriteria,
    FlowTotals,
    MonthBucket,
    Snapshot,
    Transaction,
    Trend,
)
from finance_engine.filters import filter_transactions, recent
from finance_engine.flows import aggregate_flows
from finance_engine.functional import ensure_valid
from finance_engine.log import get_logger
from finance_engine.periods import (
    bucket_by_period,
    current_month,
    last_n_months,
    monthly_spending,
    previous_month,
    time_range_window,
)
from finance_engine.snapshot import SnapshotProvider
from finance_engine.trends import calculate_trend, inverted

logger = get_logger(__name__)


@dataclass(frozen=True)
class OverviewView:
    balances: BalanceSummary
    month_flows: FlowTotals
    income_trend: Trend
    expense_trend: Trend
    monthly: tuple[MonthBucket, ...]
    recent_transactions: tuple[Transaction, ...]

    @property
    def total_balance(self) -> float:
        return self.balances.total


@dataclass(frozen=True)
class AnalyticsView:
    time_range: str
    start: date
    end: date
    flows: FlowTotals
    monthly_spending: tuple[tuple[str, float], ...]
    categories: tuple[CategoryTotal, ...]


class DashboardService:
    """Facade composing engine fragments into the dashboard's screen view models.

    provider: synchronous source of the current records, called once per method
    settings: window sizes and list lengths for the overview screen
    """

    def __init__(self, provider: SnapshotProvider, settings: Optional[Settings] = None):
        self.provider = provider
        self.settings = settings or Settings()

    def _snapshot(self) -> Snapshot:
        snap = self.provider.snapshot()
        ensure_valid(snap.transactions)
        return snap

    def overview(self, today: date) -> OverviewView:
        """Balances, this month vs last month, the last N months and recent activity."""
        snap = self._snapshot()
        months = last_n_months(self.settings.overview_months, today)
        window = filter_transactions(
            snap.transactions,
            FilterCriteria(start_date=months[0].start, end_date=months[-1].last_day),
        )

        this_month, last_month = current_month(today), previous_month(today)
        current = aggregate_flows(
            filter_transactions(snap.transactions, FilterCriteria(this_month.start, this_month.last_day))
        )
        previous = aggregate_flows(
            filter_transactions(snap.transactions, FilterCriteria(last_month.start, last_month.last_day))
        )

        view = OverviewView(
            balances=summarize_balances(snap.accounts),
            month_flows=current,
            income_trend=calculate_trend(current.income, previous.income),
            # spending less than last month is the good direction
            expense_trend=inverted(calculate_trend(current.expenses, previous.expenses)),
            monthly=bucket_by_period(window, months),
            recent_transactions=recent(window, self.settings.recent_limit),
        )
        logger.debug(
            "dashboard.overview",
            today=today.isoformat(),
            transactions=len(window),
            accounts=len(snap.accounts),
        )
        return view

    def analytics(self, time_range: str, today: date) -> AnalyticsView:
        snap = self._snapshot()
        start, end = time_range_window(time_range, today)
        in_range = filter_transactions(snap.transactions, FilterCriteria(start_date=start, end_date=end))

        view = AnalyticsView(
            time_range=time_range,
            start=start,
            end=end,
            flows=aggregate_flows(in_range),
            monthly_spending=monthly_spending(in_range),
            categories=spending_by_category(in_range),
        )
        logger.debug("dashboard.analytics", time_range=time_range, transactions=len(in_range))
        return view

    def budgets(self) -> tuple[BudgetProgress, ...]:
        snap = self._snapshot()
        progress = budget_progress(snap.budget_categories, snap.transactions)
        logger.debug(
            "dashboard.budgets",
            categories=len(progress),
            over_budget=sum(1 for p in progress if p.over_budget),
        )
        return progress

    def transactions(self, criteria: Optional[FilterCriteria] = None) -> tuple[Transaction, ...]:
        """Filtered transactions, newest first."""
        snap = self._snapshot()
        matched = filter_transactions(snap.transactions, criteria or FilterCriteria())
        return recent(matched, len(matched))
