import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import date

import streamlit as st
import plotly.express as px
import plotly.graph_objects as go

from finance_engine.config import get_settings
from finance_engine.domain import ALL_KINDS, FilterCriteria, Trend
from finance_engine.errors import FinanceEngineError
from finance_engine.filters import page_count, paginate
from finance_engine.frames import (
    balances_to_frame,
    budgets_to_frame,
    buckets_to_frame,
    categories_to_frame,
    spending_to_frame,
    transactions_to_frame,
)
from finance_engine.log import configure_logging, get_logger
from finance_engine.periods import TIME_RANGES
from finance_engine.services import DashboardService
from finance_engine.snapshot import JsonSnapshotProvider

settings = get_settings()
configure_logging(settings.log_level, settings.log_json)
logger = get_logger("app")

st.set_page_config(page_title="Finance Manager", layout="wide")

service = DashboardService(JsonSnapshotProvider(settings.seed_path), settings)
today = date.today()

TIME_RANGE_LABELS = {
    "1m": "Last Month",
    "3m": "Last 3 Months",
    "6m": "Last 6 Months",
    "1y": "Last Year",
}


def money(value: float) -> str:
    return f"₹{value:,.2f}"


def trend_delta(trend: Trend) -> str:
    arrow = "↑" if trend.is_positive else "↓"
    return f"{arrow} {abs(trend.percent)}% from last month"


def show_overview():
    view = service.overview(today)

    k1, k2, k3 = st.columns(3)
    with k1:
        st.metric("Total Balance", money(view.total_balance))
    with k2:
        st.metric("Monthly Income", money(view.month_flows.income), trend_delta(view.income_trend),
                  delta_color="normal" if view.income_trend.is_positive else "inverse")
    with k3:
        st.metric("Monthly Expenses", money(view.month_flows.expenses), trend_delta(view.expense_trend),
                  delta_color="normal" if view.expense_trend.is_positive else "inverse")

    df_months = buckets_to_frame(view.monthly)
    fig = go.Figure()
    fig.add_trace(go.Bar(x=df_months["month"], y=df_months["income"], name="Income"))
    fig.add_trace(go.Bar(x=df_months["month"], y=df_months["expenses"], name="Expenses"))
    fig.update_layout(title="Income vs Expenses", barmode="group", template="plotly_dark")
    st.plotly_chart(fig, use_container_width=True)

    col_acc, col_tx = st.columns(2)
    with col_acc:
        st.subheader("Accounts")
        df_acc = balances_to_frame(view.balances)
        if df_acc.empty:
            st.caption("No accounts added yet")
        for row in df_acc.itertuples():
            st.write(f"**{row.account}** ({row.type}): {money(row.balance)}")
            st.progress(min(max(row.percentage, 0.0), 100.0) / 100)
            if row.near_limit:
                st.warning(f"{row.account} is above 80% of its credit limit")
    with col_tx:
        st.subheader("Recent Transactions")
        st.dataframe(transactions_to_frame(view.recent_transactions), use_container_width=True)


def show_analytics():
    time_range = st.selectbox(
        "Time range", list(TIME_RANGES), format_func=lambda key: TIME_RANGE_LABELS[key]
    )
    view = service.analytics(time_range, today)

    k1, k2, k3, k4 = st.columns(4)
    with k1:
        st.metric("Total Income", money(view.flows.income))
    with k2:
        st.metric("Total Expenses", money(view.flows.expenses))
    with k3:
        st.metric("Net Savings", money(view.flows.net))
    with k4:
        st.metric("Savings Rate", f"{view.flows.savings_rate:.1f}%")

    col_month, col_cat = st.columns(2)
    with col_month:
        df_spend = spending_to_frame(view.monthly_spending)
        fig_spend = px.bar(df_spend, x="month", y="amount", title="Monthly Spending", template="plotly_dark")
        st.plotly_chart(fig_spend, use_container_width=True)
    with col_cat:
        df_cat = categories_to_frame(view.categories)
        if df_cat.empty:
            st.info("No expenses in this range")
        else:
            fig_cat = px.pie(df_cat, names="category", values="total", title="Spending by Category",
                             template="plotly_dark")
            st.plotly_chart(fig_cat, use_container_width=True)


def show_budgets():
    df_budgets = budgets_to_frame(service.budgets())
    if df_budgets.empty:
        st.info("No budget categories found. Add a category to get started.")
        return

    for row in df_budgets.itertuples():
        st.write(f"**{row.category}**: {money(row.spent)} spent of {money(row.budget)} budget")
        st.progress(row.percent_used / 100)
        st.caption(f"{row.percent_used}% of budget used")
        if row.over_budget:
            st.error(f"{row.category} is over budget")

    fig = px.bar(df_budgets, x="category", y=["spent", "budget"], barmode="group",
                 title="Spending by Budget Category", template="plotly_dark")
    st.plotly_chart(fig, use_container_width=True)


def show_transactions():
    col1, col2, col3 = st.columns(3)
    with col1:
        kind = st.selectbox("Type", [ALL_KINDS, "income", "expense"])
    with col2:
        category = st.text_input("Category") or None
    with col3:
        page = st.number_input("Page", min_value=1, value=1, step=1)

    matched = service.transactions(FilterCriteria(kind=kind, category=category))
    pages = page_count(len(matched), settings.page_size)
    st.caption(f"{len(matched)} transactions, page {min(page, pages)} of {pages}")
    st.dataframe(
        transactions_to_frame(paginate(matched, int(page), settings.page_size)),
        use_container_width=True,
    )


menu = st.sidebar.radio(
    "Menu",
    ["🏠 Overview", "📊 Analytics", "💰 Budgets", "🧾 Transactions"]
)

try:
    if menu == "🏠 Overview":
        show_overview()
    elif menu == "📊 Analytics":
        show_analytics()
    elif menu == "💰 Budgets":
        show_budgets()
    else:
        show_transactions()
except FinanceEngineError as e:
    logger.error("app.render_failed", page=menu, error=str(e))
    st.error(f"Could not build this page: {e}")
