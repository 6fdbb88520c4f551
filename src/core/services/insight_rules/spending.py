"""Spending trend, category concentration and top vendor rules."""

from __future__ import annotations

from datetime import timedelta

from src.core.entities.insight import (
    DistributionData,
    Insight,
    InsightCategory,
    InsightSeverity,
    SpendingTrendData,
    VendorData,
)
from src.core.services.aggregation import (
    group_by,
    group_by_category,
    pct,
    start_of_day,
    total,
    within_last_days,
)
from src.core.services.insight_rules.context import AnalysisContext

TREND_MIN_TRANSACTIONS = 10
TREND_RISING_PCT = 25
TREND_FALLING_PCT = -20

CONCENTRATION_MIN_EXPENSES = 8
CONCENTRATION_SHARE_PCT = 45

VENDOR_WINDOW_DAYS = 90
VENDOR_MIN_EXPENSES = 10
VENDOR_SHARE_PCT = 20
VENDOR_TOP_N = 5


def analyze_spending_trends(ctx: AnalysisContext) -> list[Insight]:
    """Compare expenses in the last 30 days with the 30 days before."""
    if len(ctx.transactions) < TREND_MIN_TRANSACTIONS:
        return []

    last_30 = within_last_days(ctx.expenses, 30, ctx.now)
    cutoff = ctx.now - timedelta(days=30)
    previous_30 = [
        t
        for t in within_last_days(ctx.expenses, 60, ctx.now)
        if start_of_day(t.date) < cutoff
    ]

    current = total(t.magnitude for t in last_30)
    previous = total(t.magnitude for t in previous_30)
    if previous <= 0:
        return []

    change = pct(current - previous, previous)
    data = SpendingTrendData(
        current_period=current, previous_period=previous, change_pct=change
    )

    if change > TREND_RISING_PCT:
        return [
            Insight(
                id="spend_up_30",
                severity=InsightSeverity.MEDIUM,
                category=InsightCategory.SPENDING,
                title="Expenses rising significantly",
                message=(
                    f"Your expenses increased by {change:.1f}% compared to the "
                    "previous period."
                ),
                detail=(
                    f"Current: {ctx.money(current)} vs Previous: {ctx.money(previous)}. "
                    "Review recent purchases to identify the cause."
                ),
                priority=8,
                actionable=True,
                data=data,
            )
        ]

    if change < TREND_FALLING_PCT:
        return [
            Insight(
                id="spend_down_30",
                severity=InsightSeverity.LOW,
                category=InsightCategory.SPENDING,
                title="Great job reducing expenses!",
                message=f"You've decreased spending by {abs(change):.1f}% this period.",
                detail=(
                    f"You're saving {ctx.money(previous - current)} compared to "
                    "last period. Keep it up!"
                ),
                priority=6,
                actionable=False,
                data=data,
            )
        ]

    return []


def analyze_category_concentration(ctx: AnalysisContext) -> list[Insight]:
    """Flag a single category that takes too large a share of expenses."""
    if len(ctx.expenses) < CONCENTRATION_MIN_EXPENSES:
        return []

    category_totals = {
        category: total(t.magnitude for t in txs)
        for category, txs in group_by_category(ctx.expenses).items()
    }
    ranked = sorted(category_totals.items(), key=lambda kv: kv[1], reverse=True)
    all_expenses = total(category_totals.values())
    if not ranked or all_expenses <= 0:
        return []

    top_category, top_total = ranked[0]
    share = pct(top_total, all_expenses)
    if share <= CONCENTRATION_SHARE_PCT:
        return []

    return [
        Insight(
            id="category_concentration",
            severity=InsightSeverity.MEDIUM,
            category=InsightCategory.DISTRIBUTION,
            title="One category dominates spending",
            message=(
                f'"{top_category}" represents {share:.1f}% of your expenses '
                f"({ctx.money(top_total)})."
            ),
            detail=(
                "If this is expected (e.g., rent, inventory), it's fine. Otherwise, "
                "review for potential savings opportunities."
            ),
            priority=7,
            actionable=True,
            data=DistributionData(
                top_category=top_category,
                top_total=top_total,
                share_pct=share,
                category_totals=dict(ranked),
            ),
        )
    ]


def analyze_top_vendors(ctx: AnalysisContext) -> list[Insight]:
    """Flag a single payee taking too large a share of 90-day expenses."""
    expenses = within_last_days(ctx.expenses, VENDOR_WINDOW_DAYS, ctx.now)
    if len(expenses) < VENDOR_MIN_EXPENSES:
        return []

    vendor_totals = {
        vendor: total(t.magnitude for t in txs)
        for vendor, txs in group_by(expenses, lambda t: t.name or "Unknown").items()
    }
    all_spending = total(vendor_totals.values())
    if all_spending <= 0:
        return []

    top_vendors = sorted(vendor_totals.items(), key=lambda kv: kv[1], reverse=True)[
        :VENDOR_TOP_N
    ]
    vendor, amount = top_vendors[0]
    share = pct(amount, all_spending)
    if share <= VENDOR_SHARE_PCT:
        return []

    return [
        Insight(
            id="top_vendor",
            severity=InsightSeverity.LOW,
            category=InsightCategory.VENDORS,
            title=f'Most spending at "{vendor}"',
            message=(
                f"{share:.1f}% of your expenses ({ctx.money(amount)}) go to {vendor}."
            ),
            detail=(
                "Consider if there are cheaper alternatives or ways to negotiate "
                "better rates with this vendor."
            ),
            priority=5,
            actionable=True,
            data=VendorData(
                vendor=vendor,
                amount=amount,
                share_pct=share,
                total_spending=all_spending,
                top_vendors=dict(top_vendors),
            ),
        )
    ]
