"""Calendar spending patterns: weekday concentration and seasonality."""

from __future__ import annotations

import calendar

from src.core.entities.insight import (
    DayPatternData,
    Insight,
    InsightCategory,
    InsightSeverity,
    SeasonalData,
)
from src.core.services.aggregation import (
    average,
    group_by,
    group_by_weekday,
    pct,
    total,
    within_last_days,
)
from src.core.services.insight_rules.context import AnalysisContext

WEEKDAY_WINDOW_DAYS = 60
WEEKDAY_MIN_EXPENSES = 20
WEEKDAY_SHARE_PCT = 25

SEASONAL_MIN_EXPENSES = 30
SEASONAL_FACTOR = 1.3


def analyze_spending_by_weekday(ctx: AnalysisContext) -> list[Insight]:
    """Flag a weekday that concentrates an outsized share of recent spending."""
    expenses = within_last_days(ctx.expenses, WEEKDAY_WINDOW_DAYS, ctx.now)
    if len(expenses) < WEEKDAY_MIN_EXPENSES:
        return []

    by_day = {
        day: total(t.magnitude for t in txs)
        for day, txs in group_by_weekday(expenses).items()
    }
    all_spending = total(by_day.values())
    if all_spending <= 0:
        return []

    top_day, amount = max(by_day.items(), key=lambda kv: kv[1])
    share = pct(amount, all_spending)
    if share <= WEEKDAY_SHARE_PCT:
        return []

    return [
        Insight(
            id="day_pattern",
            severity=InsightSeverity.LOW,
            category=InsightCategory.PATTERNS,
            title=f"You spend most on {top_day}s",
            message=(
                f"{share:.1f}% of your spending happens on {top_day}s "
                f"({ctx.money(amount)})."
            ),
            detail=(
                f"Be extra mindful of purchases on {top_day}s. Consider planning "
                "ahead to avoid impulse spending."
            ),
            priority=4,
            actionable=True,
            data=DayPatternData(
                top_day=top_day, amount=amount, share_pct=share, by_day=by_day
            ),
        )
    ]


def analyze_seasonal_patterns(ctx: AnalysisContext) -> list[Insight]:
    """Compare this calendar month's historical spend with the other months."""
    if len(ctx.expenses) < SEASONAL_MIN_EXPENSES:
        return []

    by_month = {
        month: total(t.magnitude for t in txs)
        for month, txs in group_by(ctx.expenses, lambda t: t.date.month).items()
    }
    current_month = ctx.now.month
    current_spending = by_month.get(current_month, 0.0)
    others = [amount for month, amount in by_month.items() if month != current_month]
    if not others:
        return []

    avg_others = average(others)
    if avg_others <= 0 or current_spending <= avg_others * SEASONAL_FACTOR:
        return []

    month_name = calendar.month_name[current_month]
    increase = (current_spending / avg_others - 1) * 100
    return [
        Insight(
            id="seasonal_high",
            severity=InsightSeverity.LOW,
            category=InsightCategory.SEASONAL,
            title=f"{month_name} is a high-spending month",
            message=f"Historically, you spend {increase:.0f}% more in {month_name}.",
            detail=(
                "This could be due to holidays, seasonal needs, or recurring annual "
                "expenses. Plan ahead for this pattern next year."
            ),
            priority=4,
            actionable=False,
            data=SeasonalData(
                month=month_name,
                current_month_spending=current_spending,
                avg_other_months=avg_others,
                increase_pct=increase,
            ),
        )
    ]
