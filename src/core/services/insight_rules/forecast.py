"""Month-to-date spending forecast."""

from __future__ import annotations

import calendar

from src.core.entities.insight import (
    ForecastData,
    Insight,
    InsightCategory,
    InsightSeverity,
)
from src.core.services.aggregation import average, month_key, recent_months, total
from src.core.services.insight_rules.context import AnalysisContext

OVERSPEND_FACTOR = 1.15
UNDERSPEND_FACTOR = 0.85


def predict_month_spending(ctx: AnalysisContext) -> list[Insight]:
    """
    Prorate month-to-date spend to a full month and compare it with a
    three-month average adjusted by a simple linear trend.
    """
    months = recent_months(ctx.expenses, limit=3)
    if len(months) < 2:
        return []

    amounts = [total(t.magnitude for t in txs) for _, txs in months]
    # amounts are newest first, so a positive trend means spending is growing
    trend = (amounts[0] - amounts[-1]) / len(amounts) if len(amounts) >= 3 else 0.0
    predicted = average(amounts) + trend
    if predicted <= 0:
        return []

    current_key = month_key(ctx.now.date())
    current_spending = total(
        t.magnitude for t in ctx.expenses if month_key(t.date) == current_key
    )
    day_of_month = ctx.now.day
    days_in_month = calendar.monthrange(ctx.now.year, ctx.now.month)[1]
    projected = current_spending / day_of_month * days_in_month

    data = ForecastData(
        predicted=predicted,
        projected_month_total=projected,
        current_spending=current_spending,
        day_of_month=day_of_month,
        days_in_month=days_in_month,
        trend=trend,
    )

    if projected > predicted * OVERSPEND_FACTOR:
        return [
            Insight(
                id="spending_forecast_high",
                severity=InsightSeverity.MEDIUM,
                category=InsightCategory.FORECAST,
                title="On track to overspend this month",
                message=(
                    f"At current pace, you'll spend {ctx.money(projected)} vs "
                    f"typical {ctx.money(predicted)}."
                ),
                detail=(
                    f"You've spent {ctx.money(current_spending)} in {day_of_month} "
                    "days. Reduce discretionary spending to stay on track."
                ),
                priority=7,
                actionable=True,
                data=data,
            )
        ]

    if projected < predicted * UNDERSPEND_FACTOR:
        return [
            Insight(
                id="spending_forecast_low",
                severity=InsightSeverity.LOW,
                category=InsightCategory.FORECAST,
                title="Trending below normal spending",
                message=(
                    f"You're on pace to spend {ctx.money(projected)} vs typical "
                    f"{ctx.money(predicted)}."
                ),
                detail=(
                    "Great spending control! Consider allocating the difference to "
                    "savings or investments."
                ),
                priority=5,
                actionable=False,
                data=data,
            )
        ]

    return []
