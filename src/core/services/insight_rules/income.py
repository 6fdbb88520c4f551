"""Income stability and multi-month savings rate rules."""

from __future__ import annotations

from src.core.entities.insight import (
    IncomeStabilityData,
    Insight,
    InsightCategory,
    InsightSeverity,
    MonthlySavings,
    SavingsData,
)
from src.core.services.aggregation import (
    average,
    pct,
    recent_months,
    standard_deviation,
    total,
)
from src.core.services.insight_rules.context import AnalysisContext

STABILITY_MIN_TRANSACTIONS = 10
VOLATILE_CV_PCT = 30
STABLE_CV_PCT = 10

LOW_SAVINGS_PCT = 10
GOOD_SAVINGS_PCT = 20


def analyze_income_stability(ctx: AnalysisContext) -> list[Insight]:
    """Coefficient of variation of monthly income over the last three months."""
    if len(ctx.transactions) < STABILITY_MIN_TRANSACTIONS or not ctx.income:
        return []

    months = recent_months(ctx.income, limit=3)
    if len(months) < 2:
        return []

    amounts = [total(t.amount for t in txs) for _, txs in months]
    avg_income = average(amounts)
    if avg_income <= 0:
        return []

    std_dev = standard_deviation(amounts)
    cv = pct(std_dev, avg_income)
    data = IncomeStabilityData(
        avg_income=avg_income,
        std_dev=std_dev,
        coefficient_of_variation=cv,
        monthly_amounts=amounts,
    )

    if cv > VOLATILE_CV_PCT:
        return [
            Insight(
                id="income_volatility",
                severity=InsightSeverity.MEDIUM,
                category=InsightCategory.INCOME,
                title="Income varies significantly",
                message=f"Your monthly income fluctuates by {cv:.1f}%.",
                detail=(
                    "Variable income requires a larger emergency fund (6+ months of "
                    "expenses) and careful budgeting."
                ),
                priority=7,
                actionable=True,
                data=data,
            )
        ]

    if cv < STABLE_CV_PCT:
        return [
            Insight(
                id="income_stable",
                severity=InsightSeverity.LOW,
                category=InsightCategory.INCOME,
                title="Stable income stream",
                message="Your income is very consistent month-to-month.",
                detail=(
                    "Predictable income allows for better planning. Consider "
                    "automating savings and bill payments."
                ),
                priority=5,
                actionable=False,
                data=data,
            )
        ]

    return []


def analyze_savings_rate(ctx: AnalysisContext) -> list[Insight]:
    """Average monthly savings rate over up to the last three months."""
    months = recent_months(ctx.transactions, limit=3)
    if len(months) < 2:
        return []

    monthly: list[MonthlySavings] = []
    for month, txs in months:
        income = total(t.amount for t in txs if t.is_income)
        expenses = total(t.magnitude for t in txs if t.is_expense)
        # A month without income counts as a 0% rate.
        rate = pct(income - expenses, income) if income > 0 else 0.0
        monthly.append(
            MonthlySavings(
                month=month,
                rate=rate,
                savings=income - expenses,
                income=income,
                expenses=expenses,
            )
        )

    avg_rate = average([m.rate for m in monthly])
    data = SavingsData(avg_savings_rate=avg_rate, months=monthly)

    if 0 < avg_rate < LOW_SAVINGS_PCT:
        return [
            Insight(
                id="low_savings_rate",
                severity=InsightSeverity.MEDIUM,
                category=InsightCategory.SAVINGS,
                title="Below recommended savings rate",
                message=(
                    f"Your average savings rate is {avg_rate:.1f}%. "
                    "Aim for at least 20%."
                ),
                detail=(
                    "Try the 50/30/20 rule: 50% needs, 30% wants, 20% savings. "
                    "Start small and increase gradually."
                ),
                priority=7,
                actionable=True,
                data=data,
            )
        ]

    if avg_rate >= GOOD_SAVINGS_PCT:
        return [
            Insight(
                id="good_savings_rate",
                severity=InsightSeverity.LOW,
                category=InsightCategory.SAVINGS,
                title="Excellent savings habits!",
                message=f"You're saving {avg_rate:.1f}% of your income on average.",
                detail=(
                    "You're building wealth effectively! Consider diversifying your "
                    "savings into investments for long-term growth."
                ),
                priority=5,
                actionable=False,
                data=data,
            )
        ]

    return []
