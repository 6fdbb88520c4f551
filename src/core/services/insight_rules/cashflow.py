"""Overall cash flow rule."""

from __future__ import annotations

from src.core.entities.insight import (
    CashflowData,
    Insight,
    InsightCategory,
    InsightSeverity,
)
from src.core.services.aggregation import pct, total
from src.core.services.insight_rules.context import AnalysisContext

MIN_TRANSACTIONS = 5
LOW_SAVINGS_PCT = 10
HEALTHY_SAVINGS_PCT = 20


def analyze_cash_flow(ctx: AnalysisContext) -> list[Insight]:
    """Net position across all transactions, and the savings rate it implies."""
    if len(ctx.transactions) < MIN_TRANSACTIONS:
        return []

    income = total(t.amount for t in ctx.income)
    expenses = total(t.magnitude for t in ctx.expenses)
    net = income - expenses

    if net < 0:
        return [
            Insight(
                id="cashflow_negative",
                severity=InsightSeverity.HIGH,
                category=InsightCategory.CASHFLOW,
                title="Negative cash flow",
                message=f"You're spending more than you earn ({ctx.money(net)} net).",
                detail="Consider reducing your biggest expense categories or increasing income sources.",
                priority=10,
                actionable=True,
                data=CashflowData(income=income, expenses=expenses, net=net),
            )
        ]

    if income <= 0:
        return []

    savings_rate = pct(net, income)
    data = CashflowData(
        income=income, expenses=expenses, net=net, savings_rate=savings_rate
    )

    if savings_rate < LOW_SAVINGS_PCT:
        return [
            Insight(
                id="cashflow_low_savings",
                severity=InsightSeverity.MEDIUM,
                category=InsightCategory.CASHFLOW,
                title="Low savings rate",
                message=f"You're only saving {savings_rate:.1f}% of your income.",
                detail="Financial experts recommend saving at least 20% of income for financial health.",
                priority=8,
                actionable=True,
                data=data,
            )
        ]

    if savings_rate >= HEALTHY_SAVINGS_PCT:
        return [
            Insight(
                id="cashflow_healthy",
                severity=InsightSeverity.LOW,
                category=InsightCategory.CASHFLOW,
                title="Excellent savings rate!",
                message=(
                    f"You're saving {savings_rate:.1f}% of your income "
                    f"({ctx.money(net)})."
                ),
                detail="Great job! You're building strong financial health.",
                priority=6,
                actionable=False,
                data=data,
            )
        ]

    return []
