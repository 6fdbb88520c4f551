"""Unusually large expense detection."""

from __future__ import annotations

from src.core.entities.insight import (
    AnomalyData,
    Insight,
    InsightCategory,
    InsightSeverity,
)
from src.core.services.aggregation import average, standard_deviation, within_last_days
from src.core.services.insight_rules.context import AnalysisContext

BASELINE_DAYS = 60
RECENT_DAYS = 7
MIN_BASELINE_EXPENSES = 10
Z_SCORE_THRESHOLD = 2


def detect_anomalies(ctx: AnalysisContext) -> list[Insight]:
    """
    Z-score each expense from the last week against the 60-day baseline.

    Emits one insight per anomalous transaction, keyed by its id.
    """
    baseline = within_last_days(ctx.expenses, BASELINE_DAYS, ctx.now)
    if len(baseline) < MIN_BASELINE_EXPENSES:
        return []

    amounts = [t.magnitude for t in baseline]
    mean = average(amounts)
    std_dev = standard_deviation(amounts)
    if std_dev <= 0:
        return []

    insights: list[Insight] = []
    for transaction in within_last_days(ctx.expenses, RECENT_DAYS, ctx.now):
        amount = transaction.magnitude
        z_score = (amount - mean) / std_dev
        if z_score <= Z_SCORE_THRESHOLD:
            continue

        insights.append(
            Insight(
                id=f"anomaly_{transaction.id}",
                severity=InsightSeverity.MEDIUM,
                category=InsightCategory.ANOMALY,
                title="Unusual large purchase detected",
                message=(
                    f'{ctx.money(amount)} for "{transaction.name}" is '
                    f"{z_score:.1f} standard deviations above your typical spending."
                ),
                detail=(
                    "Was this planned? Ensure unusual purchases align with your "
                    "budget and financial goals."
                ),
                priority=6,
                actionable=True,
                data=AnomalyData(
                    transaction_id=transaction.id,
                    transaction_name=transaction.name,
                    amount=amount,
                    mean=mean,
                    std_dev=std_dev,
                    z_score=z_score,
                ),
            )
        )

    return insights
