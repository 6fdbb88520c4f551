"""
Recurring charge rules.

Both rules cluster transactions by similarity key and look for a
roughly monthly cadence between occurrences.
"""

from __future__ import annotations

from src.core.entities.finance import Transaction
from src.core.entities.insight import (
    DetectedSubscription,
    Insight,
    InsightCategory,
    InsightSeverity,
    RecurringData,
    SubscriptionData,
)
from src.core.services.aggregation import (
    average,
    days_since,
    group_by_similarity,
    intervals_in_days,
    pct,
    total,
    within_last_days,
)
from src.core.services.insight_rules.context import AnalysisContext

MIN_OCCURRENCES = 3
MONTHLY_MIN_DAYS = 25
MONTHLY_MAX_DAYS = 35
REGULARITY_TOLERANCE_DAYS = 7
MISSING_GRACE_DAYS = 5

SUBSCRIPTION_SHARE_PCT = 15
SUBSCRIPTION_SUMMARY_MIN = 4


def _chronological(txs: list[Transaction]) -> list[Transaction]:
    return sorted(txs, key=lambda t: (t.date, t.id))


def _is_monthly(avg_interval: float) -> bool:
    return MONTHLY_MIN_DAYS <= avg_interval <= MONTHLY_MAX_DAYS


def analyze_recurring_patterns(ctx: AnalysisContext) -> list[Insight]:
    """Flag regular monthly charges whose next occurrence is overdue."""
    insights: list[Insight] = []

    for key, txs in group_by_similarity(ctx.transactions).items():
        if len(txs) < MIN_OCCURRENCES:
            continue

        intervals = intervals_in_days(t.date for t in txs)
        avg_interval = average(intervals)
        is_regular = all(
            abs(gap - avg_interval) < REGULARITY_TOLERANCE_DAYS for gap in intervals
        )
        if not (is_regular and _is_monthly(avg_interval)):
            continue

        last = _chronological(txs)[-1]
        elapsed = days_since(last.date, ctx.now)
        if elapsed <= avg_interval + MISSING_GRACE_DAYS:
            continue

        insights.append(
            Insight(
                id=f"recurring_missing_{key}",
                severity=InsightSeverity.MEDIUM,
                category=InsightCategory.RECURRING,
                title="Expected transaction missing",
                message=(
                    f'Haven\'t seen "{last.name}" for {int(elapsed)} days '
                    f"(usually every {int(avg_interval)} days)."
                ),
                detail=(
                    "Check if this subscription or bill is still active or has been "
                    "paid through another method."
                ),
                priority=6,
                actionable=True,
                data=RecurringData(
                    similarity_key=key,
                    last_transaction_id=last.id,
                    last_seen=last.date,
                    avg_interval_days=avg_interval,
                    days_since_last=elapsed,
                    occurrences=len(txs),
                ),
            )
        )

    return insights


def find_monthly_subscriptions(
    expenses: list[Transaction],
) -> list[DetectedSubscription]:
    """Expense clusters of three or more with an average gap of 25-35 days."""
    found: list[DetectedSubscription] = []
    for txs in group_by_similarity(expenses).values():
        if len(txs) < MIN_OCCURRENCES:
            continue
        if not _is_monthly(average(intervals_in_days(t.date for t in txs))):
            continue
        latest = _chronological(txs)[-1]
        found.append(
            DetectedSubscription(
                name=latest.name,
                amount=latest.magnitude,
                last_date=latest.date,
            )
        )
    return found


def detect_subscriptions(ctx: AnalysisContext) -> list[Insight]:
    """Share of the last 30 days' spending that goes to monthly subscriptions."""
    subscriptions = find_monthly_subscriptions(ctx.expenses)
    monthly_total = total(s.amount for s in subscriptions)
    if not subscriptions or monthly_total <= 0:
        return []

    recent_spending = total(
        t.magnitude for t in within_last_days(ctx.expenses, 30, ctx.now)
    )
    share = pct(monthly_total, recent_spending) if recent_spending > 0 else 0.0
    data = SubscriptionData(
        monthly_total=monthly_total, share_pct=share, subscriptions=subscriptions
    )

    if share > SUBSCRIPTION_SHARE_PCT:
        return [
            Insight(
                id="subscriptions_high",
                severity=InsightSeverity.MEDIUM,
                category=InsightCategory.SUBSCRIPTIONS,
                title="Subscriptions are significant expense",
                message=(
                    f"Subscriptions represent {share:.1f}% of monthly spending "
                    f"({ctx.money(monthly_total)})."
                ),
                detail=(
                    f"Found {len(subscriptions)} recurring subscription(s). "
                    "Review each to ensure you're getting value."
                ),
                priority=7,
                actionable=True,
                data=data,
            )
        ]

    if len(subscriptions) >= SUBSCRIPTION_SUMMARY_MIN:
        return [
            Insight(
                id="subscriptions_summary",
                severity=InsightSeverity.LOW,
                category=InsightCategory.SUBSCRIPTIONS,
                title="Monthly subscription summary",
                message=(
                    f"You have {len(subscriptions)} recurring subscription(s) "
                    f"totaling {ctx.money(monthly_total)}/month."
                ),
                detail="Regularly review subscriptions to ensure they still provide value.",
                priority=5,
                actionable=True,
                data=data,
            )
        ]

    return []
