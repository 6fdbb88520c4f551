"""
Insight Engine.

Runs every analysis rule against one input snapshot, then ranks and
deduplicates the combined output. Pure apart from logging: no storage,
no I/O, and nothing escapes as an exception.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from datetime import datetime

from src.config import get_logger
from src.core.entities.finance import Invoice, TaxPayment, Transaction, UserSettings
from src.core.entities.insight import Insight, InsightSeverity, InsightSummary
from src.core.services.aggregation import as_local_naive
from src.core.services.insight_rules import ANALYSIS_RULES, AnalysisContext, InsightRule

logger = get_logger(__name__)


def rank_insights(insights: Iterable[Insight]) -> list[Insight]:
    """
    Order by priority descending, then drop later (category, title) repeats.

    The sort is stable, so equal priorities keep emission order and the
    first survivor of each duplicate group is the highest-ranked one.
    """
    ordered = sorted(insights, key=lambda i: i.priority, reverse=True)
    seen: set[tuple[str, str]] = set()
    ranked: list[Insight] = []
    for insight in ordered:
        if insight.dedup_key in seen:
            continue
        seen.add(insight.dedup_key)
        ranked.append(insight)
    return ranked


def filter_dismissed(
    insights: Iterable[Insight], dismissed_ids: Collection[str]
) -> list[Insight]:
    return [i for i in insights if i.id not in dismissed_ids]


def group_by_severity(insights: Iterable[Insight]) -> dict[InsightSeverity, list[Insight]]:
    """Bucket insights by severity, preserving rank order within each bucket."""
    groups: dict[InsightSeverity, list[Insight]] = {s: [] for s in InsightSeverity}
    for insight in insights:
        groups[insight.severity].append(insight)
    return groups


def summarize_insights(
    insights: Sequence[Insight], dismissed_ids: Collection[str] = ()
) -> InsightSummary:
    """Totals for one run: everything generated vs what is still active."""
    active = filter_dismissed(insights, dismissed_ids)
    by_severity = group_by_severity(active)
    return InsightSummary(
        total=len(insights),
        active=len(active),
        high=len(by_severity[InsightSeverity.HIGH]),
        medium=len(by_severity[InsightSeverity.MEDIUM]),
        low=len(by_severity[InsightSeverity.LOW]),
        actionable=sum(1 for i in active if i.actionable),
    )


class InsightEngine:
    """
    Fan-out over the analysis rules, fan-in to one ranked list.

    Rules run sequentially in registry order. A rule that raises is
    logged and skipped so the rest of the run still produces output.
    """

    def __init__(self, rules: Sequence[InsightRule] | None = None) -> None:
        self._rules: tuple[InsightRule, ...] = (
            tuple(rules) if rules is not None else ANALYSIS_RULES
        )

    @property
    def rules(self) -> tuple[InsightRule, ...]:
        return self._rules

    def generate(
        self,
        transactions: Iterable[Transaction] = (),
        invoices: Iterable[Invoice] = (),
        tax_payments: Iterable[TaxPayment] = (),
        settings: UserSettings | None = None,
        now: datetime | None = None,
    ) -> list[Insight]:
        """
        Produce the ranked insight list for one snapshot.

        Args:
            transactions: Income and expense records.
            invoices: Issued invoices.
            tax_payments: Tax payments already made.
            settings: User preferences (currency symbol).
            now: Reference clock. Pass it explicitly for reproducible output;
                defaults to the current local time. Timezone-aware values
                are converted to local time, matching the naive record dates.

        Returns:
            Insights ordered by priority, unique per (category, title).
        """
        ctx = AnalysisContext(
            transactions=tuple(transactions),
            invoices=tuple(invoices),
            tax_payments=tuple(tax_payments),
            settings=settings or UserSettings(),
            now=as_local_naive(now) if now else datetime.now(),
        )

        collected: list[Insight] = []
        for rule in self._rules:
            try:
                collected.extend(rule(ctx))
            except Exception:
                logger.warning(
                    "insight_rule_failed",
                    rule=getattr(rule, "__name__", repr(rule)),
                    exc_info=True,
                )

        ranked = rank_insights(collected)
        logger.debug(
            "insight_generation_complete",
            transactions=len(ctx.transactions),
            invoices=len(ctx.invoices),
            emitted=len(collected),
            total=len(ranked),
        )
        return ranked

    def count_active(
        self,
        dismissed_ids: Collection[str],
        transactions: Iterable[Transaction] = (),
        invoices: Iterable[Invoice] = (),
        tax_payments: Iterable[TaxPayment] = (),
        settings: UserSettings | None = None,
        now: datetime | None = None,
    ) -> int:
        """Number of generated insights whose id is not dismissed."""
        insights = self.generate(transactions, invoices, tax_payments, settings, now)
        return len(filter_dismissed(insights, dismissed_ids))


_default_engine = InsightEngine()


def generate_insights(
    transactions: Iterable[Transaction] = (),
    invoices: Iterable[Invoice] = (),
    tax_payments: Iterable[TaxPayment] = (),
    settings: UserSettings | None = None,
    now: datetime | None = None,
) -> list[Insight]:
    """Run the default rule set. See InsightEngine.generate."""
    return _default_engine.generate(transactions, invoices, tax_payments, settings, now)


def get_insight_count(
    transactions: Iterable[Transaction] = (),
    invoices: Iterable[Invoice] = (),
    tax_payments: Iterable[TaxPayment] = (),
    settings: UserSettings | None = None,
    dismissed_ids: Collection[str] = (),
    now: datetime | None = None,
) -> int:
    """Count of default-engine insights not in dismissed_ids."""
    return _default_engine.count_active(
        dismissed_ids, transactions, invoices, tax_payments, settings, now
    )
