"""
Evaluate Insights Use Case.

Runs the insight engine over one snapshot of financial records and
applies the user's dismissals.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from src.config import get_logger
from src.core.entities.finance import Invoice, TaxPayment, Transaction, UserSettings
from src.core.entities.insight import Insight, InsightSummary
from src.core.interfaces.storage import IDismissalStore
from src.core.services.insight_engine import (
    InsightEngine,
    filter_dismissed,
    summarize_insights,
)

logger = get_logger(__name__)


@dataclass
class InsightEvaluationResult:
    """Result of insight evaluation."""

    insights: list[Insight] = field(default_factory=list)
    summary: InsightSummary = field(default_factory=InsightSummary)
    dismissed_ids: set[str] = field(default_factory=set)


class DismissalStoreUseCase:
    """Resolves the dismissal store lazily so tests can inject their own."""

    def __init__(self, dismissal_store: IDismissalStore | None = None) -> None:
        self._store = dismissal_store

    async def _get_store(self) -> IDismissalStore:
        if self._store is None:
            from src.infrastructure.storage import get_dismissal_store

            self._store = await get_dismissal_store()
        return self._store


class EvaluateInsightsUseCase(DismissalStoreUseCase):
    """Generate ranked insights and hide the ones the user dismissed."""

    def __init__(
        self,
        dismissal_store: IDismissalStore | None = None,
        engine: InsightEngine | None = None,
    ) -> None:
        super().__init__(dismissal_store)
        self._engine = engine or InsightEngine()

    async def execute(
        self,
        transactions: Sequence[Transaction] = (),
        invoices: Sequence[Invoice] = (),
        tax_payments: Sequence[TaxPayment] = (),
        settings: UserSettings | None = None,
        now: datetime | None = None,
        include_dismissed: bool = False,
    ) -> InsightEvaluationResult:
        """
        Evaluate all analysis rules.

        Args:
            transactions: Income and expense records.
            invoices: Issued invoices.
            tax_payments: Tax payments already made.
            settings: User preferences.
            now: Reference clock (defaults to the current time).
            include_dismissed: Return dismissed insights too. The summary
                still counts them as inactive.

        Returns:
            InsightEvaluationResult with ranked insights and counts.
        """
        generated = self._engine.generate(
            transactions, invoices, tax_payments, settings, now
        )
        store = await self._get_store()
        dismissed = await store.get_dismissed_ids()

        result = InsightEvaluationResult(
            insights=generated if include_dismissed else filter_dismissed(generated, dismissed),
            summary=summarize_insights(generated, dismissed),
            dismissed_ids=dismissed,
        )

        logger.info(
            "insight_evaluation_done",
            total=result.summary.total,
            active=result.summary.active,
            high=result.summary.high,
        )
        return result


class CountActiveInsightsUseCase(DismissalStoreUseCase):
    """Badge count: generated insights that are not dismissed."""

    def __init__(
        self,
        dismissal_store: IDismissalStore | None = None,
        engine: InsightEngine | None = None,
    ) -> None:
        super().__init__(dismissal_store)
        self._engine = engine or InsightEngine()

    async def execute(
        self,
        transactions: Sequence[Transaction] = (),
        invoices: Sequence[Invoice] = (),
        tax_payments: Sequence[TaxPayment] = (),
        settings: UserSettings | None = None,
        now: datetime | None = None,
    ) -> int:
        store = await self._get_store()
        dismissed = await store.get_dismissed_ids()
        return self._engine.count_active(
            dismissed, transactions, invoices, tax_payments, settings, now
        )
