"""Immutable input snapshot shared by every analysis rule."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from functools import cached_property

from src.core.entities.finance import Invoice, TaxPayment, Transaction, UserSettings
from src.core.entities.insight import Insight
from src.core.services.aggregation import format_money


@dataclass(frozen=True)
class AnalysisContext:
    """
    One run's inputs plus the reference clock.

    Rules read from this and never see each other's output.
    """

    transactions: tuple[Transaction, ...]
    invoices: tuple[Invoice, ...]
    tax_payments: tuple[TaxPayment, ...]
    settings: UserSettings
    now: datetime

    @cached_property
    def expenses(self) -> list[Transaction]:
        return [t for t in self.transactions if t.is_expense]

    @cached_property
    def income(self) -> list[Transaction]:
        return [t for t in self.transactions if t.is_income]

    def money(self, amount: float) -> str:
        return format_money(amount, self.settings.currency_symbol)


InsightRule = Callable[[AnalysisContext], list[Insight]]
