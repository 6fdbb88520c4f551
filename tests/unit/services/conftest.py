"""Fixtures for analysis rule and engine tests."""

from collections.abc import Callable
from datetime import date, datetime, timedelta

import pytest

from src.core.entities.finance import Invoice, TaxPayment, Transaction, UserSettings
from src.core.services.insight_rules import AnalysisContext


@pytest.fixture
def tx(now: datetime) -> Callable[..., Transaction]:
    """
    Transaction factory.

    `when` is either a date or a number of days before `now`.
    """

    def _make(
        tx_id: str,
        when: date | int,
        amount: float,
        type: str = "expense",
        name: str = "Store",
        category: str = "General",
    ) -> Transaction:
        on = when if isinstance(when, date) else (now - timedelta(days=when)).date()
        return Transaction(
            id=tx_id, date=on, name=name, category=category, amount=amount, type=type
        )

    return _make


@pytest.fixture
def invoice(now: datetime) -> Callable[..., Invoice]:
    def _make(
        inv_id: str,
        amount: float,
        due_days_ago: int | None,
        status: str = "unpaid",
    ) -> Invoice:
        issued = (now - timedelta(days=30)).date()
        due = None if due_days_ago is None else (now - timedelta(days=due_days_ago)).date()
        return Invoice(id=inv_id, amount=amount, status=status, date=issued, due=due)

    return _make


@pytest.fixture
def tax_payment(now: datetime) -> Callable[..., TaxPayment]:
    def _make(payment_id: str, amount: float) -> TaxPayment:
        return TaxPayment(id=payment_id, date=(now - timedelta(days=10)).date(), amount=amount)

    return _make


@pytest.fixture
def make_context(now: datetime) -> Callable[..., AnalysisContext]:
    def _make(
        transactions=(),
        invoices=(),
        tax_payments=(),
        settings: UserSettings | None = None,
    ) -> AnalysisContext:
        return AnalysisContext(
            transactions=tuple(transactions),
            invoices=tuple(invoices),
            tax_payments=tuple(tax_payments),
            settings=settings or UserSettings(),
            now=now,
        )

    return _make
