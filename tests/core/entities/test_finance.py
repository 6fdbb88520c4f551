"""Tests for financial record entities."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from src.core.entities.finance import (
    UNCATEGORIZED,
    Invoice,
    InvoiceStatus,
    TaxPayment,
    TaxPaymentType,
    Transaction,
    TransactionType,
    UserSettings,
)


class TestTransaction:
    """Tests for Transaction entity."""

    def test_parses_plain_iso_date(self):
        tx = Transaction(id="t1", date="2026-10-19", amount=10, type="expense")
        assert tx.date == date(2026, 10, 19)
        assert tx.type == TransactionType.EXPENSE

    def test_truncates_timestamp_to_date(self):
        tx = Transaction(id="t1", date="2026-10-19T23:45:00Z", amount=10, type="income")
        assert tx.date == date(2026, 10, 19)

    def test_accepts_datetime(self):
        tx = Transaction(id="t1", date=datetime(2026, 10, 19, 8, 30), amount=10, type="income")
        assert tx.date == date(2026, 10, 19)

    @pytest.mark.parametrize("category", [None, "", "   "])
    def test_blank_category_becomes_uncategorized(self, category):
        tx = Transaction(id="t1", date="2026-10-19", amount=10, type="expense", category=category)
        assert tx.category == UNCATEGORIZED

    def test_missing_name_is_empty(self):
        tx = Transaction(id="t1", date="2026-10-19", amount=10, type="expense", name=None)
        assert tx.name == ""

    def test_magnitude_ignores_sign(self):
        tx = Transaction(id="t1", date="2026-10-19", amount=-42.5, type="expense")
        assert tx.magnitude == 42.5
        assert tx.is_expense
        assert not tx.is_income

    def test_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            Transaction(id="t1", date="2026-10-19", amount=10, type="transfer")

    def test_is_frozen(self):
        tx = Transaction(id="t1", date="2026-10-19", amount=10, type="expense")
        with pytest.raises(ValidationError):
            tx.amount = 20


class TestInvoice:
    """Tests for Invoice entity."""

    def test_due_date_falls_back_to_issue_date(self):
        inv = Invoice(id="i1", amount=100, status="unpaid", date="2026-10-01")
        assert inv.due is None
        assert inv.due_date == date(2026, 10, 1)

    def test_empty_due_string_is_missing(self):
        inv = Invoice(id="i1", amount=100, status="unpaid", date="2026-10-01", due="")
        assert inv.due_date == date(2026, 10, 1)

    def test_explicit_due_date(self):
        inv = Invoice(id="i1", amount=100, status="paid", date="2026-10-01", due="2026-10-31")
        assert inv.due_date == date(2026, 10, 31)
        assert inv.status == InvoiceStatus.PAID
        assert not inv.is_unpaid


class TestTaxPayment:
    def test_defaults_to_estimated(self):
        payment = TaxPayment(id="p1", date="2026-04-15", amount=500)
        assert payment.type == TaxPaymentType.ESTIMATED

    def test_parses_annual(self):
        payment = TaxPayment(id="p1", date="2026-04-15", amount=500, type="Annual")
        assert payment.type == TaxPaymentType.ANNUAL


class TestUserSettings:
    """Tests for UserSettings."""

    def test_defaults(self):
        settings = UserSettings()
        assert settings.currency_symbol == "$"
        assert settings.tax_rate == 0.0

    def test_ignores_unknown_fields(self):
        settings = UserSettings.model_validate({"currency_symbol": "€", "theme": "dark"})
        assert settings.currency_symbol == "€"
        assert not hasattr(settings, "theme")
