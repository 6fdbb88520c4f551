"""Tests for invoice and tax rules."""

from src.core.entities.finance import UserSettings
from src.core.entities.insight import InsightCategory, InsightSeverity
from src.core.services.insight_rules import analyze_invoices, analyze_tax_payments


class TestAnalyzeInvoices:
    """Tests for analyze_invoices."""

    def test_no_unpaid_invoices(self, invoice, make_context):
        ctx = make_context(
            invoices=[invoice("i1", 500, 10, status="paid"), invoice("i2", 300, 10, status="void")]
        )
        assert analyze_invoices(ctx) == []

    def test_overdue_invoice(self, invoice, make_context):
        [insight] = analyze_invoices(make_context(invoices=[invoice("i1", 1200, 2)]))

        assert insight.id == "invoices_overdue"
        assert insight.severity == InsightSeverity.HIGH
        assert insight.category == InsightCategory.INVOICES
        assert insight.priority == 9
        assert insight.message == "1 invoice(s) totaling $1,200.00 are overdue."
        assert insight.data.overdue is True
        assert insight.data.invoice_count == 1

    def test_overdue_takes_precedence_over_unpaid(self, invoice, make_context):
        ctx = make_context(invoices=[invoice("i1", 100, 5), invoice("i2", 200, -10)])
        [insight] = analyze_invoices(ctx)

        assert insight.id == "invoices_overdue"
        assert insight.data.invoice_ids == ["i1"]

    def test_due_today_is_only_unpaid(self, invoice, make_context):
        [insight] = analyze_invoices(make_context(invoices=[invoice("i1", 250, 0)]))

        assert insight.id == "invoices_unpaid"
        assert insight.severity == InsightSeverity.MEDIUM
        assert insight.priority == 6
        assert insight.message == "1 invoice(s) worth $250.00 are awaiting payment."

    def test_missing_due_date_uses_issue_date(self, invoice, make_context):
        # issued 30 days ago
        [insight] = analyze_invoices(make_context(invoices=[invoice("i1", 250, None)]))
        assert insight.id == "invoices_overdue"


class TestAnalyzeTaxPayments:
    """Tests for analyze_tax_payments."""

    def _income(self, tx, amount: float):
        return [tx("inc", 20, amount, type="income")]

    def test_underfunded(self, tx, tax_payment, make_context):
        ctx = make_context(self._income(tx, 10000), tax_payments=[tax_payment("p1", 500)])
        [insight] = analyze_tax_payments(ctx)

        assert insight.id == "tax_underfunded"
        assert insight.category == InsightCategory.TAX
        assert insight.priority == 7
        assert insight.message == (
            "Tax payments ($500.00) look low compared to estimated liability ($2,000.00)."
        )
        assert insight.data.shortfall == 1500

    def test_half_of_estimate_is_enough(self, tx, tax_payment, make_context):
        ctx = make_context(self._income(tx, 10000), tax_payments=[tax_payment("p1", 1000)])
        assert analyze_tax_payments(ctx) == []

    def test_configured_rate_is_not_used(self, tx, tax_payment, make_context):
        ctx = make_context(
            self._income(tx, 10000),
            tax_payments=[tax_payment("p1", 500)],
            settings=UserSettings(tax_rate=0.5, state_tax_rate=0.1),
        )
        [insight] = analyze_tax_payments(ctx)
        assert insight.data.estimated_tax == 2000

    def test_no_income_is_silent(self, tx, make_context):
        ctx = make_context([tx("e1", 3, 400)])
        assert analyze_tax_payments(ctx) == []
