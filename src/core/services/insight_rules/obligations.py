"""Receivables and tax obligation rules."""

from __future__ import annotations

from datetime import timedelta

from src.core.entities.insight import (
    Insight,
    InsightCategory,
    InsightSeverity,
    InvoiceData,
    TaxData,
)
from src.core.services.aggregation import start_of_day, total
from src.core.services.insight_rules.context import AnalysisContext

OVERDUE_GRACE = timedelta(days=1)

# Flat estimate; UserSettings.tax_rate is not consulted.
ESTIMATED_TAX_RATE = 0.20
UNDERFUNDED_FRACTION = 0.5


def analyze_invoices(ctx: AnalysisContext) -> list[Insight]:
    """Overdue receivables first; otherwise a reminder about unpaid ones."""
    unpaid = [inv for inv in ctx.invoices if inv.is_unpaid]
    if not unpaid:
        return []

    cutoff = ctx.now - OVERDUE_GRACE
    overdue = [inv for inv in unpaid if start_of_day(inv.due_date) < cutoff]

    if overdue:
        total_overdue = total(inv.amount for inv in overdue)
        return [
            Insight(
                id="invoices_overdue",
                severity=InsightSeverity.HIGH,
                category=InsightCategory.INVOICES,
                title="Overdue invoices detected",
                message=(
                    f"{len(overdue)} invoice(s) totaling {ctx.money(total_overdue)} "
                    "are overdue."
                ),
                detail=(
                    "Follow up with clients immediately. Consider implementing "
                    "automatic payment reminders."
                ),
                priority=9,
                actionable=True,
                data=InvoiceData(
                    overdue=True,
                    invoice_count=len(overdue),
                    total_amount=total_overdue,
                    invoice_ids=[inv.id for inv in overdue],
                ),
            )
        ]

    total_unpaid = total(inv.amount for inv in unpaid)
    return [
        Insight(
            id="invoices_unpaid",
            severity=InsightSeverity.MEDIUM,
            category=InsightCategory.INVOICES,
            title="Unpaid invoices",
            message=(
                f"{len(unpaid)} invoice(s) worth {ctx.money(total_unpaid)} are "
                "awaiting payment."
            ),
            detail="Monitor these closely and send friendly reminders as due dates approach.",
            priority=6,
            actionable=True,
            data=InvoiceData(
                overdue=False,
                invoice_count=len(unpaid),
                total_amount=total_unpaid,
                invoice_ids=[inv.id for inv in unpaid],
            ),
        )
    ]


def analyze_tax_payments(ctx: AnalysisContext) -> list[Insight]:
    """Compare tax paid against a flat 20% estimate of income."""
    income = total(t.amount for t in ctx.income)
    if income <= 0:
        return []

    paid_tax = total(p.amount for p in ctx.tax_payments)
    estimated_tax = income * ESTIMATED_TAX_RATE
    if paid_tax >= estimated_tax * UNDERFUNDED_FRACTION:
        return []

    shortfall = estimated_tax - paid_tax
    return [
        Insight(
            id="tax_underfunded",
            severity=InsightSeverity.MEDIUM,
            category=InsightCategory.TAX,
            title="Tax payments may be low",
            message=(
                f"Tax payments ({ctx.money(paid_tax)}) look low compared to "
                f"estimated liability ({ctx.money(estimated_tax)})."
            ),
            detail=(
                f"Consider setting aside approximately {ctx.money(shortfall)} more. "
                "Consult a tax professional for accurate estimates."
            ),
            priority=7,
            actionable=True,
            data=TaxData(
                income=income,
                paid_tax=paid_tax,
                estimated_tax=estimated_tax,
                shortfall=shortfall,
                estimate_rate=ESTIMATED_TAX_RATE,
            ),
        )
    ]
