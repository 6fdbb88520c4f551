"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.core.entities.finance import Invoice, TaxPayment, Transaction, UserSettings


class InsightSnapshotRequest(BaseModel):
    """One snapshot of the user's financial records.

    The server keeps no financial data; every call carries its own.
    """

    transactions: list[Transaction] = Field(
        default_factory=list,
        description="Income and expense records",
    )
    invoices: list[Invoice] = Field(
        default_factory=list,
        description="Issued invoices",
    )
    tax_payments: list[TaxPayment] = Field(
        default_factory=list,
        description="Tax payments already made",
    )
    settings: UserSettings = Field(
        default_factory=UserSettings,
        description="User profile and preferences",
    )
    as_of: datetime | None = Field(
        default=None,
        description="Reference time for all date windows (default: now)",
        examples=["2026-10-19T12:00:00"],
    )


class EvaluateInsightsRequest(InsightSnapshotRequest):
    """Request for insight evaluation."""

    include_dismissed: bool = Field(
        default=False,
        description="Also return insights the user has dismissed",
    )


class CountInsightsRequest(InsightSnapshotRequest):
    """Request for the active insight count."""
