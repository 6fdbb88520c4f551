"""Insight entity produced by the analysis rules."""

from datetime import date
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class InsightCategory(str, Enum):
    """Closed set of domain tags for insights."""

    CASHFLOW = "cashflow"
    SPENDING = "spending"
    INCOME = "income"
    BUDGET = "budget"
    GOALS = "goals"
    PATTERNS = "patterns"
    ANOMALY = "anomaly"
    SUBSCRIPTIONS = "subscriptions"
    FORECAST = "forecast"
    SAVINGS = "savings"
    VENDORS = "vendors"
    EMERGENCY = "emergency"
    SEASONAL = "seasonal"
    RECURRING = "recurring"
    DISTRIBUTION = "distribution"
    INVOICES = "invoices"
    TAX = "tax"


class InsightSeverity(str, Enum):
    """Coarse urgency bucket, independent of priority."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Diagnostic payloads, one per emitting category ---


class CashflowData(_Payload):
    kind: Literal["cashflow"] = "cashflow"
    income: float
    expenses: float
    net: float
    savings_rate: float | None = None


class SpendingTrendData(_Payload):
    kind: Literal["spending"] = "spending"
    current_period: float
    previous_period: float
    change_pct: float


class IncomeStabilityData(_Payload):
    kind: Literal["income"] = "income"
    avg_income: float
    std_dev: float
    coefficient_of_variation: float
    monthly_amounts: list[float] = Field(default_factory=list)


class InvoiceData(_Payload):
    kind: Literal["invoices"] = "invoices"
    overdue: bool
    invoice_count: int
    total_amount: float
    invoice_ids: list[str] = Field(default_factory=list)


class DistributionData(_Payload):
    kind: Literal["distribution"] = "distribution"
    top_category: str
    top_total: float
    share_pct: float
    category_totals: dict[str, float] = Field(default_factory=dict)


class TaxData(_Payload):
    kind: Literal["tax"] = "tax"
    income: float
    paid_tax: float
    estimated_tax: float
    shortfall: float
    estimate_rate: float


class AnomalyData(_Payload):
    kind: Literal["anomaly"] = "anomaly"
    transaction_id: str
    transaction_name: str
    amount: float
    mean: float
    std_dev: float
    z_score: float


class RecurringData(_Payload):
    kind: Literal["recurring"] = "recurring"
    similarity_key: str
    last_transaction_id: str
    last_seen: date
    avg_interval_days: float
    days_since_last: float
    occurrences: int


class DayPatternData(_Payload):
    kind: Literal["patterns"] = "patterns"
    top_day: str
    amount: float
    share_pct: float
    by_day: dict[str, float] = Field(default_factory=dict)


class MonthlySavings(_Payload):
    month: str
    rate: float
    savings: float
    income: float
    expenses: float


class SavingsData(_Payload):
    kind: Literal["savings"] = "savings"
    avg_savings_rate: float
    months: list[MonthlySavings] = Field(default_factory=list)


class VendorData(_Payload):
    kind: Literal["vendors"] = "vendors"
    vendor: str
    amount: float
    share_pct: float
    total_spending: float
    top_vendors: dict[str, float] = Field(default_factory=dict)


class DetectedSubscription(_Payload):
    name: str
    amount: float
    frequency: str = "monthly"
    last_date: date


class SubscriptionData(_Payload):
    kind: Literal["subscriptions"] = "subscriptions"
    monthly_total: float
    share_pct: float
    subscriptions: list[DetectedSubscription] = Field(default_factory=list)


class ForecastData(_Payload):
    kind: Literal["forecast"] = "forecast"
    predicted: float
    projected_month_total: float
    current_spending: float
    day_of_month: int
    days_in_month: int
    trend: float


class SeasonalData(_Payload):
    kind: Literal["seasonal"] = "seasonal"
    month: str
    current_month_spending: float
    avg_other_months: float
    increase_pct: float


InsightData = Annotated[
    Union[
        CashflowData,
        SpendingTrendData,
        IncomeStabilityData,
        InvoiceData,
        DistributionData,
        TaxData,
        AnomalyData,
        RecurringData,
        DayPatternData,
        SavingsData,
        VendorData,
        SubscriptionData,
        ForecastData,
        SeasonalData,
    ],
    Field(discriminator="kind"),
]


class Insight(BaseModel):
    """
    One ranked, categorized finding.

    Transient: created fresh on every run and never mutated. The id is
    built by the emitting rule so the same condition always yields the
    same id, which is what the dismissal store remembers.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    severity: InsightSeverity
    category: InsightCategory
    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    detail: str | None = None
    priority: int = Field(ge=1, le=10)
    actionable: bool = False
    data: InsightData | None = None

    @model_validator(mode="after")
    def payload_matches_category(self) -> "Insight":
        if self.data is not None and self.data.kind != self.category.value:
            raise ValueError(
                f"payload kind '{self.data.kind}' does not match category "
                f"'{self.category.value}'"
            )
        return self

    @property
    def dedup_key(self) -> tuple[str, str]:
        return (self.category.value, self.title)


class InsightSummary(BaseModel):
    """Counts over one run's output after dismissal filtering."""

    total: int = 0
    active: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    actionable: int = 0
