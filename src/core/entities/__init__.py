"""Core domain entities."""

from src.core.entities.finance import (
    UNCATEGORIZED,
    FilingStatus,
    Invoice,
    InvoiceStatus,
    TaxPayment,
    TaxPaymentType,
    Transaction,
    TransactionType,
    UserSettings,
)
from src.core.entities.insight import (
    AnomalyData,
    CashflowData,
    DayPatternData,
    DetectedSubscription,
    DistributionData,
    ForecastData,
    IncomeStabilityData,
    Insight,
    InsightCategory,
    InsightData,
    InsightSeverity,
    InsightSummary,
    InvoiceData,
    MonthlySavings,
    RecurringData,
    SavingsData,
    SeasonalData,
    SpendingTrendData,
    SubscriptionData,
    TaxData,
    VendorData,
)

__all__ = [
    # Financial records
    "Transaction",
    "TransactionType",
    "Invoice",
    "InvoiceStatus",
    "TaxPayment",
    "TaxPaymentType",
    "UserSettings",
    "FilingStatus",
    "UNCATEGORIZED",
    # Insight entities
    "Insight",
    "InsightCategory",
    "InsightSeverity",
    "InsightSummary",
    "InsightData",
    # Insight payloads
    "CashflowData",
    "SpendingTrendData",
    "IncomeStabilityData",
    "InvoiceData",
    "DistributionData",
    "TaxData",
    "AnomalyData",
    "RecurringData",
    "DayPatternData",
    "MonthlySavings",
    "SavingsData",
    "VendorData",
    "DetectedSubscription",
    "SubscriptionData",
    "ForecastData",
    "SeasonalData",
]
