"""
Analysis rules.

ANALYSIS_RULES fixes the execution order, which is also the
tie-break order when insights share a priority.
"""

from src.core.services.insight_rules.anomalies import detect_anomalies
from src.core.services.insight_rules.cashflow import analyze_cash_flow
from src.core.services.insight_rules.context import AnalysisContext, InsightRule
from src.core.services.insight_rules.forecast import predict_month_spending
from src.core.services.insight_rules.income import (
    analyze_income_stability,
    analyze_savings_rate,
)
from src.core.services.insight_rules.obligations import (
    analyze_invoices,
    analyze_tax_payments,
)
from src.core.services.insight_rules.patterns import (
    analyze_seasonal_patterns,
    analyze_spending_by_weekday,
)
from src.core.services.insight_rules.recurring import (
    analyze_recurring_patterns,
    detect_subscriptions,
    find_monthly_subscriptions,
)
from src.core.services.insight_rules.spending import (
    analyze_category_concentration,
    analyze_spending_trends,
    analyze_top_vendors,
)

ANALYSIS_RULES: tuple[InsightRule, ...] = (
    analyze_cash_flow,
    analyze_spending_trends,
    analyze_income_stability,
    analyze_invoices,
    analyze_category_concentration,
    analyze_tax_payments,
    detect_anomalies,
    analyze_recurring_patterns,
    analyze_spending_by_weekday,
    analyze_savings_rate,
    analyze_top_vendors,
    detect_subscriptions,
    predict_month_spending,
    analyze_seasonal_patterns,
)

__all__ = [
    "ANALYSIS_RULES",
    "AnalysisContext",
    "InsightRule",
    "analyze_cash_flow",
    "analyze_spending_trends",
    "analyze_income_stability",
    "analyze_invoices",
    "analyze_category_concentration",
    "analyze_tax_payments",
    "detect_anomalies",
    "analyze_recurring_patterns",
    "analyze_spending_by_weekday",
    "analyze_savings_rate",
    "analyze_top_vendors",
    "detect_subscriptions",
    "find_monthly_subscriptions",
    "predict_month_spending",
    "analyze_seasonal_patterns",
]
