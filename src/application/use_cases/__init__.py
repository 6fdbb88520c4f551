"""Application use cases."""

from src.application.use_cases.evaluate_insights import (
    CountActiveInsightsUseCase,
    EvaluateInsightsUseCase,
    InsightEvaluationResult,
)
from src.application.use_cases.manage_dismissals import (
    DismissInsightUseCase,
    ListDismissedInsightsUseCase,
    ResetDismissedInsightsUseCase,
)

__all__ = [
    "EvaluateInsightsUseCase",
    "InsightEvaluationResult",
    "CountActiveInsightsUseCase",
    "DismissInsightUseCase",
    "ListDismissedInsightsUseCase",
    "ResetDismissedInsightsUseCase",
]
