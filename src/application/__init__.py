"""
Application layer - Use cases and DTOs.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services and storage

Use cases are the only entry point for API handlers.
"""

from src.application.dto import (
    CountInsightsRequest,
    DismissedInsightsResponse,
    ErrorResponse,
    EvaluateInsightsRequest,
    HealthResponse,
    InsightCountResponse,
    InsightResponse,
    InsightsEvaluationResponse,
    InsightSummaryResponse,
)
from src.application.use_cases import (
    CountActiveInsightsUseCase,
    DismissInsightUseCase,
    EvaluateInsightsUseCase,
    InsightEvaluationResult,
    ListDismissedInsightsUseCase,
    ResetDismissedInsightsUseCase,
)

__all__ = [
    # Request DTOs
    "EvaluateInsightsRequest",
    "CountInsightsRequest",
    # Response DTOs
    "InsightResponse",
    "InsightSummaryResponse",
    "InsightsEvaluationResponse",
    "InsightCountResponse",
    "DismissedInsightsResponse",
    "HealthResponse",
    "ErrorResponse",
    # Use Cases
    "EvaluateInsightsUseCase",
    "InsightEvaluationResult",
    "CountActiveInsightsUseCase",
    "DismissInsightUseCase",
    "ListDismissedInsightsUseCase",
    "ResetDismissedInsightsUseCase",
]
