"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import (
    CountInsightsRequest,
    EvaluateInsightsRequest,
    InsightSnapshotRequest,
)
from src.application.dto.responses import (
    DismissedInsightsResponse,
    ErrorResponse,
    HealthResponse,
    InsightCountResponse,
    InsightResponse,
    InsightsEvaluationResponse,
    InsightSummaryResponse,
)

__all__ = [
    # Requests
    "InsightSnapshotRequest",
    "EvaluateInsightsRequest",
    "CountInsightsRequest",
    # Responses
    "InsightResponse",
    "InsightSummaryResponse",
    "InsightsEvaluationResponse",
    "InsightCountResponse",
    "DismissedInsightsResponse",
    "HealthResponse",
    "ErrorResponse",
]
