"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: str | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. VALIDATION_ERROR)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)


# --- Insights ---


class InsightResponse(BaseModel):
    """Single ranked insight."""

    id: str
    severity: str
    category: str
    title: str
    message: str
    detail: str | None = None
    priority: int
    actionable: bool = False
    dismissed: bool = False
    data: dict[str, Any] | None = None


class InsightSummaryResponse(BaseModel):
    """Counts for the dashboard header."""

    total: int = 0
    active: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    actionable: int = 0


class InsightsEvaluationResponse(BaseModel):
    """Response for insight evaluation endpoint."""

    insights: list[InsightResponse] = Field(default_factory=list)
    summary: InsightSummaryResponse = Field(default_factory=InsightSummaryResponse)
    dismissed_ids: list[str] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=datetime.now)


class InsightCountResponse(BaseModel):
    count: int


class DismissedInsightsResponse(BaseModel):
    """Ids the user has dismissed, sorted."""

    dismissed_ids: list[str] = Field(default_factory=list)
    total: int = 0
