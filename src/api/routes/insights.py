"""
Insight endpoints.

Clients post their own financial snapshot; only dismissals are stored
server-side.
"""

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import (
    get_count_insights_use_case,
    get_dismiss_insight_use_case,
    get_evaluate_insights_use_case,
    get_list_dismissed_use_case,
    get_reset_dismissed_use_case,
)
from src.application.dto.requests import CountInsightsRequest, EvaluateInsightsRequest
from src.application.dto.responses import (
    DismissedInsightsResponse,
    ErrorResponse,
    InsightCountResponse,
    InsightResponse,
    InsightsEvaluationResponse,
    InsightSummaryResponse,
)
from src.application.use_cases import (
    CountActiveInsightsUseCase,
    DismissInsightUseCase,
    EvaluateInsightsUseCase,
    ListDismissedInsightsUseCase,
    ResetDismissedInsightsUseCase,
)
from src.core.entities.insight import Insight

router = APIRouter(prefix="/api/insights", tags=["insights"])


def _entity_to_response(insight: Insight, dismissed_ids: set[str]) -> InsightResponse:
    """Convert entity to response DTO."""
    return InsightResponse(
        id=insight.id,
        severity=insight.severity.value,
        category=insight.category.value,
        title=insight.title,
        message=insight.message,
        detail=insight.detail,
        priority=insight.priority,
        actionable=insight.actionable,
        dismissed=insight.id in dismissed_ids,
        data=insight.data.model_dump(mode="json") if insight.data else None,
    )


@router.post(
    "",
    response_model=InsightsEvaluationResponse,
    responses={422: {"model": ErrorResponse}},
)
async def evaluate_insights(
    request: EvaluateInsightsRequest,
    use_case: EvaluateInsightsUseCase = Depends(get_evaluate_insights_use_case),
) -> InsightsEvaluationResponse:
    """
    Generate ranked insights for the posted records.

    Dismissed insights are left out unless include_dismissed is set;
    the summary always counts them as inactive.
    """
    result = await use_case.execute(
        transactions=request.transactions,
        invoices=request.invoices,
        tax_payments=request.tax_payments,
        settings=request.settings,
        now=request.as_of,
        include_dismissed=request.include_dismissed,
    )

    return InsightsEvaluationResponse(
        insights=[_entity_to_response(i, result.dismissed_ids) for i in result.insights],
        summary=InsightSummaryResponse(**result.summary.model_dump()),
        dismissed_ids=sorted(result.dismissed_ids),
    )


@router.post(
    "/count",
    response_model=InsightCountResponse,
    responses={422: {"model": ErrorResponse}},
)
async def count_insights(
    request: CountInsightsRequest,
    use_case: CountActiveInsightsUseCase = Depends(get_count_insights_use_case),
) -> InsightCountResponse:
    """Number of insights that are not dismissed."""
    count = await use_case.execute(
        transactions=request.transactions,
        invoices=request.invoices,
        tax_payments=request.tax_payments,
        settings=request.settings,
        now=request.as_of,
    )
    return InsightCountResponse(count=count)


@router.get("/dismissed", response_model=DismissedInsightsResponse)
async def list_dismissed(
    use_case: ListDismissedInsightsUseCase = Depends(get_list_dismissed_use_case),
) -> DismissedInsightsResponse:
    ids = await use_case.execute()
    return DismissedInsightsResponse(dismissed_ids=ids, total=len(ids))


@router.post(
    "/{insight_id}/dismiss",
    response_model=DismissedInsightsResponse,
    responses={400: {"model": ErrorResponse}},
)
async def dismiss_insight(
    insight_id: str,
    use_case: DismissInsightUseCase = Depends(get_dismiss_insight_use_case),
) -> DismissedInsightsResponse:
    """Dismiss one insight. Dismissing twice is a no-op."""
    ids = sorted(await use_case.execute(insight_id))
    return DismissedInsightsResponse(dismissed_ids=ids, total=len(ids))


@router.delete("/dismissed", status_code=status.HTTP_204_NO_CONTENT)
async def reset_dismissed(
    use_case: ResetDismissedInsightsUseCase = Depends(get_reset_dismissed_use_case),
) -> Response:
    """Restore every dismissed insight."""
    await use_case.execute()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
