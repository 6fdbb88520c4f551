"""
Dependency injection container for FastAPI.

Provides store and use case instances to route handlers. Tests swap
the dismissal store through app.dependency_overrides.
"""

from fastapi import Depends

from src.application.use_cases import (
    CountActiveInsightsUseCase,
    DismissInsightUseCase,
    EvaluateInsightsUseCase,
    ListDismissedInsightsUseCase,
    ResetDismissedInsightsUseCase,
)
from src.core.interfaces import IDismissalStore
from src.infrastructure.storage import get_dismissal_store


async def get_dismissals() -> IDismissalStore:
    """Get the dismissal store."""
    return await get_dismissal_store()


def get_evaluate_insights_use_case(
    store: IDismissalStore = Depends(get_dismissals),
) -> EvaluateInsightsUseCase:
    return EvaluateInsightsUseCase(dismissal_store=store)


def get_count_insights_use_case(
    store: IDismissalStore = Depends(get_dismissals),
) -> CountActiveInsightsUseCase:
    return CountActiveInsightsUseCase(dismissal_store=store)


def get_dismiss_insight_use_case(
    store: IDismissalStore = Depends(get_dismissals),
) -> DismissInsightUseCase:
    return DismissInsightUseCase(dismissal_store=store)


def get_list_dismissed_use_case(
    store: IDismissalStore = Depends(get_dismissals),
) -> ListDismissedInsightsUseCase:
    return ListDismissedInsightsUseCase(dismissal_store=store)


def get_reset_dismissed_use_case(
    store: IDismissalStore = Depends(get_dismissals),
) -> ResetDismissedInsightsUseCase:
    return ResetDismissedInsightsUseCase(dismissal_store=store)
