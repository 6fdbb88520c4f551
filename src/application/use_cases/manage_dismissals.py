"""Dismiss and restore insights."""

from src.application.use_cases.evaluate_insights import DismissalStoreUseCase
from src.config import get_logger
from src.core.exceptions import ValidationError

logger = get_logger(__name__)


class DismissInsightUseCase(DismissalStoreUseCase):
    """Remember that the user dismissed one insight."""

    async def execute(self, insight_id: str) -> set[str]:
        """
        Dismiss an insight by id.

        Returns:
            The dismissed set after the update.

        Raises:
            ValidationError: If insight_id is blank.
        """
        if not insight_id.strip():
            raise ValidationError("insight_id", "must not be blank")

        store = await self._get_store()
        await store.dismiss(insight_id)
        return await store.get_dismissed_ids()


class ListDismissedInsightsUseCase(DismissalStoreUseCase):
    async def execute(self) -> list[str]:
        store = await self._get_store()
        return sorted(await store.get_dismissed_ids())


class ResetDismissedInsightsUseCase(DismissalStoreUseCase):
    """Bring every dismissed insight back."""

    async def execute(self) -> None:
        store = await self._get_store()
        await store.clear()
        logger.info("dismissals_reset")
