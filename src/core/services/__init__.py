"""Core business services."""

from src.core.services.insight_engine import (
    InsightEngine,
    filter_dismissed,
    generate_insights,
    get_insight_count,
    group_by_severity,
    rank_insights,
    summarize_insights,
)
from src.core.services.insight_rules import ANALYSIS_RULES, AnalysisContext

__all__ = [
    "InsightEngine",
    "ANALYSIS_RULES",
    "AnalysisContext",
    "generate_insights",
    "get_insight_count",
    "rank_insights",
    "filter_dismissed",
    "group_by_severity",
    "summarize_insights",
]
