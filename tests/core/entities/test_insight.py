"""Tests for Insight entity."""

import pytest
from pydantic import ValidationError

from src.core.entities.insight import (
    CashflowData,
    Insight,
    InsightCategory,
    InsightSeverity,
    InsightSummary,
    TaxData,
)


def _insight(**overrides) -> Insight:
    fields = {
        "id": "cashflow_negative",
        "severity": InsightSeverity.HIGH,
        "category": InsightCategory.CASHFLOW,
        "title": "Negative cash flow",
        "message": "You're spending more than you earn (-$50.00 net).",
        "priority": 10,
    }
    fields.update(overrides)
    return Insight(**fields)


class TestInsight:
    """Tests for Insight entity."""

    def test_defaults(self):
        insight = _insight()
        assert insight.actionable is False
        assert insight.detail is None
        assert insight.data is None

    def test_category_has_seventeen_tags(self):
        assert len(InsightCategory) == 17

    @pytest.mark.parametrize("priority", [0, 11])
    def test_priority_bounds(self, priority):
        with pytest.raises(ValidationError):
            _insight(priority=priority)

    @pytest.mark.parametrize("field", ["id", "title", "message"])
    def test_required_text_not_empty(self, field):
        with pytest.raises(ValidationError):
            _insight(**{field: ""})

    def test_payload_must_match_category(self):
        payload = TaxData(
            income=1000, paid_tax=0, estimated_tax=200, shortfall=200, estimate_rate=0.2
        )
        with pytest.raises(ValidationError, match="does not match category"):
            _insight(data=payload)

    def test_payload_for_matching_category(self):
        insight = _insight(data=CashflowData(income=100, expenses=150, net=-50))
        assert insight.data.kind == "cashflow"
        assert insight.data.net == -50

    def test_payload_parsed_from_dict_by_kind(self):
        insight = Insight.model_validate(
            {
                "id": "cashflow_negative",
                "severity": "high",
                "category": "cashflow",
                "title": "Negative cash flow",
                "message": "m",
                "priority": 10,
                "data": {"kind": "cashflow", "income": 100, "expenses": 150, "net": -50},
            }
        )
        assert isinstance(insight.data, CashflowData)

    def test_dedup_key(self):
        assert _insight().dedup_key == ("cashflow", "Negative cash flow")

    def test_is_frozen(self):
        insight = _insight()
        with pytest.raises(ValidationError):
            insight.priority = 1

    def test_equal_when_fields_equal(self):
        assert _insight() == _insight()


class TestInsightSummary:
    def test_defaults_to_zero(self):
        summary = InsightSummary()
        assert summary.total == summary.active == summary.actionable == 0
