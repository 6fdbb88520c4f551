"""Tests for income stability and savings rate rules."""

from datetime import date

import pytest

from src.core.entities.insight import InsightCategory, InsightSeverity
from src.core.services.insight_rules import analyze_income_stability, analyze_savings_rate


def _filler(tx, count: int):
    return [tx(f"f{i}", date(2026, 10, 2), 10) for i in range(count)]


class TestAnalyzeIncomeStability:
    """Tests for analyze_income_stability."""

    def test_stable_income(self, tx, make_context):
        rows = [
            tx("i8", date(2026, 8, 1), 5000, type="income"),
            tx("i9", date(2026, 9, 1), 5000, type="income"),
            tx("i10", date(2026, 10, 1), 5000, type="income"),
        ] + _filler(tx, 7)
        [insight] = analyze_income_stability(make_context(rows))

        assert insight.id == "income_stable"
        assert insight.severity == InsightSeverity.LOW
        assert insight.category == InsightCategory.INCOME
        assert insight.priority == 5
        assert insight.data.coefficient_of_variation == 0

    def test_volatile_income(self, tx, make_context):
        rows = [
            tx("i8", date(2026, 8, 1), 1000, type="income"),
            tx("i9", date(2026, 9, 1), 5000, type="income"),
            tx("i10", date(2026, 10, 1), 3000, type="income"),
        ] + _filler(tx, 7)
        [insight] = analyze_income_stability(make_context(rows))

        assert insight.id == "income_volatility"
        assert insight.priority == 7
        assert insight.message == "Your monthly income fluctuates by 54.4%."

    def test_only_last_three_months_count(self, tx, make_context):
        rows = [
            tx("i6", date(2026, 6, 1), 50000, type="income"),
            tx("i8", date(2026, 8, 1), 5000, type="income"),
            tx("i9", date(2026, 9, 1), 5000, type="income"),
            tx("i10", date(2026, 10, 1), 5000, type="income"),
        ] + _filler(tx, 6)
        [insight] = analyze_income_stability(make_context(rows))
        assert insight.id == "income_stable"
        assert insight.data.monthly_amounts == [5000, 5000, 5000]

    def test_single_month_is_silent(self, tx, make_context):
        rows = [tx("i10", date(2026, 10, 1), 5000, type="income")] + _filler(tx, 9)
        assert analyze_income_stability(make_context(rows)) == []

    def test_needs_ten_transactions(self, tx, make_context):
        rows = [
            tx("i9", date(2026, 9, 1), 5000, type="income"),
            tx("i10", date(2026, 10, 1), 5000, type="income"),
        ] + _filler(tx, 7)
        assert analyze_income_stability(make_context(rows)) == []


class TestAnalyzeSavingsRate:
    """Tests for analyze_savings_rate."""

    def _months(self, tx, *months: tuple[date, float, float]):
        rows = []
        for n, (on, income, expenses) in enumerate(months):
            if income:
                rows.append(tx(f"i{n}", on, income, type="income"))
            if expenses:
                rows.append(tx(f"e{n}", on, expenses))
        return rows

    def test_good_savings(self, tx, make_context):
        rows = self._months(
            tx, (date(2026, 9, 5), 5000, 1000), (date(2026, 10, 5), 5000, 1000)
        )
        [insight] = analyze_savings_rate(make_context(rows))

        assert insight.id == "good_savings_rate"
        assert insight.category == InsightCategory.SAVINGS
        assert insight.priority == 5
        assert insight.message == "You're saving 80.0% of your income on average."
        assert [m.month for m in insight.data.months] == ["2026-10", "2026-09"]

    def test_low_savings(self, tx, make_context):
        rows = self._months(
            tx, (date(2026, 9, 5), 1000, 950), (date(2026, 10, 5), 1000, 950)
        )
        [insight] = analyze_savings_rate(make_context(rows))

        assert insight.id == "low_savings_rate"
        assert insight.severity == InsightSeverity.MEDIUM
        assert insight.priority == 7
        assert insight.message == "Your average savings rate is 5.0%. Aim for at least 20%."

    def test_month_without_income_counts_as_zero(self, tx, make_context):
        rows = self._months(tx, (date(2026, 9, 5), 1000, 900), (date(2026, 10, 5), 0, 100))
        [insight] = analyze_savings_rate(make_context(rows))
        assert insight.id == "low_savings_rate"
        assert insight.data.avg_savings_rate == pytest.approx(5.0)

    def test_negative_average_is_silent(self, tx, make_context):
        rows = self._months(
            tx, (date(2026, 9, 5), 1000, 2000), (date(2026, 10, 5), 1000, 2000)
        )
        assert analyze_savings_rate(make_context(rows)) == []

    def test_single_month_is_silent(self, tx, make_context):
        rows = self._months(tx, (date(2026, 10, 5), 5000, 1000))
        assert analyze_savings_rate(make_context(rows)) == []
