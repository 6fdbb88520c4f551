"""Tests for aggregation primitives."""

from datetime import date, datetime, timedelta, timezone

import pytest

from src.core.entities.finance import Transaction
from src.core.services.aggregation import (
    as_local_naive,
    average,
    days_since,
    format_money,
    group_by_category,
    group_by_month,
    group_by_similarity,
    group_by_weekday,
    intervals_in_days,
    month_key,
    recent_months,
    similarity_key,
    standard_deviation,
    total,
    within_last_days,
)

NOW = datetime(2026, 10, 19, 12, 0)


def _tx(tx_id: str, on: date, amount: float = 10.0, name: str = "Store", category: str = "General"):
    return Transaction(
        id=tx_id, date=on, name=name, category=category, amount=amount, type="expense"
    )


def _ago(days: int) -> date:
    return (NOW - timedelta(days=days)).date()


class TestReductions:
    """Tests for numeric reductions."""

    def test_total(self):
        assert total([1.5, 2.5, 3]) == 7.0
        assert total([]) == 0.0

    def test_average_of_empty_is_zero(self):
        assert average([]) == 0.0

    def test_average(self):
        assert average([2, 4, 6]) == 4.0

    def test_standard_deviation_is_population(self):
        assert standard_deviation([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)

    def test_standard_deviation_of_empty_is_zero(self):
        assert standard_deviation([]) == 0.0

    def test_standard_deviation_of_constant_is_zero(self):
        assert standard_deviation([5, 5, 5]) == 0.0


class TestTimeWindows:
    """Tests for date window helpers."""

    def test_window_keeps_recent_and_drops_boundary_day(self):
        records = [_tx("a", _ago(29)), _tx("b", _ago(30)), _tx("c", _ago(0))]
        kept = within_last_days(records, 30, NOW)
        assert [r.id for r in kept] == ["a", "c"]

    def test_window_keeps_future_dates(self):
        records = [_tx("a", _ago(-3))]
        assert within_last_days(records, 7, NOW) == records

    def test_naive_clock_passes_through(self):
        assert as_local_naive(NOW) is NOW

    def test_aware_clock_becomes_local_naive(self):
        aware = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        converted = as_local_naive(aware)

        assert converted.tzinfo is None
        assert converted == aware.astimezone().replace(tzinfo=None)
        assert within_last_days([_tx("a", _ago(3))], 7, converted)

    def test_days_since_is_fractional(self):
        assert days_since(date(2026, 10, 18), NOW) == pytest.approx(1.5)


class TestGrouping:
    """Tests for grouping helpers."""

    def test_month_key(self):
        assert month_key(date(2026, 3, 9)) == "2026-03"

    def test_group_by_category(self):
        groups = group_by_category(
            [_tx("a", _ago(1), category="Food"), _tx("b", _ago(2), category="Food"), _tx("c", _ago(3), category="Rent")]
        )
        assert {k: len(v) for k, v in groups.items()} == {"Food": 2, "Rent": 1}

    def test_group_by_month(self):
        groups = group_by_month([_tx("a", date(2026, 9, 30)), _tx("b", date(2026, 10, 1))])
        assert set(groups) == {"2026-09", "2026-10"}

    def test_group_by_weekday_uses_english_names(self):
        groups = group_by_weekday([_tx("a", date(2026, 10, 19)), _tx("b", date(2026, 10, 17))])
        assert set(groups) == {"Monday", "Saturday"}

    def test_recent_months_newest_first_and_capped(self):
        records = [
            _tx("a", date(2026, 6, 1)),
            _tx("b", date(2026, 8, 1)),
            _tx("c", date(2026, 10, 1)),
            _tx("d", date(2026, 9, 1)),
        ]
        months = recent_months(records, limit=3)
        assert [key for key, _ in months] == ["2026-10", "2026-09", "2026-08"]


class TestSimilarity:
    """Tests for recurrence clustering helpers."""

    def test_key_folds_case_and_snaps_amount(self):
        assert similarity_key(_tx("a", _ago(1), amount=15.99, name="Netflix")) == "netflix_15"
        assert similarity_key(_tx("b", _ago(1), amount=16.49, name="NETFLIX")) == "netflix_15"

    def test_key_rounds_halves_up(self):
        assert similarity_key(_tx("a", _ago(1), amount=17.5, name="Gym")) == "gym_20"

    def test_key_uses_magnitude(self):
        assert similarity_key(_tx("a", _ago(1), amount=-15.99, name="Netflix")) == "netflix_15"

    def test_group_by_similarity(self):
        groups = group_by_similarity(
            [
                _tx("a", _ago(60), amount=15.99, name="Netflix"),
                _tx("b", _ago(30), amount=16.49, name="netflix"),
                _tx("c", _ago(1), amount=49.0, name="Netflix"),
            ]
        )
        assert {k: len(v) for k, v in groups.items()} == {"netflix_15": 2, "netflix_50": 1}

    def test_intervals_sort_dates_first(self):
        dates = [date(2026, 3, 1), date(2026, 1, 1), date(2026, 2, 1)]
        assert intervals_in_days(dates) == [31.0, 28.0]

    def test_intervals_of_single_date(self):
        assert intervals_in_days([date(2026, 1, 1)]) == []


class TestFormatMoney:
    """Tests for format_money."""

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (-50, "-$50.00"),
            (1234.5, "$1,234.50"),
            (0, "$0.00"),
            (1_000_000, "$1,000,000.00"),
        ],
    )
    def test_formats(self, amount, expected):
        assert format_money(amount) == expected

    def test_custom_symbol(self):
        assert format_money(-12.3, "€") == "-€12.30"
