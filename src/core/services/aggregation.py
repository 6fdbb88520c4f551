"""
Aggregation primitives shared by the analysis rules.

Pure numeric and grouping helpers. Empty inputs yield zero rather
than raising, so rules can guard on the result instead of the input.
"""

from __future__ import annotations

import calendar
import math
from collections.abc import Callable, Hashable, Iterable, Sequence
from datetime import date, datetime, time, timedelta
from typing import Protocol, TypeVar

from src.core.entities.finance import UNCATEGORIZED, Transaction

SIMILARITY_BUCKET = 5


class Dated(Protocol):
    date: date


D = TypeVar("D", bound=Dated)
T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def total(values: Iterable[float]) -> float:
    return float(sum(values))


def average(values: Sequence[float]) -> float:
    """Arithmetic mean; 0 for an empty sequence."""
    if not values:
        return 0.0
    return total(values) / len(values)


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation (divides by N); 0 for an empty sequence."""
    if not values:
        return 0.0
    mean = average(values)
    return math.sqrt(average([(v - mean) ** 2 for v in values]))


def as_local_naive(moment: datetime) -> datetime:
    """Aware datetimes become naive local time; naive ones pass through."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def start_of_day(d: date) -> datetime:
    return datetime.combine(d, time.min)


def days_since(d: date, now: datetime) -> float:
    """Fractional days elapsed from midnight of d until now."""
    return (now - start_of_day(d)).total_seconds() / 86400


def within_last_days(records: Iterable[D], days: int, now: datetime) -> list[D]:
    """Records dated on or after now minus the given number of days."""
    cutoff = now - timedelta(days=days)
    return [r for r in records if start_of_day(r.date) >= cutoff]


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def month_key(d: date) -> str:
    """Year-month key, e.g. '2026-10'."""
    return f"{d.year:04d}-{d.month:02d}"


def group_by_category(transactions: Iterable[Transaction]) -> dict[str, list[Transaction]]:
    return group_by(transactions, lambda t: t.category or UNCATEGORIZED)


def group_by_month(records: Iterable[D]) -> dict[str, list[D]]:
    return group_by(records, lambda r: month_key(r.date))


def group_by_weekday(transactions: Iterable[Transaction]) -> dict[str, list[Transaction]]:
    return group_by(transactions, lambda t: calendar.day_name[t.date.weekday()])


def recent_months(
    records: Iterable[D], limit: int = 3
) -> list[tuple[str, list[D]]]:
    """Month groups ordered newest first, capped at limit."""
    by_month = group_by_month(records)
    return sorted(by_month.items(), key=lambda kv: kv[0], reverse=True)[:limit]


def similarity_key(transaction: Transaction) -> str:
    """
    Case-folded name plus the amount snapped to the nearest $5.

    Recurring charges that drift by tips or tax still share a key.
    Halves round up.
    """
    bucket = math.floor(transaction.magnitude / SIMILARITY_BUCKET + 0.5) * SIMILARITY_BUCKET
    return f"{transaction.name.lower()}_{bucket}"


def group_by_similarity(
    transactions: Iterable[Transaction],
) -> dict[str, list[Transaction]]:
    return group_by(transactions, similarity_key)


def intervals_in_days(dates: Iterable[date]) -> list[float]:
    """Gaps between consecutive dates after sorting ascending."""
    ordered = sorted(dates)
    return [float((b - a).days) for a, b in zip(ordered, ordered[1:])]


def pct(part: float, whole: float) -> float:
    return part / whole * 100


def format_money(amount: float, symbol: str = "$") -> str:
    """Render like -$1,234.50: sign, symbol, grouped digits, two decimals."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
