"""Exclusion calendar: unavailable days of a member within a scoring period.

Exclusions are clipped to the period and merged before counting, so two
overlapping illness entries never count the same calendar day twice. Day
counting is inclusive of both endpoints.
"""

from collections.abc import Iterable
from datetime import date

from src.domain.fairness import MemberExclusion


def period_day_count(period_start: date, period_end: date) -> int:
    """Number of calendar days in ``[period_start, period_end]`` (inclusive)."""
    return max(0, (period_end - period_start).days + 1)


def _clipped_intervals(
    exclusions: Iterable[MemberExclusion],
    period_start: date,
    period_end: date,
) -> list[tuple[date, date]]:
    intervals = []
    for exclusion in exclusions:
        start = max(exclusion.start_date, period_start)
        end = min(exclusion.end_date, period_end)
        if start <= end:
            intervals.append((start, end))
    return sorted(intervals)


def merge_intervals(intervals: list[tuple[date, date]]) -> list[tuple[date, date]]:
    """Union sorted day ranges; adjacent ranges are joined too."""
    merged: list[tuple[date, date]] = []
    for start, end in intervals:
        if merged and (start - merged[-1][1]).days <= 1:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def excluded_day_count(
    exclusions: Iterable[MemberExclusion],
    period_start: date,
    period_end: date,
) -> int:
    """Count the distinct calendar days covered by ``exclusions`` within the period.

    Args:
        exclusions: Exclusions of a single member
        period_start: First day of the period (inclusive)
        period_end: Last day of the period (inclusive)

    Returns:
        Excluded day count, between 0 and the period length
    """
    merged = merge_intervals(_clipped_intervals(exclusions, period_start, period_end))
    days = sum(period_day_count(start, end) for start, end in merged)
    return min(days, period_day_count(period_start, period_end))


def exclusions_by_member(exclusions: Iterable[MemberExclusion]) -> dict[str, list[MemberExclusion]]:
    """Group exclusions per member, keeping input order."""
    grouped: dict[str, list[MemberExclusion]] = {}
    for exclusion in exclusions:
        grouped.setdefault(exclusion.user_id, []).append(exclusion)
    return grouped

