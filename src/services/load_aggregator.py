"""Load aggregation: per-member weight, task count and exclusion-adjusted share."""

import logging
from collections.abc import Iterable, Sequence
from datetime import date

from src.core.logging import span
from src.domain.fairness import Member, MemberExclusion, MemberLoad, TaskCompletion
from src.services.exclusion_calendar import excluded_day_count, exclusions_by_member, period_day_count


logger = logging.getLogger(__name__)


def adjust_percentage(percentage: float, *, period_days: int, exclusion_days: int) -> float:
    """Scale a share up to what it would be over the member's available days only.

    Members that were present the whole period, or absent the whole period,
    keep their raw share.
    """
    active_days = period_days - exclusion_days
    if 0 < active_days < period_days:
        return percentage * (period_days / active_days)
    return percentage


def compute_member_loads(
    tasks: Iterable[TaskCompletion],
    members: Sequence[Member],
    exclusions: Iterable[MemberExclusion],
    period_start: date,
    period_end: date,
) -> list[MemberLoad]:
    """Aggregate completed tasks into one MemberLoad per known member.

    Every member appears in the result, even with no completions. Tasks
    completed by unknown members are ignored.

    Args:
        tasks: Completed tasks within the period
        members: Household roster
        exclusions: Availability exclusions for any member
        period_start: First day of the period (inclusive)
        period_end: Last day of the period (inclusive)

    Returns:
        List of MemberLoad in roster order
    """
    with span("load_aggregator.compute_member_loads"):
        period_days = period_day_count(period_start, period_end)
        grouped_exclusions = exclusions_by_member(exclusions)

        weights: dict[str, float] = {member.user_id: 0.0 for member in members}
        counts: dict[str, int] = {member.user_id: 0 for member in members}
        categories: dict[str, dict[str, float]] = {member.user_id: {} for member in members}

        ignored = 0
        for task in tasks:
            if task.user_id not in weights:
                ignored += 1
                continue
            weights[task.user_id] += task.weight
            counts[task.user_id] += 1
            breakdown = categories[task.user_id]
            breakdown[task.category] = breakdown.get(task.category, 0.0) + task.weight

        if ignored:
            logger.debug("Ignored %d completions from unknown members", ignored)

        total_weight = sum(weights.values())

        loads = []
        for member in members:
            exclusion_days = excluded_day_count(
                grouped_exclusions.get(member.user_id, []), period_start, period_end
            )
            weight = weights[member.user_id]
            percentage = weight / total_weight * 100 if total_weight > 0 else 0.0
            loads.append(
                MemberLoad(
                    user_id=member.user_id,
                    user_name=member.user_name,
                    tasks_completed=counts[member.user_id],
                    total_weight=weight,
                    percentage=percentage,
                    adjusted_percentage=adjust_percentage(
                        percentage, period_days=period_days, exclusion_days=exclusion_days
                    ),
                    exclusion_days=exclusion_days,
                    active_days=period_days - exclusion_days,
                    category_breakdown=categories[member.user_id],
                )
            )

        logger.debug(
            "Computed member loads",
            extra={"member_count": len(loads), "period_days": period_days, "total_weight": total_weight},
        )
        return loads
