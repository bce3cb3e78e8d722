"""Category-level fairness: who does the laundry, who handles school, ...

Shares are task-count based rather than weight based. Every active member
takes part in the dispersion, so a category done entirely by one person scores
low even when the household total is balanced. Members away for the whole
period are listed with their counts but do not take part in the dispersion or
the dominance check, the same rule the household score applies.
"""

import logging
from collections.abc import Iterable, Sequence

from src.core.config import FairnessThresholds, settings
from src.core.logging import span
from src.domain.fairness import CategoryFairness, MemberContribution, MemberLoad, TaskCompletion
from src.services.fairness_scorer import gini_coefficient, gini_to_score


logger = logging.getLogger(__name__)


def _category_entry(
    category: str,
    tasks: list[TaskCompletion],
    member_loads: Sequence[MemberLoad],
    thresholds: FairnessThresholds,
) -> CategoryFairness:
    counts = {load.user_id: 0 for load in member_loads}
    total_weight = 0.0
    for task in tasks:
        counts[task.user_id] += 1
        total_weight += task.weight

    total_tasks = len(tasks)
    contributions = [
        MemberContribution(
            user_id=load.user_id,
            user_name=load.user_name,
            task_count=counts[load.user_id],
            percentage=counts[load.user_id] / total_tasks * 100,
        )
        for load in member_loads
    ]
    contributions.sort(key=lambda contribution: contribution.percentage, reverse=True)

    active_ids = [load.user_id for load in member_loads if load.is_active]
    fairness_score = 100
    dominant_member = None
    if len(active_ids) > 1:
        fairness_score = gini_to_score(gini_coefficient([float(counts[user_id]) for user_id in active_ids]))
        top = next(contribution for contribution in contributions if contribution.user_id in active_ids)
        if top.percentage > thresholds.critical:
            dominant_member = top.user_name

    return CategoryFairness(
        category=category,
        fairness_score=fairness_score,
        total_tasks=total_tasks,
        total_weight=total_weight,
        member_contributions=contributions,
        dominant_member=dominant_member,
    )


def analyze_category_fairness(
    tasks: Iterable[TaskCompletion],
    member_loads: Sequence[MemberLoad],
    *,
    thresholds: FairnessThresholds | None = None,
) -> list[CategoryFairness]:
    """Score each category present in ``tasks``.

    Args:
        tasks: Completed tasks within the period
        member_loads: Output of compute_member_loads for the same period
        thresholds: Thresholds used to flag a dominant member (defaults from settings)

    Returns:
        One CategoryFairness per category with at least one task, sorted by
        task count (descending) then category name
    """
    thresholds = thresholds or settings.fairness_thresholds()

    with span("category_fairness.analyze_category_fairness"):
        known = {load.user_id for load in member_loads}
        by_category: dict[str, list[TaskCompletion]] = {}
        for task in tasks:
            if task.user_id in known:
                by_category.setdefault(task.category, []).append(task)

        results = [
            _category_entry(category, category_tasks, member_loads, thresholds)
            for category, category_tasks in by_category.items()
        ]
        results.sort(key=lambda entry: (-entry.total_tasks, entry.category))

        logger.debug("Analyzed %d categories", len(results))
        return results
