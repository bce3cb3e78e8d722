"""Fairness scoring for a household period.

Key Concepts:
- Gini coefficient: mean absolute pairwise difference of the members' adjusted
  shares, normalized so that the whole load on one member gives 1 and an even
  split gives 0.
- Overall score: ``round(100 * (1 - gini))``; 100 is a perfectly even split.
- Alert level: driven by the single most loaded member's adjusted share, not by
  the score, so it answers "is one person overloaded".
- Active member: a member who was available for at least one day of the
  period. Members excluded for the whole period do not take part in the
  distribution.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import date

from src.core.config import FairnessThresholds, settings
from src.core.logging import log_with_household_context, span
from src.domain.fairness import (
    AlertLevel,
    FairnessScore,
    FairnessStatus,
    ImbalanceDetails,
    Member,
    MemberExclusion,
    MemberLoad,
    TaskCompletion,
)
from src.services.load_aggregator import compute_member_loads


logger = logging.getLogger(__name__)


def gini_coefficient(values: Sequence[float]) -> float:
    """Normalized mean absolute pairwise difference of ``values`` in [0, 1].

    Returns 0 for fewer than two values, an all-zero total, or equal values.
    """
    n = len(values)
    total = sum(values)
    if n < 2 or total <= 0:  # noqa: PLR2004
        return 0.0

    pairwise = sum(abs(a - b) for a in values for b in values)
    gini = pairwise / (2 * (n - 1) * total)
    return min(1.0, max(0.0, gini))


def gini_to_score(gini: float) -> int:
    """Convert a Gini coefficient to a 0-100 fairness score."""
    return round(100 * (1 - gini))


def alert_level_for(max_share: float, thresholds: FairnessThresholds) -> AlertLevel:
    """Alert level for the highest member share (percent)."""
    if max_share > thresholds.critical:
        return AlertLevel.CRITICAL
    if max_share >= thresholds.warning:
        return AlertLevel.WARNING
    return AlertLevel.NONE


def fairness_status_for(score: float, thresholds: FairnessThresholds) -> FairnessStatus:
    """Status band for a fairness score."""
    if score >= thresholds.excellent:
        return FairnessStatus.EXCELLENT
    if score >= thresholds.good:
        return FairnessStatus.GOOD
    if score >= thresholds.fair:
        return FairnessStatus.FAIR
    if score >= thresholds.poor:
        return FairnessStatus.POOR
    return FairnessStatus.CRITICAL


def _imbalance(active_loads: list[MemberLoad]) -> ImbalanceDetails:
    if not active_loads:
        return ImbalanceDetails()

    ranked = sorted(active_loads, key=lambda load: load.adjusted_percentage, reverse=True)
    highest = ranked[0].adjusted_percentage
    lowest = ranked[-1].adjusted_percentage if len(ranked) > 1 else 0.0
    gap = highest - lowest if len(ranked) > 1 else 0.0

    return ImbalanceDetails(
        most_loaded=ranked[0].user_name,
        least_loaded=ranked[-1].user_name if len(ranked) > 1 else None,
        gap=round(gap, 1),
        gap_percentage=round(gap / highest * 100) if highest > 0 else 0,
    )


def score_member_loads(
    member_loads: Sequence[MemberLoad],
    *,
    household_id: str,
    period_start: date,
    period_end: date,
    thresholds: FairnessThresholds | None = None,
) -> FairnessScore:
    """Score the distribution of adjusted member shares.

    Args:
        member_loads: Output of compute_member_loads
        household_id: Household the loads belong to
        period_start: First day of the period
        period_end: Last day of the period
        thresholds: Alert and status thresholds (defaults from settings)

    Returns:
        FairnessScore for the period
    """
    thresholds = thresholds or settings.fairness_thresholds()

    with span("fairness_scorer.score_member_loads"):
        active = [load for load in member_loads if load.is_active]

        if len(active) <= 1:
            gini = 0.0
            alert_level = AlertLevel.NONE
        else:
            gini = gini_coefficient([load.adjusted_percentage for load in active])
            alert_level = alert_level_for(max(load.adjusted_percentage for load in active), thresholds)

        overall_score = gini_to_score(gini)
        result = FairnessScore(
            household_id=household_id,
            period_start=period_start,
            period_end=period_end,
            overall_score=overall_score,
            gini_coefficient=gini,
            member_loads=list(member_loads),
            alert_level=alert_level,
            status=fairness_status_for(overall_score, thresholds),
            imbalance=_imbalance(active),
        )

        log_with_household_context(
            logger,
            "info",
            "Fairness score computed",
            household_id=household_id,
            overall_score=overall_score,
            alert_level=str(alert_level),
            active_members=len(active),
        )
        return result


def calculate_fairness_score(
    household_id: str,
    tasks: Iterable[TaskCompletion],
    members: Sequence[Member],
    exclusions: Iterable[MemberExclusion],
    period_start: date,
    period_end: date,
    *,
    thresholds: FairnessThresholds | None = None,
) -> FairnessScore:
    """Aggregate loads and score them in one call."""
    member_loads = compute_member_loads(tasks, members, exclusions, period_start, period_end)
    return score_member_loads(
        member_loads,
        household_id=household_id,
        period_start=period_start,
        period_end=period_end,
        thresholds=thresholds,
    )
