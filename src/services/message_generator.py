"""Natural-language observations derived from scores, trends and member loads.

All functions are pure: the same input always yields the same messages in the
same order. Wording lives in src.core.message_templates.
"""

from collections.abc import Sequence

from src.core import message_templates
from src.core.config import Constants, FairnessThresholds, settings
from src.domain.fairness import (
    AlertLevel,
    CategoryFairness,
    FairnessScore,
    FairnessStatus,
    FairnessTrend,
    MemberLoad,
    TrendDirection,
)


def _ranked(member_loads: Sequence[MemberLoad]) -> list[MemberLoad]:
    return sorted(member_loads, key=lambda load: load.adjusted_percentage, reverse=True)


def score_messages(score: FairnessScore, trend: FairnessTrend) -> list[str]:
    """Household-level messages: score-based first, then trend-based.

    Returns an empty list when nothing is noteworthy.
    """
    messages = []

    if score.alert_level == AlertLevel.CRITICAL:
        messages.append(message_templates.household_conversation())
    elif score.alert_level == AlertLevel.WARNING:
        top = _ranked([load for load in score.member_loads if load.is_active])[0]
        messages.append(message_templates.load_tilting(user_name=top.user_name, share=top.adjusted_percentage))
    elif score.status in (FairnessStatus.POOR, FairnessStatus.CRITICAL):
        messages.append(message_templates.uneven_distribution(score=score.overall_score))
    elif score.status == FairnessStatus.EXCELLENT and any(load.tasks_completed for load in score.member_loads):
        messages.append(message_templates.well_balanced())

    if trend.trend == TrendDirection.IMPROVING:
        messages.append(message_templates.trend_improving())
    elif trend.trend == TrendDirection.WORSENING:
        messages.append(message_templates.trend_worsening())

    return messages


def member_messages(
    member_loads: Sequence[MemberLoad],
    *,
    thresholds: FairnessThresholds | None = None,
) -> list[str]:
    """Per-member messages ordered by descending adjusted share.

    Only active members are compared with each other; a member away for the
    whole period still gets an availability note.
    """
    thresholds = thresholds or settings.fairness_thresholds()
    ranked = _ranked(member_loads)
    active = [load for load in ranked if load.is_active]
    compare = len(active) >= 2  # noqa: PLR2004
    messages = []

    for load in ranked:
        if compare and load is active[0] and load.tasks_completed > 0:
            if load.adjusted_percentage > active[1].adjusted_percentage * Constants.MOST_ACTIVE_RATIO:
                messages.append(message_templates.most_active(user_name=load.user_name))
        if compare and load.is_active and load.adjusted_percentage > thresholds.critical:
            messages.append(
                message_templates.support_member(user_name=load.user_name, share=load.adjusted_percentage)
            )
        if load.exclusion_days > 0:
            messages.append(message_templates.member_away(user_name=load.user_name, days=load.exclusion_days))

    return messages


def weekly_highlights(score: FairnessScore, trend: FairnessTrend) -> list[str]:
    """Positive points of the week, at most four."""
    highlights = []

    if score.status == FairnessStatus.EXCELLENT and any(load.tasks_completed for load in score.member_loads):
        highlights.append(message_templates.exceptional_week())

    if trend.trend == TrendDirection.IMPROVING:
        highlights.append(message_templates.trend_highlight())

    active = [load for load in score.member_loads if load.is_active]
    if len(active) >= 2 and all(load.tasks_completed > 0 for load in active):  # noqa: PLR2004
        highlights.append(message_templates.everyone_participated())

    if score.member_loads:
        top = max(score.member_loads, key=lambda load: load.tasks_completed)
        if top.tasks_completed >= Constants.TOP_CONTRIBUTOR_MIN_TASKS:
            highlights.append(message_templates.top_contributor(user_name=top.user_name, tasks=top.tasks_completed))

    return highlights[: Constants.WEEKLY_HIGHLIGHT_LIMIT]


def weekly_suggestions(score: FairnessScore, categories: Sequence[CategoryFairness]) -> list[str]:
    """Improvement suggestions for the week, at most three."""
    suggestions = []

    if score.imbalance.gap > Constants.LARGE_GAP_POINTS:
        suggestions.append(message_templates.large_gap())

    weak = next((entry for entry in categories if entry.fairness_score < Constants.WEAK_CATEGORY_SCORE), None)
    if weak is not None:
        suggestions.append(message_templates.spread_category(category=weak.category))

    active = [load for load in score.member_loads if load.is_active]
    if len(active) >= 2:  # noqa: PLR2004
        overloaded = next(
            (load for load in _ranked(active) if load.adjusted_percentage > Constants.OVERLOADED_SHARE), None
        )
        if overloaded is not None:
            suggestions.append(message_templates.help_member(user_name=overloaded.user_name))

    return suggestions[: Constants.WEEKLY_SUGGESTION_LIMIT]


def push_notification(score: FairnessScore) -> tuple[str, str]:
    """Push notification (title, body) for a weekly score."""
    return message_templates.push_notification(status=str(score.status), score=score.overall_score)


def email_subject(score: FairnessScore, *, household_name: str, week_number: int) -> str:
    """Email subject line for a weekly report."""
    return message_templates.email_subject(
        household_name=household_name, week_number=week_number, status=str(score.status)
    )


def monthly_achievements(
    *,
    average_score: float,
    trend: TrendDirection,
    weekly_scores: Sequence[int],
    member_shares: Sequence[float],
) -> list[str]:
    """Positive points of the month, at most four."""
    achievements = []

    if average_score >= Constants.MONTHLY_EXCELLENT_AVERAGE:
        achievements.append(message_templates.excellent_month())

    if trend == TrendDirection.IMPROVING:
        achievements.append(message_templates.improving_month())

    if len(member_shares) >= 2:  # noqa: PLR2004
        even_share = 100 / len(member_shares)
        if all(abs(share - even_share) <= Constants.BALANCED_SHARE_TOLERANCE for share in member_shares):
            achievements.append(message_templates.balanced_month())

    if weekly_scores and all(score >= Constants.MONTHLY_LOW_AVERAGE for score in weekly_scores):
        achievements.append(message_templates.all_weeks_above(score=Constants.MONTHLY_LOW_AVERAGE))

    return achievements[: Constants.MONTHLY_ACHIEVEMENT_LIMIT]


def monthly_improvements(
    *,
    average_score: float,
    worsening_categories: Sequence[str],
    member_shares: dict[str, float],
) -> list[str]:
    """Areas for improvement of the month, at most three."""
    improvements = []

    if average_score < Constants.MONTHLY_LOW_AVERAGE:
        improvements.append(message_templates.low_average(score=Constants.MONTHLY_LOW_AVERAGE))

    if worsening_categories:
        improvements.append(message_templates.worsening_categories(categories=list(worsening_categories)))

    if len(member_shares) >= 2:  # noqa: PLR2004
        heavy = [name for name, share in member_shares.items() if share > Constants.MONTHLY_OVERLOADED_SHARE]
        if heavy:
            improvements.append(message_templates.heavy_load_members(user_names=heavy))

    return improvements[: Constants.MONTHLY_IMPROVEMENT_LIMIT]


def contribution_label(share: float) -> str:
    """Describe a member's average share of the load."""
    return message_templates.contribution_label(
        share=share,
        major=Constants.CONTRIBUTION_MAJOR,
        balanced=Constants.CONTRIBUTION_BALANCED,
        moderate=Constants.CONTRIBUTION_MODERATE,
    )
