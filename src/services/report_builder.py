"""Weekly and monthly fairness report assembly.

Weekly reports are computed from raw completions. The household score is the
core of the report and errors computing it propagate; the trend, category and
message sections are BEST EFFORT: a failure is logged and recorded in the
matching ``*_error`` field so the caller still receives a well-formed report.

Monthly reports only aggregate already computed weekly bundles.
"""

import calendar
import logging
from collections.abc import Iterable, Sequence
from datetime import date

from src.core.config import FairnessThresholds, settings
from src.core.errors import ReportValidationError
from src.core.logging import log_with_household_context, span
from src.domain.fairness import (
    CategoryFairness,
    FairnessTrend,
    HistoricalScore,
    Member,
    MemberExclusion,
    TaskCompletion,
    TrendDirection,
)
from src.domain.report import (
    CategoryTrend,
    MemberSummary,
    MonthlyReport,
    ReportNotification,
    WeeklyBreakdownRow,
    WeeklyReport,
    WeeklyScoreData,
)
from src.services import message_generator
from src.services.category_fairness import analyze_category_fairness
from src.services.fairness_scorer import calculate_fairness_score
from src.services.trend_analyzer import analyze_trend, classify_trend


logger = logging.getLogger(__name__)


def report_id(household_id: str, period_type: str, year: int, period_value: int) -> str:
    """Stable identifier of a report."""
    return f"report-{household_id}-{period_type}-{year}-{period_value}"


def build_weekly_report(  # noqa: PLR0913
    household_id: str,
    household_name: str,
    tasks: Iterable[TaskCompletion],
    members: Sequence[Member],
    exclusions: Iterable[MemberExclusion],
    period_start: date,
    period_end: date,
    *,
    historical: Iterable[HistoricalScore] = (),
    thresholds: FairnessThresholds | None = None,
) -> WeeklyReport:
    """Build the weekly report for a household.

    The current period is appended to ``historical`` for the trend unless an
    entry with the same range is already present.

    Args:
        household_id: Household ID
        household_name: Display name used in notifications
        tasks: Completions within the period
        members: Household roster
        exclusions: Availability exclusions
        period_start: First day of the week
        period_end: Last day of the week
        historical: Previous period scores
        thresholds: Engine thresholds (defaults from settings)

    Returns:
        WeeklyReport; sections that failed carry an error message instead of data
    """
    thresholds = thresholds or settings.fairness_thresholds()
    tasks = list(tasks)
    exclusions = list(exclusions)

    with span("report_builder.build_weekly_report"):
        score = calculate_fairness_score(
            household_id, tasks, members, exclusions, period_start, period_end, thresholds=thresholds
        )
        iso = period_start.isocalendar()

        # Category breakdown - BEST EFFORT
        categories: list[CategoryFairness] = []
        categories_error = None
        try:
            categories = analyze_category_fairness(tasks, score.member_loads, thresholds=thresholds)
        except Exception as e:
            categories_error = f"Category analysis failed: {e}"
            logger.error("%s (household %s)", categories_error, household_id)

        # Trend - BEST EFFORT
        trend = FairnessTrend(household_id=household_id, average_score=score.overall_score)
        trend_error = None
        try:
            history = list(historical)
            if not any(h.period_start == period_start and h.period_end == period_end for h in history):
                history.append(
                    HistoricalScore(
                        period_start=period_start,
                        period_end=period_end,
                        score=score.overall_score,
                        gini=score.gini_coefficient,
                    )
                )
            trend = analyze_trend(
                household_id, history, current_score=score.overall_score, thresholds=thresholds
            )
        except Exception as e:
            trend_error = f"Trend analysis failed: {e}"
            logger.error("%s (household %s)", trend_error, household_id)

        # Messages - BEST EFFORT
        messages: list[str] = []
        member_messages: list[str] = []
        highlights: list[str] = []
        suggestions: list[str] = []
        messages_error = None
        try:
            messages = message_generator.score_messages(score, trend)
            member_messages = message_generator.member_messages(score.member_loads, thresholds=thresholds)
            highlights = message_generator.weekly_highlights(score, trend)
            suggestions = message_generator.weekly_suggestions(score, categories)
        except Exception as e:
            messages_error = f"Message generation failed: {e}"
            logger.error("%s (household %s)", messages_error, household_id)

        title, body = message_generator.push_notification(score)
        report = WeeklyReport(
            id=report_id(household_id, "week", iso.year, iso.week),
            household_id=household_id,
            household_name=household_name,
            period_start=period_start,
            period_end=period_end,
            week_number=iso.week,
            year=iso.year,
            fairness=score,
            trend=trend,
            categories=categories,
            messages=messages,
            member_messages=member_messages,
            highlights=highlights,
            suggestions=suggestions,
            notification=ReportNotification(
                title=title,
                body=body,
                email_subject=message_generator.email_subject(
                    score, household_name=household_name, week_number=iso.week
                ),
            ),
            trend_error=trend_error,
            categories_error=categories_error,
            messages_error=messages_error,
        )

        log_with_household_context(
            logger,
            "info",
            "Weekly report built",
            household_id=household_id,
            week_number=iso.week,
            overall_score=score.overall_score,
        )
        return report


def _member_summaries(weeks: Sequence[WeeklyScoreData]) -> list[MemberSummary]:
    totals: dict[str, dict] = {}
    for week in weeks:
        for load in week.member_loads:
            entry = totals.setdefault(
                load.user_id,
                {"user_name": load.user_name, "tasks": 0, "weight": 0.0, "shares": []},
            )
            entry["tasks"] += load.tasks_completed
            entry["weight"] += load.total_weight
            entry["shares"].append(load.adjusted_percentage)

    summaries = []
    for user_id, entry in totals.items():
        average = sum(entry["shares"]) / len(entry["shares"])
        summaries.append(
            MemberSummary(
                user_id=user_id,
                user_name=entry["user_name"],
                total_tasks=entry["tasks"],
                total_weight=entry["weight"],
                average_percentage=round(average, 1),
                contribution=message_generator.contribution_label(average),
            )
        )
    return summaries


def _category_trends(weeks: Sequence[WeeklyScoreData], threshold: float) -> list[CategoryTrend]:
    scores: dict[str, list[int]] = {}
    for week in weeks:
        for entry in week.category_fairness:
            scores.setdefault(entry.category, []).append(entry.fairness_score)

    return [
        CategoryTrend(
            category=category,
            average_fairness=round(sum(values) / len(values)),
            trend=classify_trend(values, threshold),
        )
        for category, values in scores.items()
    ]


def build_monthly_report(
    household_id: str,
    household_name: str,
    weekly_scores: Sequence[WeeklyScoreData],
    *,
    month: int | None = None,
    year: int | None = None,
    thresholds: FairnessThresholds | None = None,
) -> MonthlyReport:
    """Aggregate weekly bundles into a monthly report.

    Args:
        household_id: Household ID
        household_name: Display name
        weekly_scores: Weekly bundles of the month (any order)
        month: Report month (defaults to the month of the middle week)
        year: Report year (defaults to the year of the middle week)
        thresholds: Engine thresholds (defaults from settings)

    Returns:
        MonthlyReport

    Raises:
        ReportValidationError: If weekly_scores is empty
    """
    if not weekly_scores:
        raise ReportValidationError("weekly_scores required for monthly report")

    thresholds = thresholds or settings.fairness_thresholds()

    with span("report_builder.build_monthly_report"):
        weeks = sorted(weekly_scores, key=lambda week: (week.period_start, week.period_end))
        anchor = weeks[len(weeks) // 2].period_start
        report_month = month or anchor.month
        report_year = year or anchor.year
        last_day = calendar.monthrange(report_year, report_month)[1]

        trend = analyze_trend(
            household_id,
            [
                HistoricalScore(
                    period_start=week.period_start,
                    period_end=week.period_end,
                    score=week.score,
                    gini=week.gini,
                )
                for week in weeks
            ],
            thresholds=thresholds,
        )
        week_numbers = {(week.period_start, week.period_end): week.week_number for week in weeks}
        best_week = week_numbers[(trend.best_period.period_start, trend.best_period.period_end)]
        worst_week = week_numbers[(trend.worst_period.period_start, trend.worst_period.period_end)]

        breakdown = [
            WeeklyBreakdownRow(
                week_number=week.week_number,
                period_start=week.period_start,
                period_end=week.period_end,
                score=week.score,
                alert_level=week.alert_level,
                tasks_completed=sum(load.tasks_completed for load in week.member_loads),
                total_weight=sum(load.total_weight for load in week.member_loads),
            )
            for week in weeks
        ]

        member_summaries = _member_summaries(weeks)
        category_trends = _category_trends(weeks, thresholds.trend)

        report = MonthlyReport(
            id=report_id(household_id, "month", report_year, report_month),
            household_id=household_id,
            household_name=household_name,
            month=report_month,
            year=report_year,
            period_start=date(report_year, report_month, 1),
            period_end=date(report_year, report_month, last_day),
            weekly_breakdown=breakdown,
            total_tasks=sum(row.tasks_completed for row in breakdown),
            total_weight=sum(row.total_weight for row in breakdown),
            average_score=trend.average_score,
            best_week=best_week,
            worst_week=worst_week,
            trend=trend.trend,
            member_summaries=member_summaries,
            category_trends=category_trends,
            achievements=message_generator.monthly_achievements(
                average_score=trend.average_score,
                trend=trend.trend,
                weekly_scores=[week.score for week in weeks],
                member_shares=[summary.average_percentage for summary in member_summaries],
            ),
            areas_for_improvement=message_generator.monthly_improvements(
                average_score=trend.average_score,
                worsening_categories=[
                    entry.category for entry in category_trends if entry.trend == TrendDirection.WORSENING
                ],
                member_shares={summary.user_name: summary.average_percentage for summary in member_summaries},
            ),
        )

        log_with_household_context(
            logger,
            "info",
            "Monthly report built",
            household_id=household_id,
            month=report_month,
            year=report_year,
            week_count=len(weeks),
        )
        return report
