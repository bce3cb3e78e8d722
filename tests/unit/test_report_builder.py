"""Unit tests for report_builder module."""

from datetime import date
from unittest.mock import patch

import pytest

from src.core import message_templates
from src.core.errors import ErrorCode, ReportValidationError
from src.domain.fairness import AlertLevel, CategoryFairness, HistoricalScore, MemberLoad, TrendDirection
from src.domain.report import ReportType, WeeklyScoreData
from src.services.report_builder import build_monthly_report, build_weekly_report, report_id


def _week(week_number: int, start: date, score: int, loads=(), categories=()) -> WeeklyScoreData:
    return WeeklyScoreData(
        week_number=week_number,
        period_start=start,
        period_end=date.fromordinal(start.toordinal() + 6),
        score=score,
        gini=round(1 - score / 100, 2),
        member_loads=list(loads),
        category_fairness=list(categories),
    )


def _contains(messages: list[str], text: str) -> bool:
    return any(text in message for message in messages)


def _load(user_id: str, tasks: int, weight: float, share: float) -> MemberLoad:
    return MemberLoad(
        user_id=user_id,
        user_name=user_id.title(),
        tasks_completed=tasks,
        total_weight=weight,
        percentage=share,
        adjusted_percentage=share,
        active_days=7,
    )


@pytest.mark.unit
class TestReportId:
    """Tests for report_id function."""

    def test_format(self):
        """Identifier combines household, period type, year and number."""
        assert report_id("house_1", "week", 2026, 2) == "report-house_1-week-2026-2"


@pytest.mark.unit
class TestBuildWeeklyReport:
    """Tests for build_weekly_report function."""

    def test_empty_week_is_well_formed(self, members, week, thresholds):
        """No completions still yields a complete report."""
        report = build_weekly_report("house_1", "Maison", [], members, [], *week, thresholds=thresholds)

        assert report.report_type == ReportType.WEEKLY
        assert report.id == "report-house_1-week-2026-2"
        assert report.week_number == 2
        assert report.year == 2026
        assert report.fairness.overall_score == 100
        assert len(report.fairness.member_loads) == 2
        assert report.categories == []
        assert report.notification.body.startswith("Fairness score: 100/100.")
        assert "Maison" in report.notification.email_subject
        assert report.trend_error is None
        assert report.categories_error is None
        assert report.messages_error is None

    def test_skewed_week(self, members, week, make_weighted_tasks, thresholds):
        """Score, categories and messages are all populated."""
        tasks = make_weighted_tasks("alice", 70, category="laundry") + make_weighted_tasks("bob", 30, "cooking")

        report = build_weekly_report("house_1", "Maison", tasks, members, [], *week, thresholds=thresholds)

        assert report.fairness.overall_score == 60
        assert report.fairness.alert_level == AlertLevel.CRITICAL
        assert [entry.category for entry in report.categories] == ["laundry", "cooking"]
        assert report.messages
        assert report.member_messages

    def test_member_away_all_week_is_consistent(self, members, week, make_task, exclusion, thresholds):
        """Household score, categories, suggestions and member notes agree when Bob is away all week."""
        tasks = [make_task("alice", 2, category="laundry") for _ in range(3)]
        away = [exclusion("bob", date(2026, 1, 1), date(2026, 1, 31))]

        report = build_weekly_report("house_1", "Maison", tasks, members, away, *week, thresholds=thresholds)

        assert report.fairness.overall_score == 100
        assert report.fairness.alert_level == AlertLevel.NONE
        assert [(c.category, c.fairness_score, c.dominant_member) for c in report.categories] == [
            ("laundry", 100, None)
        ]
        assert report.suggestions == []
        assert report.member_messages == [message_templates.member_away(user_name="Bob", days=7)]

    def test_current_period_appended_to_history(self, members, week, make_weighted_tasks, thresholds):
        """History plus the current week forms the trend."""
        tasks = make_weighted_tasks("alice", 20) + make_weighted_tasks("bob", 20)
        history = [
            HistoricalScore(period_start=date(2025, 12, 22), period_end=date(2025, 12, 28), score=40),
            HistoricalScore(period_start=date(2025, 12, 29), period_end=date(2026, 1, 4), score=45),
        ]

        report = build_weekly_report(
            "house_1", "Maison", tasks, members, [], *week, historical=history, thresholds=thresholds
        )

        assert len(report.trend.periods) == 3
        assert report.trend.trend == TrendDirection.IMPROVING
        assert report.trend.best_period.period_start == week[0]

    def test_current_period_not_duplicated(self, members, week, thresholds):
        """A history entry with the current range is not added twice."""
        history = [HistoricalScore(period_start=week[0], period_end=week[1], score=100)]

        report = build_weekly_report(
            "house_1", "Maison", [], members, [], *week, historical=history, thresholds=thresholds
        )

        assert len(report.trend.periods) == 1

    def test_failed_section_is_recorded(self, members, week, thresholds):
        """A failing best-effort section is reported instead of aborting the report."""
        with patch(
            "src.services.report_builder.analyze_category_fairness",
            side_effect=RuntimeError("boom"),
        ):
            report = build_weekly_report("house_1", "Maison", [], members, [], *week, thresholds=thresholds)

        assert report.categories == []
        assert report.categories_error == "Category analysis failed: boom"
        assert report.fairness.overall_score == 100

    def test_score_failure_propagates(self, members, week, thresholds):
        """The household score is not best effort."""
        with (
            patch(
                "src.services.report_builder.calculate_fairness_score",
                side_effect=RuntimeError("scoring down"),
            ),
            pytest.raises(RuntimeError, match="scoring down"),
        ):
            build_weekly_report("house_1", "Maison", [], members, [], *week, thresholds=thresholds)

    def test_weekly_report_feeds_monthly(self, members, week, make_weighted_tasks, thresholds):
        """A weekly report condenses into monthly input."""
        tasks = make_weighted_tasks("alice", 70) + make_weighted_tasks("bob", 30)
        report = build_weekly_report("house_1", "Maison", tasks, members, [], *week, thresholds=thresholds)

        weekly = WeeklyScoreData.from_weekly_report(report)

        assert weekly.week_number == 2
        assert weekly.score == 60
        assert weekly.alert_level == AlertLevel.CRITICAL
        assert weekly.category_fairness == report.categories


@pytest.mark.unit
class TestBuildMonthlyReport:
    """Tests for build_monthly_report function."""

    def test_empty_weekly_scores_rejected(self, thresholds):
        """No weekly data is a validation error, never a partial report."""
        with pytest.raises(ReportValidationError, match="weekly_scores required") as exc_info:
            build_monthly_report("house_1", "Maison", [], thresholds=thresholds)

        assert exc_info.value.code == ErrorCode.ERR_WEEKLY_SCORES_REQUIRED

    def test_aggregates_weeks(self, thresholds):
        """Totals, average, best and worst weeks over the month."""
        weeks = [
            _week(2, date(2026, 1, 5), 50, [_load("alice", 6, 30, 60.0), _load("bob", 4, 20, 40.0)]),
            _week(3, date(2026, 1, 12), 60, [_load("alice", 5, 25, 55.0), _load("bob", 4, 20, 45.0)]),
            _week(4, date(2026, 1, 19), 90, [_load("alice", 3, 15, 50.0), _load("bob", 3, 15, 50.0)]),
            _week(5, date(2026, 1, 26), 80, [_load("alice", 4, 20, 45.0), _load("bob", 5, 25, 55.0)]),
        ]

        report = build_monthly_report("house_1", "Maison", list(reversed(weeks)), thresholds=thresholds)

        assert report.report_type == ReportType.MONTHLY
        assert report.id == "report-house_1-month-2026-1"
        assert (report.month, report.year) == (1, 2026)
        assert report.period_start == date(2026, 1, 1)
        assert report.period_end == date(2026, 1, 31)
        assert [row.week_number for row in report.weekly_breakdown] == [2, 3, 4, 5]
        assert report.total_tasks == 34
        assert report.total_weight == 170.0
        assert report.average_score == 70.0
        assert report.best_week == 4
        assert report.worst_week == 2
        assert report.trend == TrendDirection.IMPROVING

    def test_member_summaries(self, thresholds):
        """Per-member totals and average share across weeks."""
        weeks = [
            _week(2, date(2026, 1, 5), 60, [_load("alice", 6, 30, 70.0), _load("bob", 2, 10, 30.0)]),
            _week(3, date(2026, 1, 12), 70, [_load("alice", 4, 20, 60.0), _load("bob", 3, 15, 40.0)]),
        ]

        report = build_monthly_report("house_1", "Maison", weeks, thresholds=thresholds)

        alice, bob = report.member_summaries
        assert (alice.user_id, alice.total_tasks, alice.total_weight) == ("alice", 10, 50.0)
        assert alice.average_percentage == 65.0
        assert alice.contribution == "Major contributor"
        assert bob.average_percentage == 35.0
        assert _contains(report.areas_for_improvement, "Alice")

    def test_category_trends(self, thresholds):
        """Category fairness is averaged and classified across weeks."""
        laundry = [
            CategoryFairness(category="laundry", fairness_score=score, total_tasks=3) for score in (90, 60)
        ]
        weeks = [
            _week(2, date(2026, 1, 5), 70, categories=[laundry[0]]),
            _week(3, date(2026, 1, 12), 70, categories=[laundry[1]]),
        ]

        report = build_monthly_report("house_1", "Maison", weeks, thresholds=thresholds)

        (trend,) = report.category_trends
        assert trend.category == "laundry"
        assert trend.average_fairness == 75
        assert trend.trend == TrendDirection.WORSENING
        assert _contains(report.areas_for_improvement, "laundry")

    def test_explicit_month_and_year(self, thresholds):
        """Month and year override the ones derived from the weeks."""
        weeks = [_week(5, date(2026, 1, 26), 80)]

        report = build_monthly_report("house_1", "Maison", weeks, month=2, year=2026, thresholds=thresholds)

        assert report.id == "report-house_1-month-2026-2"
        assert report.period_end == date(2026, 2, 28)

    def test_single_week(self, thresholds):
        """One week is its own best and worst week."""
        report = build_monthly_report("house_1", "Maison", [_week(2, date(2026, 1, 5), 75)], thresholds=thresholds)

        assert report.best_week == report.worst_week == 2
        assert report.trend == TrendDirection.STABLE
        assert report.average_score == 75
