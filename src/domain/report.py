"""Report domain models consumed by email, push and PDF formatters."""

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from src.domain.fairness import (
    AlertLevel,
    CategoryFairness,
    FairnessScore,
    FairnessStatus,
    FairnessTrend,
    MemberLoad,
    TrendDirection,
)


class ReportType(StrEnum):
    """Kind of report."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"


class ReportNotification(BaseModel):
    """Short texts announcing a report."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    email_subject: str


class WeeklyReport(BaseModel):
    """Weekly fairness report for one household."""

    model_config = ConfigDict(frozen=True)

    id: str
    household_id: str
    household_name: str
    report_type: ReportType = ReportType.WEEKLY
    period_start: date
    period_end: date
    week_number: int
    year: int
    fairness: FairnessScore
    trend: FairnessTrend
    categories: list[CategoryFairness] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list, description="Score and trend observations")
    member_messages: list[str] = Field(default_factory=list)
    highlights: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    notification: ReportNotification
    trend_error: str | None = None
    categories_error: str | None = None
    messages_error: str | None = None


class WeeklyScoreData(BaseModel):
    """Already computed weekly bundle used as monthly report input."""

    model_config = ConfigDict(frozen=True)

    week_number: int = Field(..., ge=1, le=53)
    period_start: date
    period_end: date
    score: int = Field(..., ge=0, le=100)
    gini: float = Field(default=0.0, ge=0, le=1)
    alert_level: AlertLevel = AlertLevel.NONE
    status: FairnessStatus = FairnessStatus.EXCELLENT
    member_loads: list[MemberLoad] = Field(default_factory=list)
    category_fairness: list[CategoryFairness] = Field(default_factory=list)

    @classmethod
    def from_fairness_score(
        cls,
        score: FairnessScore,
        category_fairness: list[CategoryFairness] | None = None,
    ) -> "WeeklyScoreData":
        """Condense a FairnessScore into a monthly input row."""
        return cls(
            week_number=score.period_start.isocalendar().week,
            period_start=score.period_start,
            period_end=score.period_end,
            score=score.overall_score,
            gini=score.gini_coefficient,
            alert_level=score.alert_level,
            status=score.status,
            member_loads=score.member_loads,
            category_fairness=category_fairness or [],
        )

    @classmethod
    def from_weekly_report(cls, report: WeeklyReport) -> "WeeklyScoreData":
        """Condense a WeeklyReport into a monthly input row."""
        return cls.from_fairness_score(report.fairness, report.categories).model_copy(
            update={"week_number": report.week_number}
        )


class WeeklyBreakdownRow(BaseModel):
    """One line of the monthly week-by-week table."""

    model_config = ConfigDict(frozen=True)

    week_number: int
    period_start: date
    period_end: date
    score: int
    alert_level: AlertLevel
    tasks_completed: int
    total_weight: float


class MemberSummary(BaseModel):
    """Per-member roll-up across the weeks of a month."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    user_name: str
    total_tasks: int
    total_weight: float
    average_percentage: float
    contribution: str


class CategoryTrend(BaseModel):
    """Average category fairness across a month."""

    model_config = ConfigDict(frozen=True)

    category: str
    average_fairness: int
    trend: TrendDirection


class MonthlyReport(BaseModel):
    """Monthly fairness report aggregated from weekly bundles."""

    model_config = ConfigDict(frozen=True)

    id: str
    household_id: str
    household_name: str
    report_type: ReportType = ReportType.MONTHLY
    month: int = Field(..., ge=1, le=12)
    year: int
    period_start: date
    period_end: date
    weekly_breakdown: list[WeeklyBreakdownRow]
    total_tasks: int
    total_weight: float
    average_score: float
    best_week: int
    worst_week: int
    trend: TrendDirection
    member_summaries: list[MemberSummary] = Field(default_factory=list)
    category_trends: list[CategoryTrend] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    areas_for_improvement: list[str] = Field(default_factory=list)
