"""Domain models and DTOs."""

from src.domain.fairness import (
    AlertLevel,
    CategoryFairness,
    FairnessScore,
    FairnessStatus,
    FairnessTrend,
    HistoricalScore,
    ImbalanceDetails,
    Member,
    MemberContribution,
    MemberExclusion,
    MemberLoad,
    TaskCompletion,
    TrendDirection,
    TrendPeriod,
)
from src.domain.report import (
    CategoryTrend,
    MemberSummary,
    MonthlyReport,
    ReportNotification,
    ReportType,
    WeeklyBreakdownRow,
    WeeklyReport,
    WeeklyScoreData,
)


__all__ = [
    "AlertLevel",
    "CategoryFairness",
    "CategoryTrend",
    "FairnessScore",
    "FairnessStatus",
    "FairnessTrend",
    "HistoricalScore",
    "ImbalanceDetails",
    "Member",
    "MemberContribution",
    "MemberExclusion",
    "MemberLoad",
    "MemberSummary",
    "MonthlyReport",
    "ReportNotification",
    "ReportType",
    "TaskCompletion",
    "TrendDirection",
    "TrendPeriod",
    "WeeklyBreakdownRow",
    "WeeklyReport",
    "WeeklyScoreData",
]
