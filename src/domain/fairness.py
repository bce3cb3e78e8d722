"""Fairness domain models: engine inputs and derived score records."""

from datetime import date, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


MIN_TASK_WEIGHT = 1
MAX_TASK_WEIGHT = 10


class AlertLevel(StrEnum):
    """Household alert derived from the most loaded member's adjusted share."""

    NONE = "none"
    WARNING = "warning"
    CRITICAL = "critical"


class FairnessStatus(StrEnum):
    """Score band used for headlines and notifications."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    CRITICAL = "critical"


class TrendDirection(StrEnum):
    """Trajectory of the fairness score across periods."""

    IMPROVING = "improving"
    WORSENING = "worsening"
    STABLE = "stable"


class TaskCompletion(BaseModel):
    """A completed, weighted chore."""

    model_config = ConfigDict(frozen=True)

    task_id: str = Field(..., min_length=1, description="ID of the completed task")
    user_id: str = Field(..., min_length=1, description="ID of the member who completed it")
    category: str = Field(..., min_length=1, description="Task category (e.g., 'laundry', 'school')")
    weight: float = Field(..., ge=MIN_TASK_WEIGHT, le=MAX_TASK_WEIGHT, description="Effort weight (1-10)")
    completed_at: datetime = Field(..., description="When the task was completed")


class Member(BaseModel):
    """Household member known to the engine."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="Unique member ID")
    user_name: str = Field(..., description="Display name of the member")


class MemberExclusion(BaseModel):
    """Calendar interval during which a member is not expected to contribute."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="ID of the excluded member")
    start_date: date = Field(..., description="First unavailable day (inclusive)")
    end_date: date = Field(..., description="Last unavailable day (inclusive)")
    reason: str | None = Field(default=None, description="Illness, travel, alternating custody, ...")

    @model_validator(mode="after")
    def validate_range(self) -> "MemberExclusion":
        """Reject intervals that end before they start."""
        if self.end_date < self.start_date:
            raise ValueError("Exclusion end_date must not be before start_date")
        return self


class MemberLoad(BaseModel):
    """Load carried by one member over a scoring period."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    user_name: str
    tasks_completed: int = 0
    total_weight: float = 0.0
    percentage: float = Field(default=0.0, description="Share of the household's total weight (0-100)")
    adjusted_percentage: float = Field(default=0.0, description="Share corrected for partial availability")
    exclusion_days: int = Field(default=0, ge=0, description="Days the member was unavailable")
    active_days: int | None = Field(
        default=None,
        ge=0,
        description="Days the member was available; None when the period is unknown",
    )
    category_breakdown: dict[str, float] = Field(default_factory=dict, description="Weight per category")

    @property
    def is_active(self) -> bool:
        """A member excluded for the whole period is not part of the distribution."""
        return self.active_days is None or self.active_days > 0


class ImbalanceDetails(BaseModel):
    """Gap between the most and least loaded members."""

    model_config = ConfigDict(frozen=True)

    most_loaded: str | None = None
    least_loaded: str | None = None
    gap: float = 0.0
    gap_percentage: float = 0.0


class FairnessScore(BaseModel):
    """Household fairness for one period."""

    model_config = ConfigDict(frozen=True)

    household_id: str
    period_start: date
    period_end: date
    overall_score: int = Field(default=100, ge=0, le=100)
    gini_coefficient: float = Field(default=0.0, ge=0, le=1)
    member_loads: list[MemberLoad] = Field(default_factory=list)
    alert_level: AlertLevel = AlertLevel.NONE
    status: FairnessStatus = FairnessStatus.EXCELLENT
    imbalance: ImbalanceDetails = Field(default_factory=ImbalanceDetails)


class MemberContribution(BaseModel):
    """One member's share of a category."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    user_name: str
    task_count: int
    percentage: float


class CategoryFairness(BaseModel):
    """Fairness restricted to a single task category."""

    model_config = ConfigDict(frozen=True)

    category: str
    fairness_score: int = Field(ge=0, le=100)
    total_tasks: int
    total_weight: float = 0.0
    member_contributions: list[MemberContribution] = Field(default_factory=list)
    dominant_member: str | None = None


class HistoricalScore(BaseModel):
    """A previously computed score, as supplied by the caller for trend analysis.

    Older callers send a single ``date`` instead of a range; those entries are
    normalized to zero-length ranges.
    """

    model_config = ConfigDict(frozen=True)

    period_start: date
    period_end: date
    score: float = Field(..., ge=0, le=100)
    gini: float = Field(default=0.0, ge=0, le=1)

    @model_validator(mode="before")
    @classmethod
    def normalize_single_date(cls, data: Any) -> Any:
        """Map ``{"date": d}`` or a missing end to the range ``[d, d]``."""
        if isinstance(data, dict):
            data = dict(data)
            single = data.pop("date", None)
            if single is not None and "period_start" not in data:
                data["period_start"] = single
            if data.get("period_end") is None and "period_start" in data:
                data["period_end"] = data["period_start"]
        return data

    @model_validator(mode="after")
    def validate_range(self) -> "HistoricalScore":
        """Reject ranges that end before they start."""
        if self.period_end < self.period_start:
            raise ValueError("Historical period_end must not be before period_start")
        return self


class TrendPeriod(BaseModel):
    """One point of a fairness trend."""

    model_config = ConfigDict(frozen=True)

    period_start: date
    period_end: date
    score: float
    gini: float = 0.0


class FairnessTrend(BaseModel):
    """Trajectory of the household score across periods."""

    model_config = ConfigDict(frozen=True)

    household_id: str
    periods: list[TrendPeriod] = Field(default_factory=list)
    trend: TrendDirection = TrendDirection.STABLE
    average_score: float = 0.0
    best_period: TrendPeriod | None = None
    worst_period: TrendPeriod | None = None

