"""Pydantic models for validating requests at the ingestion boundary.

The engine assumes validated input; these models reject malformed periods,
out-of-range weights and empty ids before any computation runs.
"""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from src.domain.fairness import HistoricalScore, Member, MemberExclusion, TaskCompletion
from src.domain.report import WeeklyScoreData


class FairnessRequest(BaseModel):
    """Completions, roster and exclusions for one household period."""

    household_id: str = Field(..., min_length=1, description="Household ID")
    period_start: date = Field(..., description="First day of the period (inclusive)")
    period_end: date = Field(..., description="Last day of the period (inclusive)")
    members: list[Member] = Field(default_factory=list, description="Household roster")
    tasks: list[TaskCompletion] = Field(default_factory=list, description="Completed tasks within the period")
    exclusions: list[MemberExclusion] = Field(default_factory=list, description="Member availability exclusions")

    @model_validator(mode="after")
    def validate_period(self) -> "FairnessRequest":
        """Reject periods whose end is not after their start."""
        if self.period_end <= self.period_start:
            raise ValueError("period_end must be after period_start")
        return self


class WeeklyReportRequest(FairnessRequest):
    """Weekly report request: a scoring request plus display name and history."""

    household_name: str = Field(..., min_length=1, description="Household display name")
    historical: list[HistoricalScore] = Field(default_factory=list, description="Previous period scores")


class TrendRequest(BaseModel):
    """Historical scores to classify."""

    household_id: str = Field(..., min_length=1, description="Household ID")
    historical: list[HistoricalScore] = Field(default_factory=list, description="Period scores in any order")
    current_score: float | None = Field(default=None, ge=0, le=100, description="Score of the current period")


class MonthlyReportRequest(BaseModel):
    """Weekly bundles to aggregate into a monthly report."""

    household_id: str = Field(..., min_length=1, description="Household ID")
    household_name: str = Field(..., min_length=1, description="Household display name")
    weekly_scores: list[WeeklyScoreData] = Field(default_factory=list, description="Weekly bundles of the month")
    month: int | None = Field(default=None, ge=1, le=12, description="Report month")
    year: int | None = Field(default=None, ge=1, description="Report year")
