"""HTTP boundary for the fairness engine.

Request bodies are validated by the pydantic models in src.models.request_models;
invalid payloads are rejected with 422 before reaching the engine. Engine errors
are turned into 422 responses by the handler registered in src.main.
"""

from fastapi import APIRouter

from src.domain.fairness import CategoryFairness, FairnessScore, FairnessTrend
from src.domain.report import MonthlyReport, WeeklyReport
from src.models.request_models import FairnessRequest, MonthlyReportRequest, TrendRequest, WeeklyReportRequest
from src.services.category_fairness import analyze_category_fairness
from src.services.fairness_scorer import calculate_fairness_score
from src.services.load_aggregator import compute_member_loads
from src.services.report_builder import build_monthly_report, build_weekly_report
from src.services.trend_analyzer import analyze_trend


router = APIRouter(tags=["fairness"])


@router.post("/fairness/score")
async def post_fairness_score(request: FairnessRequest) -> FairnessScore:
    """Compute the household fairness score for a period."""
    return calculate_fairness_score(
        request.household_id,
        request.tasks,
        request.members,
        request.exclusions,
        request.period_start,
        request.period_end,
    )


@router.post("/fairness/categories")
async def post_category_fairness(request: FairnessRequest) -> list[CategoryFairness]:
    """Compute per-category fairness for a period."""
    member_loads = compute_member_loads(
        request.tasks, request.members, request.exclusions, request.period_start, request.period_end
    )
    return analyze_category_fairness(request.tasks, member_loads)


@router.post("/fairness/trend")
async def post_fairness_trend(request: TrendRequest) -> FairnessTrend:
    """Classify the trajectory of historical scores."""
    return analyze_trend(request.household_id, request.historical, current_score=request.current_score)


@router.post("/reports/weekly")
async def post_weekly_report(request: WeeklyReportRequest) -> WeeklyReport:
    """Build the weekly report for a household."""
    return build_weekly_report(
        request.household_id,
        request.household_name,
        request.tasks,
        request.members,
        request.exclusions,
        request.period_start,
        request.period_end,
        historical=request.historical,
    )


@router.post("/reports/monthly")
async def post_monthly_report(request: MonthlyReportRequest) -> MonthlyReport:
    """Aggregate weekly bundles into a monthly report."""
    return build_monthly_report(
        request.household_id,
        request.household_name,
        request.weekly_scores,
        month=request.month,
        year=request.year,
    )
