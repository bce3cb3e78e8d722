"""Trend analysis over historical fairness scores."""

import logging
from collections.abc import Iterable, Sequence

from src.core.config import FairnessThresholds, settings
from src.core.logging import span
from src.domain.fairness import FairnessTrend, HistoricalScore, TrendDirection, TrendPeriod


logger = logging.getLogger(__name__)


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def classify_trend(scores: Sequence[float], threshold: float) -> TrendDirection:
    """Compare the most recent third of ``scores`` with the earliest third.

    Scores must be in chronological order. Fewer than two scores is always stable.
    """
    if len(scores) < 2:  # noqa: PLR2004
        return TrendDirection.STABLE

    window = max(1, len(scores) // 3)
    diff = _mean(scores[-window:]) - _mean(scores[:window])

    if diff > threshold:
        return TrendDirection.IMPROVING
    if diff < -threshold:
        return TrendDirection.WORSENING
    return TrendDirection.STABLE


def analyze_trend(
    household_id: str,
    historical: Iterable[HistoricalScore],
    *,
    current_score: float | None = None,
    thresholds: FairnessThresholds | None = None,
) -> FairnessTrend:
    """Classify the household's score trajectory.

    Args:
        household_id: Household the scores belong to
        historical: Previous scores in any order (include the current period to count it)
        current_score: Score reported as the average when there is no history
        thresholds: Trend threshold (defaults from settings)

    Returns:
        FairnessTrend with periods sorted by start date; average_score is the
        unrounded mean of the period scores
    """
    thresholds = thresholds or settings.fairness_thresholds()

    with span("trend_analyzer.analyze_trend"):
        periods = [
            TrendPeriod(
                period_start=entry.period_start,
                period_end=entry.period_end,
                score=entry.score,
                gini=entry.gini,
            )
            for entry in sorted(historical, key=lambda entry: (entry.period_start, entry.period_end))
        ]

        if not periods:
            return FairnessTrend(
                household_id=household_id,
                average_score=current_score if current_score is not None else 0.0,
            )

        # Ties go to the most recent period
        best = worst = periods[0]
        for period in periods[1:]:
            if period.score >= best.score:
                best = period
            if period.score <= worst.score:
                worst = period

        scores = [period.score for period in periods]
        trend = classify_trend(scores, thresholds.trend)

        logger.debug(
            "Trend analyzed",
            extra={"household_id": household_id, "period_count": len(periods), "trend": str(trend)},
        )
        return FairnessTrend(
            household_id=household_id,
            periods=periods,
            trend=trend,
            average_score=_mean(scores),
            best_period=best,
            worst_period=worst,
        )
