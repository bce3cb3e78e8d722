from src.services import (
    category_fairness,
    exclusion_calendar,
    fairness_scorer,
    load_aggregator,
    message_generator,
    report_builder,
    trend_analyzer,
)


__all__ = [
    "category_fairness",
    "exclusion_calendar",
    "fairness_scorer",
    "load_aggregator",
    "message_generator",
    "report_builder",
    "trend_analyzer",
]
