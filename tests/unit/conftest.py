"""Pytest configuration and fixtures for unit tests."""

from collections.abc import Callable
from datetime import UTC, date, datetime

import pytest

from src.core.config import FairnessThresholds
from src.domain.fairness import Member, MemberExclusion, TaskCompletion


WEEK_START = date(2026, 1, 5)  # Monday, ISO week 2
WEEK_END = date(2026, 1, 11)


@pytest.fixture
def thresholds() -> FairnessThresholds:
    """Default engine thresholds, independent of the environment."""
    return FairnessThresholds()


@pytest.fixture
def members() -> list[Member]:
    """Two-member household roster."""
    return [Member(user_id="alice", user_name="Alice"), Member(user_id="bob", user_name="Bob")]


@pytest.fixture
def make_task() -> Callable[..., TaskCompletion]:
    """Factory for completed tasks inside the default week."""
    counter = {"next": 0}

    def _make(
        user_id: str,
        weight: float = 1.0,
        category: str = "cleaning",
        completed_at: datetime | None = None,
    ) -> TaskCompletion:
        counter["next"] += 1
        return TaskCompletion(
            task_id=f"task_{counter['next']}",
            user_id=user_id,
            category=category,
            weight=weight,
            completed_at=completed_at or datetime(2026, 1, 7, 18, 0, tzinfo=UTC),
        )

    return _make


@pytest.fixture
def make_weighted_tasks(make_task) -> Callable[[str, float], list[TaskCompletion]]:
    """Factory splitting a total weight into max-weight tasks for one member."""

    def _make(user_id: str, total: float, category: str = "cleaning") -> list[TaskCompletion]:
        tasks = []
        remaining = total
        while remaining > 0:
            weight = min(10.0, remaining)
            tasks.append(make_task(user_id, weight=weight, category=category))
            remaining -= weight
        return tasks

    return _make


@pytest.fixture
def exclusion() -> Callable[..., MemberExclusion]:
    """Factory for member exclusions."""

    def _make(user_id: str, start: date, end: date, reason: str | None = "travel") -> MemberExclusion:
        return MemberExclusion(user_id=user_id, start_date=start, end_date=end, reason=reason)

    return _make


@pytest.fixture
def week() -> tuple[date, date]:
    """Default seven-day scoring period (Monday to Sunday)."""
    return WEEK_START, WEEK_END
