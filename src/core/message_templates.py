"""Centralized message templates for fairness observations and reports.

All user-facing strings are defined here so wording can be tuned in one place.
Messages stay non-judgemental: they describe the load, never blame a member.
"""


# Household score


def well_balanced() -> str:
    return "\U0001f31f The load is well shared this period. Keep it up!"


def load_tilting(*, user_name: str, share: float) -> str:
    return f"⚖️ The load is starting to tilt: {user_name} handled {min(share, 100.0):.0f}% of it."


def household_conversation() -> str:
    return "\U0001f91d One person is carrying most of the load. A household chat about who does what could help."


def uneven_distribution(*, score: int) -> str:
    return f"\U0001f4ca Fairness score is {score}/100. Tasks could be spread more evenly."


# Trend


def trend_improving() -> str:
    return "\U0001f4c8 Sharing is improving compared to previous periods."


def trend_worsening() -> str:
    return "\U0001f4c9 Sharing has been less even than in previous periods."


# Members


def most_active(*, user_name: str) -> str:
    return f"\U0001f4aa {user_name} was very active this period!"


def support_member(*, user_name: str, share: float) -> str:
    # Adjusted shares exceed 100 when most of the period was excluded
    shown = min(share, 100.0)
    return f"\U0001f4a1 {user_name} is carrying {shown:.0f}% of the load. A helping hand would be welcome."


def member_away(*, user_name: str, days: int) -> str:
    return f"\U0001f4c5 {user_name} was away for {days} day(s); their share is adjusted accordingly."


# Weekly highlights and suggestions


def exceptional_week() -> str:
    return "\U0001f31f Outstanding fairness score this week!"


def trend_highlight() -> str:
    return "\U0001f4c8 The trend is improving compared to previous weeks."


def everyone_participated() -> str:
    return "\U0001f46a Every member took part this week!"


def top_contributor(*, user_name: str, tasks: int) -> str:
    return f"\U0001f4aa {user_name} completed {tasks} tasks."


def large_gap() -> str:
    return "The gap in load between members is large. Consider a household conversation."


def spread_category(*, category: str) -> str:
    return f'"{category}" tasks are concentrated on one person. Consider sharing them out.'


def help_member(*, user_name: str) -> str:
    return f"{user_name} is carrying a heavy load. A helping hand would be welcome."


# Monthly achievements and areas for improvement


def excellent_month() -> str:
    return "\U0001f3c6 Excellent average score this month!"


def improving_month() -> str:
    return "\U0001f4c8 Sharing improved throughout the month."


def balanced_month() -> str:
    return "⚖️ Load was evenly balanced between members."


def all_weeks_above(*, score: int) -> str:
    return f"✅ Every week scored {score} or more!"


def low_average(*, score: int) -> str:
    return f"The average score was below {score}. A household conversation could help."


def worsening_categories(*, categories: list[str]) -> str:
    return f"Categories getting less even: {', '.join(categories)}."


def heavy_load_members(*, user_names: list[str]) -> str:
    verb = "are" if len(user_names) > 1 else "is"
    return f"{', '.join(user_names)} {verb} carrying a heavy load."


def contribution_label(*, share: float, major: float, balanced: float, moderate: float) -> str:
    if share >= major:
        return "Major contributor"
    if share >= balanced:
        return "Balanced participation"
    if share >= moderate:
        return "Moderate participation"
    return "Light participation"


# Notifications

_PUSH_TITLES = {
    "excellent": "\U0001f31f Outstanding week!",
    "good": "✅ Good week!",
    "fair": "⚖️ Weekly summary",
    "poor": "\U0001f4ac Let's talk about sharing",
    "critical": "\U0001f91d Household conversation suggested",
}

_PUSH_CLOSINGS = {
    "excellent": "Well done, everyone!",
    "good": "Keep it up!",
    "fair": "A few adjustments could help.",
    "poor": "Rebalancing would help.",
    "critical": "Take a moment to talk about it.",
}


def push_notification(*, status: str, score: int) -> tuple[str, str]:
    """Build a push notification (title, body) for a weekly score."""
    return _PUSH_TITLES[status], f"Fairness score: {score}/100. {_PUSH_CLOSINGS[status]}"


_EMAIL_SUBJECTS = {
    "excellent": "\U0001f31f {household} - Week {week}: Excellent fairness!",
    "good": "✅ {household} - Week {week}: Good balance",
    "fair": "\U0001f4ca {household} - Week {week}: Summary",
    "poor": "\U0001f4cb {household} - Week {week}: Let's improve together",
    "critical": "\U0001f4cb {household} - Week {week}: Let's improve together",
}


def email_subject(*, household_name: str, week_number: int, status: str) -> str:
    return _EMAIL_SUBJECTS[status].format(household=household_name, week=week_number)
