"""
Progress Presenter
------------------
Display-ready values derived from a WeeklyProgress: percentages, remaining
amounts, status tiers, progress bars and the motivational message.
"""
import math
from dataclasses import dataclass
from typing import List

from .core.models import WeeklyProgress

PROGRESS_BAR_CELLS = 20
FILLED_CELL = "█"
EMPTY_CELL = "░"

# Highest threshold first, first match wins
STATUS_TIERS = [
    (100, "completed"),
    (75, "almost there"),
    (50, "halfway"),
    (25, "getting started"),
]
DEFAULT_TIER = "just started"

MESSAGE_BOTH_ACHIEVED = (
    "🎉 Congratulations! You've achieved both your running and workout goals this week!"
)
MESSAGE_RUNNING_ACHIEVED = (
    "🏃‍♂️ Great job on your running goal! Keep up the momentum with your workouts!"
)
MESSAGE_WORKOUT_ACHIEVED = (
    "💪 Excellent work on your workout goal! Time to lace up those running shoes!"
)
MESSAGE_OVER_HALFWAY = "🔥 You're over halfway to both goals! Keep pushing!"
MESSAGE_BALANCE_STRENGTH = (
    "🏃‍♂️ Strong running progress! Time to balance it with some strength training!"
)
MESSAGE_BALANCE_CARDIO = (
    "💪 Great workout momentum! Add some cardio to complete the balance!"
)
MESSAGE_WEEK_IS_YOUNG = "🚀 The week is young! Time to start building towards your goals!"


@dataclass(frozen=True)
class GoalStatus:
    """Everything the terminal needs to show for one goal."""

    label: str
    unit: str
    actual: float
    goal: float
    percentage: float
    achieved: bool
    remaining: float
    tier: str
    bar: str
    symbol: str


def percentage(actual: float, goal: float) -> float:
    """Progress as a percentage of the goal, 0 when the goal is 0."""
    if goal == 0:
        return 0.0
    return (actual / goal) * 100


def achieved(actual: float, goal: float) -> bool:
    return actual >= goal


def remaining(actual: float, goal: float) -> float:
    """Amount still needed to reach the goal, never negative."""
    return max(0.0, goal - actual)


def status_tier(percent: float) -> str:
    for threshold, tier in STATUS_TIERS:
        if percent >= threshold:
            return tier
    return DEFAULT_TIER


def filled_cells(percent: float) -> int:
    """Number of filled progress bar cells, one per 5%, clamped to the bar."""
    cells = math.floor(percent / 5)
    return max(0, min(PROGRESS_BAR_CELLS, cells))


def progress_bar(percent: float) -> str:
    filled = filled_cells(percent)
    return FILLED_CELL * filled + EMPTY_CELL * (PROGRESS_BAR_CELLS - filled)


def status_symbol(percent: float, is_achieved: bool) -> str:
    if is_achieved:
        return "✅"
    if percent >= 75:
        return "🟡"
    if percent >= 50:
        return "🟠"
    return "🔴"


def running_percentage(progress: WeeklyProgress) -> float:
    return percentage(progress.running_distance_km, progress.goals.running_goal_km)


def workout_percentage(progress: WeeklyProgress) -> float:
    return percentage(progress.workout_hours, progress.goals.workout_goal_hours)


def running_achieved(progress: WeeklyProgress) -> bool:
    return achieved(progress.running_distance_km, progress.goals.running_goal_km)


def workout_achieved(progress: WeeklyProgress) -> bool:
    return achieved(progress.workout_hours, progress.goals.workout_goal_hours)


def running_remaining_km(progress: WeeklyProgress) -> float:
    return remaining(progress.running_distance_km, progress.goals.running_goal_km)


def workout_remaining_hours(progress: WeeklyProgress) -> float:
    return remaining(progress.workout_hours, progress.goals.workout_goal_hours)


def motivational_message(progress: WeeklyProgress) -> str:
    """
    Pick the motivational message for the week.

    Achieved goals take precedence; otherwise the message depends on how the
    two percentages compare.
    """
    is_running_achieved = running_achieved(progress)
    is_workout_achieved = workout_achieved(progress)

    if is_running_achieved and is_workout_achieved:
        return MESSAGE_BOTH_ACHIEVED
    if is_running_achieved:
        return MESSAGE_RUNNING_ACHIEVED
    if is_workout_achieved:
        return MESSAGE_WORKOUT_ACHIEVED

    running_percent = running_percentage(progress)
    workout_percent = workout_percentage(progress)

    if running_percent > 50 and workout_percent > 50:
        return MESSAGE_OVER_HALFWAY
    if running_percent > workout_percent:
        return MESSAGE_BALANCE_STRENGTH
    if workout_percent > running_percent:
        return MESSAGE_BALANCE_CARDIO
    return MESSAGE_WEEK_IS_YOUNG


def _goal_status(label: str, unit: str, actual: float, goal: float) -> GoalStatus:
    percent = percentage(actual, goal)
    is_achieved = achieved(actual, goal)
    return GoalStatus(
        label=label,
        unit=unit,
        actual=actual,
        goal=goal,
        percentage=percent,
        achieved=is_achieved,
        remaining=remaining(actual, goal),
        tier=status_tier(percent),
        bar=progress_bar(percent),
        symbol=status_symbol(percent, is_achieved),
    )


def goal_statuses(progress: WeeklyProgress) -> List[GoalStatus]:
    """Running and workout statuses, in display order."""
    return [
        _goal_status(
            "Running", "km", progress.running_distance_km, progress.goals.running_goal_km
        ),
        _goal_status(
            "Workout", "hours", progress.workout_hours, progress.goals.workout_goal_hours
        ),
    ]
