"""
Weekly goals service: aggregates Strava activities into progress toward
weekly running and workout goals.
"""

from .core import Activity, GoalTarget, WeeklyProgress, enrich_activities
from .classifier import GoalClass, classify_activity, is_run_activity, is_workout_activity
from .week import week_start, parse_timestamp
from .tracker import compute_weekly_progress
from .templates import TerminalReport

__all__ = [
    "Activity",
    "GoalTarget",
    "WeeklyProgress",
    "enrich_activities",
    "GoalClass",
    "classify_activity",
    "is_run_activity",
    "is_workout_activity",
    "week_start",
    "parse_timestamp",
    "compute_weekly_progress",
    "TerminalReport",
]

__version__ = "1.0.0"
