"""
Activity Classifier
-------------------
Maps Strava activity types to the goal they count toward.
Matching is exact and case-sensitive; unknown types count toward no goal.
"""
from enum import Enum
from typing import FrozenSet

RUN_TYPE = "Run"

WORKOUT_TYPES: FrozenSet[str] = frozenset(
    {
        "WeightTraining",
        "Workout",
        "Crossfit",
        "StairStepper",
        "Elliptical",
        "Yoga",
        "Pilates",
        "RockClimbing",
        "Swimming",
    }
)


class GoalClass(str, Enum):
    RUN = "Run"
    WORKOUT = "Workout"
    OTHER = "Other"


def is_run_activity(activity_type: str) -> bool:
    """Return True if the activity counts toward the running goal."""
    return activity_type == RUN_TYPE


def is_workout_activity(activity_type: str) -> bool:
    """Return True if the activity counts toward the workout goal."""
    return activity_type in WORKOUT_TYPES


def classify_activity(activity_type: str) -> GoalClass:
    if is_run_activity(activity_type):
        return GoalClass.RUN
    if is_workout_activity(activity_type):
        return GoalClass.WORKOUT
    return GoalClass.OTHER
