from .models import Activity, GoalTarget, WeeklyProgress, enrich_activities

__all__ = [
    "Activity",
    "GoalTarget",
    "WeeklyProgress",
    "enrich_activities",
]
