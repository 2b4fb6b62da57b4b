"""
Weekly Goals Tracker
--------------------
Aggregates the current week's activities into progress toward the weekly goals.
"""
import logging
from datetime import datetime
from typing import Iterable, Optional

from .classifier import is_run_activity, is_workout_activity
from .core.models import Activity, GoalTarget, WeeklyProgress
from .week import parse_timestamp, week_start

logger = logging.getLogger(__name__)


def compute_weekly_progress(
    activities: Iterable[Activity],
    goals: GoalTarget,
    now: Optional[datetime] = None,
) -> WeeklyProgress:
    """
    Compute progress toward the weekly goals.

    Only activities starting at or after Monday 00:00 of the current week are
    counted. Activities with a missing or malformed start date are skipped.
    Run and workout checks are independent, so a type matching both rules
    would count toward both goals.

    Args:
        activities: Enriched activities, in any order.
        goals: Weekly targets.
        now: Reference instant. Defaults to the current local time.

    Returns:
        A new WeeklyProgress. Empty input yields a zero-valued result.
    """
    start = week_start(now)

    running_distance_km = 0.0
    workout_hours = 0.0
    total_activities = 0
    run_count = 0
    workout_count = 0
    skipped = 0

    for activity in activities:
        started_at = parse_timestamp(activity.start_date)
        if started_at is None:
            skipped += 1
            logger.debug(
                f"Skipping activity {activity.id}: invalid start date {activity.start_date!r}"
            )
            continue

        if started_at < start:
            continue

        total_activities += 1

        if is_run_activity(activity.type):
            running_distance_km += activity.distance_km
            run_count += 1

        if is_workout_activity(activity.type):
            workout_hours += activity.moving_time_hours
            workout_count += 1

    if skipped:
        logger.warning(f"⚠️ Skipped {skipped} activities with an invalid start date")

    return WeeklyProgress(
        goals=goals,
        running_distance_km=running_distance_km,
        workout_hours=workout_hours,
        total_activities=total_activities,
        run_count=run_count,
        workout_count=workout_count,
        week_start=start,
    )
