from typing import List, Sequence

from ..core.models import Activity, WeeklyProgress
from ..formatting import format_date, format_duration
from ..presenter import GoalStatus, goal_statuses, motivational_message

GOAL_ICONS = {
    "Running": "🏃‍♂️",
    "Workout": "💪",
}


class TerminalReport:
    """Text report generator for the terminal"""

    @staticmethod
    def get_activity_icon(activity_type: str) -> str:
        """Return the icon for a Strava activity type"""
        icons = {
            "run": "🏃",
            "ride": "🚴",
            "walk": "🚶",
            "swim": "🏊",
            "swimming": "🏊",
            "hike": "🥾",
            "workout": "💪",
            "weighttraining": "🏋️",
            "yoga": "🧘",
        }
        return icons.get(activity_type.lower(), "🎯")

    @staticmethod
    def generate_goal_lines(status: GoalStatus) -> List[str]:
        icon = GOAL_ICONS.get(status.label, "🎯")
        lines = [
            f"   {icon} {status.label} Goal: {status.actual:.1f}/{status.goal:.1f} "
            f"{status.unit} {status.symbol} ({status.percentage:.1f}%)",
            f"      [{status.bar}] {status.tier}",
        ]
        if not status.achieved:
            lines.append(
                f"      💭 Need {status.remaining:.1f} {status.unit} more to reach your goal"
            )
        return lines

    @classmethod
    def generate_weekly_goals(cls, progress: WeeklyProgress) -> str:
        """Weekly goals section: one block per goal, counts and message"""
        lines = ["", "🎯 === WEEKLY GOALS PROGRESS ==="]
        for status in goal_statuses(progress):
            lines.extend(cls.generate_goal_lines(status))

        lines.append(
            f"   📊 This Week: {progress.run_count} runs, {progress.workout_count} workouts, "
            f"{progress.total_activities} total activities"
        )
        lines.append("")
        lines.append(f"   {motivational_message(progress)}")
        return "\n".join(lines)

    @classmethod
    def generate_activity(cls, activity: Activity, position: int) -> str:
        """Detail block for a single activity"""
        lines = [
            "",
            f"📈 Activity {position}",
            f"   🏷️  Name: {activity.name}",
            f"   {cls.get_activity_icon(activity.type)} Type: {activity.type}",
            f"   📏 Distance: {activity.distance_km:.2f} km",
            f"   ⏱️  Moving Time: {format_duration(activity.moving_time)}",
        ]

        if activity.total_elevation_gain > 0:
            lines.append(f"   ⛰️  Elevation Gain: {activity.total_elevation_gain:.0f} m")

        if activity.pace_min_per_km:
            lines.append(f"   🏃 Average Pace: {activity.pace_min_per_km} min/km")

        if activity.has_heartrate and activity.average_heartrate:
            lines.append(f"   ❤️  Avg Heart Rate: {activity.average_heartrate:.0f} bpm")

        if activity.kudos_count > 0:
            lines.append(f"   👍 Kudos: {activity.kudos_count}")

        lines.append(f"   📅 Date: {format_date(activity.start_date_local)}")
        return "\n".join(lines)

    @classmethod
    def generate_activities(cls, activities: Sequence[Activity]) -> str:
        blocks = ["", "🏃‍♂️ === RECENT ACTIVITIES ==="]
        for i, activity in enumerate(activities, 1):
            blocks.append(cls.generate_activity(activity, i))
        return "\n".join(blocks)

    @staticmethod
    def generate_summary(activities: Sequence[Activity]) -> str:
        """Totals over every fetched activity, not only the current week"""
        if not activities:
            return "📊 No activities to analyze"

        total_distance = sum(a.distance_km for a in activities)
        total_time = sum(a.moving_time for a in activities)
        run_count = sum(1 for a in activities if a.type == "Run")
        ride_count = sum(1 for a in activities if a.type == "Ride")

        lines = [
            "",
            "📊 === ACTIVITY SUMMARY ===",
            f"   📈 Total Activities: {len(activities)}",
            f"   🏃 Runs: {run_count}",
            f"   🚴 Rides: {ride_count}",
            f"   📏 Total Distance: {total_distance:.2f} km",
            f"   ⏱️  Total Time: {format_duration(total_time)}",
        ]
        if total_distance > 0:
            lines.append(
                f"   📊 Average Distance: {total_distance / len(activities):.2f} km"
            )
        return "\n".join(lines)

    @classmethod
    def display_weekly_goals(cls, progress: WeeklyProgress) -> None:
        print(cls.generate_weekly_goals(progress))

    @classmethod
    def display_activities(cls, activities: Sequence[Activity]) -> None:
        print(cls.generate_activities(activities))

    @classmethod
    def display_summary(cls, activities: Sequence[Activity]) -> None:
        print(cls.generate_summary(activities))
