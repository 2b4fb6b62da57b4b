from src.services.goals.core.models import Activity, GoalTarget, WeeklyProgress
from src.services.goals.presenter import MESSAGE_BALANCE_STRENGTH
from src.services.goals.templates import TerminalReport


def make_progress(running_km=7.5, workout_hours=0.5):
    return WeeklyProgress(
        goals=GoalTarget(running_goal_km=10.0, workout_goal_hours=2.0),
        running_distance_km=running_km,
        workout_hours=workout_hours,
        total_activities=4,
        run_count=2,
        workout_count=1,
    )


def test_weekly_goals_section():
    text = TerminalReport.generate_weekly_goals(make_progress())

    assert "WEEKLY GOALS PROGRESS" in text
    assert "Running Goal: 7.5/10.0 km 🟡 (75.0%)" in text
    assert "Workout Goal: 0.5/2.0 hours 🔴 (25.0%)" in text
    assert "Need 2.5 km more to reach your goal" in text
    assert "Need 1.5 hours more to reach your goal" in text
    assert "This Week: 2 runs, 1 workouts, 4 total activities" in text
    assert MESSAGE_BALANCE_STRENGTH in text


def test_weekly_goals_section_achieved_has_no_need_line():
    text = TerminalReport.generate_weekly_goals(make_progress(running_km=12.0, workout_hours=2.0))

    assert "Need" not in text
    assert "✅" in text
    assert "completed" in text


def test_activity_block():
    activity = Activity(
        name="Morning Run",
        type="Run",
        distance=5000.0,
        moving_time=1500,
        total_elevation_gain=42.0,
        has_heartrate=True,
        average_heartrate=151.4,
        kudos_count=3,
        start_date_local="2024-09-22T07:30:00Z",
    )
    text = TerminalReport.generate_activity(activity, 1)

    assert "Activity 1" in text
    assert "Name: Morning Run" in text
    assert "Distance: 5.00 km" in text
    assert "Moving Time: 25m 0s" in text
    assert "Elevation Gain: 42 m" in text
    assert "Average Pace: 5:00 min/km" in text
    assert "Avg Heart Rate: 151 bpm" in text
    assert "Kudos: 3" in text
    assert "Date: Sep 22, 2024 07:30" in text


def test_activity_block_omits_empty_fields():
    activity = Activity(name="Gym", type="WeightTraining", moving_time=3600)
    text = TerminalReport.generate_activity(activity, 2)

    assert "Elevation" not in text
    assert "Pace" not in text
    assert "Heart Rate" not in text
    assert "Kudos" not in text
    assert "Date: N/A" in text


def test_summary():
    activities = [
        Activity(type="Run", distance=5000.0, moving_time=1500),
        Activity(type="Ride", distance=20000.0, moving_time=3600),
        Activity(type="Yoga", moving_time=1800),
    ]
    text = TerminalReport.generate_summary(activities)

    assert "Total Activities: 3" in text
    assert "Runs: 1" in text
    assert "Rides: 1" in text
    assert "Total Distance: 25.00 km" in text
    assert "Total Time: 1h 55m 0s" in text
    assert "Average Distance: 8.33 km" in text


def test_summary_empty():
    assert TerminalReport.generate_summary([]) == "📊 No activities to analyze"


def test_display_prints(capsys):
    TerminalReport.display_weekly_goals(make_progress())
    TerminalReport.display_activities([Activity(name="Evening Ride", type="Ride")])
    TerminalReport.display_summary([])

    out = capsys.readouterr().out
    assert "WEEKLY GOALS PROGRESS" in out
    assert "RECENT ACTIVITIES" in out
    assert "Evening Ride" in out
    assert "No activities to analyze" in out
