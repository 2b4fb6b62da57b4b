from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, computed_field, field_validator


class Activity(BaseModel):
    """A completed Strava activity with its derived units"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(0, description="Strava activity ID")
    name: str = Field("", description="Activity name")
    type: str = Field("", description="Activity type (Run, Ride, WeightTraining...)")
    distance: float = Field(0.0, ge=0, description="Distance in meters")
    moving_time: int = Field(0, ge=0, description="Moving time in seconds")
    elapsed_time: int = Field(0, ge=0, description="Elapsed time in seconds")
    total_elevation_gain: float = Field(0.0, description="Elevation gain in meters")
    start_date: str = Field("", description="Start instant, RFC3339")
    start_date_local: str = Field("", description="Start in the athlete's local time")
    average_speed: float = Field(0.0, description="Average speed in m/s")
    max_speed: float = Field(0.0, description="Max speed in m/s")
    has_heartrate: bool = Field(False, description="Heart rate was recorded")
    average_heartrate: Optional[float] = Field(None, description="Average HR in bpm")
    kudos_count: int = Field(0, description="Number of kudos")

    @field_validator(
        "id",
        "name",
        "type",
        "distance",
        "moving_time",
        "elapsed_time",
        "total_elevation_gain",
        "start_date",
        "start_date_local",
        "average_speed",
        "max_speed",
        "has_heartrate",
        "kudos_count",
        mode="before",
    )
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """The API sends null for fields it did not record; use the zero value."""
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @computed_field
    @property
    def distance_km(self) -> float:
        return self.distance / 1000

    @computed_field
    @property
    def moving_time_hours(self) -> float:
        return self.moving_time / 3600

    @computed_field
    @property
    def pace_min_per_km(self) -> Optional[str]:
        """Average pace as M:SS per km, for runs with a distance only."""
        if self.type != "Run" or self.distance <= 0:
            return None
        pace_seconds_per_km = self.moving_time / self.distance_km
        minutes = int(pace_seconds_per_km // 60)
        seconds = int(pace_seconds_per_km) % 60
        return f"{minutes}:{seconds:02d}"


def enrich_activities(records: Iterable[Dict[str, Any]]) -> List[Activity]:
    """Validate raw API records into Activity models."""
    return [Activity.model_validate(record) for record in records]


class GoalTarget(BaseModel):
    """Weekly targets set by the user"""

    model_config = ConfigDict(frozen=True)

    running_goal_km: float = Field(10.0, ge=0, description="Weekly running distance in km")
    workout_goal_hours: float = Field(3.0, ge=0, description="Weekly workout time in hours")


class WeeklyProgress(BaseModel):
    """Progress toward the weekly goals for the current calendar week"""

    model_config = ConfigDict(frozen=True)

    goals: GoalTarget = Field(..., description="Targets the progress is measured against")
    running_distance_km: float = Field(0.0, description="Distance run this week in km")
    workout_hours: float = Field(0.0, description="Workout time this week in hours")
    total_activities: int = Field(0, description="Activities this week, any type")
    run_count: int = Field(0, description="Runs this week")
    workout_count: int = Field(0, description="Workouts this week")
    week_start: Optional[datetime] = Field(None, description="Monday 00:00 of the week")
