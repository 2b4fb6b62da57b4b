"""
Weekly Goals Configuration
--------------------------
Settings are read once at startup: packaged defaults from settings.yaml,
overridden by environment variables (optionally loaded from a .env file).
"""
import os
from datetime import timedelta
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.connectors.strava.config import DEFAULT_CACHE_DIR, REQUIRED_ENV_VARS
from src.connectors.utils import get_settings, validate_env_vars

from .core.models import GoalTarget

SETTINGS_FILE = Path(__file__).parent / "settings.yaml"

RUNNING_GOAL_ENV = "WEEKLY_RUNNING_GOAL_KM"
WORKOUT_GOAL_ENV = "WEEKLY_WORKOUT_GOAL_HOURS"
CACHE_MAX_AGE_ENV = "STRAVA_CACHE_MAX_AGE_MINUTES"
CACHE_DIR_ENV = "STRAVA_CACHE_DIR"


class GoalsSettings(BaseModel):
    """Process-wide configuration, immutable for the run"""

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(..., description="Strava application client ID")
    client_secret: str = Field(..., description="Strava application client secret")
    refresh_token: str = Field(..., description="OAuth refresh token")
    goals: GoalTarget = Field(default_factory=GoalTarget, description="Weekly targets")
    cache_max_age_minutes: float = Field(15.0, ge=0, description="Cache staleness threshold")
    cache_dir: Path = Field(DEFAULT_CACHE_DIR, description="Cache directory")
    per_page: int = Field(30, gt=0, description="Activities fetched per request")

    @property
    def cache_max_age(self) -> timedelta:
        return timedelta(minutes=self.cache_max_age_minutes)


def _env_or(name: str, default):
    value = os.getenv(name)
    return value if value else default


def cache_dir_from_env() -> Path:
    """Cache directory, from STRAVA_CACHE_DIR or the default location."""
    return Path(_env_or(CACHE_DIR_ENV, str(DEFAULT_CACHE_DIR))).expanduser()


def load_settings(settings_path: Optional[Path] = None) -> GoalsSettings:
    """
    Build the settings from settings.yaml and the environment.

    Raises:
        ValueError: If a Strava credential is missing.
        pydantic.ValidationError: If a goal is negative or not a number.
    """
    defaults = get_settings(settings_path or SETTINGS_FILE)
    goal_defaults = defaults.get("goals", {})
    cache_defaults = defaults.get("cache", {})
    fetch_defaults = defaults.get("fetch", {})

    credentials = validate_env_vars(REQUIRED_ENV_VARS)

    goals = GoalTarget(
        running_goal_km=_env_or(RUNNING_GOAL_ENV, goal_defaults.get("running_goal_km", 10.0)),
        workout_goal_hours=_env_or(
            WORKOUT_GOAL_ENV, goal_defaults.get("workout_goal_hours", 3.0)
        ),
    )

    return GoalsSettings(
        client_id=credentials["STRAVA_CLIENT_ID"],
        client_secret=credentials["STRAVA_CLIENT_SECRET"],
        refresh_token=credentials["STRAVA_REFRESH_TOKEN"],
        goals=goals,
        cache_max_age_minutes=_env_or(
            CACHE_MAX_AGE_ENV, cache_defaults.get("max_age_minutes", 15.0)
        ),
        cache_dir=cache_dir_from_env(),
        per_page=fetch_defaults.get("per_page", 30),
    )
