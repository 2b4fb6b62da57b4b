"""Strava connector: OAuth token refresh, activity fetch and local cache."""

from .client import StravaClient, StravaAPIError, StravaAuthError
from .cache import ActivityCache

__all__ = [
    "StravaClient",
    "StravaAPIError",
    "StravaAuthError",
    "ActivityCache",
]
