"""
Strava Connector Configuration
------------------------------
API endpoints, paging and cache defaults for the Strava connector.
"""
from pathlib import Path

STRAVA_TOKEN_URL = "https://www.strava.com/oauth/token"
STRAVA_API_URL = "https://www.strava.com/api/v3"
STRAVA_ACTIVITIES_URL = f"{STRAVA_API_URL}/athlete/activities"

DEFAULT_PER_PAGE = 30
REQUEST_TIMEOUT_SECONDS = 30

REQUIRED_ENV_VARS = [
    "STRAVA_CLIENT_ID",
    "STRAVA_CLIENT_SECRET",
    "STRAVA_REFRESH_TOKEN",
]

DEFAULT_CACHE_DIR = Path.home() / ".strava-goals-cache"
CACHE_FILENAME = "activities.json"
