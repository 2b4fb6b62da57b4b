"""
Strava API Client
-----------------
Exchanges a refresh token for an access token and fetches recent activities.

API Documentation: https://developers.strava.com/docs/reference/
"""
import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from .config import (
    DEFAULT_PER_PAGE,
    REQUEST_TIMEOUT_SECONDS,
    STRAVA_ACTIVITIES_URL,
    STRAVA_TOKEN_URL,
)
from .models import TokenResponse

logger = logging.getLogger(__name__)


class StravaAPIError(Exception):
    """Raised when the Strava API answers with an error or an unexpected payload."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class StravaAuthError(StravaAPIError):
    """Raised when the refresh-token exchange fails."""


class StravaClient:
    """Thin wrapper around the Strava OAuth and activities endpoints."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        timeout: int = REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.refresh_token = refresh_token
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_access_token(self) -> str:
        """
        Exchange the refresh token for a short-lived access token.

        Returns:
            The bearer access token.

        Raises:
            StravaAuthError: On transport failure, non-200 status, or an empty token.
        """
        payload = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "refresh_token": self.refresh_token,
            "grant_type": "refresh_token",
        }

        try:
            resp = self.session.post(STRAVA_TOKEN_URL, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise StravaAuthError(f"Token request failed: {e}") from e

        if resp.status_code != 200:
            raise StravaAuthError(
                f"Token API error {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            token = TokenResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise StravaAuthError(f"Could not decode token response: {e}") from e

        if not token.access_token:
            raise StravaAuthError("Empty access token received")

        if token.refresh_token and token.refresh_token != self.refresh_token:
            logger.debug("🔄 Strava rotated the refresh token")
            self.refresh_token = token.refresh_token

        return token.access_token

    def get_activities(
        self, access_token: str, per_page: int = DEFAULT_PER_PAGE, page: int = 1
    ) -> List[Dict[str, Any]]:
        """
        Fetch one page of the athlete's most recent activities.

        Args:
            access_token: Bearer token from get_access_token().
            per_page: Number of activities per page.
            page: Page number, starting at 1.

        Returns:
            Raw activity records as returned by the API.

        Raises:
            StravaAPIError: On transport failure, non-200 status, or a non-list payload.
        """
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }
        params = {"per_page": per_page, "page": page}

        try:
            resp = self.session.get(
                STRAVA_ACTIVITIES_URL,
                headers=headers,
                params=params,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise StravaAPIError(f"Activities request failed: {e}") from e

        if resp.status_code != 200:
            raise StravaAPIError(
                f"Activities API error {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            activities = resp.json()
        except ValueError as e:
            raise StravaAPIError(f"Could not decode activities response: {e}") from e

        if not isinstance(activities, list):
            raise StravaAPIError(
                f"Expected a list of activities, got {type(activities).__name__}"
            )

        logger.debug(f"Fetched {len(activities)} activities (page {page})")
        return activities
