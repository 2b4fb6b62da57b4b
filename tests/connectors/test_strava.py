"""
Unit tests for src/connectors/strava/client.py
"""
import unittest
from unittest.mock import MagicMock

import requests

from src.connectors.strava.client import StravaAPIError, StravaAuthError, StravaClient
from src.connectors.strava.config import STRAVA_ACTIVITIES_URL, STRAVA_TOKEN_URL


def make_response(status_code=200, payload=None, text=""):
    resp = MagicMock(status_code=status_code, text=text)
    resp.json.return_value = payload
    return resp


class TestStravaAuthentication(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.client = StravaClient("id", "secret", "refresh", session=self.session)

    def test_get_access_token(self):
        self.session.post.return_value = make_response(
            payload={"access_token": "abc", "refresh_token": "refresh", "expires_at": 1}
        )
        token = self.client.get_access_token()
        self.assertEqual(token, "abc")

        args, kwargs = self.session.post.call_args
        self.assertEqual(args[0], STRAVA_TOKEN_URL)
        self.assertEqual(kwargs["json"]["grant_type"], "refresh_token")
        self.assertEqual(kwargs["json"]["refresh_token"], "refresh")
        self.assertEqual(kwargs["timeout"], 30)

    def test_get_access_token_http_error(self):
        self.session.post.return_value = make_response(status_code=401, text="Unauthorized")
        with self.assertRaises(StravaAuthError) as ctx:
            self.client.get_access_token()
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.body, "Unauthorized")

    def test_get_access_token_empty(self):
        self.session.post.return_value = make_response(payload={"access_token": ""})
        with self.assertRaises(StravaAuthError):
            self.client.get_access_token()

    def test_get_access_token_network_error(self):
        self.session.post.side_effect = requests.exceptions.ConnectionError("down")
        with self.assertRaises(StravaAuthError):
            self.client.get_access_token()

    def test_rotated_refresh_token_is_kept(self):
        self.session.post.return_value = make_response(
            payload={"access_token": "abc", "refresh_token": "new-refresh"}
        )
        self.client.get_access_token()
        self.assertEqual(self.client.refresh_token, "new-refresh")


class TestStravaActivities(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.client = StravaClient("id", "secret", "refresh", session=self.session)

    def test_get_activities(self):
        self.session.get.return_value = make_response(
            payload=[{"id": 1, "name": "Test Activity"}]
        )
        activities = self.client.get_activities("dummy", per_page=1)
        self.assertEqual(len(activities), 1)
        self.assertEqual(activities[0]["name"], "Test Activity")

        args, kwargs = self.session.get.call_args
        self.assertEqual(args[0], STRAVA_ACTIVITIES_URL)
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer dummy")
        self.assertEqual(kwargs["params"], {"per_page": 1, "page": 1})

    def test_get_activities_empty(self):
        self.session.get.return_value = make_response(payload=[])
        self.assertEqual(self.client.get_activities("dummy"), [])

    def test_get_activities_error(self):
        self.session.get.return_value = make_response(status_code=500, text="boom")
        with self.assertRaises(StravaAPIError) as ctx:
            self.client.get_activities("dummy")
        self.assertEqual(ctx.exception.status_code, 500)

    def test_get_activities_unexpected_payload(self):
        self.session.get.return_value = make_response(payload={"message": "Bad"})
        with self.assertRaises(StravaAPIError):
            self.client.get_activities("dummy")

    def test_auth_error_is_api_error(self):
        self.assertTrue(issubclass(StravaAuthError, StravaAPIError))


if __name__ == "__main__":
    unittest.main()
