"""
Strava Weekly Goals Entry Point
-------------------------------
Fetches recent Strava activities and reports progress toward the weekly
running and workout goals.

Usage:
  python -m src.services.goals
  python -m src.services.goals --max 10 --no-summary
  python -m src.services.goals --clear-cache
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from src.connectors.strava import ActivityCache, StravaAPIError, StravaClient
from src.connectors.utils import load_env, setup_logging

from .config import GoalsSettings, cache_dir_from_env, load_settings
from .core.models import enrich_activities
from .templates import TerminalReport
from .tracker import compute_weekly_progress

DEFAULT_MAX_RESULTS = 30


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Track weekly running and workout goals from Strava activities.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-m", "--max",
        type=int,
        default=DEFAULT_MAX_RESULTS,
        help="Maximum number of activities to show in the details section",
    )
    parser.add_argument(
        "--summary",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show the activity summary",
    )
    parser.add_argument(
        "--details",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show detailed activities",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Always fetch from the Strava API, ignoring the local cache",
    )
    parser.add_argument(
        "--clear-cache",
        action="store_true",
        help="Remove the local activity cache and exit",
    )
    parser.add_argument(
        "-e", "--env",
        type=Path,
        default=Path(".env"),
        help="Path to the .env file",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level",
    )
    return parser.parse_args(argv)


def get_activities(settings: GoalsSettings, use_cache: bool = True) -> List[Dict[str, Any]]:
    """Return raw activities from the cache when fresh, otherwise from the API."""
    cache = ActivityCache(settings.cache_dir)

    if use_cache:
        cached = cache.load(settings.cache_max_age)
        if cached is not None:
            logging.info(f"📦 Loaded {len(cached)} activities from cache")
            return cached

    client = StravaClient(settings.client_id, settings.client_secret, settings.refresh_token)

    logging.info("📡 Authenticating with Strava API...")
    access_token = client.get_access_token()
    logging.info("✅ Successfully authenticated")

    logging.info("📊 Fetching recent activities...")
    activities = client.get_activities(access_token, per_page=settings.per_page)
    logging.info(f"✅ Retrieved {len(activities)} activities")

    try:
        cache.save(activities)
    except OSError as e:
        logging.warning(f"⚠️ Could not write activity cache: {e}")

    return activities


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    try:
        args = parse_args(argv)
        setup_logging(args.log_level)
        load_env(args.env)

        if args.clear_cache:
            try:
                ActivityCache(cache_dir_from_env()).clear()
            except OSError as e:
                logging.error(f"❌ Could not clear activity cache: {e}")
                sys.exit(1)
            return

        logging.info("🚀 Strava Weekly Goals Tracker starting...")
        try:
            settings = load_settings()
        except ValueError as e:
            logging.error(f"❌ Configuration error: {e}")
            sys.exit(1)

        raw_activities = get_activities(settings, use_cache=not args.no_cache)
        if not raw_activities:
            logging.info("ℹ️ No activities found")
            return

        activities = enrich_activities(raw_activities)

        logging.info("🎯 Calculating weekly goals progress...")
        progress = compute_weekly_progress(activities, settings.goals)

        TerminalReport.display_weekly_goals(progress)

        if args.details:
            TerminalReport.display_activities(activities[: max(args.max, 0)])

        if args.summary:
            TerminalReport.display_summary(activities)

        logging.info(f"🎯 Analysis complete: processed {len(activities)} activities")

    except StravaAPIError as e:
        logging.error(f"❌ Strava API error: {e}")
        sys.exit(1)
    except ValidationError as e:
        logging.error(f"❌ Invalid activity data: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logging.info("Script interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
