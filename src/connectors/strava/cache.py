"""
Activity Cache
--------------
File-based cache of raw Strava activities, stored as
{"activities": [...], "timestamp": "<ISO 8601>"}.
"""
import json
import logging
import shutil
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import CACHE_FILENAME, DEFAULT_CACHE_DIR

logger = logging.getLogger(__name__)


class ActivityCache:
    """Stores the last fetched activity list on disk."""

    def __init__(self, cache_dir: Optional[Path] = None):
        self.cache_dir = Path(cache_dir) if cache_dir else DEFAULT_CACHE_DIR

    @property
    def cache_file(self) -> Path:
        return self.cache_dir / CACHE_FILENAME

    def save(
        self, activities: List[Dict[str, Any]], now: Optional[datetime] = None
    ) -> Path:
        """Write activities to the cache file, creating the directory if needed."""
        timestamp = now or datetime.now(timezone.utc)
        data = {
            "activities": activities,
            "timestamp": timestamp.isoformat(),
        }

        self.cache_dir.mkdir(parents=True, exist_ok=True)
        with open(self.cache_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False, default=str)

        logger.debug(f"💾 Cached {len(activities)} activities to {self.cache_file}")
        return self.cache_file

    def load(
        self, max_age: timedelta, now: Optional[datetime] = None
    ) -> Optional[List[Dict[str, Any]]]:
        """
        Load cached activities if the cache exists and is fresh.

        Args:
            max_age: Maximum accepted age of the cache.
            now: Reference instant, defaults to the current UTC time.

        Returns:
            The cached activities, or None on a miss (missing, invalid or expired).
        """
        if not self.cache_file.exists():
            logger.debug("Cache miss: no cache file")
            return None

        try:
            with open(self.cache_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            activities = data["activities"]
            cached_at = datetime.fromisoformat(data["timestamp"])
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"⚠️ Ignoring invalid cache file {self.cache_file}: {e}")
            return None

        if not isinstance(activities, list):
            logger.warning(f"⚠️ Ignoring invalid cache file {self.cache_file}")
            return None

        if cached_at.tzinfo is None:
            cached_at = cached_at.replace(tzinfo=timezone.utc)

        reference = now or datetime.now(timezone.utc)
        age = reference - cached_at
        if age > max_age:
            logger.debug(f"Cache expired ({age} old, max {max_age})")
            return None

        return activities

    def clear(self) -> None:
        """Remove the cache directory and everything in it."""
        if self.cache_dir.exists():
            shutil.rmtree(self.cache_dir)
            logger.info(f"🗑️ Cleared cache at {self.cache_dir}")
