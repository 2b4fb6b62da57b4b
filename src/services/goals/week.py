"""
Week Window
-----------
Calendar week boundaries and timestamp parsing.

Weeks run Monday 00:00 to Sunday 23:59:59 in the timezone of the reference
instant. A naive reference instant is taken as system local wall time. Activity
timestamps are compared as absolute instants.
"""
import re
from datetime import date, datetime, timedelta
from typing import Optional

# Strict RFC3339: "T" separator, seconds required, "Z" or a +HH:MM offset
RFC3339_PATTERN = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})T(?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?(?P<offset>Z|[+-]\d{2}:\d{2})$"
)


def _monday_of(day: date) -> date:
    # isoweekday: Monday is 1, Sunday is 7
    return day - timedelta(days=day.isoweekday() - 1)


def week_start(now: Optional[datetime] = None) -> datetime:
    """
    Return Monday 00:00:00 of the week containing ``now``.

    Sunday is the last day of the week, so a Sunday maps back six days. The
    returned instant carries Monday's own UTC offset, which differs from the
    offset of ``now`` when a DST change happened in between.

    Args:
        now: Reference instant. Defaults to the current local time.

    Returns:
        Aware datetime.
    """
    if now is None:
        now = datetime.now()

    monday = _monday_of(now.date())

    if now.tzinfo is None:
        # Local midnight resolved with the offset in effect on Monday
        return datetime(monday.year, monday.month, monday.day).astimezone()

    return datetime(monday.year, monday.month, monday.day, tzinfo=now.tzinfo)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an RFC3339 timestamp such as ``2024-09-22T07:30:00Z``.

    Fractional seconds are accepted and truncated to microseconds. Returns None
    for empty or malformed values, for values without a UTC offset, and for
    ISO 8601 variants outside RFC3339 (space separator, basic format).
    """
    if not value or not isinstance(value, str):
        return None

    match = RFC3339_PATTERN.match(value.strip())
    if match is None:
        return None

    fraction = match.group("fraction") or ""
    offset = match.group("offset")
    normalized = f"{match.group('date')}T{match.group('time')}"
    if fraction:
        normalized += "." + fraction[:6].ljust(6, "0")
    normalized += "+00:00" if offset == "Z" else offset

    try:
        return datetime.fromisoformat(normalized)
    except ValueError:
        return None
