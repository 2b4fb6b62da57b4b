"""Human-readable durations and dates for the terminal report."""
from datetime import datetime

from .week import parse_timestamp


def format_duration(seconds: int) -> str:
    """Format a duration in seconds as ``1h 2m 3s``, or ``2m 3s`` under an hour."""
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    return f"{minutes}m {secs}s"


def format_date(value: str) -> str:
    """
    Format a timestamp as ``Sep 22, 2024 07:30``.

    Strava's ``start_date_local`` ends with ``Z`` although it holds local wall
    time, so the clock time is shown as-is without conversion. Empty values
    give ``N/A``; unparseable values are returned unchanged.
    """
    if not value:
        return "N/A"
    parsed = parse_timestamp(value)
    if parsed is None:
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return value
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year} {parsed.strftime('%H:%M')}"
