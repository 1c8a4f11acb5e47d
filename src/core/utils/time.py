"""UTC timestamps for avatar records and API responses."""

from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with offset, e.g. ``2024-01-15T10:42:31.123456+00:00``."""
    return datetime.now(timezone.utc).isoformat()
