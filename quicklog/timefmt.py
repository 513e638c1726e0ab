"""Relative and absolute timestamp rendering for log entries."""

import logging
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

# RFC 822 layout, e.g. "02 Jan 06 15:04 UTC"
EXACT_TIME_FORMAT = "%d %b %y %H:%M %Z"


def resolve_timezone(name: str | None) -> tzinfo:
    """Return the zone for an IANA identifier, or UTC when it cannot be loaded."""
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.debug("Unknown timezone %r, falling back to UTC: %s", name, e)
        return timezone.utc


def format_exact(ts: datetime, tz_name: str | None = None) -> str:
    """Render ts as an absolute calendar timestamp in the given zone."""
    return ts.astimezone(resolve_timezone(tz_name)).strftime(EXACT_TIME_FORMAT)


def format_relative(ts: datetime, tz_name: str | None = None, now: datetime | None = None) -> str:
    """Render how long ago ts was.

    Seconds under a minute, minutes and seconds under an hour, hours and
    minutes under a day; anything older falls back to format_exact().
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elapsed = max(int((now - ts).total_seconds()), 0)

    if elapsed < 60:
        return f"{elapsed}s ago"
    if elapsed < 3600:
        return f"{elapsed // 60}m {elapsed % 60}s ago"
    if elapsed < 86400:
        hours = elapsed // 3600
        minutes = (elapsed // 60) % 60
        if minutes == 0:
            return f"{hours}h ago"
        return f"{hours}h {minutes}m ago"
    return format_exact(ts, tz_name)
