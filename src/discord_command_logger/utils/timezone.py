#!/usr/bin/env python3
"""
Utility functions for timezone handling.
"""

import logging
import os
from datetime import datetime
from typing import Optional

import pytz

logger = logging.getLogger(__name__)

LOCALTIME_PATH = "/etc/localtime"


def local_timezone_name() -> Optional[str]:
    """
    IANA name of the system timezone, if it can be determined.

    Checks the TZ environment variable first, then the target of the
    /etc/localtime symlink (e.g. '/usr/share/zoneinfo/Europe/Berlin').
    """
    candidates = []
    tz_env = os.getenv("TZ", "").lstrip(":")
    if tz_env:
        candidates.append(tz_env)
    if os.path.islink(LOCALTIME_PATH):
        target = os.path.realpath(LOCALTIME_PATH)
        if "zoneinfo/" in target:
            candidates.append(target.split("zoneinfo/", 1)[1])

    for name in candidates:
        if name in pytz.all_timezones_set:
            return name
    return None


def now_in_timezone(timezone_str: Optional[str] = None) -> datetime:
    """
    Get the current time as an aware datetime.

    Args:
        timezone_str (str): Timezone string (e.g., 'Europe/Berlin'). Empty means
            the system's local timezone.

    Returns:
        datetime: Current time in the requested timezone
    """
    if timezone_str:
        try:
            return datetime.now(pytz.timezone(timezone_str))
        except pytz.UnknownTimeZoneError:
            logger.warning(f"Unknown timezone {timezone_str!r}, using system timezone")

    local_name = local_timezone_name()
    if local_name:
        return datetime.now(pytz.timezone(local_name))
    return datetime.now().astimezone()


def timezone_name(timestamp: datetime) -> str:
    """
    Name of the timezone a timestamp is expressed in.

    Returns the IANA zone name for pytz zones (e.g. 'Europe/Berlin') and the
    abbreviation otherwise (e.g. 'UTC', 'CET').
    """
    zone = getattr(timestamp.tzinfo, "zone", None)
    if zone:
        return zone
    return timestamp.tzname() or "UTC"


def format_timestamp(timestamp: datetime) -> str:
    """Format as 'YYYY-MM-DD HH:MM:SS (zone)'."""
    return f"{timestamp.strftime('%Y-%m-%d %H:%M:%S')} ({timezone_name(timestamp)})"
