"""Timestamp formatting helpers."""

from datetime import datetime, timedelta, timezone

_BEIJING = timezone(timedelta(hours=8), "CST")


def bytes_to_beijing_time(data):
    """Convert a UTC ``YYYY-MM-DD HH:MM:SS`` timestamp to UTC+8 ``YYYYMMDDHHMMSS``; "" if invalid."""
    try:
        parsed = datetime.strptime(bytes(data).decode("utf-8", errors="replace"),
                                   "%Y-%m-%d %H:%M:%S")
    except ValueError:
        return ""
    return parsed.replace(tzinfo=timezone.utc).astimezone(_BEIJING).strftime("%Y%m%d%H%M%S")


def current_time(now=None):
    """Format the local time (or ``now``) as ``YYYYMMDDHHMMSS``."""
    return (now or datetime.now()).strftime("%Y%m%d%H%M%S")


def format_time_floor_10_minutes(now=None):
    """Format UTC time floored to ten minutes as ``YYYYMMDDHHMM``; naive ``now`` is UTC."""
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.replace(minute=moment.minute - moment.minute % 10).strftime("%Y%m%d%H%M")