"""Capture timestamp formatting."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "America/Sao_Paulo"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_capture_timestamp(moment: Optional[datetime] = None, tz_name: str = DEFAULT_TIMEZONE) -> str:
    """Format ``moment`` as ``day month year, HH:MM:SS`` in the given timezone.

    Naive datetimes are taken as UTC. ``None`` means now.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    local = moment.astimezone(ZoneInfo(tz_name))
    return f"{local.day} {MONTH_NAMES[local.month - 1]} {local.year}, {local:%H:%M:%S}"
