"""Render ISO-8601 timestamps as local wall-clock strings.

Month, weekday and AM/PM names follow the process ``LC_TIME`` locale. Any
failure (empty input, malformed timestamp, unknown zone) yields the
placeholder instead of an exception.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from .entities import PLACEHOLDER

logger = logging.getLogger(__name__)


def format_local_time(iso_string: Optional[str], time_zone: Optional[str] = None) -> str:
    """Return ``h:MM AM`` in ``time_zone`` (or the local zone)."""
    local = _to_local(iso_string, time_zone)
    if local is None:
        return PLACEHOLDER
    return f"{local:%I}".lstrip("0") + f":{local:%M %p}"


def format_local_date(iso_string: Optional[str], time_zone: Optional[str] = None) -> str:
    """Return ``Wed, Feb 12, 2025`` in ``time_zone`` (or the local zone)."""
    local = _to_local(iso_string, time_zone)
    if local is None:
        return PLACEHOLDER
    return f"{local:%a, %b} {local.day}, {local.year}"


def _to_local(iso_string: Optional[str], time_zone: Optional[str]) -> Optional[datetime]:
    if not iso_string:
        return None
    try:
        parsed = datetime.fromisoformat(iso_string.replace("Z", "+00:00"))
        zone = ZoneInfo(time_zone) if time_zone else None
        return parsed.astimezone(zone)
    except Exception as exc:
        logger.debug("Cannot format %r in zone %r: %s", iso_string, time_zone, exc)
        return None


__all__ = ["format_local_time", "format_local_date"]
