"""General utility functions."""
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from app.core.constants import CHECKIN_TIME_FORMAT, SCAN_PATH


def to_timezone(dt: datetime, tz: ZoneInfo) -> datetime:
    """Convert datetime to specified timezone."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(tz)


def format_checkin_time(tz: ZoneInfo, now: Optional[datetime] = None) -> str:
    """Render a check-in moment the way it is stored on attendance rows."""
    if now is None:
        now = datetime.now(timezone.utc)
    return to_timezone(now, tz).strftime(CHECKIN_TIME_FORMAT)


def build_scan_url(base_url: str, token: str) -> str:
    """URL encoded into a member's QR code."""
    return f"{base_url.rstrip('/')}{SCAN_PATH}?token={token}"
