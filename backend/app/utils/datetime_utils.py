"""
Datetime utilities for the registry
Provides the reference-timezone clock used to stamp record lifecycle dates
"""
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional

from app.core.config import get_settings


def reference_timezone(offset_hours: Optional[int] = None) -> timezone:
    """
    Build the fixed-offset timezone records are stamped in

    Args:
        offset_hours: UTC offset in hours; defaults to the configured
            ``reference_utc_offset_hours`` (UTC-3)

    Returns:
        timezone: Fixed-offset tzinfo

    Example:
        >>> reference_timezone(-3)
        datetime.timezone(datetime.timedelta(days=-1, seconds=75600), 'UTC-03:00')
    """
    if offset_hours is None:
        offset_hours = get_settings().reference_utc_offset_hours
    sign = "+" if offset_hours >= 0 else "-"
    return timezone(timedelta(hours=offset_hours), f"UTC{sign}{abs(offset_hours):02d}:00")


def utc_now() -> datetime:
    """Get current UTC time (timezone-aware)"""
    return datetime.now(timezone.utc)


class Clock(ABC):
    """Source of the current time for lifecycle timestamps"""

    @abstractmethod
    def now(self) -> datetime:
        """Current timezone-aware time"""


class SystemClock(Clock):
    """Wall clock expressed in the reference timezone"""

    def __init__(self, tz: Optional[timezone] = None):
        self.tz = tz or reference_timezone()

    def now(self) -> datetime:
        return datetime.now(self.tz)
