"""
Date and timezone utilities.

Centralizes all date/time operations with proper timezone handling.
All engine timestamps are timezone-aware UTC.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple
import pytz


_EPOCH = datetime(1970, 1, 1, tzinfo=pytz.UTC)


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def now_utc() -> datetime:
        """Current time as an aware UTC datetime."""
        return datetime.now(pytz.UTC)

    def trailing_window(
        self,
        duration: timedelta,
        reference_time: Optional[datetime] = None
    ) -> Tuple[datetime, datetime]:
        """
        Get the window of the given length ending at the reference time.

        Args:
            duration: Length of the window
            reference_time: End of the window (defaults to now in UTC)

        Returns:
            Tuple of (start_datetime, end_datetime), both UTC-aware
        """
        end = self.to_utc(reference_time) if reference_time else self.now_utc()
        start = end - duration

        self.logger.debug(f"Trailing window: {start.isoformat()} to {end.isoformat()}")
        return start, end

    @staticmethod
    def to_iso_with_timezone(dt: datetime) -> str:
        """
        Convert datetime to ISO format string with timezone.

        Args:
            dt: Datetime object (should be timezone-aware)

        Returns:
            ISO format string with timezone (e.g., '2024-01-15T00:00:00+00:00')

        Raises:
            ValueError: If datetime is not timezone-aware
        """
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")

        return dt.isoformat()

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if dt.tzinfo is None:
            # Assume UTC if no timezone
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    @classmethod
    def to_epoch_millis(cls, dt: datetime) -> int:
        """
        Convert datetime to integer milliseconds since the Unix epoch.

        Naive datetimes are treated as UTC.
        """
        delta = cls.to_utc(dt) - _EPOCH
        return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000

    @classmethod
    def parse_iso(cls, value: str) -> datetime:
        """
        Parse an ISO-8601 timestamp into an aware UTC datetime.

        Accepts a trailing 'Z' for UTC.
        """
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return cls.to_utc(datetime.fromisoformat(value))
