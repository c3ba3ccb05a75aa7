"""Duration value type and HH:MM:SS formatting utilities."""

import logging
from datetime import timedelta
from functools import total_ordering

from pydantic import BaseModel, Field

from .errors import PreconditionError

logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600


@total_ordering
class Duration(BaseModel):
    """
    Elapsed time with whole-second resolution.

    Durations are immutable, compare by their total number of seconds and
    render as zero-padded HH:MM:SS.
    """

    total_seconds: int = Field(
        description="Elapsed time in whole seconds",
        ge=0,
    )

    model_config = {"frozen": True}

    @property
    def hours(self) -> int:
        """Whole hours, unbounded."""
        return self.total_seconds // SECONDS_PER_HOUR

    @property
    def minutes(self) -> int:
        """Minutes past the hour (0-59)."""
        return (self.total_seconds // SECONDS_PER_MINUTE) % 60

    @property
    def seconds(self) -> int:
        """Seconds past the minute (0-59)."""
        return self.total_seconds % SECONDS_PER_MINUTE

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Duration":
        """Build a duration from a timedelta, dropping sub-second precision."""
        if value < timedelta(0):
            raise PreconditionError(f"duration must not be negative, got {value}")
        return cls(total_seconds=int(value.total_seconds()))

    def as_timedelta(self) -> timedelta:
        return timedelta(seconds=self.total_seconds)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_seconds < other.total_seconds

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(total_seconds=self.total_seconds + other.total_seconds)

    def __str__(self) -> str:
        return format_duration(self)


def to_duration(hours: int, minutes: int, seconds: int) -> Duration:
    """
    Create a duration from hours, minutes and seconds.

    Minutes and seconds are not limited to 0-59; ``to_duration(0, 90, 0)`` is
    one and a half hours.

    Args:
        hours: Whole hours
        minutes: Whole minutes
        seconds: Whole seconds

    Returns:
        Duration totalling the three components

    Raises:
        PreconditionError: If any component is negative
    """
    if hours < 0 or minutes < 0 or seconds < 0:
        raise PreconditionError(
            f"duration components must not be negative, got {hours}h {minutes}m {seconds}s"
        )
    return Duration(
        total_seconds=hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
    )


def format_duration(duration: Duration) -> str:
    """
    Format a duration as zero-padded HH:MM:SS.

    The hour field grows past two digits when needed (e.g. "135:59:01").
    """
    return f"{duration.hours:02d}:{duration.minutes:02d}:{duration.seconds:02d}"


def format_pace(pace: Duration) -> str:
    """
    Format a pace as MM:SS, switching to HH:MM:SS for paces of an hour or more.

    Args:
        pace: Time per kilometer or mile

    Returns:
        Formatted pace string (e.g., "05:41")
    """
    if pace.hours == 0:
        return f"{pace.minutes:02d}:{pace.seconds:02d}"
    return format_duration(pace)


def parse_duration(text: str) -> Duration:
    """
    Parse "HH:MM:SS", "MM:SS" or a bare number of seconds into a duration.

    Raises:
        ValueError: If the text is not in one of the accepted formats
    """
    parts = text.strip().split(":")
    if len(parts) > 3 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Duration must be in HH:MM:SS, MM:SS or seconds format, got {text!r}")

    values = [int(part) for part in parts]
    # Only the leading field may exceed its usual range
    if any(value >= 60 for value in values[1:]):
        raise ValueError(f"Minutes and seconds must be below 60, got {text!r}")

    while len(values) < 3:
        values.insert(0, 0)
    hours, minutes, seconds = values
    duration = to_duration(hours, minutes, seconds)
    logger.debug(f"Parsed {text!r} as {duration.total_seconds}s")
    return duration
