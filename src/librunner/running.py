"""Running model: pace, speed and split planning against a race."""

import logging
from collections.abc import Sequence
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .duration import Duration
from .errors import PreconditionError
from .race import Race

logger = logging.getLogger(__name__)


class Running(BaseModel):
    """
    A completed or planned run, described only by its duration.

    A running holds no race; each computation takes the race it is measured
    against, so one running can be evaluated over several distances.
    """

    duration: Duration = Field(description="Total elapsed time of the run")

    model_config = {"frozen": True}

    @field_validator("duration", mode="before")
    @classmethod
    def coerce_duration(cls, v: Any) -> Any:
        """Accept a timedelta or a number of seconds in place of a Duration."""
        if isinstance(v, timedelta):
            return Duration.from_timedelta(v)
        if isinstance(v, int) and not isinstance(v, bool):
            return {"total_seconds": v}
        return v

    @classmethod
    def from_pace(cls, race: Race, pace: Duration) -> "Running":
        """
        Create a running that covers the race at a constant pace.

        Args:
            race: Race to cover
            pace: Time per kilometer or mile

        Returns:
            Running whose duration is the pace times the display distance,
            truncated to whole seconds
        """
        # Integer arithmetic keeps exact results exact
        total = pace.total_seconds * race.distance // race.split_distance
        return cls(duration=Duration(total_seconds=total))

    @classmethod
    def from_splits(cls, splits: Sequence[Duration]) -> "Running":
        """Create a running whose duration is the sum of the splits."""
        total = sum(split.total_seconds for split in splits)
        return cls(duration=Duration(total_seconds=total))

    def average_pace(self, race: Race) -> Duration:
        """
        Calculate average time per kilometer (metric) or mile (imperial).

        Raises:
            PreconditionError: If the race distance is zero
        """
        if race.distance == 0:
            raise PreconditionError("average pace is undefined for a zero-distance race")
        pace_seconds = self.duration.total_seconds * race.split_distance // race.distance
        logger.debug(
            f"Pace over {race.distance}{race.units.base_unit}: {pace_seconds}s "
            f"per {race.units.distance_label}"
        )
        return Duration(total_seconds=pace_seconds)

    def speed(self, race: Race) -> float:
        """
        Calculate speed in base units per second (m/s or yd/s).

        Raises:
            PreconditionError: If the duration is zero
        """
        if self.duration.total_seconds == 0:
            raise PreconditionError("speed is undefined for a zero-duration running")
        return race.distance / self.duration.total_seconds

    def display_speed(self, race: Race) -> float:
        """Calculate speed in km/h (metric) or mph (imperial)."""
        return race.units.to_display_speed(self.speed(race))

    def splits_with_pace(self, race: Race, pace: Duration) -> list[Duration]:
        """Get one split per kilometer or mile, all at the given pace."""
        return [pace] * race.num_splits()

    def splits(self, race: Race) -> list[Duration]:
        """Get even splits at the average pace."""
        return self.splits_with_pace(race, self.average_pace(race))

    def negative_splits(self, race: Race, degree: int) -> list[Duration]:
        """
        Get splits that start slow and speed up.

        The first split is ``degree`` seconds slower than the average pace; the
        pace drops by one second per block of ``num_splits // (2 * degree + 1)``
        splits.

        Args:
            race: Race to split
            degree: Seconds between the first split and the average pace

        Raises:
            PreconditionError: If degree is negative or a split would fall below zero
        """
        return self._graded_splits(race, degree, step=-1)

    def positive_splits(self, race: Race, degree: int) -> list[Duration]:
        """
        Get splits that start fast and slow down.

        Mirror image of negative_splits: the first split is ``degree`` seconds
        faster than the average pace and each block adds one second.

        Raises:
            PreconditionError: If degree is negative or exceeds the average pace
        """
        return self._graded_splits(race, degree, step=1)

    def _graded_splits(self, race: Race, degree: int, step: int) -> list[Duration]:
        if degree < 0:
            raise PreconditionError(f"degree must not be negative, got {degree}")

        average = self.average_pace(race).total_seconds
        num_splits = race.num_splits()
        variation = 2 * degree + 1
        # Races shorter than the variation get one split per block
        block = max(num_splits // variation, 1)
        start = average - step * degree

        paces = [start + step * (index // block) for index in range(num_splits)]
        if min(paces) < 0:
            raise PreconditionError(
                f"degree {degree}s is too large for an average pace of {average}s"
            )

        logger.debug(
            f"Graded splits over {num_splits} splits: {paces[0]}s to {paces[-1]}s, block {block}"
        )
        return [Duration(total_seconds=pace) for pace in paces]
