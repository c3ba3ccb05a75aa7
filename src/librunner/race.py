"""Race models measured in metric or imperial base units."""

import logging
from collections.abc import Sequence
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from .duration import Duration
from .units import UnitSystem

logger = logging.getLogger(__name__)


class Race(BaseModel):
    """
    A race of a fixed distance.

    The distance is an integer count of the unit system's base unit: meters
    for MetricRace, yards for ImperialRace. Use one of the two variants rather
    than this base class.
    """

    distance: int = Field(
        description="Race distance in the unit system's base unit",
        ge=0,
    )
    unit_system: UnitSystem

    model_config = {"frozen": True}

    @property
    def units(self) -> UnitSystem:
        """Unit system of this race."""
        return UnitSystem(self.unit_system)

    @property
    def split_distance(self) -> int:
        """Base units per kilometer or mile."""
        return self.units.split_distance

    def display_distance(self) -> float:
        """Get distance in kilometers or miles."""
        return self.units.to_display_distance(self.distance)

    def num_splits(self) -> int:
        """Number of kilometer or mile splits, counting a trailing partial split."""
        full, remainder = divmod(self.distance, self.split_distance)
        return full + (1 if remainder > 0 else 0)

    @classmethod
    def from_splits(cls, splits: Sequence[Duration]) -> "Race":
        """Create a race covering one full kilometer or mile per split."""
        field = cls.model_fields["unit_system"]
        if field.is_required():
            raise TypeError(
                f"{cls.__name__}.from_splits needs a unit system; "
                "call it on MetricRace or ImperialRace"
            )
        unit = UnitSystem(field.default)
        race = cls(distance=len(splits) * unit.split_distance)
        logger.debug(f"Built {race.unit_system} race of {race.distance}{unit.base_unit} from splits")
        return race


class MetricRace(Race):
    """A race measured in meters."""

    unit_system: Literal["metric"] = "metric"


class ImperialRace(Race):
    """A race measured in yards."""

    unit_system: Literal["imperial"] = "imperial"


AnyRace = Annotated[MetricRace | ImperialRace, Field(discriminator="unit_system")]


def make_race(distance: int, unit_system: UnitSystem | str = UnitSystem.METRIC) -> Race:
    """
    Create a race in the given unit system.

    Args:
        distance: Distance in meters (metric) or yards (imperial)
        unit_system: Unit system the distance is measured in

    Returns:
        MetricRace or ImperialRace
    """
    if UnitSystem(unit_system) == UnitSystem.IMPERIAL:
        return ImperialRace(distance=distance)
    return MetricRace(distance=distance)
