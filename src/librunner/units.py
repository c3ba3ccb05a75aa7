"""Unit systems and display formatting for distance and speed."""

from collections.abc import Callable
from enum import Enum
from typing import NamedTuple

from .distance import to_km, to_km_h, to_mile, to_mph


class UnitProfile(NamedTuple):
    """Base unit and display conversions of a unit system."""

    base_unit: str
    split_distance: int  # base units per kilometer or mile
    distance_label: str
    speed_label: str
    to_display_distance: Callable[[float], float]
    to_display_speed: Callable[[float], float]


class UnitSystem(str, Enum):
    """Unit system a race distance is measured in."""

    METRIC = "metric"  # meters, displayed as kilometers
    IMPERIAL = "imperial"  # yards, displayed as miles

    @property
    def profile(self) -> UnitProfile:
        return _PROFILES[self]

    @property
    def base_unit(self) -> str:
        return self.profile.base_unit

    @property
    def split_distance(self) -> int:
        return self.profile.split_distance

    @property
    def distance_label(self) -> str:
        return self.profile.distance_label

    @property
    def speed_label(self) -> str:
        return self.profile.speed_label

    def to_display_distance(self, base_units: float) -> float:
        """Convert a distance in base units to kilometers or miles."""
        return self.profile.to_display_distance(base_units)

    def to_display_speed(self, base_units_per_second: float) -> float:
        """Convert a speed in base units per second to km/h or mph."""
        return self.profile.to_display_speed(base_units_per_second)


_PROFILES: dict[UnitSystem, UnitProfile] = {
    UnitSystem.METRIC: UnitProfile(
        base_unit="m",
        split_distance=1000,
        distance_label="km",
        speed_label="km/h",
        to_display_distance=to_km,
        to_display_speed=to_km_h,
    ),
    UnitSystem.IMPERIAL: UnitProfile(
        base_unit="yd",
        split_distance=1760,
        distance_label="mi",
        speed_label="mph",
        to_display_distance=to_mile,
        to_display_speed=to_mph,
    ),
}


def format_distance(distance: float, unit: UnitSystem = UnitSystem.METRIC) -> str:
    """
    Format distance with appropriate unit label.

    Args:
        distance: Distance in kilometers or miles
        unit: Unit system for label

    Returns:
        Formatted distance string (e.g., "26.20 mi" or "21.10 km")
    """
    return f"{distance:.2f} {unit.distance_label}"


def format_speed(speed: float, unit: UnitSystem = UnitSystem.METRIC) -> str:
    """
    Format speed with appropriate unit label.

    Args:
        speed: Speed in km/h or mph
        unit: Unit system for label

    Returns:
        Formatted speed string (e.g., "10.55 km/h" or "6.55 mph")
    """
    return f"{speed:.2f} {unit.speed_label}"
