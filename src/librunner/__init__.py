"""Race pace and speed calculations in metric and imperial units."""

from .distance import (
    feet_to_meter,
    km_to_mile,
    meter_to_feet,
    mile_to_km,
    to_km,
    to_km_h,
    to_mile,
    to_mph,
)
from .duration import Duration, format_duration, format_pace, parse_duration, to_duration
from .errors import PreconditionError
from .race import AnyRace, ImperialRace, MetricRace, Race, make_race
from .runner import ImperialRunner, MetricRunner, Runner, make_runner
from .running import Running
from .units import UnitSystem, format_distance, format_speed

__version__ = "0.1.0"

__all__ = [
    # Models
    "Duration",
    "Race",
    "MetricRace",
    "ImperialRace",
    "AnyRace",
    "Running",
    "Runner",
    "MetricRunner",
    "ImperialRunner",
    # Factories
    "make_race",
    "make_runner",
    # Errors
    "PreconditionError",
    # Duration utilities
    "to_duration",
    "format_duration",
    "format_pace",
    "parse_duration",
    # Distance utilities
    "to_km",
    "to_mile",
    "to_km_h",
    "to_mph",
    "mile_to_km",
    "km_to_mile",
    "meter_to_feet",
    "feet_to_meter",
    # Units
    "UnitSystem",
    "format_distance",
    "format_speed",
]
