"""Distance and speed conversion utilities."""

# Conversion constants
METERS_PER_KM = 1000
YARDS_PER_MILE = 1760
SECONDS_PER_HOUR = 3600
METERS_PER_FOOT = 0.3048
KM_PER_MILE = 1.609344

# m/s -> km/h
MPS_TO_KMH = SECONDS_PER_HOUR / METERS_PER_KM
# yd/s -> mph, kept as the exact ratio (2.04545...)
YPS_TO_MPH = SECONDS_PER_HOUR / YARDS_PER_MILE


def to_km(meters: float) -> float:
    """
    Convert meters to kilometers.

    Args:
        meters: Distance in meters

    Returns:
        Distance in kilometers
    """
    return meters / METERS_PER_KM


def to_mile(yards: float) -> float:
    """
    Convert yards to miles.

    Args:
        yards: Distance in yards

    Returns:
        Distance in miles
    """
    return yards / YARDS_PER_MILE


def to_km_h(meters_per_second: float) -> float:
    """Convert meters per second to kilometers per hour."""
    return meters_per_second * MPS_TO_KMH


def to_mph(yards_per_second: float) -> float:
    """Convert yards per second to miles per hour."""
    return yards_per_second * YPS_TO_MPH


def mile_to_km(miles: float) -> float:
    """Convert miles to kilometers."""
    return miles * KM_PER_MILE


def km_to_mile(km: float) -> float:
    """Convert kilometers to miles."""
    return km / KM_PER_MILE


def meter_to_feet(meters: float) -> float:
    return meters / METERS_PER_FOOT


def feet_to_meter(feet: float) -> float:
    return feet * METERS_PER_FOOT
