"""Distance, travel-time and time-of-day helpers.

Pure functions used by callers to fill the optional distance, duration and
arrive/depart fields of transport records. The repository never calls them.
"""

import math
import re
from dataclasses import dataclass

from backend.app.models.common import HHMM_PATTERN, TransportMode

EARTH_RADIUS_KM = 6371
MINUTES_PER_DAY = 24 * 60

# Average door-to-door speeds (km/h)
DEFAULT_SPEEDS_KMH: dict[TransportMode, float] = {
    TransportMode.walk: 4,
    TransportMode.bike: 15,
    TransportMode.scooter: 20,
    TransportMode.car: 35,
    TransportMode.taxi: 35,
    TransportMode.bus: 25,
    TransportMode.train: 50,
    TransportMode.metro: 50,
    TransportMode.ferry: 25,
    TransportMode.flight: 700,
    TransportMode.other: 30,
}
FALLBACK_SPEED_KMH = 30

# Boarding/check-in time added on top of travel time (minutes)
FIXED_OVERHEAD_MIN: dict[TransportMode, int] = {
    TransportMode.flight: 120,
    TransportMode.ferry: 30,
}

_HHMM_RE = re.compile(HHMM_PATTERN)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves going up, unlike round() which rounds halves to even."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def haversine(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in km, rounded to 0.1 km."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round_half_up(EARTH_RADIUS_KM * c, 1)


def get_default_speed(mode: TransportMode | None) -> float:
    """Average speed for a mode in km/h."""
    if mode is None:
        return FALLBACK_SPEED_KMH
    return DEFAULT_SPEEDS_KMH.get(mode, FALLBACK_SPEED_KMH)


def estimate_duration_min(mode: TransportMode | None, distance_km: float) -> int:
    """Estimated travel time in minutes for a distance, including fixed overhead.

    estimate_duration_min(TransportMode.flight, 500) == 163
    """
    travel_min = int(round_half_up(distance_km / get_default_speed(mode) * 60))
    overhead = FIXED_OVERHEAD_MIN.get(mode, 0) if mode is not None else 0
    return travel_min + overhead


def parse_hhmm(value: str) -> int:
    """Parse 'HH:MM' into minutes since midnight.

    Raises:
        ValueError: value is not a valid 24h time
    """
    if not _HHMM_RE.match(value):
        raise ValueError(f"Invalid time of day: {value!r} (expected HH:MM)")
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def format_hhmm(minutes: int) -> str:
    """Format minutes since midnight as 'HH:MM', wrapping into one day."""
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def calculate_arrive_time(depart_time: str, duration_min: int) -> str:
    """Arrival time of day; past midnight wraps to the next day's clock."""
    return format_hhmm(parse_hhmm(depart_time) + duration_min)


def calculate_depart_time(arrive_time: str, duration_min: int) -> str:
    """Departure time of day; before midnight wraps to the previous day's clock."""
    return format_hhmm(parse_hhmm(arrive_time) - duration_min)


@dataclass(frozen=True)
class LegEstimate:
    """Derived fields for a transport leg."""

    distance_km: float
    duration_min: int
    arrive_time: str | None = None


def estimate_leg(
    mode: TransportMode | None,
    from_lat: float,
    from_lng: float,
    to_lat: float,
    to_lng: float,
    depart_time: str | None = None,
) -> LegEstimate:
    """Estimate distance, duration and (given a departure) arrival for a leg.

    Args:
        mode: Transport mode (None uses the fallback speed)
        from_lat: Origin latitude
        from_lng: Origin longitude
        to_lat: Destination latitude
        to_lng: Destination longitude
        depart_time: Optional 'HH:MM' departure

    Returns:
        LegEstimate with arrive_time set only when depart_time was given
    """
    distance_km = haversine(from_lat, from_lng, to_lat, to_lng)
    duration_min = estimate_duration_min(mode, distance_km)
    arrive_time = calculate_arrive_time(depart_time, duration_min) if depart_time else None
    return LegEstimate(distance_km=distance_km, duration_min=duration_min, arrive_time=arrive_time)
