"""Human-readable formatting for durations and distances."""


def format_duration(minutes: int) -> str:
    """Format minutes as '45m', '2h' or '1h 30m'."""
    hours, mins = divmod(minutes, 60)
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def format_distance(km: float) -> str:
    """Format a distance as metres below 1 km, else km with one decimal."""
    if km < 1:
        return f"{round(km * 1000)}m"
    return f"{km:.1f}km"
