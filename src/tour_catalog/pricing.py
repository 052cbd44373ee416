"""Tour pricing formulas and the rule for choosing between them."""

from enum import StrEnum

COST_PER_DAY = 100
COST_PER_STOP = 50
COST_PER_HOUR = 5


class CostMethod(StrEnum):
    """Cost calculation methods offered to the user."""

    DURATION_ONLY = "duration_only"
    DURATION_AND_STOPS = "duration_and_stops"


def cost_by_duration(duration: float) -> float:
    """Cost of a tour measured in days."""
    return duration * COST_PER_DAY


def cost_by_duration_and_stops(duration: float, stops: int) -> float:
    """Cost of a tour measured in days, plus a charge per stop."""
    return duration * COST_PER_DAY + stops * COST_PER_STOP


def cost_in_hours(hours: float) -> float:
    """Cost of a tour measured in hours."""
    return hours * COST_PER_HOUR


def select_cost(
    duration: float,
    stops: int,
    *,
    is_in_hours: bool,
    method: CostMethod,
) -> float:
    """Apply the cost selection policy.

    Hour-based tours are always priced by the hour and never include stops,
    whatever method was requested. Day-based tours use the requested method.

    Args:
        duration: Tour duration in hours or days
        stops: Number of stops
        is_in_hours: Whether duration is in hours
        method: Requested calculation method

    Returns:
        The tour cost
    """
    if is_in_hours:
        return cost_in_hours(duration)
    if CostMethod(method) is CostMethod.DURATION_AND_STOPS:
        return cost_by_duration_and_stops(duration, stops)
    return cost_by_duration(duration)
