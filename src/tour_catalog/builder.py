"""Operations used by the interaction shell to build and accept tours.

A tour is created as an unvalidated skeleton, filled in field by field from
user input, priced, and finally accepted into the repository. Setters report
bad input as a returned ValidationError so the caller can simply re-prompt.
"""

import logging

from tour_catalog.codebook.tours import TourVariant
from tour_catalog.core.validators import (
    ValidationError,
    parse_non_negative_int,
    parse_positive_float,
)
from tour_catalog.models import TourModel
from tour_catalog.pricing import CostMethod, select_cost
from tour_catalog.repository import TourRepository

logger = logging.getLogger(__name__)


def create_tour(variant: TourVariant | int, name: str | None = None) -> TourModel:
    """Create an unvalidated tour of the given variant.

    Args:
        variant: Tour variant or its code
        name: Tour name, defaults to the variant label

    Raises:
        ValueError: If variant is not a known code
    """
    variant = TourVariant(variant)
    return TourModel(variant=variant, name=name or variant.label)


def set_duration_unit(tour: TourModel, is_in_hours: bool) -> None:  # noqa: FBT001
    """Declare whether the tour duration is in hours (else days)."""
    tour.is_in_hours = is_in_hours


def set_duration(tour: TourModel, value: str | float) -> ValidationError | None:
    """Parse and set the tour duration; it must be a positive real."""
    result = parse_positive_float(value, field="duration")
    if result.ok:
        tour.duration = result.value
    return result.error


def set_stops(tour: TourModel, value: str | int) -> ValidationError | None:
    """Parse and set the number of stops; it must be a non-negative int."""
    result = parse_non_negative_int(value, field="stops")
    if result.ok:
        tour.stops = result.value
    return result.error


def compute_cost(tour: TourModel, method: CostMethod) -> float:
    """Price the tour and store the result on it.

    Hour-based tours are priced by the hour whatever the method.
    """
    tour.cost = select_cost(
        tour.duration,
        tour.stops,
        is_in_hours=tour.is_in_hours,
        method=method,
    )
    return tour.cost


def accept_tour(
    repository: TourRepository, tour: TourModel
) -> ValidationError | None:
    """Validate a tour and add it to the repository if it is valid.

    Returns:
        The validation error, or None if the tour was added
    """
    error = tour.validate_data()
    if error is not None:
        logger.info("Rejected tour '%s': %s", tour.name, error)
        return error
    repository.add(tour)
    return None
