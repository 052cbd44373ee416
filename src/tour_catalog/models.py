"""Data model for catalog tours.

This module uses Pydantic for type coercion of stored records. Business
rules (positive duration, non-negative stops) are checked separately by
``TourModel.validate_data`` so a tour can be filled in step by step and
checked once it is complete.
"""

from pydantic import BaseModel, ConfigDict, Field

from tour_catalog import pricing
from tour_catalog.codebook.tours import TourVariant, planning_message
from tour_catalog.core.validators import ValidationError


# Data Models ------------------------------------------------------------------
class TourModel(BaseModel):
    """A single planned trip record.

    All nine variants share this shape; ``variant`` only selects the display
    label and the planning message.
    """

    model_config = ConfigDict(validate_assignment=True)

    variant: TourVariant = Field(frozen=True)
    name: str
    duration: float = 0.0
    stops: int = 0
    is_in_hours: bool = False
    cost: float = 0.0  # derived, see pricing.select_cost

    def validate_data(self) -> ValidationError | None:
        """Check the tour's business rules.

        Returns:
            The first rule violation found, or None if the tour is valid
        """
        if self.duration <= 0:
            return ValidationError(
                rule="duration<=0",
                message="Tour duration must be greater than 0.",
                field="duration",
            )
        if self.stops < 0:
            return ValidationError(
                rule="stops<0",
                message="Number of stops cannot be negative.",
                field="stops",
            )
        return None

    def calculate_cost_by_duration(self, duration: float) -> float:
        """Cost based on duration in days."""
        return pricing.cost_by_duration(duration)

    def calculate_cost_by_duration_and_stops(
        self, duration: float, stops: int
    ) -> float:
        """Cost based on duration in days and number of stops."""
        return pricing.cost_by_duration_and_stops(duration, stops)

    def calculate_cost_in_hours(self, hours: float) -> float:
        """Cost based on duration in hours."""
        return pricing.cost_in_hours(hours)

    def planning_message(self) -> str:
        """Planning message for this tour's variant."""
        return planning_message(self.variant)

    def describe(self) -> str:
        """One-line summary used when listing or viewing tours."""
        unit = "hours" if self.is_in_hours else "days"
        return (
            f"{self.name} - Duration: {format_number(self.duration)} {unit}, "
            f"Stops: {self.stops}, Cost: {format_number(self.cost)}"
        )


def format_number(value: float) -> str:
    """Format a float without a trailing ``.0`` for whole numbers."""
    return str(int(value)) if float(value).is_integer() else str(value)
