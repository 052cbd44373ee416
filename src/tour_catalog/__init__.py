"""Console catalog of travel tours with file-backed persistence."""

from .builder import (
    accept_tour,
    compute_cost,
    create_tour,
    set_duration,
    set_duration_unit,
    set_stops,
)
from .codebook.tours import TourVariant
from .core.validators import ValidationError
from .models import TourModel
from .pricing import CostMethod
from .read_write import LoadResult, LoadStatus, PersistError, TourStore
from .repository import TourIndexError, TourRepository

__all__ = [
    "CostMethod",
    "LoadResult",
    "LoadStatus",
    "PersistError",
    "TourIndexError",
    "TourModel",
    "TourRepository",
    "TourStore",
    "TourVariant",
    "ValidationError",
    "accept_tour",
    "compute_cost",
    "create_tour",
    "set_duration",
    "set_duration_unit",
    "set_stops",
]
