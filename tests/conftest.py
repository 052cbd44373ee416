"""Shared fixtures for tour catalog tests."""

import pytest

from tour_catalog.codebook.tours import TourVariant
from tour_catalog.models import TourModel
from tour_catalog.read_write import TourStore
from tour_catalog.repository import TourRepository


@pytest.fixture
def all_variant_tours():
    """One valid tour of every variant, with varied field values."""
    return [
        TourModel(
            variant=variant,
            name=f"{variant.label} #{variant.value}",
            duration=variant.value * 1.5,
            stops=variant.value - 1,
            is_in_hours=variant.value % 2 == 0,
            cost=variant.value * 37.25,
        )
        for variant in TourVariant
    ]


@pytest.fixture
def repository(all_variant_tours):
    """Repository holding the first three sample tours."""
    return TourRepository(all_variant_tours[:3])


@pytest.fixture
def csv_store(tmp_path):
    """CSV store in a temporary directory."""
    return TourStore(tmp_path / "routes.csv")
