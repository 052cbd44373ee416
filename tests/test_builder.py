"""Tests for the tour building operations and end-to-end scenarios."""

import pytest

from tour_catalog.builder import (
    accept_tour,
    compute_cost,
    create_tour,
    set_duration,
    set_duration_unit,
    set_stops,
)
from tour_catalog.codebook.tours import TourVariant
from tour_catalog.pricing import CostMethod
from tour_catalog.read_write import LoadStatus, TourStore
from tour_catalog.repository import TourRepository


class TestCreateTour:
    """Tests for create_tour."""

    def test_name_defaults_to_label(self):
        """Without a name the variant label is used."""
        tour = create_tour(TourVariant.SAFARI)
        assert tour.name == "Safari"
        assert tour.variant is TourVariant.SAFARI

    def test_from_code(self):
        """Menu codes are accepted."""
        assert create_tour(8, "Orient Express").variant is TourVariant.TRAIN_TOUR

    @pytest.mark.parametrize("code", [0, 10, -1])
    def test_unknown_code(self, code):
        """Codes outside 1..9 are rejected."""
        with pytest.raises(ValueError):
            create_tour(code)

    def test_skeleton_is_not_valid(self):
        """A fresh tour has no duration yet."""
        assert create_tour(1).validate_data().rule == "duration<=0"


class TestSetters:
    """Tests for the field setters."""

    def test_set_duration_unit(self):
        """The unit flag is stored as given."""
        tour = create_tour(1)
        set_duration_unit(tour, is_in_hours=True)
        assert tour.is_in_hours is True
        set_duration_unit(tour, is_in_hours=False)
        assert tour.is_in_hours is False

    def test_set_duration(self):
        """Valid durations are parsed and stored."""
        tour = create_tour(1)
        assert set_duration(tour, "2.5") is None
        assert tour.duration == 2.5

    @pytest.mark.parametrize("value", ["0", "-3", "soon"])
    def test_set_duration_rejects(self, value):
        """Invalid durations return an error and leave the tour alone."""
        tour = create_tour(1)
        set_duration(tour, "4")
        error = set_duration(tour, value)
        assert error is not None
        assert tour.duration == 4

    def test_set_stops(self):
        """Valid stop counts are parsed and stored."""
        tour = create_tour(1)
        assert set_stops(tour, "0") is None
        assert tour.stops == 0
        assert set_stops(tour, "6") is None
        assert tour.stops == 6

    @pytest.mark.parametrize("value", ["-1", "1.5", "many"])
    def test_set_stops_rejects(self, value):
        """Invalid stop counts return an error and leave the tour alone."""
        tour = create_tour(1)
        error = set_stops(tour, value)
        assert error is not None
        assert tour.stops == 0


class TestComputeCost:
    """Tests for compute_cost."""

    def test_days_duration_only(self):
        """Day tours priced by duration only."""
        tour = create_tour(TourVariant.CYCLING)
        set_duration(tour, "2")
        set_stops(tour, "3")
        assert compute_cost(tour, CostMethod.DURATION_ONLY) == 200
        assert tour.cost == 200

    def test_days_duration_and_stops(self):
        """Day tours priced by duration and stops."""
        tour = create_tour(TourVariant.CYCLING)
        set_duration(tour, "2")
        set_stops(tour, "3")
        assert compute_cost(tour, CostMethod.DURATION_AND_STOPS) == 350
        assert tour.cost == 350

    @pytest.mark.parametrize("method", list(CostMethod))
    def test_hours_ignore_stops(self, method):
        """Hour tours are priced by the hour whatever the method."""
        tour = create_tour(TourVariant.AIR_TOUR)
        set_duration_unit(tour, is_in_hours=True)
        set_duration(tour, "5")
        set_stops(tour, "7")
        assert compute_cost(tour, method) == 25


class TestAcceptTour:
    """Tests for the validate-then-add boundary."""

    def test_valid_tour_added(self):
        """Valid tours go into the repository."""
        repo = TourRepository()
        tour = create_tour(1)
        set_duration(tour, "1")
        assert accept_tour(repo, tour) is None
        assert repo.list() == (tour,)

    def test_invalid_tour_rejected(self):
        """Invalid tours are reported and not added."""
        repo = TourRepository()
        error = accept_tour(repo, create_tour(1))
        assert error.rule == "duration<=0"
        assert repo.count() == 0


class TestScenarios:
    """End-to-end create, price, save and reload."""

    def test_hiking_days_with_stops(self, tmp_path):
        """3 days and 2 stops cost 400 and survive a reload."""
        tour = create_tour(TourVariant.HIKING, "Test")
        set_duration_unit(tour, is_in_hours=False)
        assert set_duration(tour, "3") is None
        assert set_stops(tour, "2") is None
        assert compute_cost(tour, CostMethod.DURATION_AND_STOPS) == 400

        repo = TourRepository()
        assert accept_tour(repo, tour) is None
        TourStore(tmp_path / "routes.csv").save(repo.list())

        result = TourStore(tmp_path / "routes.csv").load()
        reloaded = TourRepository(result.tours)

        assert result.status is LoadStatus.LOADED
        assert reloaded.count() == 1
        assert reloaded.get_at(1).variant is TourVariant.HIKING
        assert reloaded.get_at(1).cost == 400
        assert reloaded.get_at(1).name == "Test"

    def test_air_tour_in_hours(self):
        """5 hours cost 25 regardless of stops."""
        tour = create_tour(TourVariant.AIR_TOUR)
        set_duration_unit(tour, is_in_hours=True)
        set_duration(tour, "5")
        set_stops(tour, "12")
        assert compute_cost(tour, CostMethod.DURATION_AND_STOPS) == 25
