"""In-memory ordered collection of tours for the current session."""

import logging
from collections.abc import Iterable, Iterator

from tour_catalog.models import TourModel

logger = logging.getLogger(__name__)


class TourIndexError(IndexError):
    """Raised when a 1-based tour number is out of range."""

    def __init__(self, index: int, count: int) -> None:
        """Record the rejected index and the collection size."""
        self.index = index
        self.count = count
        super().__init__(
            f"Tour number {index} is out of range (1..{count})"
            if count
            else f"Tour number {index} is out of range (no tours)"
        )


class TourRepository:
    """Ordered sequence of tours.

    Insertion order is display order and the basis for 1-based indices used
    by ``get_at`` and ``remove_at``. Names are not required to be unique.
    The repository does not validate tours; see ``builder.accept_tour``.
    """

    def __init__(self, tours: Iterable[TourModel] | None = None) -> None:
        """Initialize the repository, optionally with existing tours."""
        self._tours: list[TourModel] = list(tours or [])

    def add(self, tour: TourModel) -> None:
        """Append a tour."""
        self._tours.append(tour)
        logger.debug("Added tour '%s' (%d total)", tour.name, len(self._tours))

    def list(self) -> tuple[TourModel, ...]:
        """Return all tours in insertion order."""
        return tuple(self._tours)

    def get_at(self, index: int) -> TourModel:
        """Return the tour at a 1-based position.

        Raises:
            TourIndexError: If index < 1 or index > count()
        """
        self._check_index(index)
        return self._tours[index - 1]

    def remove_at(self, index: int) -> TourModel:
        """Remove and return the tour at a 1-based position.

        Later tours shift down by one.

        Raises:
            TourIndexError: If index < 1 or index > count()
        """
        self._check_index(index)
        tour = self._tours.pop(index - 1)
        logger.debug(
            "Removed tour %d '%s' (%d left)", index, tour.name, len(self._tours)
        )
        return tour

    def count(self) -> int:
        """Number of tours held."""
        return len(self._tours)

    def _check_index(self, index: int) -> None:
        if index < 1 or index > len(self._tours):
            raise TourIndexError(index, len(self._tours))

    def __len__(self) -> int:
        """Number of tours held."""
        return len(self._tours)

    def __iter__(self) -> Iterator[TourModel]:
        """Iterate over tours in insertion order."""
        return iter(self._tours)
