"""Console menu for creating, listing and deleting catalog tours.

The shell owns no state of its own: it drives a TourRepository and flushes
it to a TourStore after every change. Input and output go through the
``input_func`` / ``output_func`` callables so the menu can be scripted.
"""

import logging
from collections.abc import Callable

from tour_catalog import builder
from tour_catalog.codebook.tours import TourVariant
from tour_catalog.models import TourModel, format_number
from tour_catalog.pricing import CostMethod
from tour_catalog.read_write import PersistError, TourStore
from tour_catalog.repository import TourIndexError, TourRepository

logger = logging.getLogger(__name__)

MAIN_MENU = (
    "Choose an action:\n"
    "1. Create a tour\n"
    "2. Show saved tours\n"
    "3. Delete a tour\n"
    "4. Exit"
)

UNIT_MENU = (
    "In which units is the duration given?\n"
    "1. Hours\n"
    "2. Days"
)

COST_MENU = (
    "Choose a cost calculation method:\n"
    "1. Duration only\n"
    "2. Duration and stops"
)

COST_METHODS = {
    "1": CostMethod.DURATION_ONLY,
    "2": CostMethod.DURATION_AND_STOPS,
}

NO_TOURS = "No saved tours."
INVALID_NUMBER = "Invalid tour number."


class TourShell:
    """Interactive menu loop over a tour repository."""

    def __init__(
        self,
        repository: TourRepository,
        store: TourStore,
        input_func: Callable[[str], str] | None = None,
        output_func: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the shell.

        Args:
            repository: Tours for this session
            store: Backing store flushed after every change
            input_func: Reads one line of user input after a prompt,
                defaults to the builtin input
            output_func: Writes one message to the user, defaults to print
        """
        self.repository = repository
        self.store = store
        self._input = input_func or input
        self._output = output_func or print

    def run(self) -> None:
        """Run the menu until the user exits or input ends."""
        actions = {
            "1": self.handle_new_tour,
            "2": self.display_saved_tours,
            "3": self.delete_saved_tour,
        }
        try:
            while True:
                self._output(MAIN_MENU)
                choice = self._ask("Your choice: ")
                if choice == "4":
                    break
                action = actions.get(choice)
                if action is None:
                    self._output("Invalid choice, try again.")
                    continue
                action()
        except EOFError:
            logger.debug("Input closed, leaving the menu")

    # Actions -----------------------------------------------------------------

    def handle_new_tour(self) -> TourModel | None:
        """Create a tour from user input and offer to save it.

        Returns:
            The tour that was built, or None if the variant choice was invalid
        """
        self._output("Choose a tour type:")
        for variant in TourVariant:
            self._output(f"{variant.value}. {variant.label}")
        choice = self._ask("Your choice: ")

        try:
            tour = builder.create_tour(int(choice))
        except ValueError:
            self._output("Invalid choice.")
            return None

        self._output(f"You chose: {tour.name}")
        self.set_tour_data(tour)
        self.save_tour_prompt(tour)
        return tour

    def set_tour_data(self, tour: TourModel) -> None:
        """Ask for unit, duration, stops and cost method until all are valid."""
        self._output(UNIT_MENU)
        builder.set_duration_unit(tour, self._ask("Your choice: ") == "1")

        while True:
            error = builder.set_duration(
                tour, self._ask("Enter the tour duration (positive number): ")
            )
            if error is None:
                error = builder.set_stops(
                    tour,
                    self._ask("Enter the number of stops (whole number): "),
                )
            if error is not None:
                self._output(f"Error: {error.message} Try again.")
                continue

            self._output(COST_MENU)
            method = COST_METHODS.get(self._ask("Your choice: "))
            if method is None:
                self._output("Invalid calculation method. Try again.")
                continue

            builder.compute_cost(tour, method)
            break

        self._output(tour.planning_message())
        self._output(f"Total tour cost: {format_number(tour.cost)}")

    def save_tour_prompt(self, tour: TourModel) -> None:
        """Ask whether to keep the tour and flush it to the store if so."""
        if self._ask("Save this tour? (y/n): ").lower() != "y":
            return

        error = builder.accept_tour(self.repository, tour)
        if error is not None:
            self._output(f"Tour not saved: {error.message}")
            return
        if self._flush():
            self._output("Tour saved.")

    def display_saved_tours(self) -> None:
        """List all tours, then show one chosen by number."""
        if not self.repository.count():
            self._output(NO_TOURS)
            return

        self._output("Saved tours:")
        for i, tour in enumerate(self.repository, start=1):
            self._output(f"{i}. {tour.describe()}")

        index = self._ask_index(
            "Enter a tour number to view, or 0 to go back: "
        )
        try:
            tour = self.repository.get_at(index)
        except TourIndexError:
            self._output(INVALID_NUMBER)
            return
        self._output(f"Tour: {tour.describe()}")

    def delete_saved_tour(self) -> None:
        """Remove a tour chosen by number and flush the store."""
        if not self.repository.count():
            self._output(NO_TOURS)
            return

        self._output("Saved tours:")
        for i, tour in enumerate(self.repository, start=1):
            self._output(f"{i}. {tour.name}")

        index = self._ask_index("Enter the number of the tour to delete: ")
        try:
            self.repository.remove_at(index)
        except TourIndexError:
            self._output(INVALID_NUMBER)
            return
        if self._flush():
            self._output("Tour deleted.")

    # Helpers -----------------------------------------------------------------

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_index(self, prompt: str) -> int:
        """Read a tour number; anything that is not an integer maps to 0."""
        try:
            return int(self._ask(prompt))
        except ValueError:
            return 0

    def _flush(self) -> bool:
        """Save the repository; report failures instead of raising."""
        try:
            self.store.save(self.repository.list())
        except PersistError as e:
            logger.error("%s", e)
            self._output(f"Error saving tours: {e}")
            return False
        return True
