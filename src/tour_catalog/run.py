"""Runner for the interactive tour catalog."""

import logging
from pathlib import Path

from tour_catalog.config import load_config
from tour_catalog.read_write import LoadStatus, TourStore
from tour_catalog.repository import TourRepository
from tour_catalog.shell import TourShell

logger = logging.getLogger(__name__)


def main(config_path: Path | str | None = None) -> None:
    """Load saved tours and run the menu until the user exits."""
    config = load_config(config_path)

    logging.basicConfig(level=config.log_level, format=config.log_format)
    logger.info("Starting tour catalog (store: %s)", config.store_path)

    store = TourStore(config.store_path)
    loaded = store.load()
    if loaded.status is LoadStatus.CORRUPT:
        print(  # noqa: T201
            f"Notice: {loaded.message} Starting with an empty catalog. "
            "Saving any change will overwrite the unreadable file."
        )

    shell = TourShell(TourRepository(loaded.tours), store)
    shell.run()

    logger.info("Tour catalog closed.")


if __name__ == "__main__":
    main()
