"""Loads and saves the tour catalog from/to its backing store file.

The store is a single table with one row per tour. The ``variant`` column
holds the TourVariant code and is the discriminator that lets a reloaded
record report the right label and planning message.

Load policy: a missing store is the normal first-run state and yields no
tours. A store that exists but cannot be read back into valid tours is
reported as CORRUPT, logged, and also yields no tours; the error is never
propagated to the caller.
"""

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

import polars as pl
from pydantic import ValidationError as PydanticValidationError

from tour_catalog.core.validators import ValidationError
from tour_catalog.models import TourModel

logger = logging.getLogger(__name__)

# Column order of the backing store
STORE_SCHEMA: dict[str, pl.DataType] = {
    "variant": pl.Int64,
    "name": pl.String,
    "duration": pl.Float64,
    "stops": pl.Int64,
    "is_in_hours": pl.Boolean,
    "cost": pl.Float64,
}

SUPPORTED_SUFFIXES = (".csv", ".parquet")


class PersistError(Exception):
    """Raised when the catalog cannot be written to the backing store."""


class LoadStatus(StrEnum):
    """Outcome of reading the backing store."""

    LOADED = "loaded"
    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"


@dataclass
class LoadResult:
    """Tours read from the store together with how the read went."""

    status: LoadStatus
    tours: list[TourModel] = field(default_factory=list)
    message: str = ""


class TourStore:
    """Backing store for the tour catalog.

    The file format follows the path suffix: ``.csv`` or ``.parquet``.
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize the store.

        Args:
            path: Location of the backing store file

        Raises:
            ValueError: If the file suffix is not a supported format
        """
        self.path = Path(path)
        if self.path.suffix not in SUPPORTED_SUFFIXES:
            msg = (
                f"Unsupported file format for tour store: {self.path} "
                f"(expected one of {', '.join(SUPPORTED_SUFFIXES)})"
            )
            raise ValueError(msg)

    def save(self, tours: Iterable[TourModel]) -> None:
        """Write all tours to the store, replacing its previous contents.

        Data is written to a temporary file next to the store and moved into
        place once complete, so a failed write leaves the old store intact.

        Args:
            tours: Tours in display order

        Raises:
            PersistError: If the store could not be written
        """
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")

        try:
            df = tours_to_frame(tours)
            logger.info("Writing %d tours to %s...", len(df), self.path)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if self.path.suffix == ".csv":
                df.write_csv(tmp_path)
            else:
                df.write_parquet(tmp_path)
            os.replace(tmp_path, self.path)
        except (
            OSError,
            OverflowError,
            TypeError,
            pl.exceptions.PolarsError,
        ) as e:
            msg = f"Failed to save tours to {self.path}: {e}"
            raise PersistError(msg) from e
        finally:
            tmp_path.unlink(missing_ok=True)

        logger.info("Tours saved successfully.")

    def load(self) -> LoadResult:
        """Read all tours from the store.

        Returns:
            LoadResult with status LOADED, NOT_FOUND or CORRUPT. Tours are
            empty unless the status is LOADED.
        """
        if not self.path.exists():
            logger.info("No tour store at %s, starting empty", self.path)
            return LoadResult(
                status=LoadStatus.NOT_FOUND,
                message=f"No saved tours found at {self.path}.",
            )

        logger.info("Loading tours from %s...", self.path)
        try:
            if self.path.suffix == ".csv":
                df = pl.read_csv(
                    self.path,
                    schema=STORE_SCHEMA,
                ).with_columns(pl.col("name").fill_null(""))
            else:
                df = pl.read_parquet(self.path).select(
                    [pl.col(c).cast(t, strict=True) for c, t in STORE_SCHEMA.items()]
                )
            tours = frame_to_tours(df)
        except (
            OSError,
            pl.exceptions.PolarsError,
            PydanticValidationError,
            ValidationError,
        ) as e:
            logger.warning("Tour store %s is corrupt, ignoring it: %s", self.path, e)
            return LoadResult(
                status=LoadStatus.CORRUPT,
                message=f"Saved tours in {self.path} could not be read: {e}",
            )

        logger.info("Loaded %d tours.", len(tours))
        return LoadResult(status=LoadStatus.LOADED, tours=tours)


def tours_to_frame(tours: Iterable[TourModel]) -> pl.DataFrame:
    """Convert tours to a DataFrame in store column order."""
    rows = [tour.model_dump(mode="json") for tour in tours]
    return pl.DataFrame(
        {col: [row[col] for row in rows] for col in STORE_SCHEMA},
        schema=STORE_SCHEMA,
    )


def frame_to_tours(df: pl.DataFrame) -> list[TourModel]:
    """Convert store rows back to tours.

    Raises:
        PydanticValidationError: If a row does not fit the model
        ValidationError: If a row breaks a business rule
    """
    tours = []
    for i, row in enumerate(df.iter_rows(named=True), start=1):
        tour = TourModel.model_validate(row)
        error = tour.validate_data()
        if error is not None:
            error.message = f"Stored tour {i}: {error.message}"
            raise error
        tours.append(tour)
    return tours
