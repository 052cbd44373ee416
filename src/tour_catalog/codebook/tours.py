"""Codebook for tour variants."""

from tour_catalog.core.labeled_enum import LabeledEnum


class TourVariant(LabeledEnum):
    """Tour variant value labels.

    Codes match the numbering of the "choose a tour type" menu and are the
    discriminator written to the backing store.
    """

    EXCURSION = (1, "Excursion")
    HIKING = (2, "Hiking trip")
    CRUISE = (3, "Cruise")
    SAFARI = (4, "Safari")
    HORSE_RIDING = (5, "Horse riding route")
    CYCLING = (6, "Cycling route")
    MOTORCYCLE_TOUR = (7, "Motorcycle route")
    TRAIN_TOUR = (8, "Train journey")
    AIR_TOUR = (9, "Air tour")


PLANNING_MESSAGES: dict[TourVariant, str] = {
    TourVariant.EXCURSION: "Planning an excursion: sightseeing.",
    TourVariant.HIKING: "Planning a hike: laying out a route with stops.",
    TourVariant.CRUISE: (
        "Planning a cruise: visiting cities and on-board entertainment."
    ),
    TourVariant.SAFARI: "Planning a safari: wildlife and exotic places.",
    TourVariant.HORSE_RIDING: (
        "Planning a horse riding trip: routes for riders."
    ),
    TourVariant.CYCLING: (
        "Planning a cycling route: the best path for cyclists."
    ),
    TourVariant.MOTORCYCLE_TOUR: (
        "Planning a motorcycle route: speed and adventure."
    ),
    TourVariant.TRAIN_TOUR: "Planning a train journey: routes by rail.",
    TourVariant.AIR_TOUR: "Planning an air tour: travelling by plane.",
}


def planning_message(variant: TourVariant) -> str:
    """Return the planning message for a tour variant."""
    return PLANNING_MESSAGES[TourVariant(variant)]
