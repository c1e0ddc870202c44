"""
Pure view helpers for the home, list and detail pages.
"""

from typing import List, Optional, Sequence

from carmarket.models.enums import CarStatus
from carmarket.schemas.car import CarRead

ALL_STATUSES = "ALL"

STATUS_FILTERS = (ALL_STATUSES, *(status.value for status in CarStatus))


def filter_by_status(cars: Sequence[CarRead], status: str = ALL_STATUSES) -> List[CarRead]:
    """
    Cars whose status equals ``status`` exactly, in their original order.

    Cars without a status only appear under "ALL".

    Raises:
        ValueError: If ``status`` is not one of STATUS_FILTERS
    """
    if status not in STATUS_FILTERS:
        raise ValueError(f"Unknown status filter '{status}'")
    if status == ALL_STATUSES:
        return list(cars)
    return [car for car in cars if car.status is not None and car.status.value == status]


def featured_cars(cars: Sequence[CarRead], count: int = 3) -> List[CarRead]:
    """The first ``count`` available cars."""
    return filter_by_status(cars, CarStatus.AVAILABLE.value)[:max(count, 0)]


def select_image(images: Optional[Sequence[str]], index: int = 0) -> Optional[int]:
    """Clamp a carousel index into range; None when there is nothing to show."""
    if not images:
        return None
    return min(max(index, 0), len(images) - 1)
