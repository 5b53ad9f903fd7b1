from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lon: float
    lat: float

    def __post_init__(self) -> None:
        if not (MIN_LATITUDE <= self.lat <= MAX_LATITUDE):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (MIN_LONGITUDE <= self.lon <= MAX_LONGITUDE):
            raise ValueError(f"Invalid longitude: {self.lon}")


def validate_coordinates(
    top_left: Sequence[float], bottom_right: Sequence[float]
) -> bool:
    """Check that top_left is strictly north-west of bottom_right.

    Both corners are ``[longitude, latitude]``.
    """

    # Positive comparisons so NaN corners are rejected too.
    if not top_left[0] < bottom_right[0]:
        return False
    if not top_left[1] > bottom_right[1]:
        return False
    return (
        top_left[0] >= MIN_LONGITUDE
        and bottom_right[0] <= MAX_LONGITUDE
        and top_left[1] <= MAX_LATITUDE
        and bottom_right[1] >= MIN_LATITUDE
    )


def usable_corners(
    top_left: Sequence[float] | None, bottom_right: Sequence[float] | None
) -> bool:
    """True when both corners are present, are pairs and form a valid box."""

    return (
        top_left is not None
        and bottom_right is not None
        and len(top_left) == 2
        and len(bottom_right) == 2
        and validate_coordinates(top_left, bottom_right)
    )


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Rectangle in lon/lat space given by its north-west and south-east corners."""

    top_left: tuple[float, float]
    bottom_right: tuple[float, float]

    @property
    def min_lon(self) -> float:
        return self.top_left[0]

    @property
    def max_lon(self) -> float:
        return self.bottom_right[0]

    @property
    def min_lat(self) -> float:
        return self.bottom_right[1]

    @property
    def max_lat(self) -> float:
        return self.top_left[1]

    @property
    def is_whole_earth(self) -> bool:
        return self == WHOLE_EARTH

    @staticmethod
    def from_corners(
        top_left: Sequence[float] | None, bottom_right: Sequence[float] | None
    ) -> "BoundingBox":
        """Build a box from caller corners, or the whole earth if they are unusable.

        Both corners come from the caller or both come from the default.
        """

        if not usable_corners(top_left, bottom_right):
            return WHOLE_EARTH

        return BoundingBox(
            top_left=(float(top_left[0]), float(top_left[1])),
            bottom_right=(float(bottom_right[0]), float(bottom_right[1])),
        )


WHOLE_EARTH = BoundingBox(
    top_left=(MIN_LONGITUDE, MAX_LATITUDE),
    bottom_right=(MAX_LONGITUDE, MIN_LATITUDE),
)
