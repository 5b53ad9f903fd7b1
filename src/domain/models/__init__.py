from .geo import (
    WHOLE_EARTH,
    BoundingBox,
    GeoPoint,
    usable_corners,
    validate_coordinates,
)

__all__ = [
    "BoundingBox",
    "GeoPoint",
    "WHOLE_EARTH",
    "usable_corners",
    "validate_coordinates",
]
