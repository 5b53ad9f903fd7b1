from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from src.app.ports.output import IOutputBuffer, IRandomSource
from src.domain.algorithms.bson_encoding import (
    BSON_TYPE_ARRAY,
    BSON_TYPE_DOUBLE,
    INDEX_KEYS,
    float64_bytes,
    format_fixed,
    int32_bytes,
)
from src.domain.algorithms.sampling import uniform_in_range
from src.domain.models import BoundingBox, GeoPoint, usable_corners

logger = logging.getLogger(__name__)

TEXT_DIGITS = 10


@dataclass(slots=True)
class PositionGenerator:
    """Generates random ``[longitude, latitude]`` pairs inside a bounding box.

    The buffer and random source are borrowed: several generators of one
    document share them, and the caller owns their lifetime.
    """

    buffer: IOutputBuffer
    random_source: IRandomSource
    box: BoundingBox

    @property
    def bson_type(self) -> int:
        """Element type a parent document should tag this value with."""

        return BSON_TYPE_ARRAY

    def random_in_range(self, min_value: float, max_value: float) -> float:
        return uniform_in_range(self.random_source.random(), min_value, max_value)

    def next_point(self) -> GeoPoint:
        # Longitude is drawn first. Uniform in degrees, not by area.
        lon = self.random_in_range(self.box.min_lon, self.box.max_lon)
        lat = self.random_in_range(self.box.min_lat, self.box.max_lat)
        return GeoPoint(lon=lon, lat=lat)

    def encode_value(self) -> None:
        """Append the pair as an embedded BSON array ``{"0": lon, "1": lat}``.

        The int32 length header is reserved first and patched once the
        terminator has been written.
        """

        start = len(self.buffer)
        self.buffer.reserve()

        point = self.next_point()

        self._write_double(INDEX_KEYS[0], point.lon)
        self._write_double(INDEX_KEYS[1], point.lat)

        self.buffer.write_single_byte(0)
        self.buffer.write_at(start, int32_bytes(len(self.buffer) - start))

    def encode_value_as_string(self) -> None:
        """Append the pair as ``[lon,lat]`` with fixed fractional digits."""

        point = self.next_point()

        self.buffer.write_single_byte(ord("["))
        self.buffer.write_string(format_fixed(point.lon, TEXT_DIGITS))
        self.buffer.write_single_byte(ord(","))
        self.buffer.write_string(format_fixed(point.lat, TEXT_DIGITS))
        self.buffer.write_single_byte(ord("]"))

    def _write_double(self, key: bytes, value: float) -> None:
        self.buffer.write_single_byte(BSON_TYPE_DOUBLE)
        self.buffer.write(key)
        self.buffer.write_single_byte(0)
        self.buffer.write(float64_bytes(value))


def new_position_generator(
    buffer: IOutputBuffer,
    random_source: IRandomSource,
    top_left: Sequence[float] | None = None,
    bottom_right: Sequence[float] | None = None,
) -> PositionGenerator:
    """Build a generator, falling back to the whole earth for unusable corners.

    Never raises on bad corners: missing, wrongly sized, reversed or
    out-of-range input all yield the default box.
    """

    given = top_left is not None or bottom_right is not None
    if given and not usable_corners(top_left, bottom_right):
        logger.debug(
            "Unusable bounding box top_left=%r bottom_right=%r; using whole earth",
            top_left,
            bottom_right,
        )

    box = BoundingBox.from_corners(top_left, bottom_right)
    return PositionGenerator(buffer=buffer, random_source=random_source, box=box)
