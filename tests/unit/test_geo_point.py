from __future__ import annotations

import pytest

from src.adapters.buffer import DocumentBuffer
from src.app.ports.output import IRandomSource
from src.app.services.position_generator import new_position_generator
from src.domain.models.geo import GeoPoint

LARGEST_DRAW = (1 << 64) - 1


class _ConstantRandomSource(IRandomSource):
    def __init__(self, draw: int) -> None:
        self._draw = draw

    def random(self) -> int:
        return self._draw


@pytest.mark.parametrize(
    ("lon", "lat"),
    [(-180.0, -90.0), (180.0, 90.0), (-180.0, 90.0), (180.0, -90.0)],
)
def test_geo_point_accepts_whole_earth_corners(lon: float, lat: float) -> None:
    p = GeoPoint(lon=lon, lat=lat)
    assert (p.lon, p.lat) == (lon, lat)


@pytest.mark.parametrize(
    ("lon", "lat"),
    [(180.5, 0.0), (0.0, -90.5), (float("nan"), 0.0)],
)
def test_geo_point_rejects_values_off_the_globe(lon: float, lat: float) -> None:
    with pytest.raises(ValueError):
        GeoPoint(lon=lon, lat=lat)


def test_largest_draw_lands_on_the_whole_earth_upper_corner() -> None:
    gen = new_position_generator(DocumentBuffer(), _ConstantRandomSource(LARGEST_DRAW))

    p = gen.next_point()

    assert (p.lon, p.lat) == (180.0, 90.0)


def test_largest_draw_stays_inside_a_narrow_box() -> None:
    # 179.9 + (180 - 179.9) can round past 180 without the clamp.
    gen = new_position_generator(
        DocumentBuffer(),
        _ConstantRandomSource(LARGEST_DRAW),
        [179.9, 89.9],
        [180.0, 89.8],
    )

    p = gen.next_point()

    assert p.lon <= 180.0
    assert p.lat <= 89.9
