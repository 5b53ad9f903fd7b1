from __future__ import annotations

from src.domain.algorithms.sampling import uniform_in_range


def test_zero_draw_maps_to_lower_bound() -> None:
    assert uniform_in_range(0, -4.5, 1.7) == -4.5


def test_half_range_draw_maps_to_midpoint() -> None:
    assert uniform_in_range(1 << 63, 50.0, 53.0) == 51.5


def test_quarter_draw_on_whole_longitude_range() -> None:
    assert uniform_in_range(1 << 62, -180.0, 180.0) == -90.0


def test_largest_draw_stays_within_upper_bound() -> None:
    value = uniform_in_range((1 << 64) - 1, -180.0, 180.0)
    assert -180.0 <= value <= 180.0
