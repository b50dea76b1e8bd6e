from __future__ import annotations

import pytest

from floorplan.core.metrics import polygon_area, polygon_area_and_centroid, polygon_centroid
from floorplan.errors import StructuralError
from floorplan.models import Vec2


def _poly(*pts: tuple[float, float]) -> list[Vec2]:
    return [Vec2(x=x, y=y) for x, y in pts]


RECT = _poly((0, 0), (4000, 0), (4000, 3000), (0, 3000))
L_SHAPE = _poly((0, 0), (5000, 0), (5000, 3000), (3000, 3000), (3000, 5000), (0, 5000))


def test_rectangle_area_and_centroid() -> None:
    area, centroid = polygon_area_and_centroid(RECT)
    assert area == pytest.approx(12_000_000.0)
    assert centroid.to_tuple() == pytest.approx((2000.0, 1500.0))


def test_concave_polygon() -> None:
    area, centroid = polygon_area_and_centroid(L_SHAPE)
    # 5x3 block plus 3x2 block
    assert area == pytest.approx(21_000_000.0)
    expected_x = (15e6 * 2500 + 6e6 * 1500) / 21e6
    expected_y = (15e6 * 1500 + 6e6 * 4000) / 21e6
    assert centroid.to_tuple() == pytest.approx((expected_x, expected_y))


def test_invariant_under_cyclic_rotation() -> None:
    base_area, base_centroid = polygon_area_and_centroid(L_SHAPE)
    for k in range(1, len(L_SHAPE)):
        rotated = L_SHAPE[k:] + L_SHAPE[:k]
        area, centroid = polygon_area_and_centroid(rotated)
        assert area == pytest.approx(base_area)
        assert centroid.to_tuple() == pytest.approx(base_centroid.to_tuple())


def test_winding_reversal_flips_sign_only() -> None:
    area, centroid = polygon_area_and_centroid(RECT)
    rev_area, rev_centroid = polygon_area_and_centroid(list(reversed(RECT)))
    assert rev_area == pytest.approx(-area)
    assert rev_centroid.to_tuple() == pytest.approx(centroid.to_tuple())


def test_collinear_polygon_falls_back_to_vertex_mean() -> None:
    area, centroid = polygon_area_and_centroid(_poly((0, 0), (1000, 0), (3000, 0)))
    assert area == 0.0
    assert centroid.to_tuple() == pytest.approx((4000.0 / 3, 0.0))


def test_helpers_agree() -> None:
    assert polygon_area(RECT) == pytest.approx(12_000_000.0)
    assert polygon_centroid(RECT).to_tuple() == pytest.approx((2000.0, 1500.0))


def test_too_few_vertices() -> None:
    with pytest.raises(StructuralError):
        polygon_area_and_centroid(_poly((0, 0), (1, 1)))
