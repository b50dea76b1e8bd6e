from __future__ import annotations

import pytest

from floorplan.models import Plan, Wall, Vec2


def make_wall(wall_id: str | None, x1: float, y1: float, x2: float, y2: float, **kwargs) -> Wall:
    return Wall(id=wall_id, p1=Vec2(x=x1, y=y1), p2=Vec2(x=x2, y=y2), **kwargs)


def rectangle_walls(width: float = 4000.0, depth: float = 3000.0, thickness: float = 200.0) -> list[Wall]:
    """Counter-clockwise rectangle w1..w4 starting at the origin."""
    return [
        make_wall("w1", 0, 0, width, 0, thickness=thickness),
        make_wall("w2", width, 0, width, depth, thickness=thickness),
        make_wall("w3", width, depth, 0, depth, thickness=thickness),
        make_wall("w4", 0, depth, 0, 0, thickness=thickness),
    ]


@pytest.fixture
def rectangle_plan() -> Plan:
    return Plan(walls=rectangle_walls())
