from __future__ import annotations

import pytest

from floorplan.core.metrics import polygon_area_and_centroid
from floorplan.core.validator import PlanValidator, resolve_and_validate
from floorplan.errors import (
    BoundsError, ConfigError, OverlapError, StructuralError, ValidationError,
)
from floorplan.models import (
    Opening, Plan, Room, ValidationConfig, Vec2, ViolationKind,
)

from conftest import make_wall, rectangle_walls


def _violations(plan: Plan, config: ValidationConfig | None = None):
    with pytest.raises(ValidationError) as excinfo:
        resolve_and_validate(plan, config)
    return excinfo.value.violations


def test_valid_plan_backfills_loop_polygon() -> None:
    plan = Plan(
        walls=rectangle_walls(),
        rooms=[Room(id="living", label="Living", by_loop=["w1", "w2", "w3", "w4"])],
    )

    resolved = resolve_and_validate(plan)

    room = resolved.rooms[0]
    assert len(room.polygon) == 4
    area, centroid = polygon_area_and_centroid(room.polygon)
    assert area == pytest.approx(12_000_000.0)
    assert centroid.to_tuple() == pytest.approx((2000.0, 1500.0))


def test_input_plan_is_not_mutated() -> None:
    plan = Plan(walls=rectangle_walls(), rooms=[Room(id="r", by_loop=["w1", "w2", "w3", "w4"])])
    resolve_and_validate(plan)
    assert plan.rooms[0].polygon is None


def test_revalidation_is_idempotent() -> None:
    plan = Plan(walls=rectangle_walls(), rooms=[Room(id="r", by_loop=["w1", "w2", "w3", "w4"])])

    first = resolve_and_validate(plan)
    second = resolve_and_validate(first)

    assert second.rooms[0].polygon == first.rooms[0].polygon
    assert second == first


def test_zero_length_wall_is_reported() -> None:
    plan = Plan(walls=[make_wall("w1", 0, 0, 1000, 0), make_wall(None, 5, 5, 5, 5)])

    violations = _violations(plan)

    assert len(violations) == 1
    assert violations[0].kind == ViolationKind.STRUCTURAL
    assert violations[0].entity_id == "(unnamed #1)"
    assert isinstance(violations[0].to_exception(), StructuralError)


def test_all_opening_violations_are_collected() -> None:
    plan = Plan(
        walls=rectangle_walls(),
        openings=[
            Opening(id="neg", wall_id="w1", at=-10, width=900),
            Opening(id="thin", wall_id="w1", at=2000, width=0),
            Opening(id="long", wall_id="w2", at=2500, width=900),
            Opening(id="odd", wall_id="w3", at=100, width=900, ref="jamb"),
            Opening(id="ghost", wall_id="w9", at=100, width=900),
        ],
    )

    violations = _violations(plan)
    by_id = {v.entity_id: v for v in violations}

    assert by_id["neg"].kind == ViolationKind.BOUNDS
    assert by_id["thin"].kind == ViolationKind.BOUNDS
    assert by_id["long"].kind == ViolationKind.BOUNDS
    assert by_id["odd"].kind == ViolationKind.CONFIG
    assert isinstance(by_id["odd"].to_exception(), ConfigError)
    assert by_id["ghost"].kind == ViolationKind.STRUCTURAL
    assert "w9" in by_id["ghost"].message
    assert len(violations) == 5


def test_opening_flush_with_wall_end_is_accepted() -> None:
    plan = Plan(
        walls=rectangle_walls(),
        openings=[Opening(id="d1", wall_id="w1", at=3100, width=900)],
    )
    resolve_and_validate(plan)


def test_outer_face_shift_can_start_before_wall() -> None:
    plan = Plan(
        walls=rectangle_walls(thickness=240),
        openings=[Opening(id="d1", wall_id="w1", at=50, width=900, ref="outer_face")],
    )

    violations = _violations(plan)

    assert [v.kind for v in violations] == [ViolationKind.BOUNDS]
    assert "before the start" in violations[0].message


def test_overlapping_openings_name_both_ids() -> None:
    plan = Plan(
        walls=rectangle_walls(),
        openings=[
            Opening(id="d2", wall_id="w1", at=1500, width=900),
            Opening(id="d1", wall_id="w1", at=1000, width=900),
        ],
    )

    violations = _violations(plan)

    assert len(violations) == 1
    assert violations[0].kind == ViolationKind.OVERLAP
    assert "d1" in violations[0].message and "d2" in violations[0].message
    assert isinstance(violations[0].to_exception(), OverlapError)


def test_touching_openings_do_not_overlap() -> None:
    plan = Plan(
        walls=rectangle_walls(),
        openings=[
            Opening(id="d1", wall_id="w1", at=1000, width=900),
            Opening(id="d2", wall_id="w1", at=1900, width=900),
            Opening(id="d3", wall_id="w1", at=2800 - 5e-7, width=900),
        ],
    )
    resolve_and_validate(plan)


def test_openings_on_different_walls_never_overlap() -> None:
    plan = Plan(
        walls=rectangle_walls(),
        openings=[
            Opening(id="d1", wall_id="w1", at=1000, width=900),
            Opening(id="d2", wall_id="w3", at=1000, width=900),
        ],
    )
    resolve_and_validate(plan)


def test_room_with_missing_wall_is_reported_by_id() -> None:
    plan = Plan(
        walls=rectangle_walls(),
        rooms=[
            Room(id="ok", by_loop=["w1", "w2", "w3", "w4"]),
            Room(id="broken", by_loop=["w1", "w2", "w3", "w99"]),
        ],
    )

    violations = _violations(plan)

    assert len(violations) == 1
    assert violations[0].entity_id == "broken"
    assert "w99" in violations[0].message


def test_error_message_lists_every_violation() -> None:
    plan = Plan(
        walls=[make_wall("w1", 0, 0, 0, 0)],
        rooms=[Room(id="r", by_loop=["nope"])],
    )

    with pytest.raises(ValidationError) as excinfo:
        resolve_and_validate(plan)

    text = str(excinfo.value)
    assert "2 violation(s)" in text
    assert "Wall w1 has zero length" in text
    assert "nope" in text
    assert [type(e) for e in excinfo.value.errors()] == [StructuralError, StructuralError]


def test_explicit_polygon_rooms_validate() -> None:
    square = [Vec2(x=0, y=0), Vec2(x=3000, y=0), Vec2(x=3000, y=4000), Vec2(x=0, y=4000)]
    plan = Plan(rooms=[Room(id="living", polygon=square)])
    assert resolve_and_validate(plan).rooms[0].polygon == square


def test_disabled_checks_are_skipped() -> None:
    plan = Plan(
        walls=rectangle_walls(),
        openings=[
            Opening(id="d1", wall_id="w1", at=1000, width=900),
            Opening(id="d2", wall_id="w1", at=1200, width=900),
        ],
    )
    resolve_and_validate(plan, ValidationConfig(disabled_checks=["opening.overlap"]))


def test_unknown_check_id_is_config_error() -> None:
    with pytest.raises(ConfigError):
        resolve_and_validate(Plan(), ValidationConfig(enabled_checks=["wall.color"]))


def test_check_collects_without_raising() -> None:
    context = PlanValidator().check(Plan(openings=[Opening(wall_id="w1", at=0, width=10)]))
    assert len(context.violations) == 1
    assert context.violations[0].entity_id == "(unnamed #0)"
    assert context.violations[0].check_id == "opening.bounds"


def test_bounds_error_type_for_bounds_violation() -> None:
    plan = Plan(walls=rectangle_walls(), openings=[Opening(id="d", wall_id="w1", at=-1, width=10)])
    violations = _violations(plan)
    assert isinstance(violations[0].to_exception(), BoundsError)


def test_enabled_overlap_check_still_runs_bounds() -> None:
    plan = Plan(
        walls=rectangle_walls(),
        openings=[
            Opening(id="d1", wall_id="w1", at=1000, width=-5),
            Opening(id="d2", wall_id="w1", at=2000, width=900),
        ],
    )

    violations = _violations(plan, ValidationConfig(enabled_checks=["opening.overlap"]))

    assert [(v.entity_id, v.check_id) for v in violations] == [("d1", "opening.bounds")]
