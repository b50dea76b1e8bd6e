"""Opening placement — offset and width on a wall to a cutout rectangle."""

from __future__ import annotations

from floorplan.errors import BoundsError, ConfigError, StructuralError
from floorplan.models import Wall, Opening, OpeningRef, Justify, Polygon, EPSILON
from floorplan.core.walls import band_offsets, resolve_frame


RECOGNIZED_REFS = tuple(r.value for r in OpeningRef)


def reference_shift(ref: str | None, thickness: float, justify: Justify) -> float:
    """
    Distance from p1 at which the measurement frame of `ref` starts.

    Faces start where the neighbouring wall's band ends. The +normal side
    is taken as the interior (counter-clockwise rooms, neighbours sharing
    thickness and justification), so the inner face starts at `hi` and the
    outer face at `lo`.
    """
    if ref is None or ref == OpeningRef.CENTERLINE.value:
        return 0.0
    lo, hi = band_offsets(thickness, justify)
    if ref == OpeningRef.INNER_FACE.value:
        return hi
    if ref == OpeningRef.OUTER_FACE.value:
        return lo
    raise ConfigError(
        f"Unrecognized opening ref {ref!r} (expected one of {', '.join(RECOGNIZED_REFS)})",
        {"ref": str(ref)},
    )


def canonical_offset(opening: Opening, wall: Wall) -> float:
    """Opening start measured from p1 along the centerline."""
    return opening.at + reference_shift(opening.ref, wall.thickness, wall.justify)


def opening_cutout(wall: Wall, opening: Opening, eps: float = EPSILON) -> Polygon:
    """
    Cutout rectangle of an opening, ordered like the wall footprint.

    The cutout spans [start, start + width] along the wall axis and the
    wall's full thickness band; sill and head only matter in elevation.
    """
    if wall.id is not None and opening.wall_id != wall.id:
        raise StructuralError(
            f"Opening {opening.id or '(unnamed)'} belongs to wall {opening.wall_id}, not {wall.id}",
            {"opening_id": opening.id or "", "wall_id": wall.id},
        )
    frame = resolve_frame(wall)
    if opening.width <= 0:
        raise BoundsError(
            f"Opening {opening.id or '(unnamed)'} width must be > 0",
            {"opening_id": opening.id or ""},
        )
    start = canonical_offset(opening, wall)
    end = start + opening.width
    if start < -eps or end > frame.length + eps:
        raise BoundsError(
            f"Opening {opening.id or '(unnamed)'} spans [{start:g}, {end:g}] "
            f"outside wall {wall.id or '(unnamed)'} [0, {frame.length:g}]",
            {"opening_id": opening.id or "", "wall_id": wall.id or ""},
        )
    return frame.strip(start, end)
