"""Length units. Everything inside a Plan is stored in millimeters."""

from __future__ import annotations
from enum import Enum


class Unit(str, Enum):
    MILLIMETERS = "millimeters"
    CENTIMETERS = "centimeters"
    METERS = "meters"

    @property
    def scale(self) -> float:
        """Millimeters per one of this unit."""
        return _SCALES[self]


_SCALES = {
    Unit.MILLIMETERS: 1.0,
    Unit.CENTIMETERS: 10.0,
    Unit.METERS: 1000.0,
}


def to_canonical(value: float, unit: Unit | str = Unit.MILLIMETERS) -> float:
    """Convert a length in `unit` to canonical millimeters."""
    return float(value) * Unit(unit).scale


def mm(value: float) -> float:
    return to_canonical(value, Unit.MILLIMETERS)


def cm(value: float) -> float:
    return to_canonical(value, Unit.CENTIMETERS)


def m(value: float) -> float:
    return to_canonical(value, Unit.METERS)
