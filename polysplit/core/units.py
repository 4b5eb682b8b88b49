"""Length conversion between cut widths and coordinate distances."""

from __future__ import annotations

import math
from typing import Optional

from .errors import UnsupportedWidthConfigurationError
from .types import CoordinateSystem, LengthUnit

EARTH_RADIUS = 6371008.8

# Units per radian of arc on the mean Earth sphere.
_FACTORS = {
    LengthUnit.METERS: EARTH_RADIUS,
    LengthUnit.MILLIMETERS: EARTH_RADIUS * 1000,
    LengthUnit.CENTIMETERS: EARTH_RADIUS * 100,
    LengthUnit.KILOMETERS: EARTH_RADIUS / 1000,
    LengthUnit.MILES: EARTH_RADIUS / 1609.344,
    LengthUnit.NAUTICAL_MILES: EARTH_RADIUS / 1852,
    LengthUnit.INCHES: EARTH_RADIUS * 39.37,
    LengthUnit.YARDS: EARTH_RADIUS * 1.0936,
    LengthUnit.FEET: EARTH_RADIUS * 3.28084,
    LengthUnit.DEGREES: 360 / (2 * math.pi),
    LengthUnit.RADIANS: 1.0,
}


def length_to_radians(value: float, unit: LengthUnit) -> float:
    """Convert a length into radians of arc."""
    return value / _FACTORS[unit]


def length_to_degrees(value: float, unit: LengthUnit) -> float:
    """Convert a length into degrees of arc.

    Examples:
        >>> round(length_to_degrees(111194.9, LengthUnit.METERS), 4)
        1.0
    """
    radians = length_to_radians(value, unit) % (2 * math.pi)
    return radians * 180 / math.pi


def length_to_meters(value: float, unit: LengthUnit) -> float:
    """Convert a linear length into meters."""
    if unit.is_angular:
        raise UnsupportedWidthConfigurationError(
            f"Angular unit '{unit.value}' has no planar length"
        )
    return value * EARTH_RADIUS / _FACTORS[unit]


def length_to_coordinate_distance(
    value: float,
    unit: Optional[LengthUnit],
    coordinate_system: CoordinateSystem = CoordinateSystem.GEOGRAPHIC,
) -> float:
    """Convert a length into a distance in coordinate space.

    Args:
        value: Length to convert (sign is preserved)
        unit: Unit of ``value``; ``None`` is read as meters
        coordinate_system: Space the geometry coordinates live in

    Returns:
        Distance in degrees for geographic coordinates, meters for planar ones

    Raises:
        UnsupportedWidthConfigurationError: Angular unit in planar space
    """
    if unit is None:
        unit = LengthUnit.METERS
    sign = -1.0 if value < 0 else 1.0
    magnitude = abs(value)

    if coordinate_system == CoordinateSystem.GEOGRAPHIC:
        return sign * length_to_degrees(magnitude, unit)
    elif coordinate_system == CoordinateSystem.PLANAR:
        return sign * length_to_meters(magnitude, unit)

    raise ValueError(f"Unknown coordinate_system: {coordinate_system}")


__all__ = [
    'EARTH_RADIUS',
    'length_to_radians',
    'length_to_degrees',
    'length_to_meters',
    'length_to_coordinate_distance',
]
