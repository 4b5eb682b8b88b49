"""Type definitions for polysplit operations.

This module defines enums for units, coordinate spaces and split outcomes.
"""

from enum import Enum


class LengthUnit(Enum):
    """Unit of a cut width or minimum kerf.

    Attributes:
        METERS: Meters (default)
        MILLIMETERS: Millimeters
        CENTIMETERS: Centimeters
        KILOMETERS: Kilometers
        MILES: Statute miles
        NAUTICAL_MILES: Nautical miles
        INCHES: Inches
        YARDS: Yards
        FEET: Feet
        DEGREES: Arc degrees (geographic coordinates only)
        RADIANS: Arc radians (geographic coordinates only)

    Examples:
        >>> from polysplit import split_polygon, SplitConfig, LengthUnit
        >>> config = SplitConfig(width=2.0, unit=LengthUnit.FEET)
    """
    METERS = 'meters'
    MILLIMETERS = 'millimeters'
    CENTIMETERS = 'centimeters'
    KILOMETERS = 'kilometers'
    MILES = 'miles'
    NAUTICAL_MILES = 'nauticalmiles'
    INCHES = 'inches'
    YARDS = 'yards'
    FEET = 'feet'
    DEGREES = 'degrees'
    RADIANS = 'radians'

    @classmethod
    def parse(cls, value) -> "LengthUnit":
        """Coerce a unit name (or a LengthUnit) into a LengthUnit.

        Accepts the British spellings ``metres`` and ``kilometres`` as well.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        name = _UNIT_ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown length unit: {value!r}") from None

    @property
    def is_angular(self) -> bool:
        return self in (LengthUnit.DEGREES, LengthUnit.RADIANS)


_UNIT_ALIASES = {
    'metres': 'meters',
    'metre': 'meters',
    'meter': 'meters',
    'm': 'meters',
    'kilometres': 'kilometers',
    'km': 'kilometers',
    'mm': 'millimeters',
    'cm': 'centimeters',
    'mi': 'miles',
    'nauticalmile': 'nauticalmiles',
    'nautical_miles': 'nauticalmiles',
    'ft': 'feet',
    'in': 'inches',
    'yd': 'yards',
}


class CoordinateSystem(Enum):
    """How geometry coordinates relate to lengths.

    Attributes:
        GEOGRAPHIC: Longitude/latitude degrees; lengths are converted to
            degrees of arc on the mean Earth sphere (default)
        PLANAR: Projected coordinates measured in meters

    Examples:
        >>> from polysplit import SplitConfig, CoordinateSystem
        >>> config = SplitConfig(width=0.5, coordinate_system=CoordinateSystem.PLANAR)
    """
    GEOGRAPHIC = 'geographic'
    PLANAR = 'planar'


class SplitOutcome(Enum):
    """What happened to a single target during a split.

    Attributes:
        SPLIT: The blade was subtracted and at least one fragment survived
        DISJOINT: The line does not touch the target; target returned as-is
        DEGENERATE: Every ring was discarded during repair; empty result
        UNCHANGED: No cut was computable (blade could not be built, or the
            kerf line never crosses the target boundary); target returned as-is
        FAILED: The split raised; only reported by batch helpers
    """
    SPLIT = 'split'
    DISJOINT = 'disjoint'
    DEGENERATE = 'degenerate'
    UNCHANGED = 'unchanged'
    FAILED = 'failed'


__all__ = [
    'LengthUnit',
    'CoordinateSystem',
    'SplitOutcome',
]
