"""Core types and utilities for polysplit.

This module provides type definitions, enums, exceptions, configuration and
unit conversion used throughout the library.
"""

from .types import (
    LengthUnit,
    CoordinateSystem,
    SplitOutcome,
)

from .errors import (
    PolysplitError,
    GeometryError,
    InvalidInputGeometryError,
    BladeError,
    ConfigurationError,
    UnsupportedWidthConfigurationError,
)

from .config import (
    DEFAULT_MIN_KERF,
    SplitConfig,
    resolve_config,
)

from .units import length_to_coordinate_distance

__all__ = [
    # Enums
    'LengthUnit',
    'CoordinateSystem',
    'SplitOutcome',

    # Exceptions
    'PolysplitError',
    'GeometryError',
    'InvalidInputGeometryError',
    'BladeError',
    'ConfigurationError',
    'UnsupportedWidthConfigurationError',

    # Configuration
    'DEFAULT_MIN_KERF',
    'SplitConfig',
    'resolve_config',
    'length_to_coordinate_distance',
]
