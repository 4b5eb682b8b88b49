"""Polysplit - split polygons along a drawn cutting line.

This library cuts polygons and multipolygons with a line, either as a thin
topological split or with a kerf of configurable width, using Shapely.
"""


# Splitting functions
from .split import (
    split,
    split_polygon,
    split_polygon_with_outcome,
)

# Batch splitting
from .batch import SplitRecord, split_all, split_all_records

# Blade construction
from .blade import thin_blade, kerf_blades

# Ring repair
from .repair import repair_rings

# GeoJSON features and editor sessions
from .features import split_features
from .session import FeatureStore, InMemoryFeatureStore, SplitSession

# Measurements
from .metrics import measure_split

# Core types and configuration
from .core import (
    LengthUnit,
    CoordinateSystem,
    SplitOutcome,
    SplitConfig,
)

# Core exceptions
from .core import (
    PolysplitError,
    GeometryError,
    InvalidInputGeometryError,
    BladeError,
    ConfigurationError,
    UnsupportedWidthConfigurationError,
)

__all__ = [

    # Splitting
    'split',
    'split_polygon',
    'split_polygon_with_outcome',

    # Batch
    'SplitRecord',
    'split_all',
    'split_all_records',

    # Blades
    'thin_blade',
    'kerf_blades',

    # Repair
    'repair_rings',

    # Features and sessions
    'split_features',
    'FeatureStore',
    'InMemoryFeatureStore',
    'SplitSession',

    # Measurements
    'measure_split',

    # Core types
    'LengthUnit',
    'CoordinateSystem',
    'SplitOutcome',
    'SplitConfig',

    # Core exceptions
    'PolysplitError',
    'GeometryError',
    'InvalidInputGeometryError',
    'BladeError',
    'ConfigurationError',
    'UnsupportedWidthConfigurationError',
]
