"""Exception hierarchy for polysplit."""


class PolysplitError(Exception):
    """Base class for all polysplit errors."""
    pass


class GeometryError(PolysplitError):
    """Raised when input geometry cannot take part in a split."""
    pass


class InvalidInputGeometryError(GeometryError):
    """Raised for a cutting line with fewer than 2 points, or a target that
    is neither a Polygon nor a MultiPolygon."""
    pass


class BladeError(PolysplitError):
    """Raised when no cutting blade can be built from the line."""
    pass


class ConfigurationError(PolysplitError):
    """Raised for invalid split configuration values."""
    pass


class UnsupportedWidthConfigurationError(ConfigurationError):
    """Raised when a kerf cut is requested without a usable width and unit."""
    pass


__all__ = [
    'PolysplitError',
    'GeometryError',
    'InvalidInputGeometryError',
    'BladeError',
    'ConfigurationError',
    'UnsupportedWidthConfigurationError',
]
