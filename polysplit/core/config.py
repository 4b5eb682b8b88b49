"""Split configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .errors import ConfigurationError, UnsupportedWidthConfigurationError
from .types import CoordinateSystem, LengthUnit
from .units import length_to_coordinate_distance

# Half-width of the thin blade: half a millimeter.
DEFAULT_MIN_KERF = 0.0005


@dataclass(frozen=True)
class SplitConfig:
    """Settings that control how a cutting line becomes a blade.

    Attributes:
        width: Kerf offset on each side of the line; 0 gives a thin, purely
            topological cut
        unit: Unit of ``width`` and ``min_kerf``
        min_kerf: Half-width of the thin blade used when ``width`` is 0
        coordinate_system: Whether coordinates are lon/lat or planar meters
        mitre_limit: Mitre limit for the offset polylines
    """

    width: float = 0.0
    unit: Optional[LengthUnit] = LengthUnit.METERS
    min_kerf: float = DEFAULT_MIN_KERF
    coordinate_system: CoordinateSystem = CoordinateSystem.GEOGRAPHIC
    mitre_limit: float = 5.0

    def __post_init__(self):
        if self.unit is not None and not isinstance(self.unit, LengthUnit):
            try:
                object.__setattr__(self, 'unit', LengthUnit.parse(self.unit))
            except ValueError as e:
                raise ConfigurationError(str(e)) from None
        if not isinstance(self.coordinate_system, CoordinateSystem):
            object.__setattr__(self, 'coordinate_system', _coordinate_system(self.coordinate_system))

    @property
    def is_kerf(self) -> bool:
        return self.width > 0

    def validate(self) -> "SplitConfig":
        """Check the configuration, returning it unchanged when usable.

        Raises:
            ConfigurationError: Negative or non-finite width, min_kerf or mitre_limit
            UnsupportedWidthConfigurationError: Positive width without a unit,
                or an angular unit with planar coordinates
        """
        for name in ('width', 'min_kerf', 'mitre_limit'):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ConfigurationError(f"{name} must be a finite number, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} must be non-negative, got {value}")

        if self.min_kerf == 0:
            raise ConfigurationError("min_kerf must be positive")

        if self.width > 0 and self.unit is None:
            raise UnsupportedWidthConfigurationError(
                "A kerf width requires a unit"
            )

        if (
            self.coordinate_system == CoordinateSystem.PLANAR
            and self.unit is not None
            and self.unit.is_angular
        ):
            raise UnsupportedWidthConfigurationError(
                f"Unit '{self.unit.value}' cannot be used with planar coordinates"
            )

        return self

    def kerf_distance(self) -> float:
        """Kerf offset converted into coordinate space."""
        return length_to_coordinate_distance(self.width, self.unit, self.coordinate_system)

    def thin_blade_distance(self) -> float:
        """Thin blade half-width converted into coordinate space."""
        return length_to_coordinate_distance(self.min_kerf, self.unit, self.coordinate_system)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "SplitConfig":
        """Build a config from a host option mapping.

        Understands ``width``/``unit`` as well as ``line_width``/``line_width_unit``
        and the camelCase ``lineWidth``/``lineWidthUnit`` used by map drawing tools.

        Examples:
            >>> SplitConfig.from_options({'lineWidth': 2, 'lineWidthUnit': 'meters'}).width
            2.0
        """
        options = dict(options or {})
        width = _first(options, 'width', 'line_width', 'lineWidth', default=0.0)
        unit = _first(options, 'unit', 'line_width_unit', 'lineWidthUnit',
                      default=LengthUnit.METERS)
        kwargs = {
            'width': float(width) if width is not None else 0.0,
            'unit': unit,
        }
        for key in ('min_kerf', 'mitre_limit'):
            if key in options:
                kwargs[key] = float(options[key])
        if 'coordinate_system' in options:
            kwargs['coordinate_system'] = options['coordinate_system']
        return cls(**kwargs).validate()


def _first(options: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in options:
            return options[key]
    return default


def _coordinate_system(value: Union[str, CoordinateSystem]) -> CoordinateSystem:
    if isinstance(value, CoordinateSystem):
        return value
    try:
        return CoordinateSystem(str(value).lower())
    except ValueError:
        raise ConfigurationError(f"Unknown coordinate_system: {value!r}") from None


def resolve_config(config: Optional[SplitConfig]) -> SplitConfig:
    """Return a validated config, defaulting to a thin cut in meters."""
    if config is None:
        return SplitConfig()
    return config.validate()


__all__ = [
    'DEFAULT_MIN_KERF',
    'SplitConfig',
    'resolve_config',
]
