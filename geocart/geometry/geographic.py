# -*- coding: utf-8 -*-
"""
Geographic Coordinates - Longitude, latitude and altitude on a sphere.

Implements the self-normalizing scalar types of the geographic system of
coordinates, their derivation from Cartesian points following the
spherical coordinate system (z is the polar axis), and the great-circle
distance between two points.

Every constructor is total. Out-of-range angles are folded back into
their domain instead of being rejected:

- Longitude wraps cyclically into [-π, +π): leaving the range through
  one boundary re-enters through the other, in the same direction.
- Latitude reflects into [-π/2, +π/2]: moving past a pole comes back
  towards the opposite one.
- Altitude drops its sign.

Dependencies
------------
numpy - Euclidean modulo and trigonometry without raising on non-finite input
math - Platform libm sin/asin for the latitude fold
dataclasses - Immutable value structures

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# Standard library
import logging
import math
from typing import Any, Dict
from dataclasses import dataclass, field, asdict, replace

# Third-party
import numpy as np

# geocart internal
from geocart.geometry.cartesian import Cartesian
from geocart.utils.constants import (
    PI,
    TWO_PI,
    HALF_PI,
    LONGITUDE_MIN,
    LONGITUDE_MAX,
    LATITUDE_MIN,
    LATITUDE_MAX,
)
from geocart.utils.misc import positive_float

logger = logging.getLogger(__name__)


# ===================================================================
# Normalization Rules
# ===================================================================

def wrap_longitude(value: float) -> float:
    """
    Wrap an angle into the longitude range [-π, +π).

    Values already in range are returned unchanged. Any other value is
    mapped with ``((value + π) mod 2π) - π`` using the Euclidean modulo.

    Parameters
    ----------
    value : float
        Angle in radians.

    Returns
    -------
    float
        Equivalent longitude in [-π, +π). NaN for non-finite input.
    """
    value = float(value)
    if LONGITUDE_MIN <= value < LONGITUDE_MAX:
        return value

    wrapped = float(np.mod(value + PI, TWO_PI) - PI)
    # mod may round up to 2π for tiny negative remainders
    if wrapped >= LONGITUDE_MAX:
        wrapped = LONGITUDE_MIN
    return wrapped


def fold_latitude(value: float) -> float:
    """
    Fold an angle into the latitude range [-π/2, +π/2].

    Values already in range are returned unchanged. Any other value is
    mapped with ``asin(sin(value))``, which reflects it off the boundary
    it exceeded.

    Parameters
    ----------
    value : float
        Angle in radians.

    Returns
    -------
    float
        Equivalent latitude in [-π/2, +π/2]. NaN for non-finite input.
    """
    value = float(value)
    if LATITUDE_MIN <= value <= LATITUDE_MAX:
        return value
    if not np.isfinite(value):
        return float('nan')
    return math.asin(math.sin(value))


# ===================================================================
# Scalar Types
# ===================================================================

@dataclass(frozen=True, order=True)
class Longitude:
    """
    Horizontal axis of the geographic system of coordinates.

    The angle east (positive) or west (negative) of the zero meridian,
    in radians, always within [-π, +π).

    Examples
    --------
    >>> Longitude(PI + 1.0) == Longitude(-PI + 1.0)
    True
    """
    value: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "value", wrap_longitude(self.value))

    @classmethod
    def from_cartesian(cls, point: Cartesian) -> "Longitude":
        """
        Compute the longitude of a Cartesian point.

        The planar angle of (x, y). Points on the polar axis have no
        defined longitude and fall back to 0.

        Parameters
        ----------
        point : Cartesian

        Returns
        -------
        Longitude
        """
        x, y = float(point.x), float(point.y)

        if x > 0.0:
            angle = np.arctan(y / x)
        elif x < 0.0 and y >= 0.0:
            angle = np.arctan(y / x) + PI
        elif x < 0.0 and y < 0.0:
            angle = np.arctan(y / x) - PI
        elif x == 0.0 and y > 0.0:
            angle = HALF_PI
        elif x == 0.0 and y < 0.0:
            angle = -HALF_PI
        else:
            logger.debug(
                "Longitude undefined for (x=%r, y=%r), using fallback 0", x, y
            )
            angle = 0.0

        return cls(float(angle))

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "Longitude":
        return cls(**data)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def as_float(self) -> float:
        """Return the longitude in radians."""
        return self.value

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True, order=True)
class Latitude:
    """
    Vertical axis of the geographic system of coordinates.

    The angle between the equatorial plane and the line joining the
    point to the center of the sphere, in radians, always within
    [-π/2, +π/2].

    Examples
    --------
    >>> from geocart.utils import approx_eq
    >>> approx_eq(Latitude(-5 * PI / 4).as_float(), Latitude(PI / 4).as_float())
    True
    """
    value: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "value", fold_latitude(self.value))

    @classmethod
    def from_cartesian(cls, point: Cartesian) -> "Latitude":
        """
        Compute the latitude of a Cartesian point.

        Derived from the polar angle θ measured from the +z axis, so that
        ``latitude = π/2 - θ``. Points with z = 0, the origin included,
        use θ = π/2.

        Parameters
        ----------
        point : Cartesian

        Returns
        -------
        Latitude
        """
        x, y, z = float(point.x), float(point.y), float(point.z)
        planar = np.sqrt(x ** 2 + y ** 2)

        if z > 0.0:
            theta = np.arctan(planar / z)
        elif z < 0.0:
            theta = PI + np.arctan(planar / z)
        else:
            if x == 0.0 and y == 0.0:
                logger.debug("Latitude undefined at the origin, using fallback 0")
            theta = HALF_PI

        return cls(float(HALF_PI - theta))

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "Latitude":
        return cls(**data)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def as_float(self) -> float:
        """Return the latitude in radians."""
        return self.value

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True, order=True)
class Altitude:
    """
    Radial axis of the geographic system of coordinates.

    The distance between the point and the center of the sphere. Negative
    inputs are stored as their absolute value.

    Examples
    --------
    >>> Altitude(-1.56) == Altitude(1.56)
    True
    """
    value: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "value", positive_float(self.value))

    @classmethod
    def from_cartesian(cls, point: Cartesian) -> "Altitude":
        """Euclidean distance from the point to the origin."""
        return cls(point.norm())

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "Altitude":
        return cls(**data)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def as_float(self) -> float:
        """Return the altitude."""
        return self.value

    def __float__(self) -> float:
        return self.value


# ===================================================================
# Geographic Coordinates
# ===================================================================

_FIELD_TYPES = {
    "longitude": Longitude,
    "latitude": Latitude,
    "altitude": Altitude,
}


@dataclass(frozen=True)
class Geographic:
    """
    Coordinates in the geographic system of coordinates.

    The default value is the front point: longitude 0, latitude 0 and
    altitude 0. Plain floats given for any field are normalized through
    the matching scalar type.

    Attributes
    ----------
    longitude : Longitude
        Angle from the zero meridian, in [-π, +π).
    latitude : Latitude
        Angle from the equatorial plane, in [-π/2, +π/2].
    altitude : Altitude
        Distance to the center of the sphere, non-negative.

    Examples
    --------
    >>> point = Geographic().with_latitude(Latitude(HALF_PI)).with_altitude(Altitude(1.0))
    >>> point.longitude.as_float()
    0.0
    """
    longitude: Longitude = field(default_factory=Longitude)
    latitude: Latitude = field(default_factory=Latitude)
    altitude: Altitude = field(default_factory=Altitude)

    def __post_init__(self):
        for name, scalar in _FIELD_TYPES.items():
            value = getattr(self, name)
            if not isinstance(value, scalar):
                object.__setattr__(self, name, scalar(value))

    @classmethod
    def from_cartesian(cls, point: Cartesian) -> "Geographic":
        """
        Convert a Cartesian point to geographic coordinates.

        Longitude, latitude and altitude are derived independently from
        the same (x, y, z) triple.

        Parameters
        ----------
        point : Cartesian

        Returns
        -------
        Geographic
        """
        return (
            cls()
            .with_longitude(Longitude.from_cartesian(point))
            .with_latitude(Latitude.from_cartesian(point))
            .with_altitude(Altitude.from_cartesian(point))
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Geographic":
        """
        Decode coordinates from a dictionary.

        Each field may be a nested ``{"value": float}`` mapping or a plain
        float. Missing fields take their default.
        """
        fields = {}
        for name, value in data.items():
            scalar = _FIELD_TYPES.get(name)
            if scalar is not None and isinstance(value, dict):
                value = scalar.from_dict(value)
            fields[name] = value
        return cls(**fields)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return asdict(self)

    def to_cartesian(self) -> Cartesian:
        return Cartesian.from_geographic(self)

    def with_longitude(self, longitude: Longitude) -> "Geographic":
        return replace(self, longitude=longitude)

    def with_latitude(self, latitude: Latitude) -> "Geographic":
        return replace(self, latitude=latitude)

    def with_altitude(self, altitude: Altitude) -> "Geographic":
        return replace(self, altitude=altitude)

    def distance(self, other: "Geographic") -> float:
        """
        Great-circle distance to another point, in radians.

        See ``great_circle_distance``.
        """
        return great_circle_distance(self, other)


# ===================================================================
# Distance
# ===================================================================

def great_circle_distance(a: Geographic, b: Geographic) -> float:
    """
    Compute the central angle between two geographic points.

    Uses the spherical law of cosines::

        acos(sin(φa)·sin(φb) + cos(φa)·cos(φb)·cos(|λa - λb|))

    Altitudes are ignored; multiply the result by the sphere radius to
    obtain a linear distance.

    Parameters
    ----------
    a : Geographic
        First point.
    b : Geographic
        Second point.

    Returns
    -------
    float
        Angle in radians, in [0, π].
    """
    lat_a = a.latitude.as_float()
    lat_b = b.latitude.as_float()
    lon_diff = np.abs(a.longitude.as_float() - b.longitude.as_float())

    cos_angle = (
        np.sin(lat_a) * np.sin(lat_b)
        + np.cos(lat_a) * np.cos(lat_b) * np.cos(lon_diff)
    )
    # Rounding can push the cosine slightly past ±1
    cos_angle = np.clip(cos_angle, -1.0, 1.0)

    return float(np.arccos(cos_angle))


__all__ = [
    "wrap_longitude",
    "fold_latitude",
    "Longitude",
    "Latitude",
    "Altitude",
    "Geographic",
    "great_circle_distance",
]
