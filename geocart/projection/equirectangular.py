# -*- coding: utf-8 -*-
"""
Equirectangular Projection - Linear scaling of longitude and latitude.

Maps a point on a sphere of a given radius onto the plane with
``x = radius·longitude`` and ``y = radius·latitude``; z is always zero.
Altitude is not represented on the plane and is lost by ``forward``.

Dependencies
------------
numpy - IEEE division in ``reverse`` (a zero radius yields inf/NaN)
dataclasses - Immutable configuration

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# Standard library
from typing import Dict
from dataclasses import dataclass, asdict

# Third-party
import numpy as np

# geocart internal
from geocart.geometry.cartesian import Cartesian
from geocart.geometry.geographic import Geographic, Longitude, Latitude
from geocart.projection.base import Projection
from geocart.utils.constants import DEFAULT_RADIUS
from geocart.utils.misc import positive_float


@dataclass(frozen=True)
class Equirectangular(Projection):
    """
    The equirectangular (plate carrée) projection.

    Parameters
    ----------
    radius : float
        Radius of the projected sphere. The sign is discarded. A radius
        of zero collapses ``forward`` onto the origin and makes
        ``reverse`` return NaN/infinite angles. Default 1.0.

    Examples
    --------
    >>> projection = Equirectangular(radius=2.0)
    >>> projection.forward(Geographic(longitude=1.0, latitude=0.5))
    Cartesian(x=2.0, y=1.0, z=0.0)
    """
    radius: float = DEFAULT_RADIUS

    def __post_init__(self):
        object.__setattr__(self, "radius", positive_float(self.radius))

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "Equirectangular":
        return cls(**data)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def forward(self, coordinates: Geographic) -> Cartesian:
        return Cartesian(
            x=self.radius * coordinates.longitude.as_float(),
            y=self.radius * coordinates.latitude.as_float(),
        )

    def reverse(self, coordinates: Cartesian) -> Geographic:
        radius = np.float64(self.radius)
        longitude = np.float64(coordinates.x) / radius
        latitude = np.float64(coordinates.y) / radius

        return Geographic(
            longitude=Longitude(float(longitude)),
            latitude=Latitude(float(latitude)),
        )


__all__ = [
    "Equirectangular",
]
