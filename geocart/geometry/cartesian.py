# -*- coding: utf-8 -*-
"""
Cartesian Coordinates - Points in a three-dimensional (x, y, z) frame.

The frame is centered on the sphere, with z as the polar axis and the
x axis crossing the equator at the prime meridian. The same type is
used for the planar output of map projections, with z left at zero.

Dependencies
------------
numpy - Trigonometry and array interop
dataclasses - Immutable value structure

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# Standard library
from typing import TYPE_CHECKING, Any, Dict
from dataclasses import dataclass, asdict, replace

# Third-party
import numpy as np

if TYPE_CHECKING:
    from geocart.geometry.geographic import Geographic


@dataclass(frozen=True)
class Cartesian:
    """
    Point in a Cartesian system of coordinates.

    Attributes
    ----------
    x : float
        Coordinate along the axis crossing the prime meridian.
    y : float
        Coordinate along the axis crossing the meridian at +π/2.
    z : float
        Coordinate along the polar axis.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_geographic(cls, point: "Geographic") -> "Cartesian":
        """
        Compute the Cartesian position of a geographic point.

        Parameters
        ----------
        point : Geographic
            Geographic coordinates; the altitude is the distance from the
            center of the sphere.

        Returns
        -------
        Cartesian
            ``(r·cos(lat)·cos(lon), r·cos(lat)·sin(lon), r·sin(lat))``.
        """
        lon = point.longitude.as_float()
        lat = point.latitude.as_float()
        radius = point.altitude.as_float()

        cos_lat = np.cos(lat)
        return cls(
            x=float(radius * cos_lat * np.cos(lon)),
            y=float(radius * cos_lat * np.sin(lon)),
            z=float(radius * np.sin(lat)),
        )

    @classmethod
    def from_array(cls, array: Any) -> "Cartesian":
        """
        Build a point from a 3-element array-like.

        Parameters
        ----------
        array : array-like
            ``[x, y, z]`` with shape (3,), (3, 1) or (1, 3).

        Returns
        -------
        Cartesian

        Raises
        ------
        ValueError
            If the input does not hold exactly three values.
        """
        values = np.asarray(array, dtype=np.float64).ravel()
        if values.size != 3:
            raise ValueError(
                f"Invalid Cartesian shape {np.shape(array)}. Expected 3 values"
            )
        return cls(x=float(values[0]), y=float(values[1]), z=float(values[2]))

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "Cartesian":
        """Decode a point from ``{"x": ..., "y": ..., "z": ...}``."""
        return cls(**data)

    def to_dict(self) -> Dict[str, float]:
        """Encode the point field-for-field."""
        return asdict(self)

    def to_array(self) -> np.ndarray:
        """Return ``[x, y, z]`` as a float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def with_x(self, x: float) -> "Cartesian":
        return replace(self, x=x)

    def with_y(self, y: float) -> "Cartesian":
        return replace(self, y=y)

    def with_z(self, z: float) -> "Cartesian":
        return replace(self, z=z)

    def norm(self) -> float:
        """Euclidean distance from the origin."""
        return float(np.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2))

    def distance(self, other: "Cartesian") -> float:
        """
        Straight-line (chord) distance to another point.

        Parameters
        ----------
        other : Cartesian
            Target point.

        Returns
        -------
        float
            Euclidean distance, in the same unit as the coordinates.
        """
        return float(np.linalg.norm(self.to_array() - other.to_array()))


__all__ = [
    "Cartesian",
]
