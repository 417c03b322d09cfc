# -*- coding: utf-8 -*-
"""
Projection Base - Abstract capability shared by every map projection.

A projection maps geographic coordinates onto a flat Cartesian plane
(``forward``) and back (``reverse``). Implementations hold static
configuration only, so every call is independent of the previous ones.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from abc import ABC, abstractmethod

from geocart.geometry.cartesian import Cartesian
from geocart.geometry.geographic import Geographic


class Projection(ABC):
    """
    Bidirectional mapping between geographic and planar coordinates.

    Subclasses must implement ``forward`` and ``reverse`` such that
    ``reverse(forward(g))`` recovers the longitude and latitude of any
    in-range point ``g`` up to floating-point precision. Planar input
    outside the representable range is not rejected; ``reverse`` returns
    whatever the scalar types normalize it to.
    """

    @abstractmethod
    def forward(self, coordinates: Geographic) -> Cartesian:
        """
        Project geographic coordinates onto the plane.

        Parameters
        ----------
        coordinates : Geographic
            Point to project.

        Returns
        -------
        Cartesian
            Planar position.
        """

    @abstractmethod
    def reverse(self, coordinates: Cartesian) -> Geographic:
        """
        Recover geographic coordinates from a planar position.

        Parameters
        ----------
        coordinates : Cartesian
            Planar position.

        Returns
        -------
        Geographic
            Unprojected point.
        """


__all__ = [
    "Projection",
]
