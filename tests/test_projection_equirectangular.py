# -*- coding: utf-8 -*-
"""Tests for the equirectangular projection."""
import math

import numpy as np
import pytest
from geocart.geometry.cartesian import Cartesian
from geocart.geometry.geographic import Geographic, Longitude, Latitude, Altitude
from geocart.projection.base import Projection
from geocart.projection.equirectangular import Equirectangular
from geocart.utils.constants import PI, HALF_PI, DISTANCE_TOLERANCE


@pytest.fixture
def in_range_points():
    """Geographic points whose angles are already normalized."""
    rng = np.random.RandomState(42)
    return [
        Geographic(
            longitude=rng.uniform(-PI, PI),
            latitude=rng.uniform(-HALF_PI, HALF_PI),
            altitude=rng.uniform(0.0, 5.0),
        )
        for _ in range(100)
    ]


class TestEquirectangularConfig:
    def test_is_projection(self):
        assert issubclass(Equirectangular, Projection)
        assert isinstance(Equirectangular(), Projection)

    def test_default_unit_radius(self):
        assert Equirectangular().radius == 1.0

    def test_negative_radius_discards_sign(self):
        assert Equirectangular(radius=-6371.0).radius == 6371.0

    def test_serialization(self):
        projection = Equirectangular(radius=2.5)
        assert projection.to_dict() == {'radius': 2.5}
        assert Equirectangular.from_dict(projection.to_dict()) == projection

    def test_abstract_projection(self):
        with pytest.raises(TypeError):
            Projection()


class TestEquirectangularForward:
    def test_scales_angles(self):
        projection = Equirectangular(radius=2.0)
        point = projection.forward(Geographic(longitude=1.0, latitude=0.5))
        assert point == Cartesian(2.0, 1.0, 0.0)

    def test_z_always_zero(self, in_range_points):
        projection = Equirectangular(radius=3.0)
        for geo in in_range_points:
            assert projection.forward(geo).z == 0.0

    def test_altitude_ignored(self):
        projection = Equirectangular(radius=2.0)
        low = Geographic(longitude=1.0, latitude=0.5, altitude=0.0)
        high = Geographic(longitude=1.0, latitude=0.5, altitude=100.0)
        assert projection.forward(low) == projection.forward(high)

    def test_extent(self):
        """The projected map spans 2πR by πR."""
        projection = Equirectangular(radius=10.0)
        corner = Geographic().with_longitude(Longitude(-PI)).with_latitude(Latitude(-HALF_PI))
        point = projection.forward(corner)
        assert abs(point.x + 10.0 * PI) < DISTANCE_TOLERANCE
        assert abs(point.y + 10.0 * HALF_PI) < DISTANCE_TOLERANCE

    def test_zero_radius_collapses_to_origin(self):
        projection = Equirectangular(radius=0.0)
        point = projection.forward(Geographic(longitude=1.0, latitude=-0.5))
        assert point == Cartesian()


class TestEquirectangularReverse:
    def test_unscales(self):
        projection = Equirectangular(radius=2.0)
        geo = projection.reverse(Cartesian(2.0, 1.0, 0.0))
        assert geo.longitude == Longitude(1.0)
        assert geo.latitude == Latitude(0.5)

    def test_altitude_default(self):
        projection = Equirectangular(radius=2.0)
        geo = projection.reverse(Cartesian(2.0, 1.0, 7.0))
        assert geo.altitude == Altitude()

    def test_out_of_range_normalized(self):
        """Planar input past the map edge wraps like the scalar types."""
        projection = Equirectangular(radius=1.0)
        geo = projection.reverse(Cartesian(PI + 1.0, 7 * PI / 4, 0.0))
        assert abs(geo.longitude.as_float() - (-PI + 1.0)) < DISTANCE_TOLERANCE
        assert abs(geo.latitude.as_float() - (-PI / 4)) < DISTANCE_TOLERANCE

    def test_zero_radius_not_finite(self):
        projection = Equirectangular(radius=0.0)
        with np.errstate(all='ignore'):
            geo = projection.reverse(Cartesian(1.0, 1.0, 0.0))
        assert math.isnan(geo.longitude.as_float())
        assert math.isnan(geo.latitude.as_float())

    def test_roundtrip(self, in_range_points):
        """reverse(forward(g)) recovers longitude and latitude."""
        projection = Equirectangular(radius=6371.0)
        for geo in in_range_points:
            back = projection.reverse(projection.forward(geo))
            assert abs(back.longitude.as_float() - geo.longitude.as_float()) < DISTANCE_TOLERANCE
            assert abs(back.latitude.as_float() - geo.latitude.as_float()) < DISTANCE_TOLERANCE
