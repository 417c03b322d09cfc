# -*- coding: utf-8 -*-
"""
Tests for constants module.

Tests angular constants, geographic boundaries and tolerances.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import pytest
import math

from geocart.utils import constants


class TestMathematicalConstants:
    """Test mathematical constants values."""

    def test_pi_value(self):
        """Pi should be close to math.pi."""
        assert abs(constants.PI - math.pi) < 1e-15

    def test_two_pi(self):
        """Two pi should be 2 * pi."""
        assert abs(constants.TWO_PI - 2 * math.pi) < 1e-15

    def test_half_pi(self):
        """Half pi should be pi / 2."""
        assert abs(constants.HALF_PI - math.pi / 2) < 1e-15

    def test_half_pi_exact_half(self):
        """Halving is exact in binary floating point."""
        assert constants.HALF_PI * 2.0 == constants.PI


class TestBoundaries:
    """Test geographic range boundaries."""

    def test_longitude_range_is_one_turn(self):
        """Longitude range spans a full turn."""
        assert constants.LONGITUDE_MAX - constants.LONGITUDE_MIN == constants.TWO_PI

    def test_latitude_range_is_half_turn(self):
        """Latitude range spans a half turn."""
        assert constants.LATITUDE_MAX - constants.LATITUDE_MIN == constants.PI

    def test_symmetric(self):
        assert constants.LONGITUDE_MIN == -constants.LONGITUDE_MAX
        assert constants.LATITUDE_MIN == -constants.LATITUDE_MAX


class TestTolerances:
    """Test floating-point tolerances."""

    def test_abs_tolerance_positive(self):
        assert 0.0 < constants.ABS_TOLERANCE < 1e-15

    def test_distance_tolerance_looser(self):
        """Round-trips accumulate more error than a single fold."""
        assert constants.DISTANCE_TOLERANCE > constants.ABS_TOLERANCE

    def test_default_radius(self):
        assert constants.DEFAULT_RADIUS == 1.0


class TestConstantsDictionary:
    """Test the CONSTANTS dictionary."""

    def test_constants_dict_exists(self):
        """CONSTANTS dictionary should exist."""
        assert hasattr(constants, 'CONSTANTS')
        assert isinstance(constants.CONSTANTS, dict)

    def test_constants_dict_has_pi(self):
        """Dictionary should contain pi."""
        assert 'PI' in constants.CONSTANTS
        assert constants.CONSTANTS['PI'] == constants.PI

    def test_constants_dict_values_match(self):
        """Dictionary values should match module constants."""
        for key, value in constants.CONSTANTS.items():
            module_value = getattr(constants, key)
            assert value == module_value


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
