# -*- coding: utf-8 -*-
"""Tests for the two-point inverse calculation."""

import pytest

from surveycalc_lib.inverse import inverse
from surveycalc_lib.models import InverseResult
from surveycalc_lib.models import PlanePoint
from surveycalc_lib.models import Point


class TestInverse:
    """Tests for inverse."""

    def test_diagonal(self):
        result = inverse(Point(x=0, y=0, z=0), Point(x=100, y=100, z=10))

        assert isinstance(result, InverseResult)
        assert result.distance == pytest.approx(141.4214, abs=1e-4)
        assert result.azimuth == pytest.approx(45.0)
        assert result.dx == 100
        assert result.dy == 100
        assert result.dz == 10
        assert result.azimuth_dms == "45°00′00″"

    @pytest.mark.parametrize(
        ("x", "y", "azimuth"),
        [(10, 0, 0.0), (0, 10, 90.0), (-10, 0, 180.0), (0, -10, 270.0)],
    )
    def test_azimuth_measured_from_north(self, x, y, azimuth):
        result = inverse(Point(x=0, y=0), Point(x=x, y=y))
        assert result.azimuth == pytest.approx(azimuth)
        assert result.distance == pytest.approx(10.0)

    def test_azimuth_in_range(self):
        result = inverse(Point(x=0, y=0), Point(x=10, y=-0.001))
        assert 0.0 <= result.azimuth < 360.0
        assert result.azimuth == pytest.approx(359.994, abs=1e-3)

    def test_distance_is_horizontal(self):
        result = inverse(Point(x=0, y=0, z=0), Point(x=3, y=4, z=100))
        assert result.distance == pytest.approx(5.0)
        assert result.dz == 100

    def test_coincident_points(self):
        p = Point(x=-35363.6, y=-5992.8, z=3.5)
        result = inverse(p, p)
        assert result.distance == 0.0
        assert result.azimuth == 0.0

    @pytest.mark.parametrize(
        ("p1", "p2"),
        [
            (Point(x=0, y=0), Point(x=100, y=100)),
            (Point(x=-35363.6, y=-5992.8), Point(x=-35100.2, y=-6120.4)),
            (Point(x=5, y=-3), Point(x=-7, y=11)),
        ],
    )
    def test_symmetry(self, p1, p2):
        forward = inverse(p1, p2)
        backward = inverse(p2, p1)

        assert forward.distance == pytest.approx(backward.distance)
        difference = (forward.azimuth - backward.azimuth) % 360
        assert difference == pytest.approx(180.0)

    def test_plane_points(self):
        """Points without elevation give dz = 0."""
        result = inverse(PlanePoint(x=0, y=0), PlanePoint(x=0, y=5))
        assert result.dz == 0.0
        assert result.azimuth == pytest.approx(90.0)
