# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared fixtures: survey points, control point pairs
generated from a known similarity transformation and a small altitude
correction grid.
"""

from __future__ import annotations

import logging
import math

import pytest

from surveycalc_lib.altitude import AltitudeCorrectionGrid
from surveycalc_lib.altitude import mesh_code
from surveycalc_lib.models import ControlPointPair
from surveycalc_lib.models import PlanePoint
from surveycalc_lib.models import Point

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Constants
# =============================================================================

TOKYO_STATION_LAT = 35.681236
TOKYO_STATION_LON = 139.767125

#: Third-order mesh indices of the south-west corner of the test grid cell
GRID_LAT_INDEX = 4320  # 36.0°N
GRID_LON_INDEX = 3200  # 140.0°E

#: True similarity transformation used to generate control point pairs
TRUE_SCALE = 1.0002
TRUE_ROTATION_DEG = 12.5
TRUE_C = 1500.25
TRUE_D = -820.75


# =============================================================================
# Helpers
# =============================================================================


def similarity(x: float, y: float) -> PlanePoint:
    """Apply the reference transformation to a source coordinate."""
    theta = math.radians(TRUE_ROTATION_DEG)
    a = TRUE_SCALE * math.cos(theta)
    b = TRUE_SCALE * math.sin(theta)
    return PlanePoint(x=a * x - b * y + TRUE_C, y=b * x + a * y + TRUE_D)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def tokyo_station() -> Point:
    """Tokyo Station with geographic coordinates only."""
    return Point(
        name="Tokyo Station",
        x=0.0,
        y=0.0,
        z=3.5,
        lat=TOKYO_STATION_LAT,
        lon=TOKYO_STATION_LON,
    )


@pytest.fixture
def consistent_pairs() -> list[ControlPointPair]:
    """Control point pairs generated without noise by the reference transform."""
    sources = [
        (-35200.125, -8120.500),
        (-35010.900, -7800.250),
        (-35480.300, -7650.775),
        (-34900.000, -8300.125),
    ]
    return [
        ControlPointPair(source=PlanePoint(x=x, y=y), target=similarity(x, y))
        for x, y in sources
    ]


@pytest.fixture
def correction_grid() -> AltitudeCorrectionGrid:
    """Grid holding the four corners of the cell at (36.0°N, 140.0°E)."""
    lat0, lon0 = GRID_LAT_INDEX, GRID_LON_INDEX
    return AltitudeCorrectionGrid(
        {
            mesh_code(lat0, lon0): 0.10,  # south-west
            mesh_code(lat0, lon0 + 1): 0.20,  # south-east
            mesh_code(lat0 + 1, lon0): 0.30,  # north-west
            mesh_code(lat0 + 1, lon0 + 1): 0.40,  # north-east
        }
    )
