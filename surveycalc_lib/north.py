# -*- coding: utf-8 -*-
"""Meridian convergence and true-north correction.

The convergence is the first-order approximation
``γ = (λ − λ0) · sin φ``, where ``λ0`` is the zone's central meridian. It
omits the higher-order (secant) terms and is accurate to a few arc-seconds
at the distances from the central meridian found inside a zone; it is an
approximation, not the exact convergence of the transverse Mercator
projection.
"""

from __future__ import annotations

import logging
import math

from surveycalc_lib.models import TrueNorthResult
from surveycalc_lib.zones import get_zone

logger = logging.getLogger(__name__)


def meridian_convergence(lat: float, lon: float, zone: int) -> float:
    """Angle between grid north and true north at a position.

    Args:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
        zone: Plane rectangular zone number (1-19)

    Returns:
        Convergence in decimal degrees, positive east of the central meridian

    Raises:
        InvalidZoneError: If the zone number is invalid
    """
    origin_longitude = get_zone(zone).origin_longitude
    return (lon - origin_longitude) * math.sin(math.radians(lat))


def true_north_azimuth(grid_azimuth: float, convergence: float) -> float:
    """Correct a grid azimuth to true north.

    The result is not normalized and may fall outside ``[0, 360)``.
    """
    return grid_azimuth + convergence


def compute_true_north(
    lat: float, lon: float, zone: int, grid_azimuth: float = 0.0
) -> TrueNorthResult:
    """Compute the convergence at a position and the corrected azimuth."""
    convergence = meridian_convergence(lat, lon, zone)
    result = TrueNorthResult(
        convergence=convergence,
        grid_azimuth=grid_azimuth,
        true_azimuth=true_north_azimuth(grid_azimuth, convergence),
    )
    logger.debug(
        "Convergence at (%.8f, %.8f) zone %d: %.6f deg (%s)",
        lat,
        lon,
        zone,
        convergence,
        result.convergence_dms,
    )
    return result
