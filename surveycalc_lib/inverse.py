# -*- coding: utf-8 -*-
"""Two-point inverse calculation (distance and azimuth)."""

from __future__ import annotations

import math

from surveycalc_lib.angles import normalize_azimuth
from surveycalc_lib.models import InverseResult
from surveycalc_lib.models import PlanePoint
from surveycalc_lib.models import Point


def inverse(p1: Point | PlanePoint, p2: Point | PlanePoint) -> InverseResult:
    """Compute the distance and grid azimuth from ``p1`` to ``p2``.

    The distance is horizontal only; ``dz`` is reported separately. The
    azimuth is measured clockwise from the x (north) axis, i.e.
    ``atan2(dy, dx)``, which is the survey convention and not the
    mathematical one. Coincident points give distance 0 and azimuth 0.

    Args:
        p1: Start point
        p2: End point

    Returns:
        The inverse result
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    dz = getattr(p2, "z", 0.0) - getattr(p1, "z", 0.0)

    azimuth = math.degrees(math.atan2(dy, dx))
    if azimuth < 0:
        azimuth += 360.0

    return InverseResult(
        distance=math.hypot(dx, dy),
        azimuth=normalize_azimuth(azimuth),
        dx=dx,
        dy=dy,
        dz=dz,
    )
