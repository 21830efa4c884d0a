# -*- coding: utf-8 -*-
"""2D Helmert (4-parameter similarity) transformation.

The transformation maps a source plane coordinate onto a target one::

    x' = a·x − b·y + c
    y' = b·x + a·y + d

Parameters are fitted in closed form by least squares. Both point sets are
reduced to their centroids first, which decouples the translation from
rotation and scale and keeps the normal sums well conditioned for the large
coordinate values of plane rectangular systems.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from surveycalc_lib.constants import HELMERT_DEGENERATE_TOLERANCE
from surveycalc_lib.constants import HELMERT_MIN_PAIRS
from surveycalc_lib.models import HelmertParams
from surveycalc_lib.models import HelmertResidual
from surveycalc_lib.models import PlanePoint

if TYPE_CHECKING:
    from collections.abc import Iterable
    from collections.abc import Sequence

    from surveycalc_lib.models import ControlPointPair
    from surveycalc_lib.models import Point

logger = logging.getLogger(__name__)


def fit_helmert(
    pairs: Iterable[ControlPointPair],
    fixed_scale: bool = False,
    *,
    tolerance: float = HELMERT_DEGENERATE_TOLERANCE,
) -> HelmertParams | None:
    """Fit Helmert parameters to control point pairs.

    Only pairs with ``use=True`` take part.

    With ``fixed_scale`` the scale is held at exactly 1 and only the
    rotation is fitted (``θ = atan2(B, A)``, ``a = cos θ``, ``b = sin θ``),
    which is the constrained least-squares optimum.

    Args:
        pairs: Control point pairs
        fixed_scale: Hold the scale at 1.0
        tolerance: Sum of squared centred source coordinates below which
            the configuration is considered degenerate

    Returns:
        The fitted parameters, or ``None`` when fewer than two pairs are
        active or all active source points coincide
    """
    active = [pair for pair in pairs if pair.use]
    if len(active) < HELMERT_MIN_PAIRS:
        logger.debug(
            "Helmert fit needs %d active pairs, got %d", HELMERT_MIN_PAIRS, len(active)
        )
        return None

    source = np.array([(p.source.x, p.source.y) for p in active], dtype=np.float64)
    target = np.array([(p.target.x, p.target.y) for p in active], dtype=np.float64)

    source_mean = source.mean(axis=0)
    target_mean = target.mean(axis=0)

    dx, dy = (source - source_mean).T
    dxp, dyp = (target - target_mean).T

    sum_sq = float(np.sum(dx * dx + dy * dy))
    if abs(sum_sq) < tolerance:
        logger.debug("Helmert fit is degenerate: source points coincide")
        return None

    # A: cosine term, B: sine term of the normal equations
    sum_cross = float(np.sum(dx * dxp + dy * dyp))
    sum_rot = float(np.sum(dx * dyp - dy * dxp))

    if fixed_scale:
        theta = math.atan2(sum_rot, sum_cross)
        a = math.cos(theta)
        b = math.sin(theta)
    else:
        a = sum_cross / sum_sq
        b = sum_rot / sum_sq

    mx, my = (float(v) for v in source_mean)
    mxp, myp = (float(v) for v in target_mean)
    c = mxp - a * mx + b * my
    d = myp - b * mx - a * my

    params = HelmertParams(
        a=a,
        b=b,
        c=c,
        d=d,
        scale=math.hypot(a, b),
        rotation=math.degrees(math.atan2(b, a)),
    )
    logger.info(
        "Helmert fit on %d pairs: scale=%.9f rotation=%s c=%.4f d=%.4f",
        len(active),
        params.scale,
        params.rotation_dms,
        params.c,
        params.d,
    )
    return params


def apply_helmert(x: float, y: float, params: HelmertParams) -> PlanePoint:
    """Transform one source coordinate into the target frame."""
    return PlanePoint(
        x=params.a * x - params.b * y + params.c,
        y=params.b * x + params.a * y + params.d,
    )


def transform_points(points: Iterable[Point], params: HelmertParams) -> list[Point]:
    """Transform survey points, keeping their elevation and name.

    Geographic positions are dropped from the copies since they no longer
    correspond to the transformed plane coordinates.
    """
    result: list[Point] = []
    for point in points:
        moved = apply_helmert(point.x, point.y, params)
        result.append(
            point.model_copy(
                update={"x": moved.x, "y": moved.y, "lat": None, "lon": None}
            )
        )
    return result


def helmert_residuals(
    pairs: Sequence[ControlPointPair], params: HelmertParams
) -> list[HelmertResidual]:
    """Residuals of every pair (active or not) against fitted parameters."""
    residuals: list[HelmertResidual] = []
    for pair in pairs:
        moved = apply_helmert(pair.source.x, pair.source.y, params)
        vx = pair.target.x - moved.x
        vy = pair.target.y - moved.y
        residuals.append(
            HelmertResidual(vx=vx, vy=vy, v=math.hypot(vx, vy), use=pair.use)
        )
    return residuals


def residual_rms(residuals: Iterable[HelmertResidual]) -> float | None:
    """Root mean square of the horizontal residuals of the active pairs.

    Returns:
        The RMS in metres, or ``None`` when no pair is active
    """
    values = np.array([r.v for r in residuals if r.use], dtype=np.float64)
    if values.size == 0:
        return None
    return float(np.sqrt(np.mean(values**2)))
