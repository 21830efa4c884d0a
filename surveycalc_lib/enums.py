# -*- coding: utf-8 -*-
"""Enumerations for surveying calculations.

This module contains the enumerations shared by the calculation modules:
elevation update modes, per-item result status and calculation kinds.
"""

from enum import Enum


class GeoidMode(str, Enum):
    """How a retrieved geoid height updates a point elevation.

    Attributes:
        HEIGHT_ONLY: Report the geoid height, keep the elevation unchanged
        TO_ORTHOMETRIC: Ellipsoidal height -> orthometric height (z - N)
        TO_ELLIPSOIDAL: Orthometric height -> ellipsoidal height (z + N)
    """

    HEIGHT_ONLY = "only"
    TO_ORTHOMETRIC = "to_orthometric"
    TO_ELLIPSOIDAL = "to_ellipsoidal"

    def apply(self, elevation: float, geoid_height: float) -> float:
        """Return the updated elevation for this mode.

        Args:
            elevation: Current elevation of the point (metres)
            geoid_height: Geoid height at the point (metres)

        Returns:
            New elevation (metres)
        """
        if self is GeoidMode.TO_ORTHOMETRIC:
            return elevation - geoid_height
        if self is GeoidMode.TO_ELLIPSOIDAL:
            return elevation + geoid_height
        return elevation


class ResultStatus(str, Enum):
    """Outcome of one item of a batch calculation.

    Attributes:
        SUCCESS: The item was computed
        ERROR: The item could not be computed (see the attached error)
    """

    SUCCESS = "success"
    ERROR = "error"


class GradientKind(str, Enum):
    """Known quantities of a gradient calculation.

    Attributes:
        HEIGHT: Horizontal distance and height difference
        PERCENT: Horizontal distance and gradient in percent
        ANGLE: Horizontal distance and vertical angle
    """

    HEIGHT = "height"
    PERCENT = "percent"
    ANGLE = "angle"


class CurveKind(str, Enum):
    """Known quantity (besides the radius) of a circular curve calculation.

    Attributes:
        INTERSECTION_ANGLE: Intersection angle (IA)
        CURVE_LENGTH: Curve length (CL)
        CHORD: Long chord (C)
    """

    INTERSECTION_ANGLE = "intersection_angle"
    CURVE_LENGTH = "curve_length"
    CHORD = "chord"
