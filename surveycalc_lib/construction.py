# -*- coding: utf-8 -*-
"""Construction field calculations: gradients and simple circular curves.

Each calculation takes one of several input variants, selected by the
``kind`` field. Inputs may be given as models or as plain dictionaries::

    calculate_gradient({"kind": "percent", "distance": 50, "gradient": 2})
    calculate_curve({"kind": "intersection_angle", "radius": 100, "angle": "30°"})

Angles may be given in decimal degrees or as DMS text.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Annotated
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Discriminator
from pydantic import Tag
from pydantic import TypeAdapter
from pydantic import field_validator

from surveycalc_lib.angles import decimal_to_dms
from surveycalc_lib.angles import parse_dms_or_decimal
from surveycalc_lib.enums import CurveKind
from surveycalc_lib.enums import GradientKind

logger = logging.getLogger(__name__)


def _angle_from_text(value: Any) -> Any:
    if isinstance(value, str):
        return parse_dms_or_decimal(value)
    return value


def _get_kind(v: Any) -> str | None:
    """Extract the discriminator value of a calculation input.

    Handles both dict input and already-instantiated model objects.
    """
    kind = v.get("kind") if isinstance(v, dict) else getattr(v, "kind", None)
    if isinstance(kind, Enum):
        return kind.value
    return kind


# -----------------------------------------------------------------------------
# Gradient
# -----------------------------------------------------------------------------


class HeightGradientInput(BaseModel):
    """Horizontal distance and height difference are known."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["height"] = "height"
    distance: float
    height: float


class PercentGradientInput(BaseModel):
    """Horizontal distance and gradient (percent) are known."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["percent"] = "percent"
    distance: float
    gradient: float


class AngleGradientInput(BaseModel):
    """Horizontal distance and vertical angle (degrees or DMS text) are known."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["angle"] = "angle"
    distance: float
    angle: float

    @field_validator("angle", mode="before")
    @classmethod
    def parse_angle(cls, value: Any) -> Any:
        return _angle_from_text(value)


GradientInput = Annotated[
    Annotated[HeightGradientInput, Tag(GradientKind.HEIGHT.value)]
    | Annotated[PercentGradientInput, Tag(GradientKind.PERCENT.value)]
    | Annotated[AngleGradientInput, Tag(GradientKind.ANGLE.value)],
    Discriminator(_get_kind),
]

_gradient_adapter: TypeAdapter[GradientInput] = TypeAdapter(GradientInput)


class GradientResult(BaseModel):
    """Solved gradient.

    Attributes:
        kind: Which quantities were given
        distance: Horizontal distance (m)
        height: Height difference (m)
        gradient: Gradient in percent
        angle: Vertical angle in decimal degrees
        slope_distance: Slope distance (m)
    """

    model_config = ConfigDict(frozen=True)

    kind: GradientKind
    distance: float
    height: float
    gradient: float
    angle: float
    slope_distance: float

    @property
    def angle_dms(self) -> str:
        return decimal_to_dms(self.angle)


def calculate_gradient(
    data: GradientInput | dict[str, Any],
) -> GradientResult | None:
    """Solve a gradient from a horizontal distance and one other quantity.

    Returns:
        The solved gradient, or ``None`` when the distance is zero
    """
    data = _gradient_adapter.validate_python(data)
    distance = data.distance
    if not distance:
        return None

    match data:
        case HeightGradientInput():
            height = data.height
        case PercentGradientInput():
            height = distance * data.gradient / 100
        case AngleGradientInput():
            height = distance * math.tan(math.radians(data.angle))

    angle = (
        data.angle
        if isinstance(data, AngleGradientInput)
        else math.degrees(math.atan2(height, distance))
    )
    return GradientResult(
        kind=GradientKind(data.kind),
        distance=distance,
        height=height,
        gradient=height / distance * 100,
        angle=angle,
        slope_distance=math.hypot(distance, height),
    )


# -----------------------------------------------------------------------------
# Circular curve
# -----------------------------------------------------------------------------


class IntersectionAngleCurveInput(BaseModel):
    """Radius and intersection angle (degrees or DMS text) are known."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["intersection_angle"] = "intersection_angle"
    radius: float
    angle: float

    @field_validator("angle", mode="before")
    @classmethod
    def parse_angle(cls, value: Any) -> Any:
        return _angle_from_text(value)


class CurveLengthCurveInput(BaseModel):
    """Radius and curve length are known."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["curve_length"] = "curve_length"
    radius: float
    length: float


class ChordCurveInput(BaseModel):
    """Radius and long chord are known."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["chord"] = "chord"
    radius: float
    chord: float


CurveInput = Annotated[
    Annotated[IntersectionAngleCurveInput, Tag(CurveKind.INTERSECTION_ANGLE.value)]
    | Annotated[CurveLengthCurveInput, Tag(CurveKind.CURVE_LENGTH.value)]
    | Annotated[ChordCurveInput, Tag(CurveKind.CHORD.value)],
    Discriminator(_get_kind),
]

_curve_adapter: TypeAdapter[CurveInput] = TypeAdapter(CurveInput)


class CurveResult(BaseModel):
    """Elements of a simple circular curve.

    Attributes:
        kind: Which quantity was given besides the radius
        radius: Radius R (m)
        intersection_angle: Intersection angle IA in decimal degrees
        curve_length: Curve length CL = R·IA (m)
        tangent_length: Tangent length TL = R·tan(IA/2) (m)
        external_secant: External secant SL = R·(sec(IA/2) − 1) (m)
        middle_ordinate: Middle ordinate M = R·(1 − cos(IA/2)) (m)
        long_chord: Long chord C = 2R·sin(IA/2) (m)
    """

    model_config = ConfigDict(frozen=True)

    kind: CurveKind
    radius: float
    intersection_angle: float
    curve_length: float
    tangent_length: float
    external_secant: float
    middle_ordinate: float
    long_chord: float

    @property
    def intersection_angle_dms(self) -> str:
        return decimal_to_dms(self.intersection_angle)


def calculate_curve(data: CurveInput | dict[str, Any]) -> CurveResult | None:
    """Solve a circular curve from its radius and one other element.

    Returns:
        The curve elements, or ``None`` when the radius or the given element
        is zero, or when a chord is longer than the diameter
    """
    data = _curve_adapter.validate_python(data)
    radius = data.radius

    match data:
        case IntersectionAngleCurveInput():
            value = data.angle
        case CurveLengthCurveInput():
            value = data.length
        case ChordCurveInput():
            value = data.chord

    if not radius or not value:
        return None

    match data:
        case IntersectionAngleCurveInput():
            ia_degrees = value
            ia = math.radians(value)
        case CurveLengthCurveInput():
            ia = value / radius
            ia_degrees = math.degrees(ia)
        case ChordCurveInput():
            half_sine = value / (2 * radius)
            if abs(half_sine) > 1:
                logger.debug("Chord %.4f exceeds the diameter of R=%.4f", value, radius)
                return None
            ia = 2 * math.asin(half_sine)
            ia_degrees = math.degrees(ia)

    half = ia / 2
    return CurveResult(
        kind=CurveKind(data.kind),
        radius=radius,
        intersection_angle=ia_degrees,
        curve_length=radius * ia,
        tangent_length=radius * math.tan(half),
        external_secant=radius * (1 / math.cos(half) - 1),
        middle_ordinate=radius * (1 - math.cos(half)),
        long_chord=2 * radius * math.sin(half),
    )
