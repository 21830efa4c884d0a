# -*- coding: utf-8 -*-
"""Core value models for surveying calculations.

This module contains the base Pydantic models shared by the calculation
modules. All of them are frozen: the calculations treat them as immutable
inputs and always return fresh instances.

Axis convention: ``x`` is the northing and ``y`` is the easting, as in
Japanese survey practice. This is swapped relative to most projection
libraries, which take (easting, northing).
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic_extra_types.coordinate import Latitude  # noqa: TC002
from pydantic_extra_types.coordinate import Longitude  # noqa: TC002

from surveycalc_lib.angles import decimal_to_dms
from surveycalc_lib.constants import PLANE_COORDINATE_PRECISION
from surveycalc_lib.enums import ResultStatus  # noqa: TC001
from surveycalc_lib.errors import ItemError  # noqa: TC001


class PlanePoint(BaseModel):
    """2D plane rectangular coordinate.

    Attributes:
        x: Northing in metres
        y: Easting in metres
    """

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def __str__(self) -> str:
        p = PLANE_COORDINATE_PRECISION
        return f"PlanePoint(x={self.x:.{p}f}, y={self.y:.{p}f})"


class GeoLocation(BaseModel):
    """Geographic position in decimal degrees (GRS80 / JGD2011)."""

    model_config = ConfigDict(frozen=True)

    lat: Latitude
    lon: Longitude

    @property
    def lat_dms(self) -> str:
        """Latitude formatted for display."""
        return decimal_to_dms(self.lat)

    @property
    def lon_dms(self) -> str:
        """Longitude formatted for display."""
        return decimal_to_dms(self.lon)

    def __str__(self) -> str:
        return f"GeoLocation(lat={self.lat_dms}, lon={self.lon_dms})"


class Point(BaseModel):
    """A survey point as handed over by the persistence layer.

    Identity and storage belong to the caller; calculations that "update" a
    point return a modified copy.

    Attributes:
        x: Northing in metres
        y: Easting in metres
        z: Elevation in metres
        lat: Latitude in decimal degrees, if known
        lon: Longitude in decimal degrees, if known
        name: Display name (optional)
    """

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float = 0.0
    lat: Latitude | None = None
    lon: Longitude | None = None
    name: str = ""

    @property
    def has_geographic(self) -> bool:
        """True when both latitude and longitude are known."""
        return self.lat is not None and self.lon is not None

    @property
    def plane(self) -> PlanePoint:
        """The horizontal plane coordinate of this point."""
        return PlanePoint(x=self.x, y=self.y)

    @property
    def geographic(self) -> GeoLocation | None:
        """The geographic position of this point, if known."""
        if not self.has_geographic:
            return None
        return GeoLocation(lat=self.lat, lon=self.lon)

    def __str__(self) -> str:
        label = self.name or "<unnamed>"
        p = PLANE_COORDINATE_PRECISION
        return f"Point({label}, x={self.x:.{p}f}, y={self.y:.{p}f}, z={self.z:.{p}f})"


class ControlPointPair(BaseModel):
    """An observation pair for fitting a Helmert transformation.

    Attributes:
        source: Coordinate in the source frame
        target: Coordinate of the same point in the target frame
        use: Whether the pair takes part in the fit (``False`` keeps it
            listed without influencing the solution)
    """

    model_config = ConfigDict(frozen=True)

    source: PlanePoint
    target: PlanePoint
    use: bool = True


class HelmertParams(BaseModel):
    """Parameters of a 2D similarity (4-parameter Helmert) transformation.

    ``x' = a·x − b·y + c`` and ``y' = b·x + a·y + d``, with
    ``a = scale·cos(rotation)`` and ``b = scale·sin(rotation)``.

    Attributes:
        a: Scale times cosine of the rotation
        b: Scale times sine of the rotation
        c: Translation along x (metres)
        d: Translation along y (metres)
        scale: Scale factor ``sqrt(a² + b²)``
        rotation: Rotation angle in decimal degrees
    """

    model_config = ConfigDict(frozen=True)

    a: float
    b: float
    c: float
    d: float
    scale: float
    rotation: float

    @property
    def rotation_dms(self) -> str:
        """Rotation formatted for display."""
        return decimal_to_dms(self.rotation)


# -----------------------------------------------------------------------------
# Calculation results
# -----------------------------------------------------------------------------


class TrueNorthResult(BaseModel):
    """Grid azimuth corrected to true north at a geographic position.

    Attributes:
        convergence: Meridian convergence in decimal degrees
        grid_azimuth: Input grid azimuth in decimal degrees
        true_azimuth: ``grid_azimuth + convergence`` (not normalized)
    """

    model_config = ConfigDict(frozen=True)

    convergence: float
    grid_azimuth: float
    true_azimuth: float

    @property
    def convergence_dms(self) -> str:
        return decimal_to_dms(self.convergence)

    @property
    def true_azimuth_dms(self) -> str:
        return decimal_to_dms(self.true_azimuth)


class InverseResult(BaseModel):
    """Distance and direction between two points.

    Attributes:
        distance: Horizontal distance in metres
        azimuth: Grid azimuth from the first to the second point, clockwise
            from the x (north) axis, in ``[0, 360)`` degrees
        dx: Northing difference ``p2.x - p1.x``
        dy: Easting difference ``p2.y - p1.y``
        dz: Elevation difference ``p2.z - p1.z``
    """

    model_config = ConfigDict(frozen=True)

    distance: float
    azimuth: float
    dx: float
    dy: float
    dz: float

    @property
    def azimuth_dms(self) -> str:
        return decimal_to_dms(self.azimuth)


class HelmertResidual(BaseModel):
    """Misclosure of one control point pair after a Helmert fit.

    Attributes:
        vx: Target x minus transformed source x (metres)
        vy: Target y minus transformed source y (metres)
        v: Horizontal residual ``hypot(vx, vy)``
        use: Whether the pair took part in the fit
    """

    model_config = ConfigDict(frozen=True)

    vx: float
    vy: float
    v: float
    use: bool = True


class AltitudeCorrection(BaseModel):
    """Altitude correction of one point.

    Attributes:
        point: The input point
        status: Whether the correction could be computed
        correction: Interpolated correction in metres
        new_z: ``point.z + correction``
        error: Reason of the failure when ``status`` is ``ERROR``
    """

    model_config = ConfigDict(frozen=True)

    point: Point
    status: ResultStatus
    correction: float | None = None
    new_z: float | None = None
    error: ItemError | None = None

    @property
    def corrected_point(self) -> Point | None:
        """Copy of the point carrying the corrected elevation."""
        if self.new_z is None:
            return None
        return self.point.model_copy(update={"z": self.new_z})


class GeoidResult(BaseModel):
    """Geoid height lookup of one point.

    Attributes:
        point: The input point
        status: Whether a geoid height was obtained
        geoid_height: Geoid height N in metres
        new_z: Elevation after applying the requested mode
        error: Reason of the failure when ``status`` is ``ERROR``
    """

    model_config = ConfigDict(frozen=True)

    point: Point
    status: ResultStatus
    geoid_height: float | None = None
    new_z: float | None = None
    error: ItemError | None = None

    @property
    def updated_point(self) -> Point | None:
        """Copy of the point carrying the new elevation."""
        if self.new_z is None:
            return None
        return self.point.model_copy(update={"z": self.new_z})


class GeoidBatchResult(BaseModel):
    """Outcome of a geoid height batch.

    ``items`` holds one entry per processed point, in input order. A
    cancelled batch holds the prefix completed before the cancellation.
    """

    model_config = ConfigDict(frozen=True)

    items: list[GeoidResult] = []
    cancelled: bool = False

    @property
    def success_count(self) -> int:
        return sum(1 for item in self.items if item.status is ResultStatus.SUCCESS)

    @property
    def error_count(self) -> int:
        return sum(1 for item in self.items if item.status is ResultStatus.ERROR)
