# -*- coding: utf-8 -*-
"""Surveying Calculation Library.

Numerical core for land surveying on the Japan Plane Rectangular
Coordinate System: DMS angles, plane <-> geographic conversion, meridian
convergence, two-point inverse, Helmert transformation, mesh-based altitude
correction, geoid heights, leveling and construction calculations.

Usage:
    from surveycalc_lib import geographic_to_plane, inverse, plane_to_geographic
    location = plane_to_geographic(-6000.0, -20000.0, zone=9)
    print(location.lat_dms, location.lon_dms)

    plane = geographic_to_plane(35.681236, 139.767125, zone=9)

    # Fit a Helmert transformation between two local frames
    from surveycalc_lib import ControlPointPair, PlanePoint, fit_helmert
    params = fit_helmert(pairs)
    if params is not None:
        print(params.scale, params.rotation_dms)

    # Batch geoid heights (one request per second)
    from surveycalc_lib import GsiGeoidClient, fetch_geoid_heights
    result = asyncio.run(fetch_geoid_heights(points, GsiGeoidClient()))
"""

__version__ = "0.1.0"

from surveycalc_lib.altitude import AltitudeCorrectionGrid
from surveycalc_lib.altitude import correct_altitudes
from surveycalc_lib.altitude import interpolate_correction
from surveycalc_lib.altitude import mesh_code
from surveycalc_lib.altitude import mesh_indices
from surveycalc_lib.altitude import parse_parameter_text
from surveycalc_lib.angles import decimal_to_dms
from surveycalc_lib.angles import normalize_azimuth
from surveycalc_lib.angles import parse_dms_or_decimal
from surveycalc_lib.construction import AngleGradientInput
from surveycalc_lib.construction import ChordCurveInput
from surveycalc_lib.construction import CurveInput
from surveycalc_lib.construction import CurveLengthCurveInput
from surveycalc_lib.construction import CurveResult
from surveycalc_lib.construction import GradientInput
from surveycalc_lib.construction import GradientResult
from surveycalc_lib.construction import HeightGradientInput
from surveycalc_lib.construction import IntersectionAngleCurveInput
from surveycalc_lib.construction import PercentGradientInput
from surveycalc_lib.construction import calculate_curve
from surveycalc_lib.construction import calculate_gradient

# Enums
from surveycalc_lib.enums import CurveKind
from surveycalc_lib.enums import GeoidMode
from surveycalc_lib.enums import GradientKind
from surveycalc_lib.enums import ResultStatus
from surveycalc_lib.errors import GeoidServiceError
from surveycalc_lib.errors import InvalidZoneError
from surveycalc_lib.errors import ItemError
from surveycalc_lib.errors import ParameterFileError
from surveycalc_lib.errors import SurveyCalcError
from surveycalc_lib.geoid import GsiGeoidClient
from surveycalc_lib.geoid import fetch_geoid_heights
from surveycalc_lib.helmert import apply_helmert
from surveycalc_lib.helmert import fit_helmert
from surveycalc_lib.helmert import helmert_residuals
from surveycalc_lib.helmert import residual_rms
from surveycalc_lib.helmert import transform_points
from surveycalc_lib.interface import CancellationToken
from surveycalc_lib.interface import GeoidHeightFetcher
from surveycalc_lib.interface import ProgressCallback
from surveycalc_lib.inverse import inverse
from surveycalc_lib.leveling import LevelingReduction
from surveycalc_lib.leveling import LevelingRow
from surveycalc_lib.leveling import ReducedLevelingRow
from surveycalc_lib.leveling import reduce_leveling
from surveycalc_lib.models import AltitudeCorrection
from surveycalc_lib.models import ControlPointPair
from surveycalc_lib.models import GeoidBatchResult
from surveycalc_lib.models import GeoidResult
from surveycalc_lib.models import GeoLocation
from surveycalc_lib.models import HelmertParams
from surveycalc_lib.models import HelmertResidual
from surveycalc_lib.models import InverseResult
from surveycalc_lib.models import PlanePoint
from surveycalc_lib.models import Point
from surveycalc_lib.models import TrueNorthResult
from surveycalc_lib.north import compute_true_north
from surveycalc_lib.north import meridian_convergence
from surveycalc_lib.north import true_north_azimuth
from surveycalc_lib.projection import geographic_to_plane
from surveycalc_lib.projection import plane_to_geographic
from surveycalc_lib.projection import point_to_geographic
from surveycalc_lib.projection import point_to_plane
from surveycalc_lib.zones import ZONES
from surveycalc_lib.zones import Zone
from surveycalc_lib.zones import get_zone

__all__ = [
    "ZONES",
    "AltitudeCorrection",
    "AltitudeCorrectionGrid",
    "AngleGradientInput",
    "CancellationToken",
    "ChordCurveInput",
    "ControlPointPair",
    "CurveInput",
    "CurveKind",
    "CurveLengthCurveInput",
    "CurveResult",
    "GeoLocation",
    "GeoidBatchResult",
    "GeoidHeightFetcher",
    "GeoidMode",
    "GeoidResult",
    "GeoidServiceError",
    "GradientInput",
    "GradientKind",
    "GradientResult",
    "GsiGeoidClient",
    "HeightGradientInput",
    "HelmertParams",
    "HelmertResidual",
    "IntersectionAngleCurveInput",
    "InvalidZoneError",
    "InverseResult",
    "ItemError",
    "LevelingReduction",
    "LevelingRow",
    "ParameterFileError",
    "PercentGradientInput",
    "PlanePoint",
    "Point",
    "ProgressCallback",
    "ReducedLevelingRow",
    "ResultStatus",
    "SurveyCalcError",
    "TrueNorthResult",
    "Zone",
    "apply_helmert",
    "calculate_curve",
    "calculate_gradient",
    "compute_true_north",
    "correct_altitudes",
    "decimal_to_dms",
    "fetch_geoid_heights",
    "fit_helmert",
    "geographic_to_plane",
    "get_zone",
    "helmert_residuals",
    "interpolate_correction",
    "inverse",
    "mesh_code",
    "mesh_indices",
    "meridian_convergence",
    "normalize_azimuth",
    "parse_dms_or_decimal",
    "parse_parameter_text",
    "plane_to_geographic",
    "point_to_geographic",
    "point_to_plane",
    "reduce_leveling",
    "residual_rms",
    "transform_points",
    "true_north_azimuth",
]
