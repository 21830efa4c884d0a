# -*- coding: utf-8 -*-
"""Altitude correction by bilinear interpolation on a mesh-code grid.

Correction parameters (e.g. GSI's PatchJGD(H) ``.par`` files) are published
per third-order mesh (JIS X 0410): cells of 30″ of latitude by 45″ of
longitude, identified by an 8-digit mesh code. The value of a mesh is
attached to its south-west corner; the correction at an arbitrary position is
interpolated from the four surrounding corners, longitude first.

Corners missing from the grid count as ``0.0`` as long as at least one of
the four corners is present. This keeps coastal points (where the grid has
no values over the sea) computable. A position with no corner at all is out
of range and yields ``None``.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterator
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from surveycalc_lib.constants import MESH_FIRST_ORDER_CELLS
from surveycalc_lib.constants import MESH_LAT_CELLS_PER_DEGREE
from surveycalc_lib.constants import MESH_LON_CELLS_PER_DEGREE
from surveycalc_lib.constants import MESH_LON_OFFSET
from surveycalc_lib.constants import MESH_SECOND_ORDER_CELLS
from surveycalc_lib.constants import PARAMETER_MESH_CODE_COLUMNS
from surveycalc_lib.constants import PARAMETER_MIN_ROW_LENGTH
from surveycalc_lib.constants import PARAMETER_VALUE_COLUMNS
from surveycalc_lib.enums import ResultStatus
from surveycalc_lib.errors import ItemError
from surveycalc_lib.errors import ParameterFileError
from surveycalc_lib.models import AltitudeCorrection

if TYPE_CHECKING:
    from collections.abc import Iterable

    from surveycalc_lib.models import Point

logger = logging.getLogger(__name__)

_MESH_CODE_PATTERN = re.compile(r"^\d{8}$")


class AltitudeCorrectionGrid(Mapping[int, float]):
    """Read-only mapping of third-order mesh code -> correction (metres)."""

    def __init__(self, values: Mapping[int, float] | Iterable[tuple[int, float]] = ()):
        self._values: Mapping[int, float] = MappingProxyType(
            {int(code): float(value) for code, value in dict(values).items()}
        )

    def __getitem__(self, code: int) -> float:
        return self._values[code]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AltitudeCorrectionGrid({len(self)} meshes)"


def mesh_indices(lat: float, lon: float) -> tuple[int, int]:
    """Third-order mesh row / column indices of the cell containing a position.

    Args:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees

    Returns:
        Tuple of (latitude index, longitude index)
    """
    return (
        math.floor(lat * MESH_LAT_CELLS_PER_DEGREE),
        math.floor((lon - MESH_LON_OFFSET) * MESH_LON_CELLS_PER_DEGREE),
    )


def mesh_code(lat_index: int, lon_index: int) -> int:
    """Pack third-order mesh indices into the 8-digit mesh code.

    The code concatenates the first-order mesh (2 digits each for latitude
    and longitude), the second-order mesh (8×8, one digit each) and the
    third-order mesh (10×10, one digit each)::

        p·10⁶ + u·10⁴ + q·10³ + v·10² + r·10 + w

    Examples:
        >>> mesh_code(*mesh_indices(35.681236, 139.767125))
        53394611
    """
    p, lat_rest = divmod(lat_index, MESH_FIRST_ORDER_CELLS)
    q, r = divmod(lat_rest, MESH_SECOND_ORDER_CELLS)
    u, lon_rest = divmod(lon_index, MESH_FIRST_ORDER_CELLS)
    v, w = divmod(lon_rest, MESH_SECOND_ORDER_CELLS)
    return p * 1_000_000 + u * 10_000 + q * 1_000 + v * 100 + r * 10 + w


def interpolate_correction(
    grid: Mapping[int, float], lat: float, lon: float
) -> float | None:
    """Bilinearly interpolate the correction at a position.

    Args:
        grid: Mesh code -> correction mapping
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees

    Returns:
        The correction in metres, or ``None`` if none of the four
        surrounding corners is in the grid
    """
    lat_exact = lat * MESH_LAT_CELLS_PER_DEGREE
    lon_exact = (lon - MESH_LON_OFFSET) * MESH_LON_CELLS_PER_DEGREE
    lat0, lon0 = mesh_indices(lat, lon)

    fy = lat_exact - lat0
    fx = lon_exact - lon0

    # south-west, south-east, north-west, north-east
    corners = [
        grid.get(mesh_code(lat0, lon0)),
        grid.get(mesh_code(lat0, lon0 + 1)),
        grid.get(mesh_code(lat0 + 1, lon0)),
        grid.get(mesh_code(lat0 + 1, lon0 + 1)),
    ]
    if all(value is None for value in corners):
        return None

    v00, v01, v10, v11 = (0.0 if value is None else value for value in corners)

    south = v00 * (1 - fx) + v01 * fx
    north = v10 * (1 - fx) + v11 * fx
    return south * (1 - fy) + north * fy


def parse_parameter_text(text: str) -> AltitudeCorrectionGrid:
    """Read a GSI altitude correction parameter file.

    Data rows start with the 8-digit mesh code, followed by the correction
    value in columns 8-18. Header lines and anything else that does not
    match this layout are skipped.

    Args:
        text: The file content

    Returns:
        The correction grid

    Raises:
        ParameterFileError: If the text contains no valid data row
    """
    values: dict[int, float] = {}
    skipped = 0

    for lineno, line in enumerate(text.splitlines(), start=1):
        if len(line) < PARAMETER_MIN_ROW_LENGTH:
            continue

        code_text = line[PARAMETER_MESH_CODE_COLUMNS]
        if not _MESH_CODE_PATTERN.match(code_text):
            continue

        value_text = line[PARAMETER_VALUE_COLUMNS].strip()
        try:
            value = float(value_text)
        except ValueError:
            value = math.nan

        if not math.isfinite(value):
            skipped += 1
            logger.warning(
                "Skipping parameter row %d: invalid correction %r", lineno, value_text
            )
            continue

        values[int(code_text)] = value

    if not values:
        raise ParameterFileError("No valid mesh correction rows found")

    logger.info(
        "Loaded %d mesh corrections (%d rows skipped)", len(values), skipped
    )
    return AltitudeCorrectionGrid(values)


def correct_altitudes(
    points: Iterable[Point], grid: Mapping[int, float]
) -> list[AltitudeCorrection]:
    """Apply the interpolated correction to each point's elevation.

    Points without latitude/longitude or outside the grid are reported as
    errors; they never abort the batch.
    """
    results: list[AltitudeCorrection] = []

    for index, point in enumerate(points):
        correction = None
        if point.has_geographic:
            correction = interpolate_correction(grid, point.lat, point.lon)

        if correction is None:
            message = (
                "outside the correction grid"
                if point.has_geographic
                else "no latitude/longitude"
            )
            error = ItemError(index=index, name=point.name, message=message)
            logger.warning("Altitude correction failed for %s", error)
            results.append(
                AltitudeCorrection(
                    point=point, status=ResultStatus.ERROR, error=error
                )
            )
            continue

        results.append(
            AltitudeCorrection(
                point=point,
                status=ResultStatus.SUCCESS,
                correction=correction,
                new_z=point.z + correction,
            )
        )

    logger.info(
        "Altitude correction: %d/%d points corrected",
        sum(1 for r in results if r.status is ResultStatus.SUCCESS),
        len(results),
    )
    return results
