# -*- coding: utf-8 -*-
"""Constants used throughout the surveycalc_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# Plane Rectangular Coordinate System
# -----------------------------------------------------------------------------

#: Scale factor on the central meridian of every plane rectangular zone
PLANE_SCALE_FACTOR: float = 0.9999

#: Number of plane rectangular zones (numbered 1..N)
ZONE_COUNT: int = 19

#: EPSG code of zone 1 (JGD2011 / Japan Plane Rectangular CS I)
#: Zone N is ``ZONE_BASE_EPSG + N - 1``.
ZONE_BASE_EPSG: int = 6669

#: PROJ definition template for a plane rectangular zone (GRS80 ellipsoid)
ZONE_PROJ4_TEMPLATE: str = (
    "+proj=tmerc +lat_0={lat_0!r} +lon_0={lon_0!r} +k={k!r} "
    "+x_0=0 +y_0=0 +ellps=GRS80 +units=m +no_defs"
)

# -----------------------------------------------------------------------------
# Angles
# -----------------------------------------------------------------------------

#: Degree / minute / second markers accepted in DMS text input
DMS_DEGREE_MARKERS: str = "°"
DMS_MINUTE_MARKERS: str = "′'"
DMS_SECOND_MARKERS: str = "″\""

#: Field separator accepted between DMS fields (``35-20-30``)
DMS_FIELD_SEPARATOR: str = "-"

FULL_CIRCLE_DEGREES: float = 360.0

# -----------------------------------------------------------------------------
# Helmert Transformation
# -----------------------------------------------------------------------------

#: Minimum number of active control point pairs for a fit
HELMERT_MIN_PAIRS: int = 2

#: Sum of squared centred source coordinates below which the fit is degenerate
HELMERT_DEGENERATE_TOLERANCE: float = 1e-10

# -----------------------------------------------------------------------------
# Mesh Codes (JIS X 0410 standard regional mesh)
# -----------------------------------------------------------------------------

#: Third-order mesh cells per degree of latitude (30 arc-seconds)
MESH_LAT_CELLS_PER_DEGREE: int = 120

#: Third-order mesh cells per degree of longitude (45 arc-seconds)
MESH_LON_CELLS_PER_DEGREE: int = 80

#: Longitude origin of the mesh numbering (degrees east)
MESH_LON_OFFSET: float = 100.0

#: Third-order cells per first-order mesh side
MESH_FIRST_ORDER_CELLS: int = 80

#: Third-order cells per second-order mesh side
MESH_SECOND_ORDER_CELLS: int = 10

#: Columns of a parameter file row holding the mesh code / correction value
PARAMETER_MESH_CODE_COLUMNS: slice = slice(0, 8)
PARAMETER_VALUE_COLUMNS: slice = slice(8, 18)

#: Minimum length of a parameter file data row
PARAMETER_MIN_ROW_LENGTH: int = 18

# -----------------------------------------------------------------------------
# Geoid Height Service
# -----------------------------------------------------------------------------

#: GSI geoid height calculation endpoint
GEOID_SERVICE_URL: str = (
    "https://vldb.gsi.go.jp/sokuchi/surveycalc/geoid/calcgh/cgi/geoidcalc.pl"
)

#: Value of ``ReturnFlag`` reported by the service on success
GEOID_SUCCESS_FLAG: str = "1"

#: Minimum delay between two consecutive service requests (seconds)
#: The service allows 10 requests per 10 seconds.
GEOID_REQUEST_INTERVAL: float = 1.0

#: Timeout of a single service request (seconds)
GEOID_REQUEST_TIMEOUT: float = 10.0

# -----------------------------------------------------------------------------
# Formatting Constants
# -----------------------------------------------------------------------------

#: Decimal precision for plane coordinates in human readable output (metres)
PLANE_COORDINATE_PRECISION: int = 4
