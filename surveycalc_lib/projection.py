# -*- coding: utf-8 -*-
"""Plane rectangular <-> geographic coordinate conversion.

Conversions go through pyproj (PROJ's transverse Mercator), which is exact
to well below a millimetre inside a zone. One pair of transformers is built
per zone on first use and cached for the lifetime of the process.

pyproj is used with ``always_xy=True`` so that every call is
(longitude, latitude) -> (easting, northing). Survey plane coordinates are
(x=northing, y=easting); the swap is done explicitly in this module and
nowhere else.
"""

from __future__ import annotations

import logging

from pyproj import CRS
from pyproj import Transformer

from surveycalc_lib.models import GeoLocation
from surveycalc_lib.models import PlanePoint
from surveycalc_lib.models import Point
from surveycalc_lib.zones import get_zone

logger = logging.getLogger(__name__)

# zone id -> (geographic -> plane, plane -> geographic)
_transformer_cache: dict[int, tuple[Transformer, Transformer]] = {}


def _get_transformers(zone_id: int) -> tuple[Transformer, Transformer]:
    """Get or create the cached transformers of a zone.

    Args:
        zone_id: Plane rectangular zone number (1-19)

    Returns:
        Tuple of (forward, inverse) transformers

    Raises:
        InvalidZoneError: If the zone number is invalid
    """
    zone = get_zone(zone_id)
    if zone.id not in _transformer_cache:
        projected_crs = CRS.from_proj4(zone.proj4)
        geographic_crs = projected_crs.geodetic_crs
        _transformer_cache[zone.id] = (
            Transformer.from_crs(geographic_crs, projected_crs, always_xy=True),
            Transformer.from_crs(projected_crs, geographic_crs, always_xy=True),
        )
        logger.debug("Created transformers for %s (%s)", zone.name, zone.proj4)
    return _transformer_cache[zone.id]


def plane_to_geographic(x: float, y: float, zone: int) -> GeoLocation:
    """Convert a plane rectangular coordinate to latitude / longitude.

    Args:
        x: Northing in metres
        y: Easting in metres
        zone: Plane rectangular zone number (1-19)

    Returns:
        The geographic position in decimal degrees

    Raises:
        InvalidZoneError: If the zone number is invalid
    """
    _, inverse = _get_transformers(zone)
    lon, lat = inverse.transform(y, x)
    return GeoLocation(lat=float(lat), lon=float(lon))


def geographic_to_plane(lat: float, lon: float, zone: int) -> PlanePoint:
    """Convert latitude / longitude to a plane rectangular coordinate.

    Args:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
        zone: Plane rectangular zone number (1-19)

    Returns:
        The plane coordinate (x=northing, y=easting) in metres

    Raises:
        InvalidZoneError: If the zone number is invalid
    """
    forward, _ = _get_transformers(zone)
    easting, northing = forward.transform(lon, lat)
    return PlanePoint(x=float(northing), y=float(easting))


def point_to_geographic(point: Point, zone: int) -> Point:
    """Return a copy of ``point`` with lat/lon computed from its x/y."""
    location = plane_to_geographic(point.x, point.y, zone)
    logger.debug("%s -> %s (zone %d)", point, location, zone)
    return point.model_copy(update={"lat": location.lat, "lon": location.lon})


def point_to_plane(point: Point, zone: int) -> Point:
    """Return a copy of ``point`` with x/y computed from its lat/lon.

    Raises:
        ValueError: If the point has no geographic position
        InvalidZoneError: If the zone number is invalid
    """
    if not point.has_geographic:
        raise ValueError(f"Point '{point.name}' has no latitude/longitude")

    plane = geographic_to_plane(point.lat, point.lon, zone)
    logger.debug("%s -> %s (zone %d)", point, plane, zone)
    return point.model_copy(update={"x": plane.x, "y": plane.y})
