# -*- coding: utf-8 -*-
"""Japan Plane Rectangular Coordinate System zone table.

The 19 zones (JGD2011, GRS80 ellipsoid, EPSG:6669-6687) are transverse
Mercator projections that differ only by their origin. The table is built
once at import time and exposed as a read-only mapping; nothing mutates it.

A reimplementation for another country substitutes its own table here while
keeping the zone-indexed origin model.
"""

from __future__ import annotations

import numbers
from types import MappingProxyType
from typing import Annotated

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from surveycalc_lib.constants import PLANE_SCALE_FACTOR
from surveycalc_lib.constants import ZONE_BASE_EPSG
from surveycalc_lib.constants import ZONE_COUNT
from surveycalc_lib.constants import ZONE_PROJ4_TEMPLATE
from surveycalc_lib.errors import InvalidZoneError

_ROMAN_NUMERALS: tuple[str, ...] = (
    "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X",
    "XI", "XII", "XIII", "XIV", "XV", "XVI", "XVII", "XVIII", "XIX",
)  # fmt: skip


class Zone(BaseModel):
    """One zone of the plane rectangular coordinate system."""

    model_config = ConfigDict(frozen=True)

    id: Annotated[int, Field(ge=1, le=ZONE_COUNT, description="Zone number")]

    origin_latitude: Annotated[
        float,
        Field(ge=-90, le=90, description="Latitude of origin (decimal degrees)"),
    ]

    origin_longitude: Annotated[
        float,
        Field(
            ge=-180,
            le=180,
            description="Longitude of the central meridian (decimal degrees)",
        ),
    ]

    scale_factor: Annotated[
        float,
        Field(default=PLANE_SCALE_FACTOR, gt=0, description="Central scale factor"),
    ]

    region: Annotated[
        str,
        Field(default="", description="Prefectures / areas covered by the zone"),
    ]

    @property
    def name(self) -> str:
        """Official CRS name, e.g. ``JGD2011 / Japan Plane Rectangular CS IX``."""
        return f"JGD2011 / Japan Plane Rectangular CS {_ROMAN_NUMERALS[self.id - 1]}"

    @property
    def epsg(self) -> int:
        """EPSG code of the zone's JGD2011 projected CRS."""
        return ZONE_BASE_EPSG + self.id - 1

    @property
    def proj4(self) -> str:
        """PROJ definition string of the zone's projection."""
        return ZONE_PROJ4_TEMPLATE.format(
            lat_0=self.origin_latitude,
            lon_0=self.origin_longitude,
            k=self.scale_factor,
        )

    def __str__(self) -> str:
        return f"Zone {self.id} ({self.region})"


def _dm(degrees: int, minutes: int = 0) -> float:
    return degrees + minutes / 60


_ZONE_TABLE: tuple[Zone, ...] = (
    Zone(id=1, origin_latitude=_dm(33), origin_longitude=_dm(129, 30),
         region="Nagasaki, Kagoshima (parts)"),
    Zone(id=2, origin_latitude=_dm(33), origin_longitude=_dm(131),
         region="Fukuoka, Saga, Kumamoto, Oita, Miyazaki, Kagoshima (parts)"),
    Zone(id=3, origin_latitude=_dm(36), origin_longitude=_dm(132, 10),
         region="Yamaguchi, Shimane, Hiroshima"),
    Zone(id=4, origin_latitude=_dm(33), origin_longitude=_dm(133, 30),
         region="Kagawa, Ehime, Tokushima, Kochi"),
    Zone(id=5, origin_latitude=_dm(36), origin_longitude=_dm(134, 20),
         region="Hyogo, Tottori, Okayama"),
    Zone(id=6, origin_latitude=_dm(36), origin_longitude=_dm(136),
         region="Kyoto, Osaka, Fukui, Shiga, Mie, Nara, Wakayama"),
    Zone(id=7, origin_latitude=_dm(36), origin_longitude=_dm(137, 10),
         region="Ishikawa, Toyama, Gifu, Aichi"),
    Zone(id=8, origin_latitude=_dm(36), origin_longitude=_dm(138, 30),
         region="Niigata, Nagano, Yamanashi, Shizuoka"),
    Zone(id=9, origin_latitude=_dm(36), origin_longitude=_dm(139, 50),
         region="Tokyo, Fukushima, Tochigi, Ibaraki, Saitama, Chiba, Gunma, "
                "Kanagawa"),
    Zone(id=10, origin_latitude=_dm(40), origin_longitude=_dm(140, 50),
         region="Aomori, Akita, Yamagata, Iwate, Miyagi"),
    Zone(id=11, origin_latitude=_dm(44), origin_longitude=_dm(140, 15),
         region="Hokkaido (Oshima, Hiyama, Shiribeshi, Iburi)"),
    Zone(id=12, origin_latitude=_dm(44), origin_longitude=_dm(142, 15),
         region="Hokkaido (Ishikari, Sorachi, Kamikawa, Rumoi, Soya)"),
    Zone(id=13, origin_latitude=_dm(44), origin_longitude=_dm(144, 15),
         region="Hokkaido (Hidaka, Tokachi, Kushiro, Nemuro, Abashiri)"),
    Zone(id=14, origin_latitude=_dm(26), origin_longitude=_dm(142),
         region="Ogasawara Islands"),
    Zone(id=15, origin_latitude=_dm(26), origin_longitude=_dm(127, 30),
         region="Okinawa main island"),
    Zone(id=16, origin_latitude=_dm(26), origin_longitude=_dm(124),
         region="Okinawa (Miyako, Yaeyama)"),
    Zone(id=17, origin_latitude=_dm(26), origin_longitude=_dm(131),
         region="Okinawa (Daito Islands)"),
    Zone(id=18, origin_latitude=_dm(20), origin_longitude=_dm(136),
         region="Okinotorishima"),
    Zone(id=19, origin_latitude=_dm(26), origin_longitude=_dm(154),
         region="Minamitorishima"),
)  # fmt: skip

#: Zone number -> Zone, read-only
ZONES: MappingProxyType[int, Zone] = MappingProxyType(
    {zone.id: zone for zone in _ZONE_TABLE}
)


def get_zone(zone: int) -> Zone:
    """Look up a zone by number.

    Args:
        zone: Zone number (1-19)

    Returns:
        The zone definition

    Raises:
        InvalidZoneError: If ``zone`` is not an integer between 1 and 19
    """
    if isinstance(zone, bool) or not isinstance(zone, numbers.Integral):
        raise InvalidZoneError(zone)
    try:
        return ZONES[int(zone)]
    except KeyError:
        raise InvalidZoneError(zone) from None
