# -*- coding: utf-8 -*-
"""Angle utilities: decimal degrees <-> degrees/minutes/seconds.

Decimal degrees are the only angle representation passed between the
calculation modules. DMS text is a presentation format: it is parsed at the
input boundary with :func:`parse_dms_or_decimal` and produced for display
with :func:`decimal_to_dms`.
"""

from __future__ import annotations

import math
import re
from re import Pattern

from surveycalc_lib.constants import DMS_DEGREE_MARKERS
from surveycalc_lib.constants import DMS_FIELD_SEPARATOR
from surveycalc_lib.constants import DMS_MINUTE_MARKERS
from surveycalc_lib.constants import DMS_SECOND_MARKERS
from surveycalc_lib.constants import FULL_CIRCLE_DEGREES

_DMS_MARKERS = DMS_DEGREE_MARKERS + DMS_MINUTE_MARKERS + DMS_SECOND_MARKERS

# Runs of markers / separators collapse into a single field boundary
DMS_FIELD_PATTERN: Pattern[str] = re.compile(
    f"[{re.escape(_DMS_MARKERS + DMS_FIELD_SEPARATOR)}]+"
)


def _split_dms(degrees: float) -> tuple[str, int, int, int]:
    """Split an angle into (sign, degrees, minutes, rounded seconds).

    Seconds are rounded half-up. A rounded 60″ carries into the minutes and
    a resulting 60′ carries into the degrees.
    """
    sign = "-" if degrees < 0 else ""
    magnitude = abs(degrees)

    whole_degrees = math.floor(magnitude)
    minutes_float = (magnitude - whole_degrees) * 60
    minutes = math.floor(minutes_float)
    seconds = math.floor((minutes_float - minutes) * 60 + 0.5)

    if seconds == 60:
        minutes += 1
        seconds = 0
    if minutes == 60:
        whole_degrees += 1
        minutes = 0

    return sign, whole_degrees, minutes, seconds


def decimal_to_dms(degrees: float) -> str:
    """Format decimal degrees as ``[sign]D°MM′SS″``.

    Minutes and seconds are zero-padded to two digits and seconds are
    rounded to the nearest whole arc-second.

    Examples:
        >>> decimal_to_dms(35.5)
        '35°30′00″'
        >>> decimal_to_dms(-12.3456)
        '-12°20′44″'

    Args:
        degrees: Angle in decimal degrees

    Returns:
        The DMS representation
    """
    sign, whole_degrees, minutes, seconds = _split_dms(degrees)
    return f"{sign}{whole_degrees}°{minutes:02d}′{seconds:02d}″"


def _has_field_marker(text: str) -> bool:
    """Check whether unsigned text is written in DMS notation."""
    return any(ch in _DMS_MARKERS for ch in text) or DMS_FIELD_SEPARATOR in text


def _parse_decimal(text: str) -> float:
    try:
        result = float(text)
    except ValueError:
        return 0.0
    return result if math.isfinite(result) else 0.0


def parse_dms_or_decimal(text: str | None) -> float:
    """Parse user angle input written either in decimal or DMS notation.

    Accepted forms include ``"35.5"``, ``"35°30′"``, ``"35°20'30\\""``,
    ``"35-20-30"`` and ``"-12°20′44″"``. A leading ``+``/``-`` gives the
    overall sign; the remaining text is split on any run of ``°``, ``′``,
    ``'``, ``″``, ``"`` or ``-`` into degrees, minutes and seconds. Missing
    trailing fields count as zero and extra fields are ignored.

    This is a forgiving text-input path: empty or non-numeric input yields
    ``0.0`` instead of raising.

    Args:
        text: The user input

    Returns:
        The angle in decimal degrees
    """
    if not text:
        return 0.0

    value = text.strip()
    if not value:
        return 0.0

    sign = 1.0
    body = value
    if body[0] in "+-":
        sign = -1.0 if body[0] == "-" else 1.0
        body = body[1:].strip()

    if not _has_field_marker(body):
        return _parse_decimal(value)

    # "1e-05" is a decimal even though it contains a separator
    decimal = _parse_decimal(value)
    if decimal != 0.0:
        return decimal

    tokens = [token.strip() for token in DMS_FIELD_PATTERN.split(body)]
    tokens = [token for token in tokens if token]
    if not tokens:
        return 0.0

    try:
        fields = [float(token) for token in tokens[:3]]
    except ValueError:
        return 0.0

    if not all(math.isfinite(field) for field in fields):
        return 0.0

    fields += [0.0] * (3 - len(fields))
    whole_degrees, minutes, seconds = fields
    return sign * (abs(whole_degrees) + minutes / 60 + seconds / 3600)


def normalize_azimuth(degrees: float) -> float:
    """Map an angle into ``[0, 360)`` for display."""
    result = degrees % FULL_CIRCLE_DEGREES
    if result >= FULL_CIRCLE_DEGREES:
        # -1e-20 % 360 rounds to 360.0
        result -= FULL_CIRCLE_DEGREES
    return result
