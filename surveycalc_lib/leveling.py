# -*- coding: utf-8 -*-
"""Differential leveling field book reduction (height-of-instrument method).

Rows are reduced top to bottom:

- A row with a manual ground height (a bench mark) keeps that height.
- Otherwise a row with a foresight gets ``GH = IH − FS`` from the current
  instrument height.
- A backsight taken on a row whose ground height is known sets a new
  instrument height ``IH = GH + BS``.

A row carrying both a foresight and a backsight is a turning point. A row
with only a foresight is an intermediate sight and leaves the instrument
height unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic import ConfigDict

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class LevelingRow(BaseModel):
    """One line of the field book.

    Attributes:
        station: Station label
        backsight: Backsight staff reading (m)
        foresight: Foresight staff reading (m)
        ground_height: Known ground height (m), used when
            ``is_manual_ground_height`` is set
        is_manual_ground_height: Whether ``ground_height`` is a fixed input
        distance: Sight distance (m)
        note: Free text
    """

    model_config = ConfigDict(frozen=True)

    station: str = ""
    backsight: float | None = None
    foresight: float | None = None
    ground_height: float | None = None
    is_manual_ground_height: bool = False
    distance: float | None = None
    note: str = ""


class ReducedLevelingRow(BaseModel):
    """A field book row with its computed heights."""

    model_config = ConfigDict(frozen=True)

    row: LevelingRow
    instrument_height: float | None = None
    ground_height: float | None = None


class LevelingReduction(BaseModel):
    """Result of a field book reduction.

    Attributes:
        rows: Reduced rows, in input order
        sum_backsight: Sum of all backsight readings
        sum_foresight: Sum of all foresight readings
        total_distance: Sum of all sight distances
    """

    model_config = ConfigDict(frozen=True)

    rows: list[ReducedLevelingRow]
    sum_backsight: float = 0.0
    sum_foresight: float = 0.0
    total_distance: float = 0.0

    @property
    def last_ground_height(self) -> float | None:
        """Ground height of the last reduced row, if any."""
        for reduced in reversed(self.rows):
            if reduced.ground_height is not None:
                return reduced.ground_height
        return None


def reduce_leveling(rows: Iterable[LevelingRow]) -> LevelingReduction:
    """Compute instrument and ground heights for a field book."""
    reduced: list[ReducedLevelingRow] = []
    instrument_height: float | None = None
    sum_backsight = 0.0
    sum_foresight = 0.0
    total_distance = 0.0

    for row in rows:
        ground_height: float | None = None
        if row.is_manual_ground_height and row.ground_height is not None:
            ground_height = row.ground_height
        elif row.foresight is not None and instrument_height is not None:
            ground_height = instrument_height - row.foresight

        row_instrument_height: float | None = None
        if row.backsight is not None and ground_height is not None:
            instrument_height = ground_height + row.backsight
            row_instrument_height = instrument_height

        if row.backsight is not None:
            sum_backsight += row.backsight
        if row.foresight is not None:
            sum_foresight += row.foresight
        if row.distance is not None:
            total_distance += row.distance

        if ground_height is None and (row.backsight is not None or row.foresight is not None):
            logger.debug("Station %r cannot be reduced: no known height", row.station)

        reduced.append(
            ReducedLevelingRow(
                row=row,
                instrument_height=row_instrument_height,
                ground_height=ground_height,
            )
        )

    return LevelingReduction(
        rows=reduced,
        sum_backsight=sum_backsight,
        sum_foresight=sum_foresight,
        total_distance=total_distance,
    )
