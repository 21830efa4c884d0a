# -*- coding: utf-8 -*-
"""Error handling for surveying calculations.

Only caller mistakes are raised (an impossible zone number, an unreadable
parameter file, a failing external service inside its own client).
Expected data conditions such as too few control points or a point outside
the correction grid are reported as ``None`` by the calculation functions,
and failures inside a batch are recorded per item with :class:`ItemError`.
"""

from dataclasses import dataclass


class SurveyCalcError(Exception):
    """Base class for all exceptions raised by surveycalc_lib."""


class InvalidZoneError(SurveyCalcError, ValueError):
    """Raised when a plane rectangular zone number is outside 1..19.

    Attributes:
        zone: The rejected zone value
    """

    def __init__(self, zone: object):
        self.zone = zone
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Invalid plane rectangular zone: {self.zone!r} (expected 1-19)"


class ParameterFileError(SurveyCalcError, ValueError):
    """Raised when an altitude correction parameter file has no valid rows."""


class GeoidServiceError(SurveyCalcError):
    """Raised when the geoid height service cannot produce a height.

    Covers network errors, non-success HTTP responses and malformed or
    unsuccessful payloads.
    """


@dataclass(frozen=True)
class ItemError:
    """A failure recorded for one item of a batch calculation.

    This is a data record, not an exception. Batches never raise for
    a single item; they attach one of these to the item result instead.

    Attributes:
        index: Position of the item in the batch input (0-based)
        name: Display name of the item (may be empty)
        message: Human-readable reason
    """

    index: int
    name: str
    message: str

    def __str__(self) -> str:
        label = f"'{self.name}'" if self.name else f"#{self.index + 1}"
        return f"item {label}: {self.message}"
