# -*- coding: utf-8 -*-
"""Interfaces between the calculation core and its callers.

The core does not perform I/O on its own. Long-running operations accept
collaborators implementing the protocols below:

1. A geoid height fetcher, the only external service the core talks to
2. A progress callback, invoked as items complete
3. A cancellation token, checked between items
"""

from typing import Protocol


class GeoidHeightFetcher(Protocol):
    """Async source of geoid heights.

    Implementations return the geoid height in metres, or ``None`` when the
    service reports no value for the position. They may raise on transport
    errors; batch callers record such failures per item.
    """

    async def __call__(self, lat: float, lon: float) -> float | None:
        """Fetch the geoid height at a position (decimal degrees)."""
        ...


class ProgressCallback(Protocol):
    """Protocol for progress callbacks."""

    def __call__(
        self,
        message: str | None = None,
        completed: int | None = None,
        total: int | None = None,
    ) -> None:
        """Report progress."""
        ...


class CancellationToken:
    """Token for checking if an operation should be cancelled."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        """Check if cancellation was requested."""
        return self._cancelled

    def cancel(self) -> None:
        """Request cancellation."""
        self._cancelled = True
