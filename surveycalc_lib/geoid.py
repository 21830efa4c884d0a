# -*- coding: utf-8 -*-
"""Geoid height retrieval.

:class:`GsiGeoidClient` queries the geoid height calculation service of the
Geospatial Information Authority of Japan (GSI). :func:`fetch_geoid_heights`
runs a batch of points through any :class:`GeoidHeightFetcher`, one request
at a time, keeping the service's rate limit.

Example:
    client = GsiGeoidClient()
    result = asyncio.run(
        fetch_geoid_heights(points, client, mode=GeoidMode.TO_ORTHOMETRIC)
    )
    for item in result.items:
        print(item.point.name, item.geoid_height, item.error)
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import TYPE_CHECKING
from typing import Any

import orjson
import requests

from surveycalc_lib.constants import GEOID_REQUEST_INTERVAL
from surveycalc_lib.constants import GEOID_REQUEST_TIMEOUT
from surveycalc_lib.constants import GEOID_SERVICE_URL
from surveycalc_lib.constants import GEOID_SUCCESS_FLAG
from surveycalc_lib.enums import GeoidMode
from surveycalc_lib.enums import ResultStatus
from surveycalc_lib.errors import GeoidServiceError
from surveycalc_lib.errors import ItemError
from surveycalc_lib.models import GeoidBatchResult
from surveycalc_lib.models import GeoidResult

if TYPE_CHECKING:
    from collections.abc import Awaitable
    from collections.abc import Callable
    from collections.abc import Iterable

    from surveycalc_lib.interface import CancellationToken
    from surveycalc_lib.interface import GeoidHeightFetcher
    from surveycalc_lib.interface import ProgressCallback
    from surveycalc_lib.models import Point

logger = logging.getLogger(__name__)


def parse_geoid_payload(payload: Any) -> float:
    """Extract the geoid height from a decoded service response.

    The response is successful only when ``ReturnFlag`` is ``"1"`` and
    ``OutputData.geoidHeight`` holds a number.

    Raises:
        GeoidServiceError: If the payload reports a failure or is malformed
    """
    if not isinstance(payload, dict):
        raise GeoidServiceError(f"Unexpected geoid service payload: {payload!r}")

    flag = payload.get("ReturnFlag")
    if str(flag) != GEOID_SUCCESS_FLAG:
        raise GeoidServiceError(f"Geoid service returned flag {flag!r}")

    output = payload.get("OutputData")
    if not isinstance(output, dict) or output.get("geoidHeight") in (None, ""):
        raise GeoidServiceError("Geoid service response has no geoid height")

    try:
        height = float(output["geoidHeight"])
    except (TypeError, ValueError) as e:
        raise GeoidServiceError(
            f"Invalid geoid height {output['geoidHeight']!r}"
        ) from e

    if not math.isfinite(height):
        raise GeoidServiceError(f"Invalid geoid height {output['geoidHeight']!r}")

    return height


class GsiGeoidClient:
    """Geoid height fetcher backed by the GSI web service.

    The blocking HTTP request runs in a worker thread so the client can be
    awaited like any other :class:`GeoidHeightFetcher`.

    Args:
        session: HTTP session to use (a new one is created if omitted)
        url: Service endpoint
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        url: str = GEOID_SERVICE_URL,
        timeout: float = GEOID_REQUEST_TIMEOUT,
    ) -> None:
        self._session = session if session is not None else requests.Session()
        self.url = url
        self.timeout = timeout

    def fetch(self, lat: float, lon: float) -> float:
        """Query the service synchronously.

        Raises:
            GeoidServiceError: On network errors, non-success HTTP responses
                and malformed or unsuccessful payloads
        """
        params = {"latitude": lat, "longitude": lon, "outputType": "json"}
        try:
            response = self._session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise GeoidServiceError(f"Geoid service request failed: {e}") from e

        try:
            payload = orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            raise GeoidServiceError(f"Geoid service returned invalid JSON: {e}") from e

        height = parse_geoid_payload(payload)
        logger.debug("Geoid height at (%.8f, %.8f): %.4f m", lat, lon, height)
        return height

    async def __call__(self, lat: float, lon: float) -> float | None:
        return await asyncio.to_thread(self.fetch, lat, lon)


def _failure(index: int, point: Point, message: str) -> GeoidResult:
    error = ItemError(index=index, name=point.name, message=message)
    logger.warning("Geoid lookup failed for %s", error)
    return GeoidResult(point=point, status=ResultStatus.ERROR, error=error)


async def _lookup(
    index: int,
    point: Point,
    fetcher: GeoidHeightFetcher,
    mode: GeoidMode,
) -> GeoidResult:
    try:
        height = await fetcher(point.lat, point.lon)
    except Exception as e:  # noqa: BLE001
        return _failure(index, point, str(e) or type(e).__name__)

    if height is None:
        return _failure(index, point, "no geoid height returned")

    return GeoidResult(
        point=point,
        status=ResultStatus.SUCCESS,
        geoid_height=height,
        new_z=mode.apply(point.z, height),
    )


async def fetch_geoid_heights(
    points: Iterable[Point],
    fetcher: GeoidHeightFetcher,
    *,
    mode: GeoidMode = GeoidMode.HEIGHT_ONLY,
    interval: float = GEOID_REQUEST_INTERVAL,
    cancellation: CancellationToken | None = None,
    on_progress: ProgressCallback | None = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> GeoidBatchResult:
    """Look up the geoid height of each point, one request at a time.

    ``interval`` seconds are awaited between two consecutive service
    requests. Points without latitude/longitude are recorded as errors
    without a request. A failure never aborts the batch.

    Cancellation is checked before each point and after each delay. A
    cancelled batch returns the points completed so far with
    ``cancelled=True``.

    Args:
        points: Points to process
        fetcher: Geoid height source
        mode: How the geoid height updates the elevation
        interval: Delay between requests in seconds
        cancellation: Optional cancellation token
        on_progress: Optional progress callback
        sleep: Coroutine function used for the delay

    Returns:
        The per-point results, in input order
    """
    points = list(points)
    total = len(points)
    items: list[GeoidResult] = []
    cancelled = False
    has_requested = False

    logger.info("Fetching geoid heights for %d points (mode=%s)", total, mode.value)

    for index, point in enumerate(points):
        if cancellation is not None and cancellation.cancelled:
            cancelled = True
            break

        if not point.has_geographic:
            items.append(_failure(index, point, "no latitude/longitude"))
        else:
            if has_requested and interval > 0:
                await sleep(interval)
                if cancellation is not None and cancellation.cancelled:
                    cancelled = True
                    break
            has_requested = True
            items.append(await _lookup(index, point, fetcher, mode))

        if on_progress is not None:
            on_progress(
                message=f"Geoid height {index + 1}/{total}",
                completed=index + 1,
                total=total,
            )

    result = GeoidBatchResult(items=items, cancelled=cancelled)
    logger.info(
        "Geoid batch %s: %d succeeded, %d failed, %d not processed",
        "cancelled" if cancelled else "finished",
        result.success_count,
        result.error_count,
        total - len(items),
    )
    return result
