# -*- coding: utf-8 -*-
"""Tests for geoid height retrieval."""

from __future__ import annotations

import asyncio

import orjson
import pytest
import requests

from surveycalc_lib.enums import GeoidMode
from surveycalc_lib.enums import ResultStatus
from surveycalc_lib.errors import GeoidServiceError
from surveycalc_lib.geoid import GsiGeoidClient
from surveycalc_lib.geoid import fetch_geoid_heights
from surveycalc_lib.geoid import parse_geoid_payload
from surveycalc_lib.interface import CancellationToken
from surveycalc_lib.models import GeoidBatchResult
from surveycalc_lib.models import Point

# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


class FakeFetcher:
    """Geoid fetcher returning ``lat + lon / 1000`` and recording calls."""

    def __init__(self, failures: dict[float, Exception | None] | None = None):
        self.calls: list[tuple[float, float]] = []
        self.failures = failures or {}

    async def __call__(self, lat: float, lon: float) -> float | None:
        self.calls.append((lat, lon))
        if lat in self.failures:
            failure = self.failures[lat]
            if failure is None:
                return None
            raise failure
        return round(lat + lon / 1000, 6)


class FakeSleep:
    """Replacement for asyncio.sleep recording the requested delays."""

    def __init__(self, on_sleep=None):
        self.delays: list[float] = []
        self.on_sleep = on_sleep

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        if self.on_sleep is not None:
            self.on_sleep()


def _point(name: str, lat: float | None = 35.0, lon: float | None = 139.0, z=10.0):
    return Point(name=name, x=0.0, y=0.0, z=z, lat=lat, lon=lon)


def _run(coro) -> GeoidBatchResult:
    return asyncio.run(coro)


class StubSession:
    """Minimal stand-in for requests.Session."""

    def __init__(self, status_code: int = 200, content: bytes = b"", error=None):
        self.status_code = status_code
        self.content = content
        self.error = error
        self.requests: list[tuple[str, dict, float]] = []

    def get(self, url, params=None, timeout=None):
        self.requests.append((url, params, timeout))
        if self.error is not None:
            raise self.error
        response = requests.Response()
        response.status_code = self.status_code
        response._content = self.content
        response.url = url
        return response


def _payload(height="36.7080", flag="1") -> bytes:
    return orjson.dumps(
        {
            "OutputData": {
                "geoidHeight": height,
                "latitude": "35.681236",
                "longitude": "139.767125",
            },
            "ReturnFlag": flag,
        }
    )


# -----------------------------------------------------------------------------
# Batch
# -----------------------------------------------------------------------------


class TestFetchGeoidHeights:
    """Tests for fetch_geoid_heights."""

    def test_preserves_order(self):
        points = [_point("A", lat=35.1), _point("B", lat=35.2), _point("C", lat=35.3)]
        fetcher = FakeFetcher()

        result = _run(fetch_geoid_heights(points, fetcher, sleep=FakeSleep()))

        assert not result.cancelled
        assert [item.point.name for item in result.items] == ["A", "B", "C"]
        assert [item.geoid_height for item in result.items] == [
            pytest.approx(35.239),
            pytest.approx(35.339),
            pytest.approx(35.439),
        ]
        assert fetcher.calls == [(35.1, 139.0), (35.2, 139.0), (35.3, 139.0)]

    def test_delay_between_requests_only(self):
        points = [_point("A"), _point("B"), _point("C")]
        sleep = FakeSleep()

        _run(fetch_geoid_heights(points, FakeFetcher(), interval=1.0, sleep=sleep))

        assert sleep.delays == [1.0, 1.0]

    def test_point_without_position_is_not_requested(self):
        points = [_point("A"), _point("B", lat=None, lon=None), _point("C")]
        fetcher = FakeFetcher()
        sleep = FakeSleep()

        result = _run(fetch_geoid_heights(points, fetcher, sleep=sleep))

        assert len(fetcher.calls) == 2
        assert sleep.delays == [1.0]
        assert result.items[1].status is ResultStatus.ERROR
        assert result.items[1].error.name == "B"
        assert result.items[1].error.index == 1

    def test_no_delay_without_interval(self):
        sleep = FakeSleep()
        _run(
            fetch_geoid_heights(
                [_point("A"), _point("B")], FakeFetcher(), interval=0, sleep=sleep
            )
        )
        assert sleep.delays == []

    def test_partial_failure(self):
        points = [
            _point("A", lat=35.1),
            _point("B", lat=35.2),
            _point("C", lat=35.3),
            _point("D", lat=35.4),
        ]
        fetcher = FakeFetcher(
            failures={35.2: GeoidServiceError("service down"), 35.3: None}
        )

        result = _run(fetch_geoid_heights(points, fetcher, sleep=FakeSleep()))

        assert [item.status for item in result.items] == [
            ResultStatus.SUCCESS,
            ResultStatus.ERROR,
            ResultStatus.ERROR,
            ResultStatus.SUCCESS,
        ]
        assert result.items[1].error.message == "service down"
        assert result.items[2].geoid_height is None
        assert result.success_count == 2
        assert result.error_count == 2
        # one attempt per point
        assert len(fetcher.calls) == 4

    def test_unexpected_exception_is_recorded(self):
        fetcher = FakeFetcher(failures={35.0: RuntimeError()})
        result = _run(fetch_geoid_heights([_point("A")], fetcher, sleep=FakeSleep()))

        assert result.items[0].status is ResultStatus.ERROR
        assert result.items[0].error.message == "RuntimeError"

    @pytest.mark.parametrize(
        ("mode", "expected_z"),
        [
            (GeoidMode.HEIGHT_ONLY, 100.0),
            (GeoidMode.TO_ORTHOMETRIC, 100.0 - 35.139),
            (GeoidMode.TO_ELLIPSOIDAL, 100.0 + 35.139),
        ],
    )
    def test_modes(self, mode, expected_z):
        point = _point("A", z=100.0)
        result = _run(
            fetch_geoid_heights([point], FakeFetcher(), mode=mode, sleep=FakeSleep())
        )

        item = result.items[0]
        assert item.geoid_height == pytest.approx(35.139)
        assert item.new_z == pytest.approx(expected_z)
        assert item.updated_point.z == pytest.approx(expected_z)
        assert point.z == 100.0

    def test_cancel_during_delay(self):
        token = CancellationToken()
        fetcher = FakeFetcher()
        sleep = FakeSleep(on_sleep=token.cancel)
        points = [_point("A"), _point("B"), _point("C")]

        result = _run(
            fetch_geoid_heights(points, fetcher, cancellation=token, sleep=sleep)
        )

        assert result.cancelled
        assert [item.point.name for item in result.items] == ["A"]
        assert len(fetcher.calls) == 1

    def test_cancel_before_start(self):
        token = CancellationToken()
        token.cancel()
        fetcher = FakeFetcher()

        result = _run(
            fetch_geoid_heights(
                [_point("A")], fetcher, cancellation=token, sleep=FakeSleep()
            )
        )

        assert result.cancelled
        assert result.items == []
        assert fetcher.calls == []

    def test_cancel_from_progress(self):
        token = CancellationToken()

        def on_progress(message=None, completed=None, total=None):
            if completed == 2:
                token.cancel()

        result = _run(
            fetch_geoid_heights(
                [_point("A"), _point("B", lat=None, lon=None), _point("C")],
                FakeFetcher(),
                cancellation=token,
                on_progress=on_progress,
                sleep=FakeSleep(),
            )
        )

        assert result.cancelled
        assert len(result.items) == 2

    def test_progress(self):
        reports = []

        def on_progress(message=None, completed=None, total=None):
            reports.append((completed, total))

        _run(
            fetch_geoid_heights(
                [_point("A"), _point("B")],
                FakeFetcher(),
                on_progress=on_progress,
                sleep=FakeSleep(),
            )
        )

        assert reports == [(1, 2), (2, 2)]

    def test_empty(self):
        result = _run(fetch_geoid_heights([], FakeFetcher(), sleep=FakeSleep()))
        assert result.items == []
        assert not result.cancelled

    def test_with_gsi_client(self):
        client = GsiGeoidClient(session=StubSession(status_code=503))
        result = _run(fetch_geoid_heights([_point("A")], client, sleep=FakeSleep()))

        assert result.items[0].status is ResultStatus.ERROR
        assert "request failed" in result.items[0].error.message


# -----------------------------------------------------------------------------
# GSI client
# -----------------------------------------------------------------------------


class TestParseGeoidPayload:
    """Tests for parse_geoid_payload."""

    def test_success(self):
        assert parse_geoid_payload(orjson.loads(_payload())) == pytest.approx(36.708)

    @pytest.mark.parametrize(
        "payload",
        [
            {"ReturnFlag": "0", "OutputData": {"geoidHeight": "36.7"}},
            {"ReturnFlag": "1", "OutputData": {"geoidHeight": ""}},
            {"ReturnFlag": "1", "OutputData": {"geoidHeight": "abc"}},
            {"ReturnFlag": "1", "OutputData": {}},
            {"ReturnFlag": "1"},
            {"OutputData": {"geoidHeight": "36.7"}},
            [],
            None,
        ],
    )
    def test_failure(self, payload):
        with pytest.raises(GeoidServiceError):
            parse_geoid_payload(payload)


class TestGsiGeoidClient:
    """Tests for GsiGeoidClient."""

    def test_fetch(self):
        session = StubSession(content=_payload())
        client = GsiGeoidClient(session=session, timeout=5.0)

        assert client.fetch(35.681236, 139.767125) == pytest.approx(36.708)

        url, params, timeout = session.requests[0]
        assert url == client.url
        assert params == {
            "latitude": 35.681236,
            "longitude": 139.767125,
            "outputType": "json",
        }
        assert timeout == 5.0

    def test_awaitable(self):
        client = GsiGeoidClient(session=StubSession(content=_payload("40.1")))
        assert asyncio.run(client(35.0, 139.0)) == pytest.approx(40.1)

    def test_unsuccessful_flag(self):
        client = GsiGeoidClient(session=StubSession(content=_payload(flag="0")))
        with pytest.raises(GeoidServiceError, match="flag"):
            client.fetch(35.0, 139.0)

    def test_http_error(self):
        client = GsiGeoidClient(session=StubSession(status_code=500))
        with pytest.raises(GeoidServiceError) as exc_info:
            client.fetch(35.0, 139.0)
        assert isinstance(exc_info.value.__cause__, requests.HTTPError)

    def test_network_error(self):
        session = StubSession(error=requests.ConnectionError("unreachable"))
        client = GsiGeoidClient(session=session)
        with pytest.raises(GeoidServiceError, match="unreachable"):
            client.fetch(35.0, 139.0)

    def test_invalid_json(self):
        client = GsiGeoidClient(session=StubSession(content=b"<html>busy</html>"))
        with pytest.raises(GeoidServiceError, match="invalid JSON"):
            client.fetch(35.0, 139.0)
