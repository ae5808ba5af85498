"""Shared test fixtures for pycarwingsapi."""

from __future__ import annotations

import datetime
from urllib.parse import parse_qs

import httpx
import pytest

from pycarwingsapi.connection import Connection
from pycarwingsapi.session import Session


class FakeCarwings:
    """Answers requests per endpoint from queued bodies and records what was sent.

    The last queued body of an endpoint is repeated once the others are used up.
    """

    def __init__(self) -> None:
        self.responses: dict[str, list] = {}
        self.requests: list[tuple[str, dict]] = []

    def add(self, endpoint: str, *bodies) -> None:
        self.responses.setdefault(endpoint, []).extend(bodies)

    def handler(self, request: httpx.Request) -> httpx.Response:
        endpoint = request.url.path.rsplit("/", 1)[-1]
        form = {k: v[0] for k, v in parse_qs(request.content.decode(), keep_blank_values=True).items()}
        self.requests.append((endpoint, form))

        queue = self.responses.get(endpoint)
        if not queue:
            return httpx.Response(404)
        body = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(body, Exception):
            raise body
        if isinstance(body, httpx.Response):
            return body
        return httpx.Response(200, json=body)

    @property
    def endpoints(self) -> list[str]:
        return [endpoint for endpoint, _ in self.requests]


@pytest.fixture
def carwings() -> FakeCarwings:
    """Provide a fake Carwings service."""
    return FakeCarwings()


@pytest.fixture
def connection(carwings: FakeCarwings) -> Connection:
    """Provide a connection talking to the fake service."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(carwings.handler))
    return Connection(client)


@pytest.fixture
def session() -> Session:
    """Provide an authenticated session."""
    return Session(
        region="NNA",
        vin="1N4AZ0CP0FC000001",
        custom_session_id="SESSION123",
        tz=datetime.timezone.utc,
    )


@pytest.fixture
def anonymous_session() -> Session:
    """Provide a session without session id."""
    return Session(region="NNA", vin="1N4AZ0CP0FC000001", custom_session_id="")


@pytest.fixture
def battery_records() -> dict:
    """Provide a BatteryStatusRecordsRequest response as sent by the service."""
    return {
        "status": 200,
        "message": "success",
        "BatteryStatusRecords": {
            "OperationResult": "START",
            "BatteryStatus": {
                "BatteryChargingStatus": "NORMAL_CHARGING",
                "BatteryCapacity": "240",
                "BatteryRemainingAmount": "180",
                "BatteryRemainingAmountWH": "",
                "SOC": {"Value": "75"},
            },
            "PluginState": "CONNECTED",
            "CruisingRangeAcOn": "107712",
            "CruisingRangeAcOff": "109344",
            "TimeRequiredToFull": {"HourRequiredToFull": "11", "MinutesRequiredToFull": "30"},
            "TimeRequiredToFull200": {"HourRequiredToFull": "2", "MinutesRequiredToFull": "30"},
            "TimeRequiredToFull200_6kW": {"HourRequiredToFull": "1", "MinutesRequiredToFull": "40"},
            "NotificationDateAndTime": "2023/01/05 14:07",
        },
    }
