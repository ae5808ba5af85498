"""Tests for the command line interface helpers."""

from __future__ import annotations

import argparse
import datetime

import httpx
import pytest

from pycarwingsapi import cli
from pycarwingsapi.connection import Connection
from pycarwingsapi.status import decode_battery_status


def test_format_battery_status(battery_records) -> None:
    status = decode_battery_status(battery_records, datetime.timezone.utc)

    out = cli.format_battery_status(status)

    assert out["timestamp"] == "2023-01-05T14:07:00+00:00"
    assert out["state_of_charge"] == "75%"
    assert out["cruising_range_ac_on"] == "107712 m (66 mi)"
    assert out["plugin_state"] == "connected"
    assert out["charging_status"] == "charging"
    assert out["time_to_full"]["level2"] == "2:30:00"


@pytest.mark.asyncio
async def test_main_exits_with_error_message(carwings, monkeypatch) -> None:
    carwings.add("InitialApp.php", {"status": 200, "baseprm": "88dSp7wWnV3bvv9Z88zEwg"})
    carwings.add("UserLoginRequest.php", {"status": 200, "VehicleInfoList": {"vehicleInfo": []}})

    def fake_connection(debug=False):
        client = httpx.AsyncClient(transport=httpx.MockTransport(carwings.handler))
        return Connection(client, debug=debug)

    monkeypatch.setattr(cli, "Connection", fake_connection)
    args = argparse.Namespace(
        debug=False,
        username="user@example.com",
        password="hunter22",
        region="usa",
        poll_interval=0,
        poll_attempts=1,
        command="battery",
        func="battery",
    )

    with pytest.raises(SystemExit) as excinfo:
        await cli.main(args)

    assert excinfo.value.code == "no vehicle bound to account"
    assert carwings.requests[1][1]["RegionCode"] == "NNA"
