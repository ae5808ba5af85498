"""Tests for the transport layer."""

from __future__ import annotations

import io

import httpx
import pytest

from pycarwingsapi.connection import Connection
from pycarwingsapi.exceptions import (
    CarwingsProtocolStatusError,
    CarwingsTransportError,
)


class TestPostForm:
    @pytest.mark.asyncio
    async def test_returns_decoded_body(self, carwings, connection) -> None:
        carwings.add("InitialApp.php", {"status": 200, "baseprm": "KEY"})

        body = await connection.post_form("InitialApp.php", {"initial_app_strings": "abc"})

        assert body["baseprm"] == "KEY"
        assert carwings.requests == [("InitialApp.php", {"initial_app_strings": "abc"})]

    @pytest.mark.asyncio
    async def test_string_status_is_accepted(self, carwings, connection) -> None:
        carwings.add("InitialApp.php", {"status": "200"})
        assert await connection.post_form("InitialApp.php") == {"status": "200"}

    @pytest.mark.asyncio
    async def test_embedded_status_error(self, carwings, connection) -> None:
        carwings.add("UserLoginRequest.php", {"status": 401})

        with pytest.raises(CarwingsProtocolStatusError) as excinfo:
            await connection.post_form("UserLoginRequest.php")

        assert excinfo.value.code == 401
        assert excinfo.value.message == "UNAUTHORIZED"

    @pytest.mark.asyncio
    async def test_missing_status_is_an_error(self, carwings, connection) -> None:
        carwings.add("UserLoginRequest.php", {"message": "?"})

        with pytest.raises(CarwingsProtocolStatusError):
            await connection.post_form("UserLoginRequest.php")

    @pytest.mark.asyncio
    async def test_http_error_is_transport_error(self, carwings, connection) -> None:
        carwings.add("InitialApp.php", httpx.Response(503))

        with pytest.raises(CarwingsTransportError) as excinfo:
            await connection.post_form("InitialApp.php")

        assert excinfo.value.code == 503
        assert not isinstance(excinfo.value, CarwingsProtocolStatusError)

    @pytest.mark.asyncio
    async def test_network_error_is_transport_error(self, carwings, connection) -> None:
        carwings.add("InitialApp.php", httpx.ConnectError("connection refused"))

        with pytest.raises(CarwingsTransportError):
            await connection.post_form("InitialApp.php")

    @pytest.mark.asyncio
    async def test_invalid_json_is_transport_error(self, carwings, connection) -> None:
        carwings.add("InitialApp.php", httpx.Response(200, text="<html>maintenance</html>"))

        with pytest.raises(CarwingsTransportError):
            await connection.post_form("InitialApp.php")

    @pytest.mark.asyncio
    async def test_non_object_json_is_transport_error(self, carwings, connection) -> None:
        carwings.add("InitialApp.php", [1, 2, 3])

        with pytest.raises(CarwingsTransportError):
            await connection.post_form("InitialApp.php")


class TestDebugDump:
    @pytest.mark.asyncio
    async def test_dumps_raw_response(self, carwings) -> None:
        carwings.add("InitialApp.php", {"status": 200, "baseprm": "KEY"})
        sink = io.StringIO()
        connection = Connection(
            httpx.AsyncClient(transport=httpx.MockTransport(carwings.handler)),
            debug=True,
            debug_sink=sink,
        )

        await connection.post_form("InitialApp.php")
        await connection.close()

        dump = sink.getvalue()
        assert "200 OK" in dump
        assert '"baseprm"' in dump

    @pytest.mark.asyncio
    async def test_no_dump_by_default(self, carwings) -> None:
        carwings.add("InitialApp.php", {"status": 200})
        sink = io.StringIO()
        connection = Connection(
            httpx.AsyncClient(transport=httpx.MockTransport(carwings.handler)),
            debug_sink=sink,
        )

        await connection.post_form("InitialApp.php")

        assert sink.getvalue() == ""
