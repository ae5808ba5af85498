#  SPDX-License-Identifier: Apache-2.0
"""Transport layer for the Carwings API."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import httpx

from .const import BASE_URL, STATUS_OK, TIMEOUT, USER_AGENT
from .exceptions import CarwingsProtocolStatusError, CarwingsTransportError

_LOGGER = logging.getLogger(__name__)


async def log_request(request):
    """Provide formatting for http logging."""
    _LOGGER.debug("Request headers: %s", request.headers)
    _LOGGER.debug("Request method - url: %s %s", request.method, request.url)
    _LOGGER.debug("Request body: %s", request.content)


class Connection:
    """Posts form requests to the Carwings service and decodes the JSON answers.

    :param async_client: httpx.AsyncClient or None to create one
    :param base_url: url every endpoint name is appended to
    :param timeout: request timeout in seconds
    :param debug: dump every raw HTTP response to debug_sink
    :param debug_sink: text stream for the dumps, defaults to stderr
    """

    def __init__(
        self,
        async_client: httpx.AsyncClient | None = None,
        base_url: str = BASE_URL,
        timeout: float = TIMEOUT,
        *,
        debug: bool = False,
        debug_sink: TextIO | None = None,
    ) -> None:
        """Initialise the connection to the Carwings service."""
        if async_client is None:
            async_client = httpx.AsyncClient(event_hooks={"request": [log_request]})
        self.asyncClient = async_client
        self.base_url = base_url
        self.timeout = timeout
        self.debug = debug
        self.debug_sink = debug_sink
        self.headers = {"User-Agent": USER_AGENT}

    async def post_form(self, endpoint: str, params: dict | None = None) -> dict:
        """POST form encoded params to an endpoint and return the decoded body.

        :raises CarwingsTransportError: on network, HTTP or JSON decoding errors
        :raises CarwingsProtocolStatusError: if the body status is not 200
        """
        try:
            resp = await self.asyncClient.post(
                f"{self.base_url}{endpoint}",
                data=params or {},
                headers=self.headers,
                timeout=self.timeout,
            )
            if self.debug:
                self._dump_response(resp)
            resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPStatusError as exc:
            raise CarwingsTransportError(exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            msg = f"Request to {endpoint} failed: {exc}"
            raise CarwingsTransportError(msg) from exc
        except ValueError as exc:
            msg = f"Could not decode response from {endpoint}"
            raise CarwingsTransportError(msg) from exc

        if not isinstance(body, dict):
            msg = f"Unexpected response from {endpoint}: {body!r}"
            raise CarwingsTransportError(msg)

        status = body.get("status")
        if str(status) != str(STATUS_OK):
            _LOGGER.debug("Received status code %s from %s", status, endpoint)
            if str(status).isdigit():
                raise CarwingsProtocolStatusError(int(status))
            msg = f"received status code {status}"
            raise CarwingsProtocolStatusError(msg)

        return body

    def _dump_response(self, resp: httpx.Response) -> None:
        sink = self.debug_sink or sys.stderr
        print(f"{resp.http_version} {resp.status_code} {resp.reason_phrase}", file=sink)
        for name, value in resp.headers.items():
            print(f"{name}: {value}", file=sink)
        print(file=sink)
        print(resp.text, file=sink)
        print(file=sink)

    async def close(self):
        """Close the asyncClient connection."""
        await self.asyncClient.aclose()
