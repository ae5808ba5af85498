#  SPDX-License-Identifier: Apache-2.0
"""Request a refresh of the vehicle data and poll until it is done."""

from __future__ import annotations

import asyncio
import logging
from typing import NamedTuple

from .connection import Connection
from .const import (
    BATTERY_STATUS_CHECK_ENDPOINT,
    BATTERY_STATUS_CHECK_RESULT_ENDPOINT,
    OPERATION_RESULT_ELECTRIC_WAVE_ABNORMAL,
    RESPONSE_FLAG_READY,
)
from .exceptions import (
    CarwingsDecodeError,
    CarwingsUpdateFailedError,
    CarwingsUpdateTimeoutError,
)
from .session import Session
from .utils import get_field, to_int

_LOGGER = logging.getLogger(__name__)


class PollingPolicy(NamedTuple):
    """How often and how many times to poll for a refresh result."""

    #: seconds to wait before each poll
    interval: float = 5.0

    #: number of polls before giving up
    max_attempts: int = 24


class UpdatePoller:
    """Single step primitives of the refresh protocol.

    The service gives no guaranteed completion time, so the poller never
    sleeps or retries. Use wait_for_update, or drive poll_once yourself.
    """

    def __init__(self, session: Session, connection: Connection) -> None:
        """Initialise the poller for the vehicle bound to session."""
        self._session = session
        self._connection = connection

    async def request_refresh(self) -> str:
        """Ask the service to fetch fresh data from the vehicle and return the result key."""
        self._session.ensure_authenticated()

        _LOGGER.debug("Requesting status update for %s", self._session.vin)
        resp = await self._connection.post_form(
            BATTERY_STATUS_CHECK_ENDPOINT,
            self._session.common_params(),
        )

        result_key = get_field(resp, "resultKey")
        if not result_key:
            msg = "Refresh request did not return a result key"
            raise CarwingsDecodeError(msg)

        _LOGGER.debug("Got result key %s", result_key)
        return result_key

    async def poll_once(self, result_key: str) -> bool:
        """Return True if the refresh identified by result_key has finished.

        :raises CarwingsUpdateFailedError: if the service could not reach the vehicle
        """
        self._session.ensure_authenticated()

        params = self._session.common_params() | {"resultKey": result_key}
        resp = await self._connection.post_form(
            BATTERY_STATUS_CHECK_RESULT_ENDPOINT,
            params,
        )

        operation_result = get_field(resp, "operationResult")
        flag = get_field(resp, "responseFlag")
        _LOGGER.debug(
            "Current state of '%s' is: flag=%s, result=%s",
            result_key,
            flag,
            operation_result,
        )

        if operation_result == OPERATION_RESULT_ELECTRIC_WAVE_ABNORMAL:
            raise CarwingsUpdateFailedError

        if flag is None:
            return False
        return to_int(flag, "responseFlag") == RESPONSE_FLAG_READY


async def wait_for_update(
    poller: UpdatePoller,
    result_key: str,
    policy: PollingPolicy | None = None,
) -> None:
    """Keep polling until the refresh has finished.

    :raises CarwingsUpdateTimeoutError: if the refresh is not done after policy.max_attempts polls
    """
    if policy is None:
        policy = PollingPolicy()

    for attempt in range(1, policy.max_attempts + 1):
        await asyncio.sleep(policy.interval)
        if await poller.poll_once(result_key):
            _LOGGER.debug("Update '%s' finished after %d polls", result_key, attempt)
            return

    msg = f"Did not receive update result for '{result_key}' after {policy.max_attempts} polls"
    raise CarwingsUpdateTimeoutError(msg)
