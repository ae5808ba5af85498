#  SPDX-License-Identifier: Apache-2.0
"""Models the state of a Carwings vehicle."""

from __future__ import annotations

import asyncio
import json  # only for formatting debug output
import logging

from .connection import Connection
from .const import BATTERY_STATUS_RECORDS_ENDPOINT, REMOTE_AC_RECORDS_ENDPOINT
from .session import Session
from .status import BatteryStatus, decode_battery_status
from .update import PollingPolicy, UpdatePoller, wait_for_update
from .utils import get_field

_LOGGER = logging.getLogger(__name__)


class CarwingsVehicle:
    """Representation of the vehicle a session is bound to."""

    def __init__(self, session: Session, connection: Connection) -> None:
        """Initialise the Carwings vehicle."""
        self.session = session
        self.connection = connection
        self.updater = UpdatePoller(session, connection)
        self._update_lock = asyncio.Lock()

    @property
    def vin(self) -> str:
        """Get the VIN (vehicle identification number) of the vehicle."""
        return self.session.vin

    async def update_status(self, policy: PollingPolicy | None = None) -> str:
        """Have the service fetch fresh data from the vehicle and wait until it is done.

        Only one refresh runs at a time per vehicle object, a second call
        waits for the first one to finish. Returns the result key, which is
        spent once this returns.

        :raises CarwingsUpdateFailedError: if the service could not reach the vehicle
        :raises CarwingsUpdateTimeoutError: if the policy ran out of attempts
        """
        self.session.ensure_authenticated()
        async with self._update_lock:
            result_key = await self.updater.request_refresh()
            await wait_for_update(self.updater, result_key, policy)
        return result_key

    async def get_battery_status(
        self,
        *,
        refresh: bool = False,
        policy: PollingPolicy | None = None,
    ) -> BatteryStatus:
        """Return the battery status stored by the service.

        The service keeps the data of the last completed refresh, so this is
        not a live reading unless refresh is set, in which case a full
        update_status cycle runs first.
        """
        self.session.ensure_authenticated()
        if refresh:
            await self.update_status(policy)

        _LOGGER.debug("Getting stored battery status for vehicle %s", self.vin)
        resp = await self.connection.post_form(
            BATTERY_STATUS_RECORDS_ENDPOINT,
            self.session.common_params(),
        )
        _LOGGER.debug(
            "Battery status records for %s: %s",
            self.vin,
            json.dumps(get_field(resp, "BatteryStatusRecords"), indent=2),
        )
        return decode_battery_status(resp, self.session.tz)

    async def get_climate_control_records(self) -> dict:
        """Return the raw climate control records stored by the service."""
        self.session.ensure_authenticated()

        _LOGGER.debug("Getting climate control records for vehicle %s", self.vin)
        resp = await self.connection.post_form(
            REMOTE_AC_RECORDS_ENDPOINT,
            self.session.common_params(),
        )
        return get_field(resp, "RemoteACRecords", {})

    def __repr__(self) -> str:
        """Return a printable representation of the Carwings vehicle object."""
        return f"Vehicle({self.vin!r}, region={self.session.region!r})"
