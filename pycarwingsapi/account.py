#  SPDX-License-Identifier: Apache-2.0
"""Logs in to a Carwings account and binds a session to its vehicle."""

from __future__ import annotations

import logging

from .cipher import encrypt
from .connection import Connection
from .const import (
    BLOWFISH_KEY,
    INITIAL_APP_ENDPOINT,
    INITIAL_APP_STRINGS,
    LOGIN_ENDPOINT,
)
from .exceptions import (
    CarwingsHandshakeError,
    CarwingsLoginError,
    CarwingsNoVehicleError,
    CarwingsProtocolStatusError,
)
from .session import Session, resolve_timezone
from .utils import get_field

_LOGGER = logging.getLogger(__name__)


class CarwingsAccount:
    """Establishes a session with a Carwings account."""

    def __init__(
        self,
        username: str,
        password: str,
        region: str,
        connection: Connection | None = None,
    ) -> None:
        """Initialize the account."""
        self.username = username
        self.password = password
        self.region = region
        self.session: Session | None = None
        if connection is None:
            self.connection = Connection()
        else:
            self.connection = connection

    async def connect(self) -> Session:
        """Run the handshake and login, and return the new session.

        :raises CarwingsHandshakeError: if the handshake is rejected
        :raises CarwingsLoginError: if the login is rejected
        :raises CarwingsNoVehicleError: if no vehicle is bound to the account
        """
        params = {"initial_app_strings": INITIAL_APP_STRINGS}

        key = await self._handshake(params)

        params = params | {
            "UserId": self.username,
            "Password": encrypt(self.password, key),
            "RegionCode": self.region,
        }
        self.session = await self._login(params)
        return self.session

    async def _handshake(self, params: dict) -> str:
        _LOGGER.debug("Starting handshake with Carwings service")
        try:
            resp = await self.connection.post_form(INITIAL_APP_ENDPOINT, params)
        except CarwingsProtocolStatusError as exc:
            raise CarwingsHandshakeError(exc.code) from exc

        _LOGGER.debug("Handshake message: %s", get_field(resp, "message"))
        key = get_field(resp, "baseprm")
        if not key:
            _LOGGER.warning("Handshake did not return an encryption key, using the known default")
            key = BLOWFISH_KEY
        return key

    async def _login(self, params: dict) -> Session:
        _LOGGER.debug("Logging in as %s in region %s", self.username, self.region)
        try:
            resp = await self.connection.post_form(LOGIN_ENDPOINT, params)
        except CarwingsProtocolStatusError as exc:
            raise CarwingsLoginError(exc.code) from exc

        vehicles = get_field(get_field(resp, "VehicleInfoList"), "vehicleInfo")
        if not vehicles:
            raise CarwingsNoVehicleError

        vehicle = vehicles[0]
        timezone = get_field(get_field(resp, "CustomerInfo"), "Timezone")

        session = Session(
            region=self.region,
            vin=get_field(vehicle, "vin", ""),
            custom_session_id=get_field(vehicle, "custom_sessionid", ""),
            tz=resolve_timezone(timezone),
        )
        _LOGGER.debug("Logged in, bound to vehicle %s", session.vin)
        return session
