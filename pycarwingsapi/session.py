#  SPDX-License-Identifier: Apache-2.0
"""Authenticated session with the Carwings service."""

from __future__ import annotations

import datetime
import logging
from typing import NamedTuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import CarwingsNotAuthenticatedError

_LOGGER = logging.getLogger(__name__)


def resolve_timezone(name: str | None) -> datetime.tzinfo:
    """Resolve the time zone reported for the account, falling back to UTC."""
    if name:
        try:
            return ZoneInfo(name)
        # OSError: names of zone directories, e.g. "America"
        except (ZoneInfoNotFoundError, ValueError, OSError):
            pass
    _LOGGER.warning("Unknown time zone '%s', using UTC", name)
    return datetime.timezone.utc


class Session(NamedTuple):
    """Store the result of a successful login.

    A session is bound to one vehicle. An empty custom_session_id means
    the session is not authenticated and no request is made with it.

    A session should drive at most one refresh cycle at a time: result
    keys of overlapping refresh requests for the same vehicle are not
    safely interleaved. Reading the stored status while a refresh is being
    polled is fine.
    """

    region: str
    vin: str
    custom_session_id: str
    tz: datetime.tzinfo = datetime.timezone.utc

    @property
    def is_authenticated(self) -> bool:
        """Return True if the session carries a session id."""
        return bool(self.custom_session_id)

    def ensure_authenticated(self) -> None:
        """Raise if the session carries no session id."""
        if not self.is_authenticated:
            raise CarwingsNotAuthenticatedError

    def common_params(self) -> dict[str, str]:
        """Return the form parameters sent with every vehicle request."""
        return {
            "RegionCode": self.region,
            "VIN": self.vin,
            "custom_sessionid": self.custom_session_id,
        }
