#  SPDX-License-Identifier: Apache-2.0
"""Decode the battery status records reported by the Carwings service."""

from __future__ import annotations

import datetime
import logging
from enum import Enum
from typing import NamedTuple

from .const import TIMESTAMP_FORMAT
from .exceptions import CarwingsDecodeError
from .utils import get_field, to_int

_LOGGER = logging.getLogger(__name__)


class StrEnum(str, Enum):
    """A string enumeration of type `(str, Enum)`.

    Codes that match no member exactly are kept as an UNRECOGNIZED pseudo
    member whose value is the raw code as sent, so nothing the service
    reports is lost or rewritten.
    """

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        _LOGGER.warning("'%s' is not a known '%s'", value, cls.__name__)
        pseudo_member = str.__new__(cls, value)
        pseudo_member._name_ = "UNRECOGNIZED"
        pseudo_member._value_ = value
        return pseudo_member

    @property
    def is_recognized(self) -> bool:
        """Return False for codes that are not one of the members."""
        return self._name_ in type(self)._member_map_

    def __str__(self) -> str:
        """Return a human readable text, or the raw code if unrecognized."""
        if not self.is_recognized:
            return self.value
        return _LABELS[type(self)].get(self.value, self.value)


class PluginState(StrEnum):
    """Whether and how the vehicle is plugged in.

    Separate from ChargingStatus, the vehicle can be plugged in without
    charging.
    """

    NOT_CONNECTED = "NOT_CONNECTED"
    # J1772 level 1 or 2 charger
    CONNECTED = "CONNECTED"
    # CHAdeMO DC quick charger
    QC_CONNECTED = "QC_CONNECTED"
    # reported when updating data from the vehicle fails
    INVALID = "INVALID"


class ChargingStatus(StrEnum):
    """Whether and how the vehicle is charging."""

    NOT_CHARGING = "NOT_CHARGING"
    NORMAL_CHARGING = "NORMAL_CHARGING"
    RAPIDLY_CHARGING = "RAPIDLY_CHARGING"
    # reported when updating data from the vehicle fails
    INVALID = "INVALID"


_LABELS = {
    PluginState: {
        "NOT_CONNECTED": "not connected",
        "CONNECTED": "connected",
        "QC_CONNECTED": "connected to quick charger",
        "INVALID": "invalid",
    },
    ChargingStatus: {
        "NOT_CHARGING": "not charging",
        "NORMAL_CHARGING": "charging",
        "RAPIDLY_CHARGING": "rapidly charging",
        "INVALID": "invalid",
    },
}


class TimeToFull(NamedTuple):
    """Time left until the battery is full, per charging method."""

    #: 1.4 kW level 1 (120V 12A) trickle charge
    level1: datetime.timedelta = datetime.timedelta(0)

    #: 3.3 kW level 2 (240V ~15A) charge
    level2: datetime.timedelta = datetime.timedelta(0)

    #: 6.6 kW level 2 (240V ~30A) charge
    level2_at_6kw: datetime.timedelta = datetime.timedelta(0)


class BatteryStatus(NamedTuple):
    """State of charge, plug and charging state of the vehicle.

    This is the record of the last completed refresh, not a live reading:
    timestamp tells when the vehicle reported it.
    """

    timestamp: datetime.datetime | None
    #: total capacity, units unknown
    capacity: int
    #: remaining level, same units as capacity
    remaining: int
    #: percent
    state_of_charge: int
    #: meters, climate control on
    cruising_range_ac_on: int
    #: meters, climate control off
    cruising_range_ac_off: int
    plugin_state: PluginState
    charging_status: ChargingStatus
    time_to_full: TimeToFull


def parse_timestamp(raw: str | bytes) -> datetime.datetime:
    """Parse a Carwings timestamp such as ``2023/01/05 14:07`` as UTC.

    Surrounding JSON quotes are accepted.

    :raises CarwingsDecodeError: if raw does not match the pattern
    """
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        value = datetime.datetime.strptime(text.strip().strip('"'), TIMESTAMP_FORMAT)
    except (AttributeError, TypeError, ValueError) as exc:
        msg = f"Invalid timestamp: {raw!r}"
        raise CarwingsDecodeError(msg) from exc
    return value.replace(tzinfo=datetime.timezone.utc)


def _int_field(data: dict | None, name: str) -> int:
    value = get_field(data, name)
    if value is None:
        return 0
    return to_int(value, name)


def _duration(bucket: dict | None) -> datetime.timedelta:
    hours = _int_field(bucket, "HourRequiredToFull")
    minutes = _int_field(bucket, "MinutesRequiredToFull")
    return datetime.timedelta(minutes=hours * 60 + minutes)


def _enum_field(enum_cls: type[StrEnum], data: dict | None, name: str) -> StrEnum:
    try:
        return enum_cls(get_field(data, name, ""))
    except ValueError as exc:
        msg = f"Field {name} is not a string code: {get_field(data, name)!r}"
        raise CarwingsDecodeError(msg) from exc


def decode_battery_status(payload: dict, tz: datetime.tzinfo) -> BatteryStatus:
    """Build a BatteryStatus from a BatteryStatusRecordsRequest response.

    :param payload: decoded response body
    :param tz: time zone of the session, the timestamp is converted to it
    :raises CarwingsDecodeError: if a field is malformed
    """
    records = get_field(payload, "BatteryStatusRecords")
    if not isinstance(records, dict):
        msg = "Response has no BatteryStatusRecords"
        raise CarwingsDecodeError(msg)

    battery = get_field(records, "BatteryStatus")

    raw_timestamp = get_field(records, "NotificationDateAndTime")
    timestamp = None
    if raw_timestamp is not None:
        timestamp = parse_timestamp(raw_timestamp).astimezone(tz)

    return BatteryStatus(
        timestamp=timestamp,
        capacity=_int_field(battery, "BatteryCapacity"),
        remaining=_int_field(battery, "BatteryRemainingAmount"),
        state_of_charge=_int_field(get_field(battery, "SOC"), "Value"),
        cruising_range_ac_on=_int_field(records, "CruisingRangeAcOn"),
        cruising_range_ac_off=_int_field(records, "CruisingRangeAcOff"),
        plugin_state=_enum_field(PluginState, records, "PluginState"),
        charging_status=_enum_field(ChargingStatus, battery, "BatteryChargingStatus"),
        time_to_full=TimeToFull(
            level1=_duration(get_field(records, "TimeRequiredToFull")),
            level2=_duration(get_field(records, "TimeRequiredToFull200")),
            level2_at_6kw=_duration(get_field(records, "TimeRequiredToFull200_6kW")),
        ),
    )
