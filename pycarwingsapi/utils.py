#  SPDX-License-Identifier: Apache-2.0
"""Helpers for the loosely typed Carwings wire format."""

from __future__ import annotations

from typing import Any

from .const import MILES_PER_METER
from .exceptions import CarwingsDecodeError


def get_field(data: dict | None, name: str, default: Any = None) -> Any:
    """Look up a response field, matching the key case-insensitively.

    The service is not consistent about the casing of its keys, e.g. the
    login response carries both ``VehicleInfo`` and ``vehicleInfo``.
    """
    if not isinstance(data, dict):
        return default
    if name in data:
        return data[name]
    lowered = name.lower()
    for key, value in data.items():
        if key.lower() == lowered:
            return value
    return default


def to_int(value: Any, field: str) -> int:
    """Convert a native or string encoded integer field.

    :raises CarwingsDecodeError: if the value is not an integer
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    # plain ASCII digits with an optional leading minus
    if isinstance(value, str) and value.removeprefix("-").isdigit() and value.isascii():
        return int(value)
    msg = f"Field {field} is not an integer: {value!r}"
    raise CarwingsDecodeError(msg)


def meters_to_miles(meters: int) -> int:
    """Convert a Carwings distance in meters to whole miles, truncated toward zero."""
    return int(meters * MILES_PER_METER)
