#  SPDX-License-Identifier: Apache-2.0
"""Password encryption for the Carwings login request."""

from __future__ import annotations

import base64
import logging

from Crypto.Cipher import Blowfish

from .exceptions import CarwingsKeyError

_LOGGER = logging.getLogger(__name__)


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def pkcs5_padding(data: bytes, block_size: int) -> bytes:
    """Pad data up to the next multiple of block_size, each pad byte holding the pad count."""
    pad_len = block_size - (len(data) % block_size)
    return data + bytes([pad_len]) * pad_len


def encrypt(plaintext: str | bytes, key: str | bytes) -> str:
    """Encrypt plaintext with Blowfish in ECB mode and return it base64 encoded.

    ECB is what the service expects, so blocks are encrypted independently
    and there is no IV. Padding is only added when the plaintext is not a
    multiple of the block size.

    :raises CarwingsKeyError: if the key length is not valid for Blowfish
    """
    key_bytes = _to_bytes(key)
    try:
        cipher = Blowfish.new(key_bytes, Blowfish.MODE_ECB)
    except ValueError as exc:
        msg = f"Invalid Blowfish key length ({len(key_bytes)} bytes)"
        raise CarwingsKeyError(msg) from exc

    src = _to_bytes(plaintext)
    if len(src) % Blowfish.block_size != 0:
        src = pkcs5_padding(src, Blowfish.block_size)

    _LOGGER.debug("Encrypting %d bytes", len(src))
    return base64.b64encode(cipher.encrypt(src)).decode("ascii")
