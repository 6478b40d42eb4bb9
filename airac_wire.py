#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Numeric interchange format for AIRAC cycles.

A cycle travels as a single unsigned integer, the number of cycles since
1901-01-10 (hence the field name ``airac19010110``). Decoding never fails for
integers: values outside the supported range come back as ``Airac(0)``.
"""

import struct

from airac import Airac

MESSAGE_FIELD = "airac19010110"
MAX_WIRE_VALUE = 0xFFFF
SENTINEL = Airac(0)

_PACKED = struct.Struct(">I")


def encode(airac: Airac) -> int:
    """Return the wire value of a cycle.

    Raises:
        ValueError: If the cycle lies before the epoch
    """
    if airac.index < 0:
        raise ValueError(f"cannot encode AIRAC cycle before the epoch: index {airac.index}")
    return airac.index


def decode(value: int) -> Airac:
    """Return the cycle for a wire value, clamping out of range values to ``SENTINEL``.

    Raises:
        TypeError: If ``value`` is not an int
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"AIRAC wire value must be an int, not {type(value).__name__}")
    if value < 0 or value > MAX_WIRE_VALUE:
        return SENTINEL
    return Airac(value)


def to_message(airac: Airac) -> dict[str, int]:
    return {MESSAGE_FIELD: encode(airac)}


def from_message(message: dict) -> Airac:
    # absent or null fields read as zero, like an unset protobuf scalar
    value = message.get(MESSAGE_FIELD)
    if value is None:
        value = 0
    return decode(value)


def pack(airac: Airac) -> bytes:
    """Return the cycle as a big endian unsigned 32 bit integer."""
    return _PACKED.pack(encode(airac))


def unpack(data: bytes) -> Airac:
    """Inverse of ``pack``.

    Raises:
        ValueError: If ``data`` is not exactly 4 bytes long
    """
    if len(data) != _PACKED.size:
        raise ValueError(f"expected {_PACKED.size} bytes, got {len(data)}")
    (value,) = _PACKED.unpack(data)
    return decode(value)
