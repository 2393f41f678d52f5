"""
Bit layout of a Timeflake.

    bits 127..80  timestamp, milliseconds since Unix epoch (48 bits)
    bits  79..0   random (80 bits)

Serialized big-endian as 16 bytes: [0:6] timestamp, [6:16] random.
"""

from core.errors import OutOfBoundsError

TIMESTAMP_BITS = 48
RANDOM_BITS = 80

MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1    # 281474976710655
MAX_RANDOM = (1 << RANDOM_BITS) - 1          # 1208925819614629174706175
MAX_TIMEFLAKE = (1 << 128) - 1               # 340282366920938463463374607431768211455

BYTE_LENGTH = 16
TIMESTAMP_BYTES = 6
HEX_LENGTH = 32
BASE62_LENGTH = 22


def check_components(timestamp_ms, random, op="packer:check"):
    """Reject components that would spill into each other's bit range."""
    if not 0 <= timestamp_ms <= MAX_TIMESTAMP:
        raise OutOfBoundsError(f"timestamp {timestamp_ms}ms outside [0, {MAX_TIMESTAMP}]",
                               value=timestamp_ms, limit=MAX_TIMESTAMP, op=op)
    if not 0 <= random <= MAX_RANDOM:
        raise OutOfBoundsError(f"random {random} outside [0, {MAX_RANDOM}]",
                               value=random, limit=MAX_RANDOM, op=op)


def pack(timestamp_ms, random):
    """Combine the two components. Caller guarantees both are in range."""
    return (timestamp_ms << RANDOM_BITS) | random


def unpack_timestamp(value):
    return value >> RANDOM_BITS


def unpack_random(value):
    return value & MAX_RANDOM


def split_bytes(raw):
    """(timestamp_ms, random) read straight from the 16-byte layout."""
    timestamp_ms = int.from_bytes(raw[:TIMESTAMP_BYTES], byteorder="big")
    random = int.from_bytes(raw[TIMESTAMP_BYTES:BYTE_LENGTH], byteorder="big")
    return timestamp_ms, random


def to_bytes(value, op="packer:to_bytes"):
    """Big-endian 16 bytes, zero-padded on the left for small values."""
    if not 0 <= value <= MAX_TIMEFLAKE:
        raise OutOfBoundsError(f"value does not fit in {BYTE_LENGTH} bytes", value=value, limit=MAX_TIMEFLAKE, op=op)
    return value.to_bytes(BYTE_LENGTH, byteorder="big")
