"""Timeflake value type and its construction paths."""

import uuid as uuid_lib
from datetime import datetime, timedelta, timezone

from core.errors import ConversionError, OutOfBoundsError, UUIDError
from internal.logging import get_logger
from timeflake import packer
from timeflake.alphabets import BASE62, HEX
from timeflake.codec import ascii_to_int, int_to_ascii
from utils.entropy import random_component
from utils.timestamp import now_seconds

UUID_LENGTH = 36
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_uuid(raw, op="timeflake:format_uuid"):
    """8-4-4-4-12 text of the 16 bytes as-is. No version/variant bits are set."""
    try:
        return str(uuid_lib.UUID(bytes=raw))
    except (TypeError, ValueError) as exc:
        raise UUIDError("UUID formatting failed", op=op, cause=exc) from exc


class Timeflake:
    """Immutable 128-bit identifier: 48-bit ms timestamp + 80-bit random."""

    __slots__ = ("_bytes", "_int", "_timestamp_ms", "_random", "_hex", "_base62", "_uuid")

    def __init__(self, raw):
        """Derive every representation from the canonical 16 bytes."""
        op = "timeflake:from_bytes"
        if not isinstance(raw, (bytes, bytearray)):
            raise OutOfBoundsError(f"expected bytes, got {type(raw).__name__}", op=op)
        if len(raw) != packer.BYTE_LENGTH:
            raise OutOfBoundsError(f"must be {packer.BYTE_LENGTH} bytes, got {len(raw)}",
                                   value=len(raw), limit=packer.BYTE_LENGTH, op=op)

        raw = bytes(raw)
        timestamp_ms, random_part = packer.split_bytes(raw)
        value = packer.pack(timestamp_ms, random_part)

        try:
            hex_str = int_to_ascii(value, HEX, packer.HEX_LENGTH)
            base62_str = int_to_ascii(value, BASE62, packer.BASE62_LENGTH)
        except ConversionError as exc:
            raise ConversionError(f"encoding failed: {exc}", op=op, cause=exc) from exc
        uuid_str = format_uuid(raw, op=op)

        for name, field in (("_bytes", raw), ("_int", value), ("_timestamp_ms", timestamp_ms),
                            ("_random", random_part), ("_hex", hex_str), ("_base62", base62_str),
                            ("_uuid", uuid_str)):
            object.__setattr__(self, name, field)

    def __setattr__(self, name, value):
        raise TypeError("Timeflake objects are immutable")

    def __delattr__(self, name):
        raise TypeError("Timeflake objects are immutable")

    def __reduce__(self):
        # copy, deepcopy and pickle rebuild from the raw bytes
        return (self.__class__, (self._bytes,))

    @property
    def bytes(self):
        return self._bytes

    @property
    def int(self):
        return self._int

    @property
    def hex(self):
        return self._hex

    @property
    def base62(self):
        return self._base62

    @property
    def uuid(self):
        return self._uuid

    @property
    def timestamp_ms(self):
        return self._timestamp_ms

    @property
    def timestamp(self):
        """Epoch seconds. Sub-second precision is stored but truncated here."""
        return self._timestamp_ms // 1000

    @property
    def random(self):
        return self._random

    @property
    def rand(self):
        """Random part as a decimal string."""
        return str(self._random)

    @property
    def datetime(self):
        """UTC datetime. Raises OverflowError past year 9999."""
        return _EPOCH + timedelta(milliseconds=self._timestamp_ms)

    def to_dict(self):
        # 128-bit and 80-bit ints as decimal strings
        return {
            "base62": self._base62,
            "hex": self._hex,
            "uuid": self._uuid,
            "int": str(self._int),
            "timestamp": self.timestamp,
            "timestamp_ms": self._timestamp_ms,
            "random": self.rand,
        }

    def log(self, logger=None):
        (logger or get_logger()).info("timeflake", ts=self.timestamp, rand=self.rand, int=str(self._int),
                                      hex=self._hex, base62=self._base62)

    def __eq__(self, other):
        if not isinstance(other, Timeflake):
            return NotImplemented
        return self._int == other._int

    def __lt__(self, other):
        if not isinstance(other, Timeflake):
            return NotImplemented
        return self._int < other._int

    def __le__(self, other):
        if not isinstance(other, Timeflake):
            return NotImplemented
        return self._int <= other._int

    def __gt__(self, other):
        if not isinstance(other, Timeflake):
            return NotImplemented
        return self._int > other._int

    def __ge__(self, other):
        if not isinstance(other, Timeflake):
            return NotImplemented
        return self._int >= other._int

    def __hash__(self):
        return hash(self._int)

    def __str__(self):
        return self._base62

    def __repr__(self):
        return f"Timeflake('{self._base62}')"


def from_bytes(raw):
    """Build a Timeflake from its canonical 16-byte big-endian layout."""
    return Timeflake(raw)


def _from_encoded(s, alphabet):
    op = f"timeflake:from_{alphabet.name}"
    value = ascii_to_int(s, alphabet)
    if value > packer.MAX_TIMEFLAKE:
        raise ConversionError("decoded value exceeds 128 bits", alphabet=alphabet.name, op=op)
    # small values decode to fewer significant bytes; to_bytes re-pads to 16
    return from_bytes(packer.to_bytes(value, op=op))


def from_hex(s):
    return _from_encoded(s, HEX)


def from_base62(s):
    return _from_encoded(s, BASE62)


def from_uuid(s):
    """Inverse of Timeflake.uuid: canonical UUID text back to a Timeflake."""
    try:
        raw = uuid_lib.UUID(str(s)).bytes
    except ValueError as exc:
        raise UUIDError(f"malformed UUID text: {s!r}", op="timeflake:from_uuid", cause=exc) from exc
    return from_bytes(raw)


def from_values(timestamp, random=None):
    """Build from epoch seconds and an optional 80-bit random value.

    Out-of-range components raise OutOfBoundsError instead of overlapping.
    """
    op = "timeflake:from_values"
    if random is None:
        random = random_component(op=op)
    timestamp_ms = int(timestamp) * 1000
    packer.check_components(timestamp_ms, random, op=op)
    return from_bytes(packer.to_bytes(packer.pack(timestamp_ms, random), op=op))


def random():
    """Fresh Timeflake for the current second."""
    return from_values(now_seconds(), random_component(op="timeflake:random"))


def parse(s):
    """Accept any of the textual forms, picked by length."""
    if len(s) == packer.HEX_LENGTH:
        return from_hex(s)
    if len(s) == packer.BASE62_LENGTH:
        return from_base62(s)
    if len(s) == UUID_LENGTH:
        return from_uuid(s)
    raise ConversionError(f"unrecognized length {len(s)}: expected {packer.HEX_LENGTH} (hex), "
                          f"{packer.BASE62_LENGTH} (base62) or {UUID_LENGTH} (uuid)", op="timeflake:parse")
