"""Canonical binary and text encodings of an instant in time.

Binary form: 16 bytes, big-endian signed 64-bit seconds since the Unix
epoch followed by big-endian signed 64-bit nanoseconds.

Text form: ``<seconds>.<nanos>`` with the nanosecond field zero-padded to
nine digits, so ``5.003000000`` is 5 s + 3 ms.  On decode the field is read
as a decimal fraction of a second, which makes shorter fields such as
``5.3`` (5 s + 300 ms) unambiguous too.
"""

from __future__ import annotations

import re
import struct
from datetime import datetime, timedelta, timezone
from typing import NamedTuple

from s2common.exceptions import BadFormatError, InvalidLengthError

BINARY_LENGTH = 16
NANOS_PER_SECOND = 1_000_000_000
NANOS_DIGITS = 9

_INSTANT_STRUCT = struct.Struct(">qq")
_TEXT_RE = re.compile(r"(-?[0-9]+)\.([0-9]{1,9})")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Instant(NamedTuple):
    """Whole seconds since the epoch plus a nanosecond adjustment."""

    seconds: int
    nanos: int


def encode_binary(seconds: int, nanos: int) -> bytes:
    """Pack *seconds* and *nanos* into the 16-byte canonical form.

    The nanosecond range is not checked; both values only need to fit in a
    signed 64-bit integer.
    """
    try:
        return _INSTANT_STRUCT.pack(seconds, nanos)
    except struct.error as exc:
        raise BadFormatError(
            f"Instant ({seconds}, {nanos}) does not fit in signed 64-bit fields"
        ) from exc


def decode_binary(data: bytes) -> Instant:
    """Unpack the 16-byte canonical form."""
    if len(data) != BINARY_LENGTH:
        raise InvalidLengthError("Instant", BINARY_LENGTH, len(data))
    seconds, nanos = _INSTANT_STRUCT.unpack(bytes(data))
    return Instant(seconds, nanos)


def encode_text(seconds: int, nanos: int) -> str:
    if not 0 <= nanos < NANOS_PER_SECOND:
        raise BadFormatError(
            f"Instant text requires 0 <= nanos < {NANOS_PER_SECOND}, got {nanos}"
        )
    return f"{seconds}.{nanos:0{NANOS_DIGITS}d}"


def decode_text(text: str) -> Instant:
    """Parse ``SSS.NNN`` where SSS is seconds and NNN a fraction of a second.

    Raises
    ------
    BadFormatError
        Unless there is exactly one ``.``, the seconds are a base-10 integer
        and the fraction is one to nine digits.
    """
    match = _TEXT_RE.fullmatch(text)
    if match is None:
        raise BadFormatError(
            f"Invalid Instant value {text!r}: values are SSS.NNN where SSS is "
            "seconds and NNN is a fraction of a second"
        )
    fraction = match.group(2)
    return Instant(int(match.group(1)), int(fraction.ljust(NANOS_DIGITS, "0")))


def from_datetime(value: datetime) -> Instant:
    """Convert a timezone-aware ``datetime`` (microsecond precision)."""
    if value.tzinfo is None:
        raise BadFormatError("Instant conversion requires a timezone-aware datetime")
    delta = value - _EPOCH
    return Instant(delta.days * 86_400 + delta.seconds, delta.microseconds * 1_000)


def to_datetime(seconds: int, nanos: int) -> datetime:
    """Convert to a UTC ``datetime``; sub-microsecond precision is truncated."""
    return _EPOCH + timedelta(seconds=seconds, microseconds=nanos // 1_000)
