"""Tests for the temporal codec — 16-byte binary and zero-padded text forms."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from s2common.core.temporal import (
    BINARY_LENGTH,
    Instant,
    decode_binary,
    decode_text,
    encode_binary,
    encode_text,
    from_datetime,
    to_datetime,
)
from s2common.exceptions import BadFormatError, InvalidLengthError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class TestBinary:
    def test_zero(self):
        assert decode_binary(encode_binary(0, 0)) == (0, 0)

    def test_layout_is_big_endian(self):
        encoded = encode_binary(1, 2)
        assert len(encoded) == BINARY_LENGTH
        assert encoded == bytes(7) + b"\x01" + bytes(7) + b"\x02"

    @pytest.mark.parametrize(
        "seconds,nanos",
        [
            (0, 0),
            (1_700_000_000, 123_456_789),
            (-1, 999_999_999),
            (INT64_MIN, 0),
            (INT64_MAX, INT64_MAX),
            (5, -3),
        ],
    )
    def test_round_trip(self, seconds, nanos):
        assert decode_binary(encode_binary(seconds, nanos)) == Instant(seconds, nanos)

    def test_nanos_range_not_enforced(self):
        assert decode_binary(encode_binary(0, 2_000_000_000)).nanos == 2_000_000_000

    def test_out_of_int64_rejected(self):
        with pytest.raises(BadFormatError):
            encode_binary(INT64_MAX + 1, 0)

    @pytest.mark.parametrize("length", [0, 8, 15, 17, 32])
    def test_wrong_length_rejected(self, length):
        with pytest.raises(InvalidLengthError):
            decode_binary(bytes(length))


class TestText:
    def test_nanos_are_zero_padded(self):
        assert encode_text(5, 3_000_000) == "5.003000000"
        assert encode_text(0, 0) == "0.000000000"

    def test_round_trip(self):
        for seconds, nanos in [(0, 0), (5, 3), (-12, 999_999_999), (1_700_000_000, 500)]:
            assert decode_text(encode_text(seconds, nanos)) == (seconds, nanos)

    def test_short_fraction_is_decimal(self):
        assert decode_text("5.3") == Instant(5, 300_000_000)
        assert decode_text("5.003") == Instant(5, 3_000_000)

    def test_padded_and_short_forms_are_distinct(self):
        assert decode_text("5.3") != decode_text("5.000000003")

    @pytest.mark.parametrize(
        "text",
        ["", "5", "5.", ".5", "5.3.1", "a.b", "5.1234567890", "+5.1", " 5.1", "5.-1", "5,1"],
    )
    def test_malformed_rejected(self, text):
        with pytest.raises(BadFormatError):
            decode_text(text)

    @pytest.mark.parametrize("nanos", [-1, 1_000_000_000])
    def test_unrepresentable_nanos_rejected(self, nanos):
        with pytest.raises(BadFormatError):
            encode_text(0, nanos)


class TestDatetime:
    def test_from_datetime(self):
        value = datetime(2024, 1, 2, 3, 4, 5, 678_901, tzinfo=timezone.utc)
        instant = from_datetime(value)
        assert instant.nanos == 678_901_000
        assert to_datetime(*instant) == value

    def test_naive_datetime_rejected(self):
        with pytest.raises(BadFormatError):
            from_datetime(datetime(2024, 1, 1))

    def test_before_epoch(self):
        value = datetime(1969, 12, 31, 23, 59, 59, 500_000, tzinfo=timezone.utc)
        assert from_datetime(value) == Instant(-1, 500_000_000)
