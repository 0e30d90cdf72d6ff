"""Tests for ImmutableBytes — the read-only wrapped byte view."""

from __future__ import annotations

import copy
import pickle

import pytest

from s2common.core.immutable import EMPTY, ImmutableBytes, as_bytes


class TestImmutableBytes:
    def test_concatenates_parts(self):
        assert ImmutableBytes(b"ab", bytearray(b"c"), ImmutableBytes(b"d")).to_bytes() == b"abcd"

    def test_copies_mutable_source(self):
        source = bytearray(b"abc")
        view = ImmutableBytes(source)
        source[0] = ord("z")
        assert view.to_bytes() == b"abc"

    def test_equality_by_content(self):
        assert ImmutableBytes(b"abc") == ImmutableBytes(b"a", b"bc")
        assert hash(ImmutableBytes(b"abc")) == hash(ImmutableBytes(b"a", b"bc"))
        assert ImmutableBytes(b"abc") != ImmutableBytes(b"abd")

    def test_not_equal_to_raw_bytes(self):
        assert ImmutableBytes(b"abc") != b"abc"

    def test_attributes_cannot_be_set(self):
        view = ImmutableBytes(b"abc")
        with pytest.raises(AttributeError):
            view._bytes = b"xyz"

    def test_sequence_protocol(self):
        view = ImmutableBytes(b"\x01\x02\x03")
        assert len(view) == 3
        assert view[0] == 1
        assert view[1:] == ImmutableBytes(b"\x02\x03")
        assert list(view) == [1, 2, 3]
        assert bytes(view) == b"\x01\x02\x03"

    def test_text_forms(self):
        view = ImmutableBytes.from_text("héllo")
        assert view.to_text() == "héllo"
        assert view.to_bytes() == "héllo".encode("utf-8")

    def test_base64_forms(self):
        view = ImmutableBytes(b"\xfb\xff")
        assert view.to_base64() == "+/8="
        assert view.to_base64_url() == "-_8"

    def test_empty(self):
        assert len(EMPTY) == 0
        assert EMPTY == ImmutableBytes(b"")


class TestCloning:
    def test_copy_returns_same_value(self):
        view = ImmutableBytes(b"abc")
        assert copy.copy(view) is view
        assert copy.deepcopy(view) is view

    def test_deepcopy_of_container(self):
        views = {"a": [ImmutableBytes(b"abc")]}
        assert copy.deepcopy(views) == views

    def test_pickle_round_trip(self):
        view = ImmutableBytes(b"\x00\xffabc")
        restored = pickle.loads(pickle.dumps(view))
        assert restored == view
        assert restored.to_bytes() == b"\x00\xffabc"
        with pytest.raises(AttributeError):
            restored._bytes = b"xyz"


class TestAsBytes:
    @pytest.mark.parametrize(
        "value",
        [b"abc", bytearray(b"abc"), memoryview(b"abc"), ImmutableBytes(b"abc")],
    )
    def test_normalises_all_forms(self, value):
        assert as_bytes(value) == b"abc"

    def test_rejects_strings(self):
        with pytest.raises(TypeError):
            as_bytes("abc")  # type: ignore[arg-type]
