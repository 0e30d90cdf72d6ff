"""Read-only wrapped byte view.

``ImmutableBytes`` is the view type accepted everywhere a raw byte sequence
is.  Code that consumes bytes must produce identical results for
``ImmutableBytes(b)`` and ``b``; use ``as_bytes()`` to normalise either form.
"""

from __future__ import annotations

import base64
from collections.abc import Iterator
from typing import Union, overload

BytesLike = Union[bytes, bytearray, memoryview]


class ImmutableBytes:
    """An immutable byte sequence, equal to any other view with the same content.

    Constructed from zero or more byte sequences, which are concatenated.
    The content is copied on construction, so later changes to a source
    ``bytearray`` are not visible.
    """

    __slots__ = ("_bytes",)

    _bytes: bytes

    def __init__(self, *parts: BytesLike | ImmutableBytes) -> None:
        object.__setattr__(self, "_bytes", b"".join(as_bytes(p) for p in parts))

    @classmethod
    def from_text(cls, text: str) -> ImmutableBytes:
        """Wrap the UTF-8 encoding of *text*."""
        return cls(text.encode("utf-8"))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ImmutableBytes is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("ImmutableBytes is immutable")

    def __reduce__(self) -> tuple[type[ImmutableBytes], tuple[bytes]]:
        return (ImmutableBytes, (self._bytes,))

    def __copy__(self) -> ImmutableBytes:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> ImmutableBytes:
        return self

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Return the content as ``bytes``."""
        return self._bytes

    def to_text(self) -> str:
        """Decode the content as UTF-8."""
        return self._bytes.decode("utf-8")

    def to_base64(self) -> str:
        """Standard base64, with padding."""
        return base64.b64encode(self._bytes).decode("ascii")

    def to_base64_url(self) -> str:
        """URL-safe base64 without padding."""
        return base64.urlsafe_b64encode(self._bytes).rstrip(b"=").decode("ascii")

    def __bytes__(self) -> bytes:
        return self._bytes

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._bytes)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> ImmutableBytes: ...

    def __getitem__(self, index: int | slice) -> int | ImmutableBytes:
        if isinstance(index, slice):
            return ImmutableBytes(self._bytes[index])
        return self._bytes[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._bytes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ImmutableBytes):
            return self._bytes == other._bytes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bytes)

    def __repr__(self) -> str:
        return f"ImmutableBytes({self.to_base64_url()!r})"


EMPTY = ImmutableBytes()


def as_bytes(data: BytesLike | ImmutableBytes) -> bytes:
    """Normalise any accepted byte representation to ``bytes``."""
    if isinstance(data, ImmutableBytes):
        return data.to_bytes()
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected a byte sequence, got {type(data).__name__}")
