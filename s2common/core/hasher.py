"""Hash type registry and composite hashing.

Each hash type has a fixed digest length and a trailer that identifies it
when a digest is carried on the wire: the type id bytes followed by one byte
holding the length of the type id.  Type ids are positional and permanent.

DO NOT REMOVE OR REORDER EXISTING TYPES.  Append new ones only.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from typing import Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict

from s2common.bridge.crypto_bridge import ensure_initialized
from s2common.config import config
from s2common.core.immutable import BytesLike, ImmutableBytes, as_bytes
from s2common.exceptions import BadFormatError, CodingFault

NIL_HASH_TYPE_ID = 0
SHA256_HASH_TYPE_ID = 1
HYBRID_HASH_TYPE_ID = 2

HYBRID_LENGTH = 23


class HashType(BaseModel):
    """A registered hash algorithm and its wire identification."""

    model_config = ConfigDict(frozen=True)

    type_id: int
    name: str
    byte_len: int
    trailer: bytes

    @property
    def encoded_len(self) -> int:
        """Length of digest plus trailer."""
        return self.byte_len + len(self.trailer)

    def encode(self, raw_digest: bytes) -> bytes:
        """Append this type's trailer to a raw digest."""
        return raw_digest + self.trailer


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def _hybrid(data: bytes) -> bytes:
    """SHA-1 of the SHA-256, padded out to 23 bytes from the SHA-256."""
    sha256 = hashlib.sha256(data).digest()
    sha1 = hashlib.sha1(sha256).digest()
    return sha1 + sha256[len(sha1):HYBRID_LENGTH]


HASH_TYPES: tuple[HashType, ...] = (
    HashType(type_id=0, name="NIL", byte_len=0, trailer=b""),
    HashType(type_id=1, name="SHA-256", byte_len=32, trailer=b"\x01\x01"),
    HashType(type_id=2, name="SHA-1/SHA-256", byte_len=HYBRID_LENGTH, trailer=b"\x02\x01"),
)

_HASH_FUNCTIONS: dict[int, Callable[[bytes], bytes]] = {
    SHA256_HASH_TYPE_ID: _sha256,
    HYBRID_HASH_TYPE_ID: _hybrid,
}


def get_hash_type(type_id: int) -> HashType:
    """Return the registered ``HashType`` for *type_id*."""
    if type_id < 0 or type_id >= len(HASH_TYPES):
        raise BadFormatError(f"Invalid hash type ID {type_id}")
    return HASH_TYPES[type_id]


def hash_of(data: BytesLike | ImmutableBytes, type_id: int = SHA256_HASH_TYPE_ID) -> bytes:
    """Return the raw digest of *data* using hash type *type_id*."""
    function = _HASH_FUNCTIONS.get(type_id)
    if function is None:
        raise BadFormatError(f"Invalid hash type ID {type_id}")
    ensure_initialized()
    return function(as_bytes(data))


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw bytes."""
    return hash_of(data).hex()


# ---------------------------------------------------------------------------
# Composite hashing
# ---------------------------------------------------------------------------


@runtime_checkable
class SupportsDigestBytes(Protocol):
    """A digest value, such as ``ContentDigest``, usable as a composite part."""

    @property
    def is_nil(self) -> bool: ...

    def encoded_bytes(self) -> bytes: ...


CompositePart = Union[str, int, BytesLike, ImmutableBytes, SupportsDigestBytes]


def part_bytes(part: CompositePart) -> bytes:
    """Encode one element of a composite hash.

    Byte sequences and views contribute their raw bytes, strings their UTF-8
    encoding, integers their decimal ASCII form, and digests their encoded
    form, the raw digest followed by its type trailer.  Parts are
    concatenated with no separator.
    """
    if part is None:
        raise CodingFault("None included as element of composite hash")
    if isinstance(part, bool):
        raise CodingFault("bool is not a valid element of a composite hash")
    if isinstance(part, (bytes, bytearray, memoryview, ImmutableBytes)):
        return as_bytes(part)
    if isinstance(part, str):
        return part.encode("utf-8")
    if isinstance(part, int):
        return str(part).encode("ascii")
    if isinstance(part, SupportsDigestBytes):
        if part.is_nil:
            raise CodingFault("NIL digest included as element of composite hash")
        return part.encoded_bytes()
    raise CodingFault(
        f"{type(part).__name__} is not a valid element of a composite hash"
    )


class HashFactory:
    """Produces raw digests of single values or ordered composites.

    Parameters
    ----------
    type_id:
        Hash type to produce.  Defaults to ``config.default_hash_type``.
    """

    def __init__(self, type_id: int | None = None) -> None:
        self._type = get_hash_type(
            config.default_hash_type if type_id is None else type_id
        )
        if self._type.type_id not in _HASH_FUNCTIONS:
            raise BadFormatError(f"Hash type {self._type.name} cannot produce digests")

    @property
    def hash_type(self) -> HashType:
        return self._type

    def digest(self, data: BytesLike | ImmutableBytes) -> bytes:
        return hash_of(data, self._type.type_id)

    def composite_digest(self, *parts: CompositePart) -> bytes:
        """Digest of the concatenated encodings of *parts*, in order."""
        return hash_of(b"".join(part_bytes(p) for p in parts), self._type.type_id)
