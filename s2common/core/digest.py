"""ContentDigest — fixed-length SHA-256 content digest value."""

from __future__ import annotations

import base64
import binascii
import re

from pydantic import BaseModel, ConfigDict, Field

from s2common.core.hasher import SHA256_HASH_TYPE_ID, get_hash_type, hash_of
from s2common.core.immutable import BytesLike, ImmutableBytes, as_bytes
from s2common.exceptions import BadFormatError, InvalidLengthError

DIGEST_HASH_TYPE = get_hash_type(SHA256_HASH_TYPE_ID)
DIGEST_LENGTH = DIGEST_HASH_TYPE.byte_len

# 32 bytes of URL-safe base64 without padding
TEXT_LENGTH = 43

_BASE64_URL_RE = re.compile(r"[A-Za-z0-9_-]*")
_HEX_RE = re.compile(r"[0-9A-Fa-f]*")
_NIL_RAW = bytes(DIGEST_LENGTH)


class ContentDigest(BaseModel):
    """An immutable SHA-256 digest.

    Two digests are equal iff their raw bytes are identical, whichever of
    ``from_bytes``, ``of_content`` or ``from_text`` produced them.  Ordering
    is lexicographic on the raw bytes.  Direct construction is strict: only
    ``bytes`` of exactly ``DIGEST_LENGTH`` are accepted.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    raw: bytes = Field(min_length=DIGEST_LENGTH, max_length=DIGEST_LENGTH)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, raw: BytesLike | ImmutableBytes) -> ContentDigest:
        """Wrap an already computed digest.

        Raises
        ------
        InvalidLengthError
            If *raw* is not exactly ``DIGEST_LENGTH`` bytes.
        """
        data = as_bytes(raw)
        if len(data) != DIGEST_LENGTH:
            raise InvalidLengthError("ContentDigest", DIGEST_LENGTH, len(data))
        return cls(raw=data)

    @classmethod
    def of_content(cls, data: BytesLike | ImmutableBytes) -> ContentDigest:
        """Compute the digest of *data*."""
        return cls(raw=hash_of(data, SHA256_HASH_TYPE_ID))

    @classmethod
    def from_text(cls, text: str) -> ContentDigest:
        """Parse the canonical URL-safe base64 form produced by ``to_text``.

        Raises
        ------
        BadFormatError
            On a length mismatch, characters outside the URL-safe alphabet,
            padding, or a non-canonical final character.
        """
        if len(text) != TEXT_LENGTH:
            raise BadFormatError(
                f"ContentDigest text is {TEXT_LENGTH} characters but {len(text)} were passed."
            )
        if not _BASE64_URL_RE.fullmatch(text):
            raise BadFormatError("ContentDigest text contains invalid base64url characters")
        try:
            raw = base64.urlsafe_b64decode(text + "=")
        except binascii.Error as exc:
            raise BadFormatError(f"Invalid ContentDigest text: {exc}") from exc
        digest = cls.from_bytes(raw)
        if digest.to_text() != text:
            raise BadFormatError("ContentDigest text is not in canonical form")
        return digest

    @classmethod
    def from_hex(cls, text: str) -> ContentDigest:
        """Parse a hex rendering (either case)."""
        if len(text) != 2 * DIGEST_LENGTH or not _HEX_RE.fullmatch(text):
            raise BadFormatError("ContentDigest hex must be 64 hexadecimal characters")
        return cls(raw=bytes.fromhex(text))

    # ------------------------------------------------------------------
    # Canonical forms
    # ------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Canonical binary form: the raw digest, no type marker."""
        return self.raw

    def encoded_bytes(self) -> bytes:
        """The raw digest followed by the SHA-256 type trailer."""
        return DIGEST_HASH_TYPE.encode(self.raw)

    @property
    def is_nil(self) -> bool:
        return self.raw == _NIL_RAW

    def to_text(self) -> str:
        """Canonical text form: URL-safe base64 without padding."""
        return base64.urlsafe_b64encode(self.raw).rstrip(b"=").decode("ascii")

    def to_hex(self) -> str:
        return self.raw.hex()

    def to_immutable_bytes(self) -> ImmutableBytes:
        return ImmutableBytes(self.raw)

    def __str__(self) -> str:
        return self.to_text()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ContentDigest):
            return NotImplemented
        return self.raw < other.raw

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ContentDigest):
            return NotImplemented
        return self.raw <= other.raw

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ContentDigest):
            return NotImplemented
        return self.raw > other.raw

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ContentDigest):
            return NotImplemented
        return self.raw >= other.raw


# The zero digest, used in place of ``None`` for "no value"
NIL_DIGEST = ContentDigest(raw=_NIL_RAW)
