"""Single conversion surface between structured values and their wire forms.

``CanonicalCodec`` composes ``ContentDigest``, ``LanguageTag`` and the
temporal codec.  It holds no state and adds no rules of its own; every
method delegates to the owning type.
"""

from __future__ import annotations

from datetime import datetime

from s2common.core import temporal
from s2common.core.digest import ContentDigest
from s2common.core.immutable import BytesLike, ImmutableBytes
from s2common.core.language import LanguageTag
from s2common.core.temporal import Instant


class CanonicalCodec:
    """Bidirectional binary / text conversions for canonical value types."""

    # ------------------------------------------------------------------
    # ContentDigest
    # ------------------------------------------------------------------

    @staticmethod
    def digest_to_bytes(digest: ContentDigest) -> bytes:
        return digest.to_bytes()

    @staticmethod
    def digest_from_bytes(data: BytesLike | ImmutableBytes) -> ContentDigest:
        return ContentDigest.from_bytes(data)

    @staticmethod
    def digest_to_text(digest: ContentDigest) -> str:
        return digest.to_text()

    @staticmethod
    def digest_from_text(text: str) -> ContentDigest:
        return ContentDigest.from_text(text)

    # ------------------------------------------------------------------
    # Instants
    # ------------------------------------------------------------------

    @staticmethod
    def instant_to_bytes(seconds: int, nanos: int) -> bytes:
        return temporal.encode_binary(seconds, nanos)

    @staticmethod
    def instant_from_bytes(data: BytesLike | ImmutableBytes) -> Instant:
        return temporal.decode_binary(bytes(data))

    @staticmethod
    def instant_to_text(seconds: int, nanos: int) -> str:
        return temporal.encode_text(seconds, nanos)

    @staticmethod
    def instant_from_text(text: str) -> Instant:
        return temporal.decode_text(text)

    @staticmethod
    def datetime_to_bytes(value: datetime) -> bytes:
        return temporal.encode_binary(*temporal.from_datetime(value))

    @staticmethod
    def datetime_from_bytes(data: BytesLike | ImmutableBytes) -> datetime:
        return temporal.to_datetime(*temporal.decode_binary(bytes(data)))

    # ------------------------------------------------------------------
    # Language tags
    # ------------------------------------------------------------------

    @staticmethod
    def language_to_text(language: LanguageTag) -> str:
        return language.canonical_text()

    @staticmethod
    def language_from_text(text: str) -> LanguageTag:
        return LanguageTag.parse(text)
