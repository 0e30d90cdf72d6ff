"""s2common: canonical encodings and content-derived identifiers.

Value types shared by the messaging platform services:
  - ContentDigest: fixed SHA-256 digest with canonical binary and text forms
  - LanguageTag: language[-region[-variant]] tags
  - Temporal codec: 16-byte binary and seconds.nanoseconds text instants
  - CanonicalCodec: one surface over all of the above
  - LegacyIdFactory: compact ids derived from tenant + legacy message ids
"""

__version__ = "0.5.0"
__description__ = "Canonical encodings and content-derived identifiers"

from s2common.core.codec import CanonicalCodec
from s2common.core.digest import NIL_DIGEST, ContentDigest
from s2common.core.immutable import ImmutableBytes
from s2common.core.language import SYSTEM_LANGUAGE, LanguageTag
from s2common.core.temporal import Instant
from s2common.exceptions import BadFormatError, InvalidLengthError, S2Error
from s2common.legacy.legacy_id import LegacyIdentifier, LegacyIdFactory

__all__ = [
    "BadFormatError",
    "CanonicalCodec",
    "ContentDigest",
    "ImmutableBytes",
    "Instant",
    "InvalidLengthError",
    "LanguageTag",
    "LegacyIdFactory",
    "LegacyIdentifier",
    "NIL_DIGEST",
    "S2Error",
    "SYSTEM_LANGUAGE",
    "__version__",
]
