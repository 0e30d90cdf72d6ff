"""Compact identifiers derived from legacy tenant-scoped ids.

A legacy id is a pure function of its inputs, so the mirror of an old
object can be found without a lookup table:

    SHA-256(label || tenant || part || ...)  +  type trailer 01 01

rendered as URL-safe base64 without padding (46 characters).  Parts are
concatenated with no separator; integers are written in decimal ASCII.
The framing is shared with every other producer of these ids and must not
change.
"""

from __future__ import annotations

import base64
import binascii
import re
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict

from s2common.core.digest import DIGEST_HASH_TYPE, ContentDigest
from s2common.core.hasher import CompositePart, HashFactory
from s2common.core.immutable import BytesLike, ImmutableBytes, as_bytes
from s2common.exceptions import BadFormatError

ENCODED_LENGTH = DIGEST_HASH_TYPE.encoded_len  # 34 bytes
TEXT_LENGTH = 46

_BASE64_URL_RE = re.compile(r"[A-Za-z0-9_-]*")

IdBytes = Union[BytesLike, ImmutableBytes]


class LegacyId(str, Enum):
    """Labels that prefix each kind of legacy id before hashing."""

    MESSAGE_ID = "MessageID"
    OBJECT_STATUS_ID = "ObjectStatusID"
    THREAD_ID = "ThreadID"
    READ_RECEIPT_ID = "ReadReceiptID"
    DELIVERY_RECEIPT_ID = "DeliveryReceiptID"
    MAESTRO_MESSAGE_ID = "MaestroMessageID"
    OFFLINE_NOTICE_ID = "OfflineNoticeID"
    DELETE_EVENT_ID = "DeleteEventID"
    DOWNLOAD_ATTACHMENT_EVENT_ID = "DownloadAttachmentEventID"
    LIKE_EVENT_ID = "LikeEventID"
    USER_ID = "UserID"
    SIGNAL_ID = "SignalID"


class LegacyIdentifier(BaseModel):
    """A rendered legacy id: a SHA-256 digest plus the type 1 trailer."""

    model_config = ConfigDict(frozen=True)

    digest: ContentDigest

    @classmethod
    def from_text(cls, text: str) -> LegacyIdentifier:
        """Parse a rendered id.

        Raises
        ------
        BadFormatError
            On a length mismatch, characters outside the URL-safe alphabet,
            an unexpected trailer, or a non-canonical encoding.
        """
        if len(text) != TEXT_LENGTH:
            raise BadFormatError(
                f"Legacy ids are {TEXT_LENGTH} characters but {len(text)} were passed."
            )
        if not _BASE64_URL_RE.fullmatch(text):
            raise BadFormatError("Legacy id contains invalid base64url characters")
        try:
            encoded = base64.urlsafe_b64decode(text + "==")
        except binascii.Error as exc:
            raise BadFormatError(f"Invalid legacy id: {exc}") from exc

        trailer = encoded[DIGEST_HASH_TYPE.byte_len:]
        if trailer != DIGEST_HASH_TYPE.trailer:
            raise BadFormatError(f"Legacy id has unexpected type trailer {trailer.hex()}")

        identifier = cls(digest=ContentDigest.from_bytes(encoded[: DIGEST_HASH_TYPE.byte_len]))
        if identifier.text != text:
            raise BadFormatError("Legacy id is not in canonical form")
        return identifier

    def to_bytes(self) -> bytes:
        """Digest followed by the type trailer."""
        return self.digest.encoded_bytes()

    @property
    def text(self) -> str:
        return base64.urlsafe_b64encode(self.to_bytes()).rstrip(b"=").decode("ascii")

    def __str__(self) -> str:
        return self.text


class LegacyIdFactory:
    """Builds ``LegacyIdentifier`` values for tenant-scoped legacy objects.

    Every id argument may be given as raw bytes or as an ``ImmutableBytes``
    view; equal content always produces the same identifier.  The factory
    holds no mutable state.
    """

    def __init__(self) -> None:
        self._hash_factory = HashFactory(DIGEST_HASH_TYPE.type_id)

    def _build(self, label: LegacyId, tenant: str, *parts: CompositePart) -> LegacyIdentifier:
        if not tenant:
            raise BadFormatError("Tenant name is required")
        raw = self._hash_factory.composite_digest(label.value, tenant, *parts)
        return LegacyIdentifier(digest=ContentDigest.from_bytes(raw))

    def message_id(self, tenant: str, message_id: IdBytes) -> LegacyIdentifier:
        """Identifier for the mirror of the given message."""
        return self._build(LegacyId.MESSAGE_ID, tenant, as_bytes(message_id))

    def thread_id(self, tenant: str, thread_id: IdBytes) -> LegacyIdentifier:
        return self._build(LegacyId.THREAD_ID, tenant, as_bytes(thread_id))

    def read_receipt_id(
        self, tenant: str, user_id: int, message_id: IdBytes, thread_id: IdBytes
    ) -> LegacyIdentifier:
        """Identifier for *user_id*'s read receipt of a message.

        *user_id* is the external (globally unique) id of the reader.
        """
        return self._build(
            LegacyId.READ_RECEIPT_ID, tenant, user_id, as_bytes(message_id), as_bytes(thread_id)
        )

    def delivery_receipt_id(
        self, tenant: str, user_id: int, message_id: IdBytes, thread_id: IdBytes
    ) -> LegacyIdentifier:
        return self._build(
            LegacyId.DELIVERY_RECEIPT_ID, tenant, user_id, as_bytes(message_id), as_bytes(thread_id)
        )

    def maestro_id(
        self,
        tenant: str,
        type_name: str,
        from_pod: int | None,
        message_id: IdBytes,
        thread_id: IdBytes | None = None,
    ) -> LegacyIdentifier:
        """Identifier for a maestro message.

        A missing pod is hashed as ``0`` and a missing thread as no bytes.
        """
        return self._build(
            LegacyId.MAESTRO_MESSAGE_ID,
            tenant,
            type_name,
            0 if from_pod is None else from_pod,
            as_bytes(message_id),
            b"" if thread_id is None else as_bytes(thread_id),
        )

    def offline_notice_id(
        self, tenant: str, to_user_id: int, message_id: IdBytes
    ) -> LegacyIdentifier:
        """Identifier for the email sent to a user who was offline at delivery."""
        return self._build(LegacyId.OFFLINE_NOTICE_ID, tenant, to_user_id, as_bytes(message_id))

    def delete_event_id(
        self, tenant: str, requester_id: int, deleted_message_id: IdBytes, message_id: IdBytes
    ) -> LegacyIdentifier:
        return self._build(
            LegacyId.DELETE_EVENT_ID,
            tenant,
            requester_id,
            as_bytes(deleted_message_id),
            as_bytes(message_id),
        )

    def download_attachment_event_id(
        self, tenant: str, downloaded_by_user_id: int, message_id: IdBytes
    ) -> LegacyIdentifier:
        return self._build(
            LegacyId.DOWNLOAD_ATTACHMENT_EVENT_ID,
            tenant,
            downloaded_by_user_id,
            as_bytes(message_id),
        )

    def like_event_id(
        self, tenant: str, liker_id: int, liked_message_id: IdBytes, message_id: IdBytes
    ) -> LegacyIdentifier:
        return self._build(
            LegacyId.LIKE_EVENT_ID,
            tenant,
            liker_id,
            as_bytes(liked_message_id),
            as_bytes(message_id),
        )
