"""Shared test fixtures for s2common."""

from __future__ import annotations

import base64

import pytest

from s2common.bridge.crypto_bridge import ProviderRegistry
from s2common.core.immutable import ImmutableBytes
from s2common.legacy.legacy_id import LegacyIdFactory

# Published interoperability vector for LegacyIdFactory.message_id
VECTOR_TENANT = "MyTenant"
VECTOR_MESSAGE_ID = base64.b64decode("xjbP0HZYa8xSyPqH19BFxX///p49T8mWbQ==")
VECTOR_EXPECTED = "NTdNYe1p6iQDVUdq3rRJWG77_PLCq7iMwYPLO-dqS4sBAQ"


@pytest.fixture
def tenant() -> str:
    return VECTOR_TENANT


@pytest.fixture
def message_id() -> bytes:
    """Raw legacy message id bytes from the published vector."""
    return VECTOR_MESSAGE_ID


@pytest.fixture
def wrapped_message_id(message_id: bytes) -> ImmutableBytes:
    """The same message id as a read-only wrapped view."""
    return ImmutableBytes(message_id)


@pytest.fixture
def legacy_factory() -> LegacyIdFactory:
    return LegacyIdFactory()


@pytest.fixture
def registry() -> ProviderRegistry:
    """A fresh, unregistered provider registry (not the process singleton)."""
    return ProviderRegistry()
