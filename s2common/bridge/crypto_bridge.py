"""Crypto bridge — one-time registration of the digest and cipher providers.

Bridge boundary
---------------
Two providers are registered, once per process:

1. **Digest provider** (``hashlib``, backed by OpenSSL): must expose the
   ``sha256`` and ``sha1`` algorithms used by the hash types in
   ``s2common.core.hasher``.  A known-answer self test runs at registration.

2. **Cipher provider** (``libsodium`` via PyNaCl): ``sodium_init()`` is
   called and libsodium's own SHA-256 is cross-checked against the digest
   provider so both backends are known to agree.

``ensure_initialized()`` is cheap after the first call and safe to call from
any number of threads.  A registration failure is fatal for every
digest-dependent operation: it is raised as ``ProviderInitError``, never
retried, and re-raised to every later caller.
"""

from __future__ import annotations

import hashlib
import logging
import ssl
import threading

import nacl
import nacl.bindings
import nacl.encoding
import nacl.hash
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

REQUIRED_ALGORITHMS: tuple[str, ...] = ("sha256", "sha1")

# SHA-256("abc") from FIPS 180-2, appendix B.1
_KAT_INPUT = b"abc"
_KAT_SHA256 = bytes.fromhex(
    "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
)


class ProviderInitError(RuntimeError):
    """Raised when the digest or cipher provider cannot be registered.

    This error indicates that no digest can be trusted in this process.  It
    must not be caught and ignored.
    """


class ProviderInfo(BaseModel):
    """Description of the providers registered for this process."""

    model_config = ConfigDict(frozen=True)

    digest_backend: str
    cipher_backend: str
    algorithms: tuple[str, ...]


class ProviderRegistry:
    """Idempotent, thread-safe holder of the process provider registration.

    The first caller performs registration under the lock; every caller,
    including the first once it completes, then sees the registered state
    without blocking.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._info: ProviderInfo | None = None
        self._error: ProviderInitError | None = None

    def is_initialized(self) -> bool:
        """Return ``True`` once registration has succeeded."""
        return self._info is not None

    def ensure_initialized(self) -> ProviderInfo:
        """Register the providers if that has not happened yet."""
        info = self._info
        if info is not None:
            return info

        with self._lock:
            if self._info is not None:
                return self._info
            if self._error is not None:
                raise self._error
            try:
                self._info = self._register()
            except ProviderInitError as exc:
                self._error = exc
                logger.critical("Crypto provider registration failed: %s", exc)
                raise
            logger.info(
                "Crypto providers registered: digest=%s cipher=%s",
                self._info.digest_backend,
                self._info.cipher_backend,
            )
            return self._info

    def _register(self) -> ProviderInfo:
        for name in REQUIRED_ALGORITHMS:
            try:
                hashlib.new(name)
            except ValueError as exc:
                raise ProviderInitError(
                    f"Digest algorithm {name!r} is not available: {exc}"
                ) from exc

        if hashlib.sha256(_KAT_INPUT).digest() != _KAT_SHA256:
            raise ProviderInitError("SHA-256 known-answer test failed")

        try:
            nacl.bindings.sodium_init()
        except RuntimeError as exc:
            raise ProviderInitError(f"libsodium initialisation failed: {exc}") from exc

        sodium_digest = nacl.hash.sha256(_KAT_INPUT, encoder=nacl.encoding.RawEncoder)
        if sodium_digest != _KAT_SHA256:
            raise ProviderInitError(
                "libsodium SHA-256 disagrees with the digest provider"
            )

        return ProviderInfo(
            digest_backend=f"hashlib ({ssl.OPENSSL_VERSION})",
            cipher_backend=f"libsodium via PyNaCl {getattr(nacl, '__version__', 'unknown')}",
            algorithms=REQUIRED_ALGORITHMS,
        )


_registry = ProviderRegistry()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def ensure_initialized() -> ProviderInfo:
    """Register the process-wide providers at most once.

    Returns the ``ProviderInfo`` describing them.

    Raises
    ------
    ProviderInitError
        If registration failed, on this or any earlier call.
    """
    return _registry.ensure_initialized()


def is_initialized() -> bool:
    """Return ``True`` if the process-wide providers are registered."""
    return _registry.is_initialized()


def provider_info() -> ProviderInfo:
    """Return the registered providers, registering them first if needed."""
    return _registry.ensure_initialized()
