"""Bridge layer between s2common and the platform crypto libraries.

Modules
-------
crypto_bridge
    One-time, thread-safe registration of the digest provider (``hashlib``)
    and the cipher provider (libsodium via PyNaCl).  ``ensure_initialized()``
    is called by every digest-producing operation before first use.
"""
