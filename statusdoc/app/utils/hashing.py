"""
Document fingerprinting.

Provides the digest exposed to HTTP clients alongside a generated status
document, so a downloaded artifact can be matched against server logs.

This module hashes bytes, and bytes only.
"""

import hashlib
from typing import Union


def compute_document_hash(document_bytes: Union[bytes, bytearray]) -> str:
    """
    Compute a human-readable SHA-256 digest of a rendered document.

    Returns:
        A hash string with an explicit algorithm prefix.
        Example: ``SHA-256:3b7c0e4c...``
    """
    if not isinstance(document_bytes, (bytes, bytearray)):
        raise TypeError(
            "compute_document_hash expects bytes, "
            f"got {type(document_bytes).__name__}"
        )

    digest = hashlib.sha256(document_bytes).hexdigest()
    return f"SHA-256:{digest}"
