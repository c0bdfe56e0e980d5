"""
signer.py — HMAC-SHA1 request signing

The signature is the lowercase hex HMAC-SHA1 of the UTF-8 canonical message,
keyed by the UTF-8 master key. Any party holding the key recomputes it
byte-for-byte.
"""

from __future__ import annotations
from typing import Union

from cryptography.hazmat.primitives import hashes, hmac

SIGNATURE_HEX_LENGTH = hashes.SHA1.digest_size * 2


def _to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def sign(message: Union[str, bytes], key: Union[str, bytes]) -> str:
    """Return the lowercase hex HMAC-SHA1 of ``message`` under ``key``.

    Args:
        message: Canonical message; strings are UTF-8 encoded.
        key: Shared master key; strings are UTF-8 encoded.

    Returns:
        str: 40 lowercase hexadecimal characters.
    """
    mac = hmac.HMAC(_to_bytes(key), hashes.SHA1())
    mac.update(_to_bytes(message))
    return mac.finalize().hex()
