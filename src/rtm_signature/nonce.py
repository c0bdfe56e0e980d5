"""
nonce.py — Per-request nonce generation

Nonces are 7 characters drawn independently from a fixed 22-character
alphabet. They only need to be unpredictable; collisions are tolerated.
"""

from __future__ import annotations
import random
import secrets
from typing import Optional

NONCE_CHARS = "abc123def456ghi789jk0_"
NONCE_LENGTH = 7

_system_random = secrets.SystemRandom()


def generate_nonce(rng: Optional[random.Random] = None) -> str:
    """Return a fresh nonce.

    Args:
        rng: Random source; defaults to the OS CSPRNG. Tests pass a seeded
            ``random.Random``.
    """
    source = rng if rng is not None else _system_random
    return "".join(source.choice(NONCE_CHARS) for _ in range(NONCE_LENGTH))
