"""
Signing and verification of arbitrary bytes.

Signatures are produced with the Curve25519 scheme in ``curve25519`` and
can be checked against the signer's X25519 public key (the same key used
for addresses and key agreement).
"""

import logging
from typing import Optional

from . import curve25519
from .conversions import to_bytes
from .hashing import random_bytes
from .keys import private_key
from .types import (
    BinaryIn,
    PrivateKey,
    PUBLIC_KEY_LENGTH,
    SIGN_RANDOM_LENGTH,
)

logger = logging.getLogger(__name__)


def sign_bytes(seed_or_private_key, data: BinaryIn, random: Optional[BinaryIn] = None) -> bytes:
    """
    Sign bytes with a seed or a private key.

    Args:
        seed_or_private_key: Seed (phrase, bytes or NonceSeed) or a PrivateKey wrapper
        data: Bytes to sign
        random: 64 random bytes for the signing nonce. Fresh CSPRNG output
            is drawn when omitted; pass it explicitly for reproducible signatures.

    Returns:
        64-byte signature
    """
    if isinstance(seed_or_private_key, PrivateKey):
        secret = to_bytes(seed_or_private_key.private_key)
    else:
        secret = private_key(seed_or_private_key)

    nonce_random = random_bytes(SIGN_RANDOM_LENGTH) if random is None else to_bytes(random)
    return curve25519.sign(secret, to_bytes(data), nonce_random)


def verify_signature(public_key: BinaryIn, data: BinaryIn, signature: BinaryIn) -> bool:
    """
    Verify a signature against a public key.

    Never raises: malformed keys or signatures are reported as invalid.
    """
    try:
        return curve25519.verify(to_bytes(public_key), to_bytes(data), to_bytes(signature))
    except (ValueError, TypeError) as e:
        logger.debug("Signature rejected: %s", e)
        return False


def verify_public_key(public_key: BinaryIn) -> bool:
    """Check that a public key has the right length."""
    try:
        return len(to_bytes(public_key)) == PUBLIC_KEY_LENGTH
    except (ValueError, TypeError):
        return False
