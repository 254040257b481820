"""
Curve25519 keys and signatures (Trevor Perrin's XEdDSA-style scheme).

Keys are X25519 (Montgomery form). Signing lifts the private scalar to
Ed25519 (Edwards form) and stores the sign bit of the Edwards public key
in bit 7 of the last signature byte, so a verifier holding only the
Montgomery public key can rebuild the Edwards key. That bit layout is part
of the wire format of existing signatures and must not change.

See https://moderncrypto.org/mail-archive/curves/2014/000205.html
"""

import logging
from typing import Optional

import nacl.bindings
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey

from . import field
from .hashing import sha512
from .types import (
    KeyPair,
    InvalidInputLengthError,
    InvalidSharedSecretError,
    PRIVATE_KEY_LENGTH,
    PUBLIC_KEY_LENGTH,
    SIGNATURE_LENGTH,
    SIGN_RANDOM_LENGTH,
)

logger = logging.getLogger(__name__)

# Domain prefix for the randomized nonce: 0xFE followed by 31 bytes of 0xFF
RANDOM_NONCE_PREFIX = b"\xfe" + b"\xff" * 31


def _check_length(name: str, data: bytes, expected: int) -> None:
    if len(data) != expected:
        raise InvalidInputLengthError(f"{name} must be {expected} bytes, got {len(data)}")


def clamp(key: bytes) -> bytes:
    """Clamp a 32-byte scalar for Curve25519."""
    k = bytearray(key)
    k[0] &= 248
    k[31] &= 127
    k[31] |= 64
    return bytes(k)


def _reduce_scalar(scalar: bytes) -> bytes:
    """Reduce a 32 or 64-byte little-endian value mod L."""
    return nacl.bindings.crypto_core_ed25519_scalar_reduce(scalar.ljust(64, b"\x00"))


def edwards_public_key(clamped_key: bytes) -> bytes:
    """
    Compressed Ed25519 public key for a clamped Curve25519 private key.

    The scalar is reduced mod L first; the base point has order L so the
    resulting point is unchanged.
    """
    return nacl.bindings.crypto_scalarmult_ed25519_base_noclamp(_reduce_scalar(clamped_key))


def montgomery_to_edwards(montgomery_key: bytes, sign_bit: int) -> bytes:
    """
    Convert a Montgomery u-coordinate to a compressed Edwards point.

    Computes y = (u - 1) / (u + 1) mod p and sets the top bit of the last
    byte to ``sign_bit`` (0 or 0x80).
    """
    u = field.int_from_le(montgomery_key) % field.P
    numerator = (u - 1) % field.P
    denominator = (u + 1) % field.P
    y = numerator * field.inv(denominator) % field.P

    out = bytearray(field.int_to_le(y))
    out[31] |= sign_bit
    return bytes(out)


def generate_key_pair(seed: bytes) -> KeyPair:
    """
    Generate a key pair from a 32-byte seed.

    The private key is the clamped seed; the public key is the X25519 base
    point multiple with the sign bit cleared.
    """
    _check_length("Seed", seed, PRIVATE_KEY_LENGTH)

    private_key = clamp(seed)
    public_key = bytearray(X25519PrivateKey.from_private_bytes(seed).public_key().public_bytes_raw())
    public_key[31] &= 127

    return KeyPair(private_key=private_key, public_key=bytes(public_key))


def scalar_mult(private_key: bytes, public_key: bytes) -> bytes:
    """
    X25519 Diffie-Hellman.

    Raises:
        InvalidInputLengthError: If either key is not 32 bytes
        InvalidSharedSecretError: If the result is the all-zero point
    """
    _check_length("Private key", private_key, PRIVATE_KEY_LENGTH)
    _check_length("Public key", public_key, PUBLIC_KEY_LENGTH)

    try:
        shared = X25519PrivateKey.from_private_bytes(private_key).exchange(
            X25519PublicKey.from_public_bytes(public_key)
        )
    except ValueError as e:
        # The backend refuses to return an all-zero shared secret
        logger.debug("X25519 exchange rejected peer public key: %s", e)
        raise InvalidSharedSecretError("Shared secret is the all-zero point") from e

    if not any(shared):
        logger.debug("X25519 exchange produced all-zero shared secret")
        raise InvalidSharedSecretError("Shared secret is the all-zero point")

    return shared


def sign(private_key: bytes, message: bytes, random: Optional[bytes] = None) -> bytes:
    """
    Sign a message.

    Args:
        private_key: 32-byte Curve25519 private key
        message: Message bytes (may be empty)
        random: Optional 64 random bytes. When given the nonce is randomized,
            otherwise it is derived deterministically from key and message.

    Returns:
        64-byte signature R || S with the Edwards sign bit in bit 7 of byte 63

    Raises:
        InvalidInputLengthError: If the key or random data has the wrong length
    """
    _check_length("Private key", private_key, PRIVATE_KEY_LENGTH)
    if random is not None:
        _check_length("Random data", random, SIGN_RANDOM_LENGTH)

    clamped = clamp(private_key)
    ed_public = edwards_public_key(clamped)
    sign_bit = ed_public[31] & 0x80

    if random is not None:
        nonce_hash = sha512(RANDOM_NONCE_PREFIX + clamped + message + random)
    else:
        nonce_hash = sha512(clamped + message)
    r = _reduce_scalar(nonce_hash)
    r_encoded = nacl.bindings.crypto_scalarmult_ed25519_base_noclamp(r)

    h = _reduce_scalar(sha512(r_encoded + ed_public + message))
    s = nacl.bindings.crypto_core_ed25519_scalar_add(
        r, nacl.bindings.crypto_core_ed25519_scalar_mul(h, _reduce_scalar(clamped))
    )

    signature = bytearray(r_encoded + s)
    signature[63] |= sign_bit
    return bytes(signature)


def verify(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """
    Verify a signature against a Montgomery public key.

    Returns:
        True if the signature is valid, False otherwise

    Raises:
        InvalidInputLengthError: If the key or signature has the wrong length
    """
    _check_length("Signature", signature, SIGNATURE_LENGTH)
    _check_length("Public key", public_key, PUBLIC_KEY_LENGTH)

    sig = bytearray(signature)
    sign_bit = sig[63] & 0x80
    sig[63] &= 0x7F

    ed_public = montgomery_to_edwards(public_key, sign_bit)

    try:
        Ed25519PublicKey.from_public_bytes(ed_public).verify(bytes(sig), message)
        return True
    except (InvalidSignature, ValueError):
        return False
