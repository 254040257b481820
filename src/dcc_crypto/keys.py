"""Key derivation from seeds."""

from typing import Optional

from . import curve25519
from .conversions import raw_to_bytes, to_bytes
from .hashing import hash_chain, sha256
from .types import (
    KeyPair,
    NonceSeed,
    PrivateKey,
    SeedLike,
    InvalidNonceError,
    MAX_NONCE,
)


class Seed:
    """Seed inspection and conversion."""

    @staticmethod
    def is_seed_with_nonce(value: object) -> bool:
        return isinstance(value, NonceSeed) and isinstance(value.nonce, int)

    @staticmethod
    def to_binary(seed: SeedLike) -> NonceSeed:
        """Normalize a seed to bytes. Strings are encoded as UTF-8."""
        if isinstance(seed, NonceSeed):
            # Nested seeds unwrap to the innermost bytes; the outer nonce wins
            return NonceSeed(seed=Seed.to_binary(seed.seed).seed, nonce=seed.nonce)
        return NonceSeed(seed=raw_to_bytes(seed))


def seed_with_nonce(seed: SeedLike, nonce: int) -> NonceSeed:
    """Pair a seed with a derivation nonce."""
    return NonceSeed(seed=Seed.to_binary(seed).seed, nonce=nonce)


def _nonce_bytes(nonce: Optional[int]) -> bytes:
    if nonce is None:
        return bytes(4)
    if isinstance(nonce, bool) or not isinstance(nonce, int) or not 0 <= nonce <= MAX_NONCE:
        raise InvalidNonceError(f"Nonce must be an integer in [0, 2^32 - 1], got {nonce!r}")
    return nonce.to_bytes(4, byteorder="big")


def derive_key_pair(seed: bytes, nonce: Optional[int] = 0) -> KeyPair:
    """
    Derive a Curve25519 key pair from seed bytes and a nonce.

    The seed is expanded as sha256(keccak256(blake2b256(nonce || seed))),
    where the nonce is 4 big-endian bytes, then clamped into a private key.

    Args:
        seed: Seed bytes
        nonce: 32-bit unsigned nonce (0 or None for no nonce)

    Returns:
        KeyPair with 32-byte private and public keys

    Raises:
        InvalidNonceError: If the nonce is not an integer in range
    """
    expanded = sha256(hash_chain(_nonce_bytes(nonce) + seed))
    return curve25519.generate_key_pair(expanded)


def key_pair(seed: SeedLike) -> KeyPair:
    """Derive the key pair for a seed phrase, seed bytes or NonceSeed."""
    binary = Seed.to_binary(seed)
    return derive_key_pair(binary.seed, binary.nonce)


def public_key(seed_or_private_key) -> bytes:
    """Public key for a seed, or for a PrivateKey wrapper."""
    if isinstance(seed_or_private_key, PrivateKey):
        secret = to_bytes(seed_or_private_key.private_key)
        return curve25519.generate_key_pair(secret).public_key
    return key_pair(seed_or_private_key).public_key


def private_key(seed: SeedLike) -> bytes:
    return key_pair(seed).private_key
