"""Hash, HMAC and random-byte primitives."""

import hashlib
import os

from Crypto.Hash import keccak
from cryptography.hazmat.primitives import hashes, hmac

from .conversions import to_bytes
from .types import BinaryIn


def sha256(data: BinaryIn) -> bytes:
    return hashlib.sha256(to_bytes(data)).digest()


def sha512(data: BinaryIn) -> bytes:
    return hashlib.sha512(to_bytes(data)).digest()


def blake2b256(data: BinaryIn) -> bytes:
    return hashlib.blake2b(to_bytes(data), digest_size=32).digest()


def keccak256(data: BinaryIn) -> bytes:
    """Keccak-256 with the original padding (not SHA3-256)."""
    return keccak.new(digest_bits=256, data=to_bytes(data)).digest()


def hash_chain(data: BinaryIn) -> bytes:
    """keccak256(blake2b256(data)), used for addresses and seed expansion."""
    return keccak256(blake2b256(data))


def hmac_sha256(key: BinaryIn, message: BinaryIn) -> bytes:
    h = hmac.HMAC(to_bytes(key), hashes.SHA256())
    h.update(to_bytes(message))
    return h.finalize()


def random_bytes(length: int) -> bytes:
    """Cryptographically secure random bytes."""
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")
    return os.urandom(length)
