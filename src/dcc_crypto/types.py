"""Type definitions for dcc-crypto."""

from dataclasses import dataclass
from typing import List, Optional, Union


@dataclass(frozen=True)
class KeyPair:
    """Curve25519 key pair."""
    private_key: bytes  # 32 bytes, clamped scalar
    public_key: bytes  # 32 bytes, Montgomery u-coordinate


@dataclass(frozen=True)
class NonceSeed:
    """Seed bytes optionally paired with a 32-bit derivation nonce."""
    seed: bytes
    nonce: Optional[int] = None


@dataclass(frozen=True)
class PublicKey:
    """Marks a value as a public key rather than a seed."""
    public_key: "BinaryIn"


@dataclass(frozen=True)
class PrivateKey:
    """Marks a value as a private key rather than a seed."""
    private_key: "BinaryIn"


# Accepted input forms. Strings are Base58 for binary values and UTF-8 for raw values.
BinaryIn = Union[bytes, bytearray, memoryview, List[int], str]
RawStringIn = Union[bytes, bytearray, memoryview, List[int], str]
SeedLike = Union[RawStringIn, NonceSeed]
ChainIdLike = Union[str, int]


# Length constants
PUBLIC_KEY_LENGTH = 32
PRIVATE_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64
ADDRESS_LENGTH = 26
HASH_LENGTH = 32
SIGN_RANDOM_LENGTH = 64

# Address constants
ADDRESS_VERSION = 0x01
ADDRESS_HASH_LENGTH = 20
ADDRESS_CHECKSUM_LENGTH = 4
MAIN_NET_CHAIN_ID = 76  # 'L'
TEST_NET_CHAIN_ID = 84  # 'T'

# Envelope constants
ENVELOPE_VERSION = 0x01
CEK_SIZE = 32
WRAPPED_CEK_SIZE = 32
MAC_SIZE = 32
IV_SIZE = 16
ENVELOPE_HEADER_SIZE = 1 + WRAPPED_CEK_SIZE + MAC_SIZE + MAC_SIZE + IV_SIZE

MAX_NONCE = 0xFFFFFFFF


# Exception types
class CryptoError(Exception):
    """Base exception for dcc-crypto errors."""
    pass


class InvalidInputLengthError(CryptoError, ValueError):
    """Key, signature or hash has the wrong number of bytes."""
    pass


class InvalidNonceError(CryptoError, ValueError):
    """Derivation nonce is not an integer in [0, 2^32 - 1]."""
    pass


class InvalidSharedSecretError(CryptoError):
    """X25519 produced the all-zero shared secret."""
    pass


class MalformedEnvelopeError(CryptoError):
    """Encrypted message is structurally truncated."""
    pass


class MalformedProofError(CryptoError):
    """Merkle proof bytes cannot be parsed."""
    pass


class InvalidRootHashLengthError(CryptoError, ValueError):
    """Merkle root hash is not 32 bytes."""
    pass


class UnsupportedModeError(CryptoError, ValueError):
    """Unknown or retired AES mode."""
    pass


class DecryptionError(CryptoError):
    """Decryption failed."""
    pass


class InvalidKeyError(DecryptionError):
    """Wrapped content key failed authentication (wrong shared key)."""
    pass


class InvalidMessageError(DecryptionError):
    """Message content failed authentication."""
    pass
