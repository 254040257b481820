"""
dcc-crypto - Cryptographic primitives for DecentralChain

Seed-based Curve25519 keys, checksummed addresses, Curve25519 signatures,
shared-key message encryption and Merkle proof verification.
"""

import logging

from .keys import (
    Seed,
    seed_with_nonce,
    derive_key_pair,
    key_pair,
    public_key,
    private_key,
)
from .addresses import build_address, address, verify_address
from .chain_id import ChainId
from .signature import sign_bytes, verify_signature, verify_public_key
from .encryption import (
    aes_encrypt,
    aes_decrypt,
    shared_key,
    message_encrypt,
    message_decrypt,
)
from .envelope import MessageEnvelope, encode_envelope, decode_envelope, is_encrypted_message
from .merkle import Side, MerkleProofEntry, parse_merkle_proof, merkle_verify
from .seed_encryption import encrypt_seed, decrypt_seed
from .hashing import sha256, sha512, blake2b256, keccak256, hmac_sha256, random_bytes
from .conversions import (
    base16_decode,
    base16_encode,
    base58_decode,
    base58_encode,
    base64_decode,
    base64_encode,
    bytes_to_string,
    string_to_bytes,
    concat,
    split,
)
from .facade import Crypto, CryptoConfig, EncodedKeyPair, OutputFormat, crypto
from .types import (
    KeyPair,
    NonceSeed,
    PublicKey,
    PrivateKey,
    PUBLIC_KEY_LENGTH,
    PRIVATE_KEY_LENGTH,
    SIGNATURE_LENGTH,
    ADDRESS_LENGTH,
    MAIN_NET_CHAIN_ID,
    TEST_NET_CHAIN_ID,
    CryptoError,
    InvalidInputLengthError,
    InvalidNonceError,
    InvalidSharedSecretError,
    MalformedEnvelopeError,
    MalformedProofError,
    InvalidRootHashLengthError,
    UnsupportedModeError,
    DecryptionError,
    InvalidKeyError,
    InvalidMessageError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Keys
    "Seed",
    "seed_with_nonce",
    "derive_key_pair",
    "key_pair",
    "public_key",
    "private_key",
    # Addresses
    "build_address",
    "address",
    "verify_address",
    "ChainId",
    # Signatures
    "sign_bytes",
    "verify_signature",
    "verify_public_key",
    # Encryption
    "aes_encrypt",
    "aes_decrypt",
    "shared_key",
    "message_encrypt",
    "message_decrypt",
    # Envelope
    "MessageEnvelope",
    "encode_envelope",
    "decode_envelope",
    "is_encrypted_message",
    # Merkle
    "Side",
    "MerkleProofEntry",
    "parse_merkle_proof",
    "merkle_verify",
    # Seed encryption
    "encrypt_seed",
    "decrypt_seed",
    # Hashing
    "sha256",
    "sha512",
    "blake2b256",
    "keccak256",
    "hmac_sha256",
    "random_bytes",
    # Conversions
    "base16_decode",
    "base16_encode",
    "base58_decode",
    "base58_encode",
    "base64_decode",
    "base64_encode",
    "bytes_to_string",
    "string_to_bytes",
    "concat",
    "split",
    # Facade
    "Crypto",
    "CryptoConfig",
    "EncodedKeyPair",
    "OutputFormat",
    "crypto",
    # Types
    "KeyPair",
    "NonceSeed",
    "PublicKey",
    "PrivateKey",
    # Constants
    "PUBLIC_KEY_LENGTH",
    "PRIVATE_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "ADDRESS_LENGTH",
    "MAIN_NET_CHAIN_ID",
    "TEST_NET_CHAIN_ID",
    # Errors
    "CryptoError",
    "InvalidInputLengthError",
    "InvalidNonceError",
    "InvalidSharedSecretError",
    "MalformedEnvelopeError",
    "MalformedProofError",
    "InvalidRootHashLengthError",
    "UnsupportedModeError",
    "DecryptionError",
    "InvalidKeyError",
    "InvalidMessageError",
]
