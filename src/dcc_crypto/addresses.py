"""
Address construction and verification.

Address layout (26 bytes):
    [0]      version (0x01)
    [1]      chain id
    [2-21]   first 20 bytes of keccak256(blake2b256(public_key))
    [22-25]  first 4 bytes of keccak256(blake2b256(bytes 0-21))
"""

import logging
from typing import Optional

from cryptography.hazmat.primitives import constant_time

from .chain_id import ChainId
from .conversions import to_bytes
from .hashing import hash_chain
from .keys import key_pair
from .types import (
    BinaryIn,
    ChainIdLike,
    PublicKey,
    InvalidInputLengthError,
    ADDRESS_CHECKSUM_LENGTH,
    ADDRESS_HASH_LENGTH,
    ADDRESS_VERSION,
    MAIN_NET_CHAIN_ID,
    PUBLIC_KEY_LENGTH,
)

logger = logging.getLogger(__name__)

_CHECKSUM_OFFSET = 2 + ADDRESS_HASH_LENGTH


def build_address(public_key: BinaryIn, chain_id: ChainIdLike = MAIN_NET_CHAIN_ID) -> bytes:
    """
    Build a 26-byte address from a public key.

    Args:
        public_key: 32-byte Curve25519 public key
        chain_id: Network character or byte value

    Returns:
        Address bytes

    Raises:
        InvalidInputLengthError: If the public key is not 32 bytes
    """
    public_key_bytes = to_bytes(public_key)
    if len(public_key_bytes) != PUBLIC_KEY_LENGTH:
        raise InvalidInputLengthError(
            f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key_bytes)}"
        )

    prefix = bytes([ADDRESS_VERSION, ChainId.to_number(chain_id)])
    raw_address = prefix + hash_chain(public_key_bytes)[:ADDRESS_HASH_LENGTH]
    checksum = hash_chain(raw_address)[:ADDRESS_CHECKSUM_LENGTH]
    return raw_address + checksum


def address(seed_or_public_key, chain_id: ChainIdLike = MAIN_NET_CHAIN_ID) -> bytes:
    """Address for a seed, or for a PublicKey wrapper."""
    if isinstance(seed_or_public_key, PublicKey):
        return build_address(seed_or_public_key.public_key, chain_id)
    return build_address(key_pair(seed_or_public_key).public_key, chain_id)


def verify_address(
    addr: BinaryIn,
    chain_id: Optional[ChainIdLike] = None,
    public_key: Optional[BinaryIn] = None,
) -> bool:
    """
    Check an address's version, chain id, checksum and (optionally) owner.

    Never raises: anything that cannot be parsed is reported as invalid.

    Args:
        addr: Address bytes or Base58 string
        chain_id: Expected chain id, if any
        public_key: Public key the address must have been built from, if any

    Returns:
        True if every requested check passes
    """
    try:
        address_bytes = to_bytes(addr)

        if address_bytes[0] != ADDRESS_VERSION:
            return False
        if chain_id is not None and address_bytes[1] != ChainId.to_number(chain_id):
            return False

        expected_checksum = hash_chain(address_bytes[:_CHECKSUM_OFFSET])[:ADDRESS_CHECKSUM_LENGTH]
        checksum = address_bytes[_CHECKSUM_OFFSET:_CHECKSUM_OFFSET + ADDRESS_CHECKSUM_LENGTH]
        if not constant_time.bytes_eq(checksum, expected_checksum):
            return False

        if public_key is not None:
            expected = build_address(
                public_key, chain_id if chain_id is not None else MAIN_NET_CHAIN_ID
            )
            if len(address_bytes) != len(expected):
                return False
            if not constant_time.bytes_eq(address_bytes, expected):
                return False
    except (ValueError, TypeError, IndexError) as e:
        logger.debug("Address rejected: %s", e)
        return False

    return True
