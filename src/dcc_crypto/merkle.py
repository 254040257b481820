"""
Merkle proof verification.

Leaves are hashed as blake2b256(0x00 || leaf) and internal nodes as
blake2b256(0x01 || left || right). A serialized proof is a sequence of
records with no overall length prefix:

    [0]       side (0x00 = Left: parent = H(acc || hash),
              anything else = Right: parent = H(hash || acc))
    [1]       hash size (1-255)
    [2..]     sibling hash
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List

from cryptography.hazmat.primitives import constant_time

from .conversions import to_bytes
from .hashing import blake2b256
from .types import (
    BinaryIn,
    InvalidRootHashLengthError,
    MalformedProofError,
    HASH_LENGTH,
)

logger = logging.getLogger(__name__)

LEAF_PREFIX = b"\x00"
INTERNAL_NODE_PREFIX = b"\x01"


class Side(Enum):
    """Side tag of a proof step."""
    LEFT = 0
    RIGHT = 1


@dataclass(frozen=True)
class MerkleProofEntry:
    """One step of a proof path from leaf to root."""
    side: Side
    hash: bytes


def parse_merkle_proof(proof: bytes) -> List[MerkleProofEntry]:
    """
    Parse serialized proof bytes.

    Raises:
        MalformedProofError: If a size byte is missing or zero, or a hash
            runs past the end of the buffer
    """
    entries = []
    offset = 0
    while offset < len(proof):
        side = Side.LEFT if proof[offset] == 0 else Side.RIGHT

        if offset + 1 >= len(proof):
            raise MalformedProofError("Failed to parse merkleProof: Missing hash size")
        size = proof[offset + 1]
        if size < 1:
            raise MalformedProofError("Failed to parse merkleProof: Wrong hash size")

        start = offset + 2
        end = start + size
        if end > len(proof):
            raise MalformedProofError(
                f"Failed to parse merkleProof: hash of {size} bytes exceeds proof length"
            )

        entries.append(MerkleProofEntry(side=side, hash=proof[start:end]))
        offset = end
    return entries


def merkle_verify(root_hash: BinaryIn, merkle_proof: BinaryIn, leaf_data: BinaryIn) -> bool:
    """
    Verify that a leaf belongs to the tree with the given root.

    Args:
        root_hash: Expected 32-byte root hash
        merkle_proof: Serialized proof (may be empty)
        leaf_data: Leaf contents

    Returns:
        True if folding the proof over the leaf hash reproduces the root

    Raises:
        InvalidRootHashLengthError: If root_hash is not 32 bytes
        MalformedProofError: If the proof cannot be parsed
    """
    root = to_bytes(root_hash)
    if len(root) != HASH_LENGTH:
        raise InvalidRootHashLengthError("Failed to parse merkleProof: Invalid rootHash length")

    try:
        entries = parse_merkle_proof(to_bytes(merkle_proof))
    except MalformedProofError as e:
        logger.debug("Merkle proof rejected: %s", e)
        raise

    acc = blake2b256(LEAF_PREFIX + to_bytes(leaf_data))
    for entry in entries:
        if entry.side is Side.RIGHT:
            acc = blake2b256(INTERNAL_NODE_PREFIX + entry.hash + acc)
        else:
            acc = blake2b256(INTERNAL_NODE_PREFIX + acc + entry.hash)

    return constant_time.bytes_eq(acc, root)
