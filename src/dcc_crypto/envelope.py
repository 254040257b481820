"""Envelope encoding and decoding for shared-key encrypted messages."""

from dataclasses import dataclass

from .conversions import split
from .types import (
    MalformedEnvelopeError,
    ENVELOPE_HEADER_SIZE,
    ENVELOPE_VERSION,
    IV_SIZE,
    MAC_SIZE,
    WRAPPED_CEK_SIZE,
)


@dataclass
class MessageEnvelope:
    """Encrypted message envelope."""
    version: int
    wrapped_cek: bytes  # 32 bytes, AES-ECB(shared_key, cek)
    cek_mac: bytes  # 32 bytes, HMAC(shared_key, cek || iv)
    content_mac: bytes  # 32 bytes, HMAC(cek, plaintext)
    iv: bytes  # 16 bytes
    ciphertext: bytes  # variable, AES-CTR(cek, iv, plaintext)


def encode_envelope(envelope: MessageEnvelope) -> bytes:
    """
    Encode an envelope to bytes.

    Format (113-byte header + ciphertext):
        [0]       version (0x01)
        [1-32]    wrappedCek (32 bytes)
        [33-64]   cekMac (32 bytes)
        [65-96]   contentMac (32 bytes)
        [97-112]  iv (16 bytes)
        [113+]    ciphertext (variable)

    Args:
        envelope: MessageEnvelope to encode

    Returns:
        Encoded bytes
    """
    return (
        bytes([envelope.version])
        + envelope.wrapped_cek
        + envelope.cek_mac
        + envelope.content_mac
        + envelope.iv
        + envelope.ciphertext
    )


def decode_envelope(data: bytes) -> MessageEnvelope:
    """
    Decode bytes into an envelope.

    Args:
        data: Encoded envelope bytes

    Returns:
        Decoded MessageEnvelope

    Raises:
        MalformedEnvelopeError: If a fixed-size field is missing or short
    """
    if len(data) < ENVELOPE_HEADER_SIZE:
        raise MalformedEnvelopeError(
            f"Failed to decrypt: malformed encrypted message "
            f"({len(data)} bytes, minimum {ENVELOPE_HEADER_SIZE})"
        )

    version, wrapped_cek, cek_mac, content_mac, iv, ciphertext = split(
        data, 1, WRAPPED_CEK_SIZE, MAC_SIZE, MAC_SIZE, IV_SIZE
    )

    return MessageEnvelope(
        version=version[0],
        wrapped_cek=wrapped_cek,
        cek_mac=cek_mac,
        content_mac=content_mac,
        iv=iv,
        ciphertext=ciphertext,
    )


def is_encrypted_message(data: bytes) -> bool:
    """
    Check if data looks like an encrypted message envelope.

    Args:
        data: Bytes to check

    Returns:
        True if data appears to be a valid envelope
    """
    if len(data) < ENVELOPE_HEADER_SIZE:
        return False

    return data[0] == ENVELOPE_VERSION
