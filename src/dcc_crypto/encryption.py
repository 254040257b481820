"""AES helpers, shared-key agreement and shared-key message encryption."""

import logging
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import constant_time, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from . import curve25519
from .conversions import raw_to_bytes, string_to_bytes, to_bytes
from .envelope import MessageEnvelope, decode_envelope, encode_envelope
from .hashing import hmac_sha256, random_bytes, sha256
from .types import (
    BinaryIn,
    RawStringIn,
    DecryptionError,
    InvalidInputLengthError,
    InvalidKeyError,
    InvalidMessageError,
    UnsupportedModeError,
    CEK_SIZE,
    ENVELOPE_VERSION,
    IV_SIZE,
)

logger = logging.getLogger(__name__)

AES_MODES = ("CBC", "CTR", "ECB", "CFB", "GCM")
# Any AES key size is accepted as a shared key; a wrong key then fails the tag check
AES_KEY_LENGTHS = (16, 24, 32)

_ZERO_IV = bytes(16)


def _cipher(key: bytes, mode: str, iv: Optional[bytes]) -> Cipher:
    iv = iv if iv is not None else _ZERO_IV
    if mode == "CBC":
        return Cipher(algorithms.AES(key), modes.CBC(iv))
    if mode == "CTR":
        return Cipher(algorithms.AES(key), modes.CTR(iv))
    if mode == "ECB":
        return Cipher(algorithms.AES(key), modes.ECB())
    if mode == "CFB":
        return Cipher(algorithms.AES(key), modes.CFB(iv))
    raise UnsupportedModeError(f"Unsupported AES mode: {mode}")


def _normalize_mode(mode: str) -> str:
    mode = mode.upper()
    if mode == "OFB":
        raise UnsupportedModeError(
            "OFB mode is no longer supported. Use CTR (streaming), CBC (block), "
            "or GCM (authenticated) instead."
        )
    if mode not in AES_MODES:
        raise UnsupportedModeError(f"Unsupported AES mode: {mode}")
    return mode


def aes_encrypt(
    data: BinaryIn,
    key: BinaryIn,
    mode: str = "CBC",
    iv: Optional[BinaryIn] = None,
) -> bytes:
    """
    Encrypt data with AES.

    CBC and ECB apply PKCS7 padding. GCM appends the 16-byte tag. When no IV
    is given a zero IV is used.

    Args:
        data: Plaintext
        key: 16, 24 or 32-byte AES key
        mode: One of CBC, CTR, ECB, CFB, GCM
        iv: Initialization vector (nonce for GCM)

    Returns:
        Ciphertext bytes

    Raises:
        UnsupportedModeError: If the mode is unknown or no longer supported
    """
    mode = _normalize_mode(mode)
    key_bytes = to_bytes(key)
    data_bytes = to_bytes(data)
    iv_bytes = to_bytes(iv) if iv is not None else None

    if mode == "GCM":
        return AESGCM(key_bytes).encrypt(iv_bytes or _ZERO_IV, data_bytes, None)

    if mode in ("CBC", "ECB"):
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        data_bytes = padder.update(data_bytes) + padder.finalize()

    encryptor = _cipher(key_bytes, mode, iv_bytes).encryptor()
    return encryptor.update(data_bytes) + encryptor.finalize()


def aes_decrypt(
    encrypted_data: BinaryIn,
    key: BinaryIn,
    mode: str = "CBC",
    iv: Optional[BinaryIn] = None,
) -> bytes:
    """
    Decrypt data encrypted with :func:`aes_encrypt`.

    Raises:
        UnsupportedModeError: If the mode is unknown or no longer supported
        DecryptionError: If padding or the GCM tag does not check out
    """
    mode = _normalize_mode(mode)
    key_bytes = to_bytes(key)
    data_bytes = to_bytes(encrypted_data)
    iv_bytes = to_bytes(iv) if iv is not None else None

    if mode == "GCM":
        try:
            return AESGCM(key_bytes).decrypt(iv_bytes or _ZERO_IV, data_bytes, None)
        except InvalidTag as e:
            raise DecryptionError("Failed to decrypt: authentication tag mismatch") from e

    try:
        decryptor = _cipher(key_bytes, mode, iv_bytes).decryptor()
        plaintext = decryptor.update(data_bytes) + decryptor.finalize()

        if mode in ("CBC", "ECB"):
            unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
            plaintext = unpadder.update(plaintext) + unpadder.finalize()
    except ValueError as e:
        raise DecryptionError(f"Failed to decrypt: {e}") from e

    return plaintext


def _aes_block_encrypt(key: bytes, data: bytes) -> bytes:
    """Unpadded AES-ECB, for block-aligned key wrapping."""
    encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    return encryptor.update(data) + encryptor.finalize()


def _aes_block_decrypt(key: bytes, data: bytes) -> bytes:
    decryptor = Cipher(algorithms.AES(key), modes.ECB()).decryptor()
    return decryptor.update(data) + decryptor.finalize()


def _aes_ctr(key: bytes, iv: bytes, data: bytes) -> bytes:
    encryptor = Cipher(algorithms.AES(key), modes.CTR(iv)).encryptor()
    return encryptor.update(data) + encryptor.finalize()


def _shared_key_bytes(shared_key: BinaryIn) -> bytes:
    key = to_bytes(shared_key)
    if len(key) not in AES_KEY_LENGTHS:
        raise InvalidInputLengthError(
            f"Shared key must be 16, 24 or 32 bytes, got {len(key)}"
        )
    return key


def shared_key(private_key_from: BinaryIn, public_key_to: BinaryIn, prefix: RawStringIn) -> bytes:
    """
    Derive a 32-byte symmetric key between two Curve25519 key holders.

    Computes HMAC-SHA256(key=sha256(prefix), message=X25519(private, public)).
    Both sides obtain the same key; different prefixes give unrelated keys.

    Args:
        private_key_from: Our 32-byte private key
        public_key_to: Their 32-byte public key
        prefix: Domain-separation prefix (UTF-8 string or bytes)

    Returns:
        32-byte shared key

    Raises:
        InvalidInputLengthError: If a key is not 32 bytes
        InvalidSharedSecretError: If the Diffie-Hellman result is all zeros
    """
    raw = curve25519.scalar_mult(to_bytes(private_key_from), to_bytes(public_key_to))
    prefix_hash = sha256(raw_to_bytes(prefix))
    return hmac_sha256(prefix_hash, raw)


def message_encrypt(shared_key: BinaryIn, message: str) -> bytes:
    """
    Encrypt a UTF-8 message under a shared key.

    A fresh content key (CEK) and IV are drawn per message. The message is
    encrypted with AES-CTR under the CEK, the CEK is wrapped with AES-ECB
    under the shared key, and two HMAC-SHA256 tags bind the CEK and the
    plaintext.

    Args:
        shared_key: 32-byte key from :func:`shared_key`
        message: Text to encrypt

    Returns:
        Encoded envelope bytes
    """
    key = _shared_key_bytes(shared_key)
    cek = random_bytes(CEK_SIZE)
    iv = random_bytes(IV_SIZE)
    message_bytes = string_to_bytes(message)

    envelope = MessageEnvelope(
        version=ENVELOPE_VERSION,
        wrapped_cek=_aes_block_encrypt(key, cek),
        cek_mac=hmac_sha256(key, cek + iv),
        content_mac=hmac_sha256(cek, message_bytes),
        iv=iv,
        ciphertext=_aes_ctr(cek, iv, message_bytes),
    )
    return encode_envelope(envelope)


def message_decrypt(shared_key: BinaryIn, encrypted_message: BinaryIn) -> str:
    """
    Decrypt a message produced by :func:`message_encrypt`.

    Args:
        shared_key: Shared key (16, 24 or 32 bytes)
        encrypted_message: Envelope bytes

    Returns:
        The decrypted text

    Raises:
        InvalidInputLengthError: If the shared key is not an AES key size
        MalformedEnvelopeError: If the envelope is truncated
        InvalidKeyError: If the CEK tag does not match (wrong shared key)
        InvalidMessageError: If the content tag does not match
    """
    key = _shared_key_bytes(shared_key)
    envelope = decode_envelope(to_bytes(encrypted_message))

    cek = _aes_block_decrypt(key, envelope.wrapped_cek)
    if not constant_time.bytes_eq(hmac_sha256(key, cek + envelope.iv), envelope.cek_mac):
        logger.debug("Envelope rejected: content key tag mismatch")
        raise InvalidKeyError("Invalid key")

    plaintext = _aes_ctr(cek, envelope.iv, envelope.ciphertext)
    if not constant_time.bytes_eq(hmac_sha256(cek, plaintext), envelope.content_mac):
        logger.debug("Envelope rejected: content tag mismatch")
        raise InvalidMessageError("Invalid message")

    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidMessageError("Invalid message: not UTF-8") from e
