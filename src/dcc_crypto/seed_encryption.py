"""
Password encryption of seed phrases.

Produces the OpenSSL "Salted__" format used by existing wallet clients:
base64("Salted__" || salt(8) || AES-256-CBC(key, iv, seed)), with key and
IV derived by EVP_BytesToKey (MD5) from a strengthened password.

EVP_BytesToKey is kept for compatibility with seeds already encrypted this
way; it is not a modern password KDF.
"""

import hashlib

from .conversions import base64_decode, base64_encode, bytes_to_string, string_to_bytes
from .encryption import aes_decrypt, aes_encrypt
from .hashing import random_bytes, sha256
from .types import DecryptionError

DEFAULT_ENCRYPTION_ROUNDS = 5000
SALT_HEADER = b"Salted__"
SALT_SIZE = 8
KEY_SIZE = 32
IV_SIZE = 16


def strengthen_password(password: str, rounds: int = DEFAULT_ENCRYPTION_ROUNDS) -> str:
    """Hash the password ``rounds`` times as hex(sha256(utf8(password)))."""
    for _ in range(rounds):
        password = sha256(string_to_bytes(password)).hex()
    return password


def evp_kdf(passphrase: bytes, salt: bytes, output_length: int = KEY_SIZE + IV_SIZE) -> bytes:
    """OpenSSL EVP_BytesToKey with MD5 and a single iteration."""
    derived = b""
    block = b""
    while len(derived) < output_length:
        block = hashlib.md5(block + passphrase + salt).digest()
        derived += block
    return derived[:output_length]


def _key_and_iv(password: str, salt: bytes, rounds: int):
    passphrase = strengthen_password(password, rounds)
    key_iv = evp_kdf(passphrase.encode("latin-1"), salt)
    return key_iv[:KEY_SIZE], key_iv[KEY_SIZE:]


def encrypt_seed(seed: str, password: str, encryption_rounds: int = DEFAULT_ENCRYPTION_ROUNDS) -> str:
    """
    Encrypt a seed phrase with a password.

    Args:
        seed: Seed phrase
        password: Password
        encryption_rounds: Password hashing rounds

    Returns:
        Base64 OpenSSL-format ciphertext
    """
    salt = random_bytes(SALT_SIZE)
    key, iv = _key_and_iv(password, salt, encryption_rounds)
    encrypted = aes_encrypt(string_to_bytes(seed), key, "CBC", iv)
    return base64_encode(SALT_HEADER + salt + encrypted)


def decrypt_seed(
    encrypted_seed: str,
    password: str,
    encryption_rounds: int = DEFAULT_ENCRYPTION_ROUNDS,
) -> str:
    """
    Decrypt a seed phrase encrypted with :func:`encrypt_seed`.

    Raises:
        DecryptionError: If the password is wrong or the data is corrupted
    """
    try:
        data = base64_decode(encrypted_seed)
    except ValueError as e:
        raise DecryptionError("Failed to decrypt: encrypted seed is not valid base64") from e
    if not data.startswith(SALT_HEADER) or len(data) < len(SALT_HEADER) + SALT_SIZE:
        raise DecryptionError("Failed to decrypt: not a \"Salted__\" payload")

    salt = data[len(SALT_HEADER) : len(SALT_HEADER) + SALT_SIZE]
    key, iv = _key_and_iv(password, salt, encryption_rounds)

    plaintext = aes_decrypt(data[len(SALT_HEADER) + SALT_SIZE :], key, "CBC", iv)
    try:
        return bytes_to_string(plaintext)
    except UnicodeDecodeError as e:
        raise DecryptionError("Failed to decrypt: incorrect password or corrupted data") from e
