"""Byte and string conversions for binary inputs."""

import base64
from typing import List

import base58

from .types import BinaryIn, RawStringIn


def to_bytes(value: BinaryIn) -> bytes:
    """
    Convert a binary input to bytes.

    Strings are treated as Base58, which is how keys, addresses and
    signatures travel as text.

    Raises:
        ValueError: If a string is not valid Base58
        TypeError: If the value is not a supported binary form
    """
    if isinstance(value, str):
        return base58_decode(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (list, tuple)):
        return bytes(value)
    raise TypeError(f"Unsupported binary input: {type(value).__name__}")


def raw_to_bytes(value: RawStringIn) -> bytes:
    """Convert a raw input to bytes, encoding strings as UTF-8."""
    if isinstance(value, str):
        return string_to_bytes(value)
    return to_bytes(value)


def string_to_bytes(text: str) -> bytes:
    return text.encode("utf-8")


def bytes_to_string(data: BinaryIn) -> str:
    return to_bytes(data).decode("utf-8")


def base58_encode(data: BinaryIn) -> str:
    return base58.b58encode(to_bytes(data)).decode("ascii")


def base58_decode(text: str) -> bytes:
    try:
        return base58.b58decode(text)
    except ValueError as e:
        raise ValueError(f"Invalid Base58 string: {e}") from e


def base64_encode(data: BinaryIn) -> str:
    return base64.b64encode(to_bytes(data)).decode("ascii")


def base64_decode(text: str) -> bytes:
    return base64.b64decode(text)


def base16_encode(data: BinaryIn) -> str:
    return to_bytes(data).hex()


def base16_decode(text: str) -> bytes:
    return bytes.fromhex(text)


def concat(*parts: BinaryIn) -> bytes:
    """Concatenate binary inputs."""
    return b"".join(to_bytes(part) for part in parts)


def split(data: BinaryIn, *sizes: int) -> List[bytes]:
    """
    Split data into segments of the given sizes.

    The bytes left over after the last size form a final segment, so the
    result always has ``len(sizes) + 1`` items. Short input produces short
    or empty segments.
    """
    remaining = to_bytes(data)
    segments = []
    for size in sizes:
        segments.append(remaining[:size])
        remaining = remaining[size:]
    segments.append(remaining)
    return segments
