"""
Modular arithmetic over the Curve25519 field.

Only the public Montgomery to Edwards coordinate map is computed here.
Operations on secret scalars and group elements go through libsodium
(``nacl.bindings``) in ``curve25519``.
"""

# Field prime
P = 2**255 - 19
# Order of the base point
L = 2**252 + 27742317777372353535851937790883648493


def inv(x: int) -> int:
    """Inverse mod P by Fermat's little theorem. inv(0) is 0."""
    return pow(x, P - 2, P)


def int_from_le(data: bytes) -> int:
    return int.from_bytes(data, "little")


def int_to_le(value: int, length: int = 32) -> bytes:
    return value.to_bytes(length, "little")
