"""Tests for key derivation."""

import os

import pytest
from dcc_crypto.conversions import base58_decode, base58_encode
from dcc_crypto.curve25519 import clamp
from dcc_crypto.keys import (
    Seed,
    derive_key_pair,
    key_pair,
    private_key,
    public_key,
    seed_with_nonce,
)
from dcc_crypto.types import InvalidNonceError, NonceSeed, PrivateKey
from .test_vectors import (
    ALPHA_PRIVATE_KEY_B58,
    ALPHA_PUBLIC_KEY_B58,
    ALPHA_SEED,
    ANCHOR_PRIVATE_KEY_B58,
    ANCHOR_PUBLIC_KEY_B58,
    ANCHOR_SEED,
)


class TestKeyDerivation:
    """Test Curve25519 key derivation from seeds."""

    def test_anchor_keys(self) -> None:
        """Anchor seed derives the known public and private keys."""
        pair = key_pair(ANCHOR_SEED)

        assert base58_encode(pair.public_key) == ANCHOR_PUBLIC_KEY_B58
        assert base58_encode(pair.private_key) == ANCHOR_PRIVATE_KEY_B58

    def test_alpha_keys(self) -> None:
        """Second known seed derives its known keys."""
        assert base58_encode(public_key(ALPHA_SEED)) == ALPHA_PUBLIC_KEY_B58
        assert base58_encode(private_key(ALPHA_SEED)) == ALPHA_PRIVATE_KEY_B58

    def test_string_and_bytes_seed_agree(self) -> None:
        """A seed phrase and its UTF-8 bytes derive the same keys."""
        assert key_pair(ANCHOR_SEED) == key_pair(ANCHOR_SEED.encode("utf-8"))

    def test_deterministic_derivation(self) -> None:
        """Same seed and nonce always produce the same keys."""
        seed = os.urandom(24)

        assert derive_key_pair(seed, 7) == derive_key_pair(seed, 7)

    def test_nonce_zero_matches_no_nonce(self) -> None:
        """Nonce 0 and an absent nonce both use four zero bytes."""
        seed = ANCHOR_SEED.encode("utf-8")

        assert derive_key_pair(seed, 0) == derive_key_pair(seed, None)
        assert derive_key_pair(seed) == key_pair(ANCHOR_SEED)

    def test_different_nonces_different_keys(self) -> None:
        """Distinct nonces give distinct public keys."""
        seed = os.urandom(16)
        public_keys = {derive_key_pair(seed, nonce).public_key for nonce in range(16)}

        assert len(public_keys) == 16

    def test_max_nonce_accepted(self) -> None:
        pair = derive_key_pair(b"seed", 0xFFFFFFFF)
        assert len(pair.public_key) == 32

    @pytest.mark.parametrize("nonce", [-1, 2**32, 1.5, "1", True])
    def test_invalid_nonce(self, nonce) -> None:
        """Reject nonces outside [0, 2^32 - 1] and non-integers."""
        with pytest.raises(InvalidNonceError):
            derive_key_pair(b"seed", nonce)

    def test_key_shape(self) -> None:
        """Private key is clamped and public key has bit 255 clear."""
        pair = key_pair(os.urandom(32))

        assert len(pair.private_key) == 32
        assert len(pair.public_key) == 32
        assert pair.private_key == clamp(pair.private_key)
        assert pair.public_key[31] & 0x80 == 0

    def test_empty_and_emoji_seeds(self) -> None:
        """Edge-case seed phrases still derive valid keys."""
        for seed in ("", "\U0001F993\U0001F30A\U0001F510"):
            pair = key_pair(seed)
            assert len(pair.public_key) == 32


class TestSeedWithNonce:
    """Test nonce-paired seeds."""

    def test_nonce_changes_keys(self) -> None:
        assert public_key(seed_with_nonce(ALPHA_SEED, 1)) != public_key(ALPHA_SEED)

    def test_nonce_seed_is_deterministic(self) -> None:
        assert public_key(seed_with_nonce(ALPHA_SEED, 1)) == public_key(seed_with_nonce(ALPHA_SEED, 1))

    def test_seed_with_nonce_matches_derive(self) -> None:
        expected = derive_key_pair(ALPHA_SEED.encode("utf-8"), 5)
        assert key_pair(seed_with_nonce(ALPHA_SEED, 5)) == expected

    def test_is_seed_with_nonce(self) -> None:
        assert not Seed.is_seed_with_nonce(ALPHA_SEED)
        assert not Seed.is_seed_with_nonce(b"\x01\x02\x03")
        assert Seed.is_seed_with_nonce(seed_with_nonce(ALPHA_SEED, 0))
        assert Seed.is_seed_with_nonce(seed_with_nonce(ALPHA_SEED, 42))

    def test_to_binary(self) -> None:
        assert Seed.to_binary("abc") == NonceSeed(seed=b"abc", nonce=None)
        assert Seed.to_binary(bytes([10, 20, 30])).seed == bytes([10, 20, 30])
        assert Seed.to_binary(seed_with_nonce("abc", 5)) == NonceSeed(seed=b"abc", nonce=5)
        assert Seed.to_binary("").seed == b""

    def test_to_binary_nested(self) -> None:
        """A NonceSeed wrapping another unwraps to the inner bytes with the outer nonce."""
        nested = NonceSeed(seed=seed_with_nonce("abc", 5), nonce=9)

        assert Seed.to_binary(nested) == NonceSeed(seed=b"abc", nonce=9)
        assert key_pair(nested) == derive_key_pair(b"abc", 9)


class TestPublicKeyFromPrivate:
    """Test public key recovery from a private key."""

    def test_public_key_from_private_key(self) -> None:
        pair = key_pair(ANCHOR_SEED)

        assert public_key(PrivateKey(pair.private_key)) == pair.public_key

    def test_public_key_from_base58_private_key(self) -> None:
        recovered = public_key(PrivateKey(ANCHOR_PRIVATE_KEY_B58))

        assert recovered == base58_decode(ANCHOR_PUBLIC_KEY_B58)
