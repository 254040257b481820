"""Tests for address construction and verification."""

import os

import pytest
from dcc_crypto.addresses import address, build_address, verify_address
from dcc_crypto.chain_id import ChainId
from dcc_crypto.conversions import base58_encode
from dcc_crypto.hashing import blake2b256, keccak256
from dcc_crypto.keys import key_pair, public_key
from dcc_crypto.types import (
    InvalidInputLengthError,
    PublicKey,
    ADDRESS_LENGTH,
    MAIN_NET_CHAIN_ID,
    TEST_NET_CHAIN_ID,
)
from .test_vectors import (
    ALPHA_SEED,
    ANCHOR_ADDRESS_L_B58,
    ANCHOR_ADDRESS_W_B58,
    ANCHOR_SEED,
    BETA_SEED,
    GAMMA_SEED,
)


class TestBuildAddress:
    """Test address construction."""

    def test_anchor_address_chain_l(self) -> None:
        addr = address(ANCHOR_SEED, "L")

        assert base58_encode(addr) == ANCHOR_ADDRESS_L_B58
        assert verify_address(addr, chain_id="L")

    def test_anchor_address_chain_w(self) -> None:
        addr = address(ANCHOR_SEED, "W")

        assert base58_encode(addr) == ANCHOR_ADDRESS_W_B58
        assert verify_address(addr, chain_id="W")

    def test_default_chain_is_mainnet(self) -> None:
        assert address(ANCHOR_SEED) == address(ANCHOR_SEED, "L")

    def test_layout(self) -> None:
        """Address is version, chain id, 20-byte key hash and 4-byte checksum."""
        pk = key_pair(ALPHA_SEED).public_key
        addr = build_address(pk, "T")

        assert len(addr) == ADDRESS_LENGTH
        assert addr[0] == 1
        assert addr[1] == TEST_NET_CHAIN_ID
        assert addr[2:22] == keccak256(blake2b256(pk))[:20]
        assert addr[22:] == keccak256(blake2b256(addr[:22]))[:4]

    def test_char_and_number_chain_id_agree(self) -> None:
        pk = public_key(ALPHA_SEED)
        assert build_address(pk, "L") == build_address(pk, MAIN_NET_CHAIN_ID)

    def test_address_from_public_key_wrapper(self) -> None:
        pk = public_key(ALPHA_SEED)
        assert address(PublicKey(pk), "T") == address(ALPHA_SEED, "T")

    def test_different_seeds_unique_addresses(self) -> None:
        addresses = {address(seed, "L") for seed in (ALPHA_SEED, BETA_SEED, GAMMA_SEED)}
        assert len(addresses) == 3

    def test_chain_changes_address(self) -> None:
        assert address(ALPHA_SEED, "W") != address(ALPHA_SEED, "L")

    def test_wrong_public_key_length(self) -> None:
        with pytest.raises(InvalidInputLengthError):
            build_address(bytes(31))


class TestVerifyAddress:
    """Test address verification."""

    @pytest.fixture
    def addr(self) -> bytes:
        return address(ALPHA_SEED, "L")

    def test_valid_without_options(self, addr) -> None:
        assert verify_address(addr) is True

    def test_valid_with_chain_and_public_key(self, addr) -> None:
        assert verify_address(addr, chain_id="L", public_key=public_key(ALPHA_SEED)) is True

    def test_base58_input(self, addr) -> None:
        assert verify_address(base58_encode(addr), chain_id="L") is True

    def test_other_chain_rejected(self, addr) -> None:
        assert verify_address(addr, chain_id="T") is False
        assert verify_address(addr, chain_id=TEST_NET_CHAIN_ID) is False

    def test_random_chains(self) -> None:
        """An address only verifies for the chain it was built for."""
        pk = os.urandom(32)
        for chain in range(256):
            addr = build_address(pk, chain)
            other = (chain + 1) % 256
            assert verify_address(addr, chain_id=chain)
            assert not verify_address(addr, chain_id=other)

    def test_wrong_public_key_rejected(self, addr) -> None:
        assert verify_address(addr, public_key=public_key(BETA_SEED)) is False

    def test_wrong_version_rejected(self) -> None:
        addr = bytearray(ADDRESS_LENGTH)
        assert verify_address(bytes(addr)) is False

    def test_bad_checksum_rejected(self, addr) -> None:
        tampered = bytearray(addr)
        tampered[25] ^= 0x01
        assert verify_address(bytes(tampered)) is False

    def test_tampered_hash_rejected(self, addr) -> None:
        tampered = bytearray(addr)
        tampered[10] ^= 0x01
        assert verify_address(bytes(tampered)) is False

    def test_length_mismatch_with_public_key(self, addr) -> None:
        """Extra trailing bytes pass the checksum but fail reconstruction."""
        assert verify_address(addr + b"\x00") is True
        assert verify_address(addr + b"\x00", public_key=public_key(ALPHA_SEED)) is False

    @pytest.mark.parametrize("garbage", [b"", b"\x00\x00\x00", b"\x01", "!!!invalid!!!", 42])
    def test_garbage_input(self, garbage) -> None:
        assert verify_address(garbage) is False

    def test_garbage_public_key(self, addr) -> None:
        assert verify_address(addr, public_key=b"\x01\x02") is False


class TestChainId:
    """Test chain id helpers."""

    def test_to_number(self) -> None:
        assert ChainId.to_number("L") == 76
        assert ChainId.to_number("T") == 84
        assert ChainId.to_number(87) == 87

    def test_is_mainnet(self) -> None:
        assert ChainId.is_mainnet("L")
        assert ChainId.is_mainnet(MAIN_NET_CHAIN_ID)
        assert not ChainId.is_mainnet("T")

    def test_is_testnet(self) -> None:
        assert ChainId.is_testnet("T")
        assert ChainId.is_testnet(TEST_NET_CHAIN_ID)
        assert not ChainId.is_testnet("L")
