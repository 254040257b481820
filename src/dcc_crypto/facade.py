"""Configured crypto facade with an optional embedded seed and output format."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from . import addresses
from . import encryption, keys, signature
from .conversions import base58_encode
from .merkle import merkle_verify
from .seed_encryption import decrypt_seed, encrypt_seed
from .types import (
    BinaryIn,
    ChainIdLike,
    KeyPair,
    NonceSeed,
    RawStringIn,
    SeedLike,
    MAIN_NET_CHAIN_ID,
)


class OutputFormat(str, Enum):
    """How binary results are returned."""
    BYTES = "Bytes"
    BASE58 = "Base58"


@dataclass(frozen=True)
class EncodedKeyPair:
    """Key pair as Base58 strings."""
    private_key: str
    public_key: str


@dataclass
class CryptoConfig:
    """Configuration for a Crypto instance."""

    output: OutputFormat = OutputFormat.BASE58
    seed: Optional[SeedLike] = None
    chain_id: ChainIdLike = MAIN_NET_CHAIN_ID

    def __post_init__(self) -> None:
        self.output = OutputFormat(self.output)
        if isinstance(self.seed, str) and self.seed == "":
            raise ValueError("Empty seed is not allowed.")


class Crypto:
    """
    Crypto operations bound to a configuration.

    Seed-related operations use the configured seed when none is passed,
    and binary results are Base58 strings unless the output format is BYTES.

    Example usage:
        ```python
        wallet = crypto(seed="my seed phrase")
        wallet.address()        # Base58 address on the configured chain
        wallet.sign_bytes(data)
        ```
    """

    # Stateless operations, exposed unchanged
    build_address = staticmethod(addresses.build_address)
    verify_address = staticmethod(addresses.verify_address)
    verify_signature = staticmethod(signature.verify_signature)
    verify_public_key = staticmethod(signature.verify_public_key)
    message_encrypt = staticmethod(encryption.message_encrypt)
    message_decrypt = staticmethod(encryption.message_decrypt)
    aes_encrypt = staticmethod(encryption.aes_encrypt)
    aes_decrypt = staticmethod(encryption.aes_decrypt)
    encrypt_seed = staticmethod(encrypt_seed)
    decrypt_seed = staticmethod(decrypt_seed)
    merkle_verify = staticmethod(merkle_verify)

    def __init__(self, config: Optional[CryptoConfig] = None) -> None:
        self.config = config or CryptoConfig()

    def _out(self, data: bytes) -> Union[bytes, str]:
        if self.config.output is OutputFormat.BASE58:
            return base58_encode(data)
        return data

    def _seed(self, seed: Optional[SeedLike]) -> SeedLike:
        if seed is not None:
            return seed
        if self.config.seed is None:
            raise ValueError("No seed given and none configured")
        return self.config.seed

    def seed_with_nonce(self, nonce: int, seed: Optional[SeedLike] = None) -> NonceSeed:
        return keys.seed_with_nonce(self._seed(seed), nonce)

    def key_pair(self, seed: Optional[SeedLike] = None) -> Union[KeyPair, EncodedKeyPair]:
        pair = keys.key_pair(self._seed(seed))
        if self.config.output is OutputFormat.BASE58:
            return EncodedKeyPair(
                private_key=base58_encode(pair.private_key),
                public_key=base58_encode(pair.public_key),
            )
        return pair

    def public_key(self, seed_or_private_key=None) -> Union[bytes, str]:
        return self._out(keys.public_key(self._seed(seed_or_private_key)))

    def private_key(self, seed: Optional[SeedLike] = None) -> Union[bytes, str]:
        return self._out(keys.private_key(self._seed(seed)))

    def address(
        self,
        seed_or_public_key=None,
        chain_id: Optional[ChainIdLike] = None,
    ) -> Union[bytes, str]:
        chain = chain_id if chain_id is not None else self.config.chain_id
        return self._out(addresses.address(self._seed(seed_or_public_key), chain))

    def sign_bytes(
        self,
        data: BinaryIn,
        seed_or_private_key=None,
        random: Optional[BinaryIn] = None,
    ) -> Union[bytes, str]:
        return self._out(signature.sign_bytes(self._seed(seed_or_private_key), data, random))

    def shared_key(
        self,
        private_key_from: BinaryIn,
        public_key_to: BinaryIn,
        prefix: RawStringIn,
    ) -> Union[bytes, str]:
        return self._out(encryption.shared_key(private_key_from, public_key_to, prefix))


def crypto(
    output: Union[OutputFormat, str] = OutputFormat.BASE58,
    seed: Optional[SeedLike] = None,
    chain_id: ChainIdLike = MAIN_NET_CHAIN_ID,
) -> Crypto:
    """Create a configured Crypto instance."""
    return Crypto(CryptoConfig(output=OutputFormat(output), seed=seed, chain_id=chain_id))
