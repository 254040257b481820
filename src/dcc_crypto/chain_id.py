"""Chain id helpers."""

from .types import ChainIdLike, MAIN_NET_CHAIN_ID, TEST_NET_CHAIN_ID


class ChainId:
    """Converts and classifies network identifiers."""

    @staticmethod
    def to_number(chain_id: ChainIdLike) -> int:
        """Numeric form of a chain id: the code point of a character, or the int itself."""
        if isinstance(chain_id, str):
            if not chain_id:
                raise ValueError("Chain id must not be empty")
            return ord(chain_id[0])
        return chain_id

    @staticmethod
    def is_mainnet(chain_id: ChainIdLike) -> bool:
        return ChainId.to_number(chain_id) == MAIN_NET_CHAIN_ID

    @staticmethod
    def is_testnet(chain_id: ChainIdLike) -> bool:
        return ChainId.to_number(chain_id) == TEST_NET_CHAIN_ID
