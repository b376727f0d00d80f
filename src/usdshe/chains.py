"""Chain identifiers known to usdshe.

Values are EIP-155 chain IDs. The enumeration covers more networks than the
USDC table so callers can ask about any of them and get a typed answer.
"""

from enum import IntEnum
from typing import TYPE_CHECKING

from ._exceptions import UnsupportedChainError

if TYPE_CHECKING:
    from eth_typing import Address


class NamedChain(IntEnum):
    """A named EVM network."""

    MAINNET = 1
    OPTIMISM = 10
    BINANCE_SMART_CHAIN = 56
    GNOSIS = 100
    POLYGON = 137
    SONIC = 146
    FANTOM = 250
    FRAXTAL = 252
    ZKSYNC = 324
    MANTLE = 5000
    BASE = 8453
    HOLESKY = 17000
    MODE = 34443
    ARBITRUM = 42161
    CELO = 42220
    AVALANCHE = 43114
    LINEA = 59144
    POLYGON_AMOY = 80002
    BLAST = 81457
    BASE_SEPOLIA = 84532
    ARBITRUM_SEPOLIA = 421614
    SCROLL = 534352
    ZORA = 7777777
    SEPOLIA = 11155111
    OPTIMISM_SEPOLIA = 11155420

    def usdc_address(self) -> "Address":
        """
        Get the USDC contract address on this chain.

        Raises:
            UnsupportedChainError: If no address is known for this chain
            AddressParseError: If the stored address string is malformed
        """
        from .directory import DEFAULT_DIRECTORY

        return DEFAULT_DIRECTORY.usdc_address(self)

    @classmethod
    def from_name(cls, name: str) -> "NamedChain":
        """
        Look up a chain by name.

        Accepts member names in any case, with dashes or underscores
        ("base-sepolia", "BASE_SEPOLIA"), plus common aliases like
        "ethereum" or "bsc".

        Raises:
            ValueError: If the name is not recognized
        """
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        key = CHAIN_ALIASES.get(key, key)
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown chain name: {name!r}") from None


# Alternative spellings, normalized to lower_snake_case
CHAIN_ALIASES: dict[str, str] = {
    "ethereum": "mainnet",
    "eth": "mainnet",
    "ethereum_sepolia": "sepolia",
    "bsc": "binance_smart_chain",
    "bnb": "binance_smart_chain",
    "arbitrum_one": "arbitrum",
    "avax": "avalanche",
    "matic": "polygon",
    "op": "optimism",
    "zksync_era": "zksync",
}


def coerce_chain(chain: NamedChain | int | str) -> NamedChain:
    """
    Turn a chain ID or chain name into a NamedChain.

    Raises:
        UnsupportedChainError: If the ID or name matches no known chain
        TypeError: If chain is not a NamedChain, int or str
    """
    if isinstance(chain, NamedChain):
        return chain
    if isinstance(chain, bool):
        raise TypeError(f"Expected NamedChain, int or str, got {type(chain).__name__}")
    if isinstance(chain, int):
        try:
            return NamedChain(chain)
        except ValueError:
            raise UnsupportedChainError(chain) from None
    if isinstance(chain, str):
        try:
            return NamedChain.from_name(chain)
        except ValueError:
            raise UnsupportedChainError(chain) from None
    raise TypeError(f"Expected NamedChain, int or str, got {type(chain).__name__}")
