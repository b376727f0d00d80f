"""USDC address directory."""

import logging
from types import MappingProxyType
from typing import Mapping, Protocol, runtime_checkable

from eth_typing import Address, ChecksumAddress

from ._exceptions import AddressParseError, UnsupportedChainError
from .address import parse_address, to_checksum
from .chains import NamedChain, coerce_chain
from .constants import USDC_ADDRESSES
from .types import Resolution

logger = logging.getLogger(__name__)

ChainLike = NamedChain | int | str


@runtime_checkable
class Usdc(Protocol):
    """Anything that can provide a USDC contract address."""

    def usdc_address(self) -> Address:
        """
        Return the USDC contract address for this context.

        Raises:
            UnsupportedChainError: If no address is known for the context
            AddressParseError: If a known address string is malformed
        """
        ...


class UsdcDirectory:
    """
    Immutable mapping from chain to USDC contract address.

    Every lookup re-validates the stored string, so a malformed entry is
    reported as AddressParseError instead of leaking a decoder error.

    Example:
        >>> directory = UsdcDirectory()
        >>> directory.usdc_address(NamedChain.MAINNET).hex()
        'a0b86991c6218b36c1d19d4a2e9eb0ce3606eb48'
        >>> directory.resolve(NamedChain.GNOSIS).reason
        'unsupported_chain'
    """

    def __init__(
        self,
        addresses: Mapping[NamedChain, str] | None = None,
        overrides: Mapping[NamedChain, str] | None = None,
    ) -> None:
        """
        Initialize the directory.

        Args:
            addresses: Base table (uses USDC_ADDRESSES if not provided)
            overrides: Entries added on top of the base table, replacing
                any existing entry for the same chain
        """
        table = dict(USDC_ADDRESSES if addresses is None else addresses)
        if overrides:
            table.update(overrides)
        self._addresses: Mapping[NamedChain, str] = MappingProxyType(table)

    def __repr__(self) -> str:
        return f"UsdcDirectory({len(self._addresses)} chains)"

    @property
    def addresses(self) -> Mapping[NamedChain, str]:
        """Read-only view of the underlying table."""
        return self._addresses

    @property
    def supported_chains(self) -> tuple[NamedChain, ...]:
        """Chains with a known address, ordered by chain ID."""
        return tuple(sorted(self._addresses))

    def is_supported(self, chain: ChainLike) -> bool:
        """Check if an address is known for a chain."""
        try:
            return coerce_chain(chain) in self._addresses
        except UnsupportedChainError:
            return False

    def get_usdc_address(self, chain: ChainLike) -> str:
        """
        Get the stored (unvalidated) address string for a chain.

        Raises:
            UnsupportedChainError: If chain has no entry
        """
        named = coerce_chain(chain)
        address = self._addresses.get(named)
        if address is None:
            logger.debug("No USDC address for chain %s", named.name)
            raise UnsupportedChainError(named)
        return address

    def usdc_address(self, chain: ChainLike) -> Address:
        """
        Get the 20-byte USDC address for a chain.

        Raises:
            UnsupportedChainError: If chain has no entry
            AddressParseError: If the stored string is not a valid address
        """
        address_str = self.get_usdc_address(chain)
        try:
            return parse_address(address_str)
        except AddressParseError as exc:
            logger.error("Malformed USDC address for chain %s: %s", chain, exc)
            raise

    def checksum_address(self, chain: ChainLike) -> ChecksumAddress:
        """Get the USDC address for a chain in EIP-55 checksum form."""
        return to_checksum(self.usdc_address(chain))

    def resolve(self, chain: ChainLike) -> Resolution:
        """
        Look up the USDC address without raising for lookup failures.

        Returns:
            Resolution with status RESOLVED and the 20-byte address, or
            status FAILED with reason unsupported_chain or address_parse_error
        """
        try:
            address = self.usdc_address(chain)
        except UnsupportedChainError as exc:
            return Resolution(
                status="FAILED",
                chain=exc.chain,
                reason="unsupported_chain",
                message=str(exc),
            )
        except AddressParseError as exc:
            return Resolution(
                status="FAILED",
                chain=coerce_chain(chain),
                address_str=exc.address_str,
                reason="address_parse_error",
                message=str(exc),
            )

        named = coerce_chain(chain)
        return Resolution(
            status="RESOLVED",
            chain=named,
            address=address,
            address_str=self._addresses[named],
        )


DEFAULT_DIRECTORY = UsdcDirectory()


def get_usdc_address(chain: ChainLike) -> str:
    """Get the USDC address string for a chain."""
    return DEFAULT_DIRECTORY.get_usdc_address(chain)


def usdc_address(chain: ChainLike) -> Address:
    """Get the 20-byte USDC address for a chain."""
    return DEFAULT_DIRECTORY.usdc_address(chain)


def resolve(chain: ChainLike) -> Resolution:
    """Look up the USDC address for a chain without raising."""
    return DEFAULT_DIRECTORY.resolve(chain)


def is_supported_chain(chain: ChainLike) -> bool:
    """Check if a chain is supported."""
    return DEFAULT_DIRECTORY.is_supported(chain)
