"""
usdshe

USDC (USD Coin) contract addresses on EVM networks.

Usage:
    from usdshe import NamedChain, UnsupportedChainError

    address = NamedChain.MAINNET.usdc_address()  # 20 raw bytes

    try:
        NamedChain.GNOSIS.usdc_address()
    except UnsupportedChainError as exc:
        print(exc.chain)

Non-raising lookup:
    from usdshe import resolve

    result = resolve("polygon")
    if result.status == "RESOLVED":
        print(result.address_str)
    else:
        print(result.reason, result.message)

Custom table:
    from usdshe import NamedChain, UsdcDirectory

    directory = UsdcDirectory(overrides={NamedChain.GNOSIS: "0x..."})
    directory.checksum_address(NamedChain.GNOSIS)
"""

from ._exceptions import (
    AddressParseError,
    UnsupportedChainError,
    UsdcError,
)
from ._version import __version__

# Address decoding
from .address import parse_address, to_checksum

# Chains
from .chains import NamedChain, coerce_chain

# Constants
from .constants import (
    ADDRESS_LENGTH,
    SUPPORTED_CHAINS,
    USDC_ADDRESSES,
)

# Directory
from .directory import (
    DEFAULT_DIRECTORY,
    Usdc,
    UsdcDirectory,
    get_usdc_address,
    is_supported_chain,
    resolve,
    usdc_address,
)

# Types
from .types import FailedReason, Resolution, ResolveStatus

__all__ = [
    # Version
    "__version__",
    # Directory
    "Usdc",
    "UsdcDirectory",
    "DEFAULT_DIRECTORY",
    "get_usdc_address",
    "usdc_address",
    "resolve",
    "is_supported_chain",
    # Chains
    "NamedChain",
    "coerce_chain",
    # Address decoding
    "parse_address",
    "to_checksum",
    # Types
    "Resolution",
    "ResolveStatus",
    "FailedReason",
    # Constants
    "USDC_ADDRESSES",
    "SUPPORTED_CHAINS",
    "ADDRESS_LENGTH",
    # Exceptions
    "UsdcError",
    "UnsupportedChainError",
    "AddressParseError",
]
