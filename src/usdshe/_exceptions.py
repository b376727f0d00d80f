"""Custom exceptions for the usdshe package."""


class UsdcError(Exception):
    """Base exception for USDC address lookups."""


class UnsupportedChainError(UsdcError):
    """No USDC address is known for the requested chain."""

    def __init__(self, chain: int | str) -> None:
        super().__init__(f"USDC address not available for chain: {_describe(chain)}")
        self.chain = chain


class AddressParseError(UsdcError):
    """A known address string is not a valid 20-byte hex address."""

    def __init__(self, address_str: str, source: Exception) -> None:
        super().__init__(f"Failed to parse address string '{address_str}': {source}")
        self.address_str = address_str
        self.source = source


def _describe(chain: int | str) -> str:
    # NamedChain is an IntEnum; show its name alongside the numeric id
    name = getattr(chain, "name", None)
    if name is not None:
        return f"{name} ({int(chain)})"
    return repr(chain)
