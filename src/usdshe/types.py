"""Type definitions for usdshe."""

from typing import Literal

from pydantic import BaseModel

from .chains import NamedChain

ResolveStatus = Literal["RESOLVED", "FAILED"]
FailedReason = Literal[
    "unsupported_chain",
    "address_parse_error",
]


class Resolution(BaseModel):
    """
    Result of a non-raising USDC address lookup.

    status: RESOLVED | FAILED

    Example:
        >>> result = resolve(NamedChain.POLYGON)
        >>> if result.status == "RESOLVED":
        ...     print(result.address.hex())
    """

    status: ResolveStatus
    chain: NamedChain | int | str
    address: bytes | None = None
    address_str: str | None = None
    reason: FailedReason | None = None
    message: str | None = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.status == "RESOLVED"
