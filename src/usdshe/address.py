"""Hex address decoding."""

from eth_typing import Address, ChecksumAddress
from eth_utils import decode_hex
from web3 import Web3

from ._exceptions import AddressParseError
from .constants import ADDRESS_LENGTH


def parse_address(value: str) -> Address:
    """
    Decode a hex address string into its 20 raw bytes.

    The "0x" prefix is optional and digits may be in any case. Checksum
    casing is not verified.

    Raises:
        AddressParseError: If value is not hex or does not decode to 20 bytes.
            The decoder's exception is kept as ``source`` and ``__cause__``.
    """
    try:
        raw = decode_hex(value)
    except (TypeError, ValueError) as exc:
        raise AddressParseError(value, exc) from exc

    if len(raw) != ADDRESS_LENGTH:
        exc = ValueError(f"expected {ADDRESS_LENGTH} bytes, got {len(raw)}")
        raise AddressParseError(value, exc) from exc

    return Address(raw)


def to_checksum(address: bytes) -> ChecksumAddress:
    """Render a 20-byte address in EIP-55 checksum form."""
    return Web3.to_checksum_address(address)
