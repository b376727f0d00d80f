"""Pytest configuration and fixtures for usdshe tests."""

import pytest

from usdshe import NamedChain, UsdcDirectory

# 39 hex digits (odd length)
ODD_LENGTH_ADDRESS = "0x3c499c542cEF5E3811e1192ce70d8cC03d5c335"

# Valid hex but only 19 bytes
SHORT_ADDRESS = "0x3c499c542cEF5E3811e1192ce70d8cC03d5c33"

# Right length, not hex
NON_HEX_ADDRESS = "0xZZ499c542cEF5E3811e1192ce70d8cC03d5c3359"


@pytest.fixture
def malformed_directory() -> UsdcDirectory:
    """Directory with broken entries on top of the real table."""
    return UsdcDirectory(
        overrides={
            NamedChain.GNOSIS: ODD_LENGTH_ADDRESS,
            NamedChain.CELO: SHORT_ADDRESS,
            NamedChain.BLAST: NON_HEX_ADDRESS,
        }
    )
