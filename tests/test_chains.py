"""Tests for chain identifiers."""

import pytest

from usdshe import NamedChain, UnsupportedChainError, coerce_chain


class TestNamedChain:
    """Tests for the NamedChain enumeration."""

    def test_values_are_chain_ids(self) -> None:
        """Members compare equal to their EIP-155 chain IDs."""
        assert NamedChain.MAINNET == 1
        assert NamedChain.BASE == 8453
        assert NamedChain.BASE_SEPOLIA == 84532
        assert NamedChain.SEPOLIA == 11155111

    def test_ids_unique(self) -> None:
        """No two members share a chain ID."""
        values = [chain.value for chain in NamedChain]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("mainnet", NamedChain.MAINNET),
            ("MAINNET", NamedChain.MAINNET),
            ("ethereum", NamedChain.MAINNET),
            ("base-sepolia", NamedChain.BASE_SEPOLIA),
            ("Base Sepolia", NamedChain.BASE_SEPOLIA),
            ("arbitrum_sepolia", NamedChain.ARBITRUM_SEPOLIA),
            ("bsc", NamedChain.BINANCE_SMART_CHAIN),
            ("zksync-era", NamedChain.ZKSYNC),
            ("  polygon ", NamedChain.POLYGON),
        ],
    )
    def test_from_name(self, name: str, expected: NamedChain) -> None:
        """Names, aliases and spelling variants resolve."""
        assert NamedChain.from_name(name) is expected

    def test_from_name_unknown(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown chain name"):
            NamedChain.from_name("kovan")


class TestCoerceChain:
    """Tests for coerce_chain."""

    def test_named_chain_passthrough(self) -> None:
        assert coerce_chain(NamedChain.POLYGON) is NamedChain.POLYGON

    def test_int(self) -> None:
        assert coerce_chain(137) is NamedChain.POLYGON

    def test_str(self) -> None:
        assert coerce_chain("avalanche") is NamedChain.AVALANCHE

    def test_unknown_int(self) -> None:
        """Unknown chain IDs are unsupported chains."""
        with pytest.raises(UnsupportedChainError) as exc_info:
            coerce_chain(999999)

        assert exc_info.value.chain == 999999
        assert "999999" in str(exc_info.value)

    def test_unknown_name(self) -> None:
        with pytest.raises(UnsupportedChainError) as exc_info:
            coerce_chain("kovan")

        assert exc_info.value.chain == "kovan"

    @pytest.mark.parametrize("value", [None, 1.0, True, b"mainnet"])
    def test_wrong_type(self, value: object) -> None:
        """Non int/str values are a TypeError."""
        with pytest.raises(TypeError):
            coerce_chain(value)  # type: ignore[arg-type]
