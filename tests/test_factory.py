"""
Tests for selecting chain implementations.
"""
import pytest

from crosschain_sdk import factory
from crosschain_sdk.asset import AssetConfig, Driver, NativeAsset
from crosschain_sdk.chain.bitcoin import BitcoinAddressBuilder
from crosschain_sdk.chain.cosmos import CosmosAddressBuilder
from crosschain_sdk.chain.evm import EvmAddressBuilder
from crosschain_sdk.chain.solana import SolanaAddressBuilder
from crosschain_sdk.exceptions import ChainNotImplementedError, InvalidInputError
from crosschain_sdk.factory import new_address_builder


@pytest.mark.parametrize("config, expected", [
    (AssetConfig(asset="ETH"), EvmAddressBuilder),
    (AssetConfig(asset="USDC", chain="MATIC", decimals=6), EvmAddressBuilder),
    (AssetConfig(asset="SOL"), SolanaAddressBuilder),
    (AssetConfig(asset="ATOM", chain_prefix="cosmos"), CosmosAddressBuilder),
    (AssetConfig(asset="BTC", net="testnet"), BitcoinAddressBuilder),
])
def test_new_address_builder(config, expected):
    builder = new_address_builder(config)
    assert isinstance(builder, expected)
    assert builder.asset_config is config


def test_every_driver_has_a_builder():
    assert set(factory.ADDRESS_BUILDERS) == set(Driver)
    for native in NativeAsset:
        assert native.driver in factory.ADDRESS_BUILDERS


def test_missing_builder_is_not_implemented(monkeypatch):
    monkeypatch.delitem(factory.ADDRESS_BUILDERS, Driver.SOLANA)
    with pytest.raises(ChainNotImplementedError, match="SOL"):
        new_address_builder(AssetConfig(asset="SOL"))


def test_builder_config_errors_propagate():
    with pytest.raises(InvalidInputError):
        new_address_builder(AssetConfig(asset="ATOM"))


def test_not_implemented_is_a_builtin_not_implemented_error():
    assert issubclass(ChainNotImplementedError, NotImplementedError)
