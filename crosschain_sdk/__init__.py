"""
crosschain SDK - chain-agnostic assets, amounts, addresses and transactions.
"""
from .amount import AmountBlockchain, AmountHumanReadable
from .asset import (
    Asset,
    AssetConfig,
    AssetID,
    AssetType,
    ChainType,
    Config,
    DEFAULT_CHAIN,
    Driver,
    NATIVE_ASSETS,
    NativeAsset,
    NativeAssetInfo,
    asset_type,
    chain_type,
    get_asset_id,
    native_asset_of,
)
from .address import Address, AddressBuilder, AddressType, ContractAddress, PossibleAddress
from .tx import Tx, TxDataToSign, TxHash, TxInfo, TxInput, TxSignature, TxState
from .exceptions import (
    AddressDerivationError,
    AssetNotFoundError,
    ChainNotImplementedError,
    ConfigError,
    CrosschainError,
    InvalidInputError,
    NotInitializedError,
)
from .factory import new_address_builder
from .version import __version__

__all__ = [
    "AmountBlockchain",
    "AmountHumanReadable",
    "Asset",
    "AssetConfig",
    "AssetID",
    "AssetType",
    "ChainType",
    "Config",
    "DEFAULT_CHAIN",
    "Driver",
    "NATIVE_ASSETS",
    "NativeAsset",
    "NativeAssetInfo",
    "asset_type",
    "chain_type",
    "get_asset_id",
    "native_asset_of",
    "Address",
    "AddressBuilder",
    "AddressType",
    "ContractAddress",
    "PossibleAddress",
    "Tx",
    "TxDataToSign",
    "TxHash",
    "TxInfo",
    "TxInput",
    "TxSignature",
    "TxState",
    "AddressDerivationError",
    "AssetNotFoundError",
    "ChainNotImplementedError",
    "ConfigError",
    "CrosschainError",
    "InvalidInputError",
    "NotInitializedError",
    "new_address_builder",
    "__version__",
]
