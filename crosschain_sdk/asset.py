"""
Asset identity model for the crosschain SDK.

An asset is either the native asset of a chain (the one used to pay fees)
or a token living on some chain. For simplicity a native asset also stands
for its chain. Every asset has one canonical AssetID:

- ``SYMBOL`` for native assets and for tokens on the default chain (ETH)
- ``SYMBOL.CHAIN`` for tokens on every other chain
"""
import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NewType, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ._rate_limited_log import rate_limited_log
from .amount import AmountBlockchain, AmountHumanReadable
from .exceptions import AssetNotFoundError

logger = logging.getLogger(__name__)

# Asset is an asset symbol as typed by a user or read from config
Asset = NewType("Asset", str)

# AssetID is the canonical identifier, e.g. ETH, USDC, USDC.SOL
AssetID = NewType("AssetID", str)

ASSET_SEPARATOR = "."


class NativeAsset(str, Enum):
    """Assets used to pay fees; one per supported chain."""

    # UTXO
    BCH = "BCH"        # Bitcoin Cash
    BTC = "BTC"        # Bitcoin
    DOGE = "DOGE"      # Dogecoin

    # Account-based
    ACA = "ACA"        # Acala
    ArbETH = "ArbETH"  # Arbitrum Ether
    ATOM = "ATOM"      # Atom (Cosmos)
    AurETH = "AurETH"  # Aurora
    AVAX = "AVAX"      # Avalanche
    BNB = "BNB"        # Binance Coin
    CELO = "CELO"      # Celo
    ETC = "ETC"        # Ethereum Classic
    ETH = "ETH"        # Ether
    FTM = "FTM"        # Fantom
    KAR = "KAR"        # Karura
    KLAY = "KLAY"      # Klaytn
    LUNA = "LUNA"      # Luna (Terra)
    MATIC = "MATIC"    # Matic PoS (Polygon)
    OptETH = "OptETH"  # Optimism
    ROSE = "ROSE"      # Rose (Oasis)
    SOL = "SOL"        # Solana

    def __str__(self) -> str:
        return self.value

    @property
    def info(self) -> "NativeAssetInfo":
        return NATIVE_ASSETS[self]

    @property
    def chain_type(self) -> "ChainType":
        return NATIVE_ASSETS[self].chain_type

    @property
    def driver(self) -> "Driver":
        return NATIVE_ASSETS[self].driver


class AssetType(str, Enum):
    """Type of an asset, either native or token."""
    NATIVE = "native"
    TOKEN = "token"


class ChainType(str, Enum):
    """Ledger model of a chain."""
    UNKNOWN = "unknown"
    UTXO = "utxo"
    ACCOUNT = "account"


class Driver(str, Enum):
    """Chain family used to select address builders and tx adapters."""
    EVM = "evm"
    SOLANA = "solana"
    COSMOS = "cosmos"
    BITCOIN = "bitcoin"


@dataclass(frozen=True)
class NativeAssetInfo:
    """Static properties of a supported chain."""
    chain_type: ChainType
    driver: Driver
    decimals: int
    name: str


NATIVE_ASSETS: Mapping[NativeAsset, NativeAssetInfo] = MappingProxyType({
    NativeAsset.BCH: NativeAssetInfo(ChainType.UTXO, Driver.BITCOIN, 8, "Bitcoin Cash"),
    NativeAsset.BTC: NativeAssetInfo(ChainType.UTXO, Driver.BITCOIN, 8, "Bitcoin"),
    NativeAsset.DOGE: NativeAssetInfo(ChainType.UTXO, Driver.BITCOIN, 8, "Dogecoin"),
    NativeAsset.ACA: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 12, "Acala"),
    NativeAsset.ArbETH: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Arbitrum Ether"),
    NativeAsset.ATOM: NativeAssetInfo(ChainType.ACCOUNT, Driver.COSMOS, 6, "Atom (Cosmos)"),
    NativeAsset.AurETH: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Aurora"),
    NativeAsset.AVAX: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Avalanche"),
    NativeAsset.BNB: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Binance Coin"),
    NativeAsset.CELO: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Celo"),
    NativeAsset.ETC: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Ethereum Classic"),
    NativeAsset.ETH: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Ether"),
    NativeAsset.FTM: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Fantom"),
    NativeAsset.KAR: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 12, "Karura"),
    NativeAsset.KLAY: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Klaytn"),
    NativeAsset.LUNA: NativeAssetInfo(ChainType.ACCOUNT, Driver.COSMOS, 6, "Luna (Terra)"),
    NativeAsset.MATIC: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Matic PoS (Polygon)"),
    NativeAsset.OptETH: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Optimism"),
    NativeAsset.ROSE: NativeAssetInfo(ChainType.ACCOUNT, Driver.EVM, 18, "Rose (Oasis)"),
    NativeAsset.SOL: NativeAssetInfo(ChainType.ACCOUNT, Driver.SOLANA, 9, "Solana"),
})

# Chain assumed when neither the asset nor a hint names one
DEFAULT_CHAIN = NativeAsset.ETH

_NATIVE_BY_UPPER: Mapping[str, NativeAsset] = MappingProxyType(
    {native.value.upper(): native for native in NativeAsset}
)


def native_asset_of(symbol: Optional[str]) -> Optional[NativeAsset]:
    """
    Look up the native asset a symbol names, ignoring case.

    Args:
        symbol: Asset symbol, e.g. "btc" or "ArbETH"

    Returns:
        The matching NativeAsset, or None for tokens and unknown symbols
    """
    if not symbol:
        return None
    return _NATIVE_BY_UPPER.get(str(symbol).upper())


def asset_type(symbol: str) -> AssetType:
    """Return AssetType.NATIVE if the symbol names a supported chain, else TOKEN."""
    if native_asset_of(symbol) is not None:
        return AssetType.NATIVE
    return AssetType.TOKEN


def chain_type(symbol: str) -> ChainType:
    """Return the ledger model of the chain a symbol names."""
    native = native_asset_of(symbol)
    if native is None:
        return ChainType.UNKNOWN
    return native.chain_type


def _normalize_symbol(symbol: str) -> str:
    # natives keep their registry spelling (ArbETH), everything else is upper case
    native = native_asset_of(symbol)
    if native is not None:
        return native.value
    return symbol.upper()


def parse_asset_and_native_asset(asset: str, native_asset: str) -> Tuple[str, str]:
    """
    Split user input into an asset symbol and the chain it lives on.

    Accepts both ``("USDC.SOL", "")`` and ``("USDC", "SOL")``. When no chain can
    be found the default chain is assumed.

    Returns:
        Tuple of (asset, native_asset); native_asset is normalized, asset is not
    """
    if not asset and not native_asset:
        return "", ""
    if not asset:
        asset = native_asset

    parts = asset.split(ASSET_SEPARATOR)
    if len(parts) == 2 and native_asset_of(parts[1]) is not None:
        asset = parts[0]
        if not native_asset:
            native_asset = parts[1]

    if not native_asset:
        if native_asset_of(asset) is not None:
            native_asset = asset
        else:
            rate_limited_log(
                f"No chain given for asset {asset!r}, assuming {DEFAULT_CHAIN.value}",
                logger_instance=logger,
            )
            native_asset = DEFAULT_CHAIN.value

    return asset, _normalize_symbol(native_asset)


def get_asset_id(asset: str, native_asset: str = "") -> AssetID:
    """
    Return the canonical AssetID for user supplied asset and chain strings.

    Examples:
        get_asset_id("USDC", "")      -> "USDC"
        get_asset_id("USDC", "ETH")   -> "USDC"
        get_asset_id("USDC", "SOL")   -> "USDC.SOL"
        get_asset_id("USDC.SOL", "")  -> "USDC.SOL"
        get_asset_id("", "")          -> ""

    Canonicalizing an AssetID again yields the same AssetID.
    """
    asset, native_asset = parse_asset_and_native_asset(asset, native_asset)
    if not asset and not native_asset:
        return AssetID("")
    asset = _normalize_symbol(asset)
    valid_native = native_asset_of(asset) is not None

    # native asset, e.g. BTC, ETH, SOL
    if asset == native_asset:
        return AssetID(asset)
    # tokens on the default chain carry no suffix
    if native_asset == DEFAULT_CHAIN.value and not valid_native:
        return AssetID(asset)
    # token, e.g. USDC.SOL
    return AssetID(f"{asset}{ASSET_SEPARATOR}{native_asset}")


class AssetConfig(BaseModel):
    """
    An asset as read from a config file or database.

    Example TOML entries::

        [[silochain.beta.chains]]
        asset = "eth"
        net = "mainnet"
        url = "http://7.125.36.22:8089"

        [[silochain.beta.chains]]
        asset = "usdc"
        chain = "eth"
        net = "mainnet"
        contract = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
        decimals = 6

    ``id``, ``native_asset`` and ``type`` are derived from ``asset`` and
    ``chain`` and never read from input. ``auth_secret`` is never printed or
    serialized.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    asset: str = ""
    net: str = ""
    url: str = ""
    auth: str = ""
    provider: str = ""
    chain_id: int = 0
    chain_id_str: str = ""
    chain_name: str = ""
    chain_prefix: str = ""
    explorer_url: str = ""

    # Tokens
    chain: str = ""
    contract: str = ""
    decimals: Optional[int] = Field(None, ge=0)
    name: str = ""

    # Derived
    id: AssetID = AssetID("")
    native_asset: NativeAsset = DEFAULT_CHAIN
    type: AssetType = AssetType.NATIVE
    auth_secret: str = Field("", repr=False, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _derive_identity(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = {k: v for k, v in data.items() if k not in ("id", "native_asset", "type")}
        asset = data.get("asset") or ""
        chain = data.get("chain") or ""
        if not asset and not chain:
            raise ValueError("asset config requires 'asset' or 'chain'")

        symbol, chain_symbol = parse_asset_and_native_asset(asset, chain)
        native = native_asset_of(chain_symbol)
        if native is None:
            raise ValueError(f"unsupported chain {chain_symbol!r} for asset {asset!r}")

        is_native = _normalize_symbol(symbol) == native.value
        data["id"] = get_asset_id(asset, chain)
        data["native_asset"] = native
        data["type"] = AssetType.NATIVE if is_native else AssetType.TOKEN

        if data.get("decimals") is None:
            if not is_native:
                raise ValueError(f"token {data['id']!r} requires 'decimals'")
            data["decimals"] = native.info.decimals
        return data

    @property
    def chain_type(self) -> ChainType:
        return self.native_asset.chain_type

    @property
    def driver(self) -> Driver:
        return self.native_asset.driver

    def to_human(self, amount: int) -> AmountHumanReadable:
        """Convert a blockchain amount of this asset to human units."""
        return AmountBlockchain(amount).to_human(self.decimals)

    def to_blockchain(self, amount: Any) -> AmountBlockchain:
        """Convert a human amount of this asset (str, int or Decimal) to blockchain units."""
        return AmountHumanReadable(amount).to_blockchain(self.decimals)

    def __str__(self) -> str:
        # do NOT print auth_secret
        return f"net: {self.net}, url: {self.url}, auth: {self.auth}, provider: {self.provider}"


class Config(BaseModel):
    """Full config containing all assets, looked up by AssetID."""
    model_config = ConfigDict(frozen=True)

    chains: List[AssetConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "Config":
        seen: Dict[str, int] = {}
        for index, cfg in enumerate(self.chains):
            if cfg.id in seen:
                raise ValueError(f"duplicate asset id {cfg.id!r} at entries {seen[cfg.id]} and {index}")
            seen[cfg.id] = index
        return self

    @property
    def asset_ids(self) -> List[AssetID]:
        return [cfg.id for cfg in self.chains]

    def get_asset_config(self, asset: str, native_asset: str = "") -> AssetConfig:
        """
        Find the config of an asset.

        Args:
            asset: Asset symbol or AssetID, e.g. "USDC" or "USDC.SOL"
            native_asset: Optional chain hint, e.g. "SOL"

        Raises:
            AssetNotFoundError: If no config matches the canonical AssetID
        """
        asset_id = get_asset_id(asset, native_asset)
        for cfg in self.chains:
            if cfg.id == asset_id:
                return cfg
        raise AssetNotFoundError(asset_id)
