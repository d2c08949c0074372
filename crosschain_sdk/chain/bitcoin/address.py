"""
Address builder for Bitcoin and Bitcoin-derived UTXO chains.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import base58
import bech32

from ...address import Address, AddressBuilder, AddressType, PossibleAddress, ensure_bytes
from ...asset import AssetConfig, NativeAsset
from ...exceptions import AddressDerivationError, InvalidInputError
from ...utils import (
    SECP256K1_RAW_LEN,
    compress_secp256k1_public_key,
    hash160,
    load_secp256k1_public_key,
)

logger = logging.getLogger(__name__)

MAINNET = "mainnet"
TESTNET = "testnet"
REGTEST = "regtest"


@dataclass(frozen=True)
class NetworkParams:
    """Address encoding parameters of one chain on one network."""
    p2pkh_version: int
    segwit_hrp: Optional[str] = None


NETWORK_PARAMS: Dict[Tuple[NativeAsset, str], NetworkParams] = {
    (NativeAsset.BTC, MAINNET): NetworkParams(0x00, "bc"),
    (NativeAsset.BTC, TESTNET): NetworkParams(0x6F, "tb"),
    (NativeAsset.BTC, REGTEST): NetworkParams(0x6F, "bcrt"),
    # TODO: cashaddr encoding for BCH; only the legacy form is derived today
    (NativeAsset.BCH, MAINNET): NetworkParams(0x00),
    (NativeAsset.BCH, TESTNET): NetworkParams(0x6F),
    (NativeAsset.BCH, REGTEST): NetworkParams(0x6F),
    (NativeAsset.DOGE, MAINNET): NetworkParams(0x1E),
    (NativeAsset.DOGE, TESTNET): NetworkParams(0x71),
    (NativeAsset.DOGE, REGTEST): NetworkParams(0x6F),
}


class BitcoinAddressBuilder(AddressBuilder):
    """
    P2PKH and, where the chain supports it, P2WPKH addresses.

    The network is taken from the asset config's ``net`` (mainnet when empty).
    """

    def __init__(self, asset_config: AssetConfig):
        net = (asset_config.net or MAINNET).lower()
        params = NETWORK_PARAMS.get((asset_config.native_asset, net))
        if params is None:
            raise InvalidInputError(
                f"unsupported network {asset_config.net!r} for {asset_config.native_asset.value}"
            )
        super().__init__(asset_config)
        self.params = params

    @property
    def supports_segwit(self) -> bool:
        return self.params.segwit_hrp is not None

    def get_address_from_public_key(self, public_key_bytes: bytes) -> Address:
        if self.supports_segwit:
            return self.get_segwit_address(public_key_bytes)
        return self.get_legacy_address(public_key_bytes)

    def get_legacy_address(self, public_key_bytes: bytes) -> Address:
        """P2PKH address of the key, in the encoding (compressed or not) it was given."""
        public_key_bytes = ensure_bytes(public_key_bytes)
        load_secp256k1_public_key(public_key_bytes)
        if len(public_key_bytes) == SECP256K1_RAW_LEN:
            public_key_bytes = b"\x04" + public_key_bytes
        payload = bytes([self.params.p2pkh_version]) + hash160(public_key_bytes)
        return Address(base58.b58encode_check(payload).decode("ascii"))

    def get_segwit_address(self, public_key_bytes: bytes) -> Address:
        """P2WPKH address of the key; segwit always commits to the compressed key."""
        if not self.supports_segwit:
            raise InvalidInputError(
                f"{self.asset_config.native_asset.value} has no segwit addresses"
            )
        compressed = compress_secp256k1_public_key(ensure_bytes(public_key_bytes))
        address = bech32.encode(self.params.segwit_hrp, 0, hash160(compressed))
        if address is None:
            raise InvalidInputError("segwit encoding failed")
        return Address(address)

    def get_all_possible_addresses_from_public_key(self, public_key_bytes: bytes) -> List[PossibleAddress]:
        if not self.supports_segwit:
            return super().get_all_possible_addresses_from_public_key(public_key_bytes)

        try:
            return [
                PossibleAddress(address=self.get_segwit_address(public_key_bytes), type=AddressType.SEGWIT),
                PossibleAddress(address=self.get_legacy_address(public_key_bytes), type=AddressType.LEGACY),
            ]
        except InvalidInputError as e:
            logger.debug("Address derivation failed: %s", e)
            raise AddressDerivationError(
                str(e),
                possible_addresses=[
                    PossibleAddress(address=Address(""), type=AddressType.SEGWIT),
                    PossibleAddress(address=Address(""), type=AddressType.LEGACY),
                ],
            ) from e
