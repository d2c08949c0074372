"""
Address builder for Cosmos SDK chains.
"""
import bech32

from ...address import Address, AddressBuilder, ensure_bytes
from ...asset import AssetConfig
from ...exceptions import InvalidInputError
from ...utils import compress_secp256k1_public_key, hash160


class CosmosAddressBuilder(AddressBuilder):
    """
    Bech32 account addresses, ``bech32(prefix, ripemd160(sha256(pubkey)))``.

    The human readable prefix (``cosmos``, ``terra``, ...) comes from the asset
    config's ``chain_prefix``.
    """

    def __init__(self, asset_config: AssetConfig):
        if not asset_config.chain_prefix:
            raise InvalidInputError(
                f"chain_prefix is required for cosmos asset {asset_config.id!r}"
            )
        super().__init__(asset_config)
        self.prefix = asset_config.chain_prefix

    def get_address_from_public_key(self, public_key_bytes: bytes) -> Address:
        compressed = compress_secp256k1_public_key(ensure_bytes(public_key_bytes))
        data = bech32.convertbits(hash160(compressed), 8, 5)
        return Address(bech32.bech32_encode(self.prefix, data))
