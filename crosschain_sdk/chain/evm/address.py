"""
Address builder for EVM chains.
"""
from ...address import Address, AddressBuilder, ensure_bytes
from ...utils import load_secp256k1_public_key


class EvmAddressBuilder(AddressBuilder):
    """EIP-55 checksummed addresses from secp256k1 public keys."""

    def get_address_from_public_key(self, public_key_bytes: bytes) -> Address:
        public_key = load_secp256k1_public_key(ensure_bytes(public_key_bytes))
        return Address(public_key.to_checksum_address())
