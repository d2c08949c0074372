"""
Address builder for Solana.
"""
import base58
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ...address import Address, AddressBuilder, ensure_bytes
from ...exceptions import InvalidInputError


class SolanaAddressBuilder(AddressBuilder):
    """Solana addresses are the base58 encoded ed25519 public key."""

    def get_address_from_public_key(self, public_key_bytes: bytes) -> Address:
        public_key_bytes = ensure_bytes(public_key_bytes)
        try:
            public_key = Ed25519PublicKey.from_public_bytes(public_key_bytes)
        except ValueError as e:
            raise InvalidInputError(f"invalid ed25519 public key: {e}") from e
        raw = public_key.public_bytes(Encoding.Raw, PublicFormat.Raw)
        return Address(base58.b58encode(raw).decode("ascii"))
