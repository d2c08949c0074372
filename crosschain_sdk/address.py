"""
Address derivation contract.

Each chain family provides an AddressBuilder that turns public key bytes into
one or more addresses. Some chains accept several encodings of the same key
(e.g. legacy and segwit on Bitcoin); all of them are returned, tagged with
their variant.
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, NewType

from pydantic import BaseModel, ConfigDict

from .asset import AssetConfig
from .exceptions import AddressDerivationError, InvalidInputError

logger = logging.getLogger(__name__)

# Address is an address on the blockchain, either sender or recipient
Address = NewType("Address", str)

# ContractAddress is a smart contract address
ContractAddress = NewType("ContractAddress", str)


class AddressType(str, Enum):
    """Variant of an address encoding."""
    DEFAULT = "default"
    LEGACY = "legacy"
    SEGWIT = "segwit"


class PossibleAddress(BaseModel):
    """An address together with the encoding variant it was derived with."""
    model_config = ConfigDict(frozen=True)

    address: Address
    type: AddressType = AddressType.DEFAULT


class AddressBuilder(ABC):
    """
    Abstract base class for per-chain address builders.

    Subclasses validate in ``__init__`` that the asset config carries what the
    chain family needs, and raise InvalidInputError otherwise.
    """

    def __init__(self, asset_config: AssetConfig):
        self.asset_config = asset_config

    @abstractmethod
    def get_address_from_public_key(self, public_key_bytes: bytes) -> Address:
        """
        Return the primary address for a public key.

        Args:
            public_key_bytes: Raw public key bytes

        Raises:
            InvalidInputError: If the key is malformed or has the wrong length
        """
        pass

    def get_all_possible_addresses_from_public_key(self, public_key_bytes: bytes) -> List[PossibleAddress]:
        """
        Return every address the chain treats as equivalent for a public key.

        Chains without alternate encodings return a single ``default`` entry.

        Raises:
            AddressDerivationError: If derivation fails; the error carries the
                attempted default entry in ``possible_addresses``
        """
        try:
            address = self.get_address_from_public_key(public_key_bytes)
        except InvalidInputError as e:
            raise AddressDerivationError(
                str(e),
                possible_addresses=[PossibleAddress(address=Address(""), type=AddressType.DEFAULT)],
            ) from e
        return [PossibleAddress(address=address, type=AddressType.DEFAULT)]


def ensure_bytes(public_key_bytes: bytes) -> bytes:
    """Accept bytes-like public keys, reject everything else."""
    if isinstance(public_key_bytes, (bytes, bytearray, memoryview)):
        return bytes(public_key_bytes)
    raise InvalidInputError(
        f"public key must be bytes, got {type(public_key_bytes).__name__}"
    )
