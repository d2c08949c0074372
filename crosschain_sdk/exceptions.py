"""
Exceptions for the crosschain SDK.
"""
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .address import PossibleAddress


class CrosschainError(Exception):
    """Base exception for all crosschain SDK errors."""
    pass


class ChainNotImplementedError(CrosschainError, NotImplementedError):
    """Raised when a chain family or operation has no concrete adapter."""
    pass


class NotInitializedError(CrosschainError):
    """Raised when a transaction is used before it has been built."""

    def __init__(self, message: str = "transaction not initialized"):
        super().__init__(message)


class InvalidInputError(CrosschainError, ValueError):
    """Raised on malformed key material, amounts or configuration."""
    pass


class AddressDerivationError(InvalidInputError):
    """
    Raised when a public key cannot be turned into an address.

    Attributes:
        possible_addresses: The attempted address entries, so callers can
            still inspect which variants were tried
    """

    def __init__(self, message: str, possible_addresses: Optional[List["PossibleAddress"]] = None):
        self.possible_addresses = possible_addresses or []
        super().__init__(message)


class ConfigError(InvalidInputError):
    """Raised when asset configuration cannot be loaded or validated."""
    pass


class AssetNotFoundError(CrosschainError, KeyError):
    """Raised when no asset configuration matches an AssetID."""

    def __init__(self, asset_id: str):
        self.asset_id = asset_id
        super().__init__(f"asset not configured: {asset_id}")

    def __str__(self) -> str:
        return self.args[0]
